"""Path algebra for import specifiers.

Resolve raw specifiers to absolute targets and compute the specifier an
import should use. Nothing here touches the filesystem except the
file-existence probe passed into resolution.

Exports:
    resolve_import: Turn a raw specifier into a ResolvedImport.
    calculate_same_directory_path: './file' form for same-directory imports.
    calculate_same_boundary_path: Minimal relative path inside one boundary.
    canonical_same_boundary_path: Preferred specifier inside one boundary.
    calculate_cross_boundary_path: Preferred specifier for another boundary.
"""

from import_boundaries.paths.calculation import (
    are_both_paths_exhausted as are_both_paths_exhausted,
    calculate_cross_boundary_path as calculate_cross_boundary_path,
    calculate_same_boundary_path as calculate_same_boundary_path,
    calculate_same_directory_path as calculate_same_directory_path,
    canonical_same_boundary_path as canonical_same_boundary_path,
    has_valid_first_differing_segment as has_valid_first_differing_segment,
    is_boundary_root as is_boundary_root,
)
from import_boundaries.paths.resolution import resolve_import as resolve_import

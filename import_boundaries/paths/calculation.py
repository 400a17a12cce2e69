# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/paths/calculation.py
"""Compute the specifier an import should use.

Two families live here. ``calculate_same_directory_path`` and
``calculate_same_boundary_path`` build plain relative paths between two
locations inside one boundary. The canonical helpers
(``canonical_same_boundary_path``, ``calculate_cross_boundary_path`` and
friends) encode the preferred import style:

- same directory: ``./file``
- subdirectory of the file's directory: ``./sub`` (through its barrel)
- cousin (parent's sibling, not top level): ``../cousin``
- top-level directory or anything further away: ``@alias/segment``
- other boundary: ``@alias`` with no subpath
"""

import os

from import_boundaries.core.types import Boundary, CrossBoundaryStyle
from import_boundaries.paths.utils import (
    basename_without_ext,
    choose_path_format,
    format_absolute_path,
    path_to_parts,
)


def is_boundary_root(segments: list[str]) -> bool:
    """True iff the segment list is empty, i.e. the path is the boundary root."""
    return len(segments) == 0


def are_both_paths_exhausted(index: int, source_segments: list[str], target_segments: list[str]) -> bool:
    """True iff index has reached or passed the end of both segment lists."""
    return index >= len(source_segments) and index >= len(target_segments)


def has_valid_first_differing_segment(segment: str | None) -> bool:
    """True iff the segment is present and non-empty."""
    return bool(segment)


def _first_differing_index(left: list[str], right: list[str]) -> int:
    index = 0
    while index < len(left) and index < len(right) and left[index] == right[index]:
        index += 1
    return index


def _parts_below(path: str, boundary_abs_dir: str) -> list[str]:
    return path_to_parts(os.path.relpath(path, boundary_abs_dir).replace("\\", "/"))


def calculate_same_directory_path(target_abs: str, barrel_file_name: str) -> str | None:
    """Specifier for a file in the importing file's own directory.

    Returns:
        './<basename>' or None when the target is the directory's own barrel
        file (the ancestor-barrel case, handled separately).
    """
    basename = basename_without_ext(target_abs)
    if basename == barrel_file_name:
        return None
    return f"./{basename}"


def calculate_same_boundary_path(file_abs: str, target_abs: str, boundary_abs_dir: str) -> str:
    """Minimal relative path between two files of the same boundary.

    Both locations are split into segments below the boundary root and walked
    together up to the first difference. Every remaining directory segment of
    the source becomes '..', followed by the remaining target segments. The
    target's extension is dropped. A source at the boundary root yields the
    plain target path with no ascending segments.

    The result is undefined when file_abs and target_abs are the same file.
    """
    source_parts = _parts_below(os.path.dirname(file_abs), boundary_abs_dir)
    target_parts = _parts_below(target_abs, boundary_abs_dir)
    if target_parts:
        target_parts[-1] = basename_without_ext(target_parts[-1])

    if is_boundary_root(source_parts):
        return "/".join(target_parts)

    index = _first_differing_index(source_parts, target_parts)
    if are_both_paths_exhausted(index, source_parts, target_parts):
        return "."

    ascending = [".."] * (len(source_parts) - index)
    segment = target_parts[index] if index < len(target_parts) else None
    if not has_valid_first_differing_segment(segment):
        return "/".join(ascending)
    return "/".join(ascending + target_parts[index:])


def calculate_boundary_root_path(
    target_abs: str,
    file_boundary: Boundary,
    root_dir: str,
    barrel_file_name: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> str | None:
    """Specifier for a file sitting directly in the boundary root.

    Returns None for the boundary's own barrel file (ancestor barrel).
    """
    basename = basename_without_ext(target_abs)
    if basename == barrel_file_name:
        return None
    return choose_path_format(file_boundary, basename, root_dir, cross_boundary_style)


def calculate_distant_path(
    target_parts: list[str],
    file_parts: list[str],
    first_differing_index: int,
    first_differing_segment: str,
    file_boundary: Boundary,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> str:
    """Specifier for a target in another directory of the same boundary.

    Only the first differing segment is used; deeper targets are reached
    through that directory's barrel file.
    """
    if first_differing_index == len(file_parts):
        return f"./{first_differing_segment}"

    # Top-level targets prefer the alias even when '../' would be short
    if len(target_parts) == 1 and len(file_parts) > 0:
        return choose_path_format(file_boundary, first_differing_segment, root_dir, cross_boundary_style)

    if first_differing_index == len(file_parts) - 1:
        return f"../{first_differing_segment}"

    return choose_path_format(file_boundary, first_differing_segment, root_dir, cross_boundary_style)


def canonical_same_boundary_path(
    target_dir: str,
    target_abs: str,
    file_dir: str,
    file_boundary: Boundary,
    root_dir: str,
    barrel_file_name: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> str | None:
    """Canonical specifier for an import within a single boundary.

    Args:
        target_dir: Directory of the resolved target.
        target_abs: Resolved target file.
        file_dir: Directory of the importing file.
        file_boundary: Boundary shared by file and target.
        root_dir: Root directory name (for absolute style).
        barrel_file_name: Barrel file name without extension.
        cross_boundary_style: Alias or absolute style.

    Returns:
        The expected specifier, or None when the target is a barrel file of
        the file's own directory or one of its ancestors.
    """
    target_parts = _parts_below(target_dir, file_boundary.abs_dir)
    file_parts = _parts_below(file_dir, file_boundary.abs_dir)
    index = _first_differing_index(target_parts, file_parts)

    if are_both_paths_exhausted(index, file_parts, target_parts):
        return calculate_same_directory_path(target_abs, barrel_file_name)

    if is_boundary_root(target_parts):
        return calculate_boundary_root_path(
            target_abs, file_boundary, root_dir, barrel_file_name, cross_boundary_style
        )

    segment = target_parts[index] if index < len(target_parts) else None
    if not has_valid_first_differing_segment(segment):
        return None
    assert segment is not None

    return calculate_distant_path(
        target_parts,
        file_parts,
        index,
        segment,
        file_boundary,
        root_dir,
        cross_boundary_style,
    )


def calculate_cross_boundary_path(
    target_boundary: Boundary,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> str:
    """Canonical specifier for importing another boundary: its alias or root path."""
    if cross_boundary_style == CrossBoundaryStyle.ABSOLUTE or not target_boundary.alias:
        return format_absolute_path(root_dir, target_boundary.dir)
    return target_boundary.alias

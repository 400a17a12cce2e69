# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/engine/relationship.py
"""Classify an (importing file, target) pair and derive its expected specifier."""

import os

from pydantic import BaseModel, ConfigDict

from import_boundaries.boundary.membership import find_boundary_for, find_ruled_boundary_for
from import_boundaries.boundary.registry import BoundaryRegistry
from import_boundaries.boundary.rules import check_boundary_rules, is_same_boundary
from import_boundaries.core.constants import DEFAULT_BARREL_FILE_NAME, DEFAULT_FILE_EXTENSIONS
from import_boundaries.core.exceptions import ResolutionError
from import_boundaries.core.types import Boundary, CrossBoundaryStyle, Relationship, ResolvedImport
from import_boundaries.paths.calculation import (
    calculate_cross_boundary_path,
    calculate_same_boundary_path,
    calculate_same_directory_path,
    canonical_same_boundary_path,
)
from import_boundaries.paths.resolution import FileExists, resolve_import
from import_boundaries.paths.utils import (
    absolute_to_relative_path,
    basename_without_ext,
    format_absolute_path,
    strip_trailing_slash,
)


def is_cross_boundary_import(file_boundary: Boundary | None, target_boundary: Boundary | None) -> bool:
    """True when either boundary is unknown or the two differ by identifier.

    Two unknown boundaries also count as cross-boundary. Rule validation
    short-circuits on a missing file boundary, so this never reports on its own.
    """
    if file_boundary is None or target_boundary is None:
        return True
    return not is_same_boundary(file_boundary, target_boundary)


def is_ancestor_barrel_import(
    raw_specifier: str,
    file_boundary: Boundary | None,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> bool:
    """True when the specifier names the importing file's own boundary root.

    Both styles tolerate one trailing slash: alias style compares against the
    boundary alias, absolute style against '<root_dir>/<dir>'.
    """
    if file_boundary is None:
        return False
    if cross_boundary_style == CrossBoundaryStyle.ALIAS:
        return file_boundary.alias is not None and strip_trailing_slash(raw_specifier) == file_boundary.alias
    return strip_trailing_slash(raw_specifier) == format_absolute_path(root_dir, file_boundary.dir)


def detect_relationship(
    file_boundary: Boundary | None,
    target_boundary: Boundary | None,
    file_abs: str,
    target_abs: str,
    raw_specifier: str,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> Relationship:
    """Classify how an importing file relates to its resolved target.

    Ancestor-barrel takes precedence over every other relationship, then
    cross-boundary. Within one boundary, a target in the importing file's own
    directory is same-directory and anything else is same-boundary.
    """
    if is_ancestor_barrel_import(raw_specifier, file_boundary, root_dir, cross_boundary_style):
        return Relationship.ANCESTOR_BARREL
    if is_cross_boundary_import(file_boundary, target_boundary):
        return Relationship.CROSS_BOUNDARY
    if os.path.dirname(file_abs) == os.path.dirname(target_abs):
        return Relationship.SAME_DIRECTORY
    return Relationship.SAME_BOUNDARY


def calculate_expected_path(
    relationship: Relationship,
    resolved: ResolvedImport,
    file_abs: str,
    file_boundary: Boundary | None,
    target_boundary: Boundary | None,
    *,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
    barrel_file_name: str = DEFAULT_BARREL_FILE_NAME,
) -> str | None:
    """Canonical specifier for an import with a known relationship.

    Returns:
        The expected specifier, or None when no specifier can be suggested:
        ancestor barrels, barrel files of the importing file's own
        directory tree, and targets outside every boundary imported from
        inside one.
    """
    file_dir = os.path.dirname(file_abs)

    if relationship == Relationship.ANCESTOR_BARREL:
        return None

    if relationship == Relationship.CROSS_BOUNDARY:
        if target_boundary is not None:
            return calculate_cross_boundary_path(target_boundary, root_dir, cross_boundary_style)
        if file_boundary is None:
            pointed = resolved.target_abs
            if basename_without_ext(pointed) == barrel_file_name:
                pointed = resolved.target_dir
            return absolute_to_relative_path(pointed, file_dir, barrel_file_name)
        return None

    if relationship == Relationship.SAME_DIRECTORY:
        return calculate_same_directory_path(resolved.target_abs, barrel_file_name)

    assert file_boundary is not None
    return canonical_same_boundary_path(
        resolved.target_dir,
        resolved.target_abs,
        file_dir,
        file_boundary,
        root_dir,
        barrel_file_name,
        cross_boundary_style,
    )


class ImportExplanation(BaseModel):
    """Everything the engine concludes about one import.

    Attributes:
        specifier: Raw specifier as written.
        file_abs: Absolute path of the importing file.
        resolved: Resolution result, or None if the specifier is external.
        file_boundary: Boundary containing the importing file.
        target_boundary: Boundary containing the target.
        relationship: Structural relationship, when resolved.
        expected_path: Canonical specifier, when one can be suggested.
        relative_path: Minimal relative path for same-boundary targets.
        denial_reason: Why the boundary rules deny the import, if they do.
        error: Resolution error message for external specifiers.
    """

    model_config = ConfigDict(frozen=True)

    specifier: str
    file_abs: str
    resolved: ResolvedImport | None = None
    file_boundary: Boundary | None = None
    target_boundary: Boundary | None = None
    relationship: Relationship | None = None
    expected_path: str | None = None
    relative_path: str | None = None
    denial_reason: str | None = None
    error: str | None = None


def explain_import(
    raw_specifier: str,
    file_abs: str,
    registry: BoundaryRegistry,
    *,
    cross_boundary_style: CrossBoundaryStyle = CrossBoundaryStyle.ALIAS,
    barrel_file_name: str = DEFAULT_BARREL_FILE_NAME,
    file_extensions: tuple[str, ...] = DEFAULT_FILE_EXTENSIONS,
    is_type_only: bool = False,
    file_exists: FileExists = os.path.isfile,
) -> ImportExplanation:
    """Resolve and classify one import without reporting anything.

    Args:
        raw_specifier: Specifier exactly as written.
        file_abs: Absolute path of the importing file.
        registry: Boundary registry.
        cross_boundary_style: Alias or absolute style.
        barrel_file_name: Barrel file name without extension.
        file_extensions: Candidate extensions in priority order.
        is_type_only: Evaluate rules as for a type-only import.
        file_exists: Probe used to tell extensionless files from directories.

    Returns:
        ImportExplanation describing the resolution, boundaries,
        relationship, expected specifier and rule outcome.
    """
    try:
        resolved = resolve_import(
            raw_specifier,
            file_abs,
            registry.boundaries,
            cwd=registry.cwd,
            root_dir=registry.root_dir,
            barrel_file_name=barrel_file_name,
            file_extensions=file_extensions,
            file_exists=file_exists,
        )
    except ResolutionError as e:
        return ImportExplanation(specifier=raw_specifier, file_abs=file_abs, error=str(e))

    file_boundary = find_ruled_boundary_for(file_abs, registry.boundaries)
    target_boundary = find_boundary_for(resolved.target_abs, registry.boundaries)
    relationship = detect_relationship(
        file_boundary,
        target_boundary,
        file_abs,
        resolved.target_abs,
        raw_specifier,
        registry.root_dir,
        cross_boundary_style,
    )
    expected = calculate_expected_path(
        relationship,
        resolved,
        file_abs,
        file_boundary,
        target_boundary,
        root_dir=registry.root_dir,
        cross_boundary_style=cross_boundary_style,
        barrel_file_name=barrel_file_name,
    )

    relative_path = None
    if relationship in (Relationship.SAME_DIRECTORY, Relationship.SAME_BOUNDARY):
        assert file_boundary is not None
        relative_path = calculate_same_boundary_path(file_abs, resolved.target_abs, file_boundary.abs_dir)

    denial_reason = None
    if file_boundary is not None and target_boundary is not None:
        denial_reason = check_boundary_rules(file_boundary, target_boundary, is_type_only)

    return ImportExplanation(
        specifier=raw_specifier,
        file_abs=file_abs,
        resolved=resolved,
        file_boundary=file_boundary,
        target_boundary=target_boundary,
        relationship=relationship,
        expected_path=expected,
        relative_path=relative_path,
        denial_reason=denial_reason,
    )

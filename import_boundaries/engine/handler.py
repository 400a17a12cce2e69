# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/engine/handler.py
"""Run every boundary check for a single import statement."""

import os

from loguru import logger

from import_boundaries.boundary.membership import find_boundary_for, find_ruled_boundary_for
from import_boundaries.boundary.registry import BoundaryRegistry
from import_boundaries.config import Settings
from import_boundaries.core.exceptions import ResolutionError
from import_boundaries.core.types import CrossBoundaryStyle, ImportStatement, Relationship, Reporter
from import_boundaries.engine.relationship import calculate_expected_path, detect_relationship
from import_boundaries.engine.validation import (
    FixerFactory,
    detect_and_report_ancestor_barrel,
    handle_unknown_boundary,
    validate_alias_subpath,
    validate_boundary_rules,
    validate_path_format,
)
from import_boundaries.paths.resolution import FileExists, resolve_import


def handle_import(
    statement: ImportStatement,
    file_path: str,
    registry: BoundaryRegistry,
    settings: Settings,
    reporter: Reporter,
    create_fixer: FixerFactory | None = None,
    file_exists: FileExists = os.path.isfile,
) -> bool:
    """Validate one import statement and report at most one violation.

    Checks run in order and stop at the first report: alias subpath (alias
    style only), allow/deny rules (when enforce_boundaries is set), ancestor
    barrel, unknown boundary, then path format.

    Args:
        statement: Scanned import statement.
        file_path: Absolute path of the importing file.
        registry: Boundary registry.
        settings: Project settings.
        reporter: Violation sink.
        create_fixer: Builds a fixer that rewrites the specifier to a new path.
        file_exists: Probe used to tell extensionless files from directories.

    Returns:
        True iff a violation was reported.
    """
    raw = statement.specifier
    boundaries = registry.boundaries
    severity = settings.default_severity

    try:
        resolved = resolve_import(
            raw,
            file_path,
            boundaries,
            cwd=registry.cwd,
            root_dir=registry.root_dir,
            barrel_file_name=settings.barrel_file_name,
            file_extensions=settings.file_extensions,
            file_exists=file_exists,
        )
    except ResolutionError as e:
        logger.debug("Skipping unresolvable import", specifier=raw, file=file_path, reason=str(e))
        return False

    # Rule-less nested boundaries are attributed to their ruled parent for every check.
    file_boundary = find_ruled_boundary_for(file_path, boundaries)

    if settings.cross_boundary_style == CrossBoundaryStyle.ALIAS and validate_alias_subpath(
        raw, boundaries, file_boundary, reporter, create_fixer, severity
    ):
        return True

    target_boundary = find_boundary_for(resolved.target_abs, boundaries)

    if settings.enforce_boundaries and validate_boundary_rules(
        file_boundary,
        target_boundary,
        boundaries,
        statement.is_type_only,
        reporter,
        severity,
    ):
        return True

    relationship = detect_relationship(
        file_boundary,
        target_boundary,
        file_path,
        resolved.target_abs,
        raw,
        registry.root_dir,
        settings.cross_boundary_style,
    )

    if relationship == Relationship.ANCESTOR_BARREL:
        return detect_and_report_ancestor_barrel(
            raw, file_boundary, registry.root_dir, settings.cross_boundary_style, reporter, severity
        )

    if relationship == Relationship.CROSS_BOUNDARY and target_boundary is None and file_boundary is not None:
        return handle_unknown_boundary(raw, settings.allow_unknown_boundaries, reporter, severity)

    expected = calculate_expected_path(
        relationship,
        resolved,
        file_path,
        file_boundary,
        target_boundary,
        root_dir=registry.root_dir,
        cross_boundary_style=settings.cross_boundary_style,
        barrel_file_name=settings.barrel_file_name,
    )
    if not expected:
        logger.debug("No canonical specifier for import", specifier=raw, relationship=str(relationship))
        return False

    return validate_path_format(raw, expected, file_boundary, reporter, create_fixer, severity)

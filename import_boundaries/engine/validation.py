# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/engine/validation.py
"""Validators that turn engine decisions into reported violations.

Each validator returns True iff it handed exactly one violation to the
reporter. Violations are values, never raised.
"""

from collections.abc import Callable, Sequence

from loguru import logger

from import_boundaries.boundary.membership import check_alias_subpath
from import_boundaries.boundary.rules import check_boundary_rules, is_same_boundary
from import_boundaries.core.constants import MessageId
from import_boundaries.core.types import (
    Boundary,
    CrossBoundaryStyle,
    Fixer,
    Reporter,
    Severity,
    Violation,
    ViolationData,
)
from import_boundaries.engine.relationship import is_ancestor_barrel_import


FixerFactory = Callable[[str], Fixer]


def get_severity(file_boundary: Boundary | None, default_severity: Severity | None = None) -> Severity | None:
    """Boundary-specific severity, else the default, else None."""
    if file_boundary is not None and file_boundary.severity is not None:
        return file_boundary.severity
    return default_severity


def report_violation(
    reporter: Reporter,
    message_id: MessageId,
    data: ViolationData,
    *,
    file_boundary: Boundary | None = None,
    default_severity: Severity | None = None,
    fix: Fixer | None = None,
) -> None:
    """Build a Violation with the resolved severity and hand it to the reporter."""
    violation = Violation(
        message_id=message_id,
        data=data,
        severity=get_severity(file_boundary, default_severity),
        fix=fix,
    )
    logger.debug("Reporting violation", message_id=str(message_id), severity=violation.severity)
    reporter.report(violation)


def validate_boundary_rules(
    file_boundary: Boundary | None,
    target_boundary: Boundary | None,
    boundaries: Sequence[Boundary],
    is_type_only: bool,
    reporter: Reporter,
    default_severity: Severity | None = None,
) -> bool:
    """Check allow/deny rules for one import and report a boundaryViolation.

    Files outside every boundary are unrestricted, targets outside every
    boundary are external to the policy, and same-boundary imports are always
    allowed; none of these report.

    Args:
        file_boundary: Boundary whose rules govern the importing file.
        target_boundary: Boundary containing the target.
        boundaries: All configured boundaries.
        is_type_only: Whether the import only brings in types.
        reporter: Violation sink.
        default_severity: Severity when the boundary sets none.

    Returns:
        True iff a violation was reported.
    """
    if file_boundary is None or target_boundary is None:
        return False
    if is_same_boundary(file_boundary, target_boundary):
        return False

    reason = check_boundary_rules(file_boundary, target_boundary, is_type_only)
    if reason is None:
        return False

    report_violation(
        reporter,
        MessageId.BOUNDARY_VIOLATION,
        ViolationData(from_=file_boundary.identifier, to=target_boundary.identifier, reason=reason),
        file_boundary=file_boundary,
        default_severity=default_severity,
    )
    return True


def validate_alias_subpath(
    raw_specifier: str,
    boundaries: Sequence[Boundary],
    file_boundary: Boundary | None,
    reporter: Reporter,
    create_fixer: FixerFactory | None = None,
    default_severity: Severity | None = None,
) -> bool:
    """Report cross-boundary alias imports that reach below the alias.

    '@entities/army' from outside @entities should be '@entities'. Subpaths
    within the file's own boundary are left to the path-format check.
    """
    subpath = check_alias_subpath(raw_specifier, boundaries)
    if not subpath.is_subpath or subpath.base_alias is None:
        return False

    target = next((b for b in boundaries if b.alias == subpath.base_alias), None)
    if target is None or file_boundary is None or is_same_boundary(file_boundary, target):
        return False

    expected = subpath.base_alias
    report_violation(
        reporter,
        MessageId.INCORRECT_IMPORT_PATH,
        ViolationData(expected_path=expected, actual_path=raw_specifier),
        file_boundary=file_boundary,
        default_severity=default_severity,
        fix=create_fixer(expected) if create_fixer else None,
    )
    return True


def validate_path_format(
    raw_specifier: str,
    expected_path: str,
    file_boundary: Boundary | None,
    reporter: Reporter,
    create_fixer: FixerFactory | None = None,
    default_severity: Severity | None = None,
) -> bool:
    """Report an incorrectImportPath when the specifier is not the expected one."""
    if raw_specifier == expected_path:
        return False

    report_violation(
        reporter,
        MessageId.INCORRECT_IMPORT_PATH,
        ViolationData(expected_path=expected_path, actual_path=raw_specifier),
        file_boundary=file_boundary,
        default_severity=default_severity,
        fix=create_fixer(expected_path) if create_fixer else None,
    )
    return True


def detect_and_report_ancestor_barrel(
    raw_specifier: str,
    file_boundary: Boundary | None,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
    reporter: Reporter,
    default_severity: Severity | None = None,
) -> bool:
    """Report imports of the file's own boundary barrel. Not fixable."""
    if not is_ancestor_barrel_import(raw_specifier, file_boundary, root_dir, cross_boundary_style):
        return False
    assert file_boundary is not None

    report_violation(
        reporter,
        MessageId.ANCESTOR_BARREL_IMPORT,
        ViolationData(alias=file_boundary.identifier),
        file_boundary=file_boundary,
        default_severity=default_severity,
    )
    return True


def handle_unknown_boundary(
    raw_specifier: str,
    allow_unknown_boundaries: bool,
    reporter: Reporter,
    default_severity: Severity | None = None,
) -> bool:
    """Report a target outside every boundary unless such targets are allowed."""
    if allow_unknown_boundaries:
        return False

    report_violation(
        reporter,
        MessageId.UNKNOWN_BOUNDARY_IMPORT,
        ViolationData(path=raw_specifier),
        default_severity=default_severity,
    )
    return True

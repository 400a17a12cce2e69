# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/boundary/rules.py
"""Allow/deny policy between two boundaries.

Semantics, evaluated in order:

- Same boundary (by identifier): always allowed.
- Type-only import and target listed in ``allow_type_imports_from``: allowed.
- Target listed in ``deny_imports_from``: denied, even if also allowed.
- Target listed in ``allow_imports_from``: allowed.
- Only a deny list declared: everything not denied is allowed.
- Otherwise (allow list only, or no lists): denied.
"""

from import_boundaries.core.types import Boundary


def _listed(identifiers: tuple[str, ...] | None, target: Boundary) -> bool:
    return identifiers is not None and target.identifier in identifiers


def _not_allowed_reason(file_identifier: str, target_identifier: str) -> str:
    return (
        f"Cross-boundary import from '{target_identifier}' to '{file_identifier}' is not allowed. "
        f"Add '{target_identifier}' to 'allowImportsFrom' if this import is intentional."
    )


def is_same_boundary(left: Boundary | None, right: Boundary | None) -> bool:
    """True iff both boundaries exist and share an identifier."""
    return left is not None and right is not None and left.identifier == right.identifier


def check_boundary_rules(
    file_boundary: Boundary,
    target_boundary: Boundary,
    is_type_only: bool = False,
) -> str | None:
    """Decide whether file_boundary may import from target_boundary.

    Args:
        file_boundary: Boundary of the importing file.
        target_boundary: Boundary of the import target.
        is_type_only: Whether the import only brings in types.

    Returns:
        None when the import is allowed, otherwise a human-readable reason.
    """
    if is_same_boundary(file_boundary, target_boundary):
        return None

    file_id = file_boundary.identifier
    target_id = target_boundary.identifier

    if is_type_only and _listed(file_boundary.allow_type_imports_from, target_boundary):
        return None

    has_allow_list = file_boundary.allow_imports_from is not None
    has_deny_list = file_boundary.deny_imports_from is not None

    if _listed(file_boundary.deny_imports_from, target_boundary):
        if _listed(file_boundary.allow_imports_from, target_boundary):
            return (
                f"Boundary '{file_id}' explicitly denies imports from '{target_id}' "
                f"(deny takes precedence over allow)"
            )
        return f"Boundary '{file_id}' explicitly denies imports from '{target_id}'"

    if _listed(file_boundary.allow_imports_from, target_boundary):
        return None

    if has_deny_list and not has_allow_list:
        return None

    return _not_allowed_reason(file_id, target_id)

"""Import classification, rule validation and per-import orchestration.

Exports:
    handle_import: Run every check for one import statement.
    explain_import: Resolve and classify an import without reporting.
    detect_relationship: Classify an (importing file, target) pair.
    validate_boundary_rules: Report allow/deny violations.
"""

from import_boundaries.engine.handler import handle_import as handle_import
from import_boundaries.engine.relationship import (
    ImportExplanation as ImportExplanation,
    detect_relationship as detect_relationship,
    explain_import as explain_import,
    is_ancestor_barrel_import as is_ancestor_barrel_import,
    is_cross_boundary_import as is_cross_boundary_import,
)
from import_boundaries.engine.validation import validate_boundary_rules as validate_boundary_rules

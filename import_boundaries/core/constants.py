# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/core/constants.py
"""Constants used across the import-boundaries codebase."""

from enum import StrEnum


class MessageId(StrEnum):
    """Violation taxonomy tags handed to reporters."""

    BOUNDARY_VIOLATION = "boundaryViolation"
    INCORRECT_IMPORT_PATH = "incorrectImportPath"
    ANCESTOR_BARREL_IMPORT = "ancestorBarrelImport"
    UNKNOWN_BOUNDARY_IMPORT = "unknownBoundaryImport"


# User-facing text per message id. Placeholders match ViolationData fields.
MESSAGES: dict[MessageId, str] = {
    MessageId.INCORRECT_IMPORT_PATH: "Expected '{expected_path}' but got '{actual_path}'.",
    MessageId.ANCESTOR_BARREL_IMPORT: (
        "Cannot import from ancestor barrel '{alias}'. This would create a circular "
        "dependency. Import from the specific file or directory instead."
    ),
    MessageId.UNKNOWN_BOUNDARY_IMPORT: (
        "Cannot import from '{path}' - path is outside all configured boundaries. "
        "Add this path to boundaries configuration or set 'allow_unknown_boundaries: true'."
    ),
    MessageId.BOUNDARY_VIOLATION: "Cannot import from '{to}' to '{from_}': {reason}",
}

DEFAULT_ROOT_DIR = "src"
DEFAULT_BARREL_FILE_NAME = "index"
DEFAULT_FILE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs")

# Directory names never descended into by the linter
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = ("node_modules", "dist", "build", ".git")

DEFAULT_SETTINGS_FILE = "boundaries.yaml"
SETTINGS_ENV_VAR = "IMPORT_BOUNDARIES_SETTINGS"

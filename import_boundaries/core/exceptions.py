# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/core/exceptions.py
"""Custom exceptions for import-boundaries."""


class ImportBoundariesError(Exception):
    """Base exception for all import-boundaries errors."""

    pass


class ConfigurationError(ImportBoundariesError):
    """Raised when the boundary configuration is missing or inconsistent."""

    pass


class ResolutionError(ImportBoundariesError):
    """Raised when an import specifier cannot be resolved to a path.

    Attributes:
        specifier: The raw specifier that failed to resolve.
    """

    def __init__(self, message: str, specifier: str = "") -> None:
        super().__init__(message)
        self.specifier = specifier

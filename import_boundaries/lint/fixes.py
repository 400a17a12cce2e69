# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/lint/fixes.py
"""Autofixes that rewrite import specifier literals."""

from collections.abc import Iterable

from loguru import logger

from import_boundaries.core.types import FixResult, ImportStatement, Violation


class LiteralFixer:
    """Replace a statement's specifier literal with a new path.

    The original quote character is preserved and nothing outside the
    literal is touched.

    Attributes:
        statement: The scanned import statement to rewrite.
        new_path: Replacement specifier, without quotes.
    """

    def __init__(self, statement: ImportStatement, new_path: str) -> None:
        self.statement = statement
        self.new_path = new_path

    def apply(self) -> FixResult | None:
        """Return the replacement, or None if it cannot be written safely."""
        quote = self.statement.quote
        if not self.new_path or quote in self.new_path or "\n" in self.new_path:
            return None
        return FixResult(text=f"{quote}{self.new_path}{quote}", range=self.statement.range)


def apply_fixes(source: str, violations: Iterable[Violation]) -> tuple[str, int]:
    """Apply the fixes attached to violations.

    Fixes are applied back to front so earlier offsets stay valid. A fix
    overlapping one already applied is skipped.

    Args:
        source: Original source text the fix ranges refer to.
        violations: Violations, possibly carrying fixes.

    Returns:
        Tuple of (fixed source, number of fixes applied).
    """
    results: list[FixResult] = []
    for violation in violations:
        if violation.fix is None:
            continue
        result = violation.fix.apply()
        if result is not None:
            results.append(result)

    results.sort(key=lambda r: r.range[0], reverse=True)

    applied = 0
    boundary = len(source) + 1
    for result in results:
        start, end = result.range
        if end > boundary or start < 0 or end > len(source):
            logger.debug("Skipping overlapping fix", start=start, end=end)
            continue
        source = source[:start] + result.text + source[end:]
        boundary = start
        applied += 1
    return source, applied

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/lint/scanner.py
"""Extract import specifiers from TypeScript/JavaScript source text.

Recognized constructs:

- ``import x from 'y'``, ``import {a, b} from 'y'``, ``import * as ns from 'y'``
- ``import type {T} from 'y'`` (type-only)
- ``import 'y'`` (side effect)
- ``export {a} from 'y'``, ``export * from 'y'``, ``export type {T} from 'y'``
- ``import('y')`` and ``require('y')`` with a string literal argument

Comments are masked before matching so commented-out imports are ignored.
Offsets in the returned statements refer to the original text.
"""

import re

from import_boundaries.core.types import ImportKind, ImportStatement


_LITERAL = r"(?P<literal>(?P<quote>['\"])(?P<spec>[^'\"\n]*)(?P=quote))"

# The clause may not contain another import/export keyword, a string, or an
# assignment, so one match never swallows a neighbouring statement.
_CLAUSE = r"(?P<clause>(?:(?!\b(?:import|export)\b)[^;'\"()=`])*?)"

_FROM_PATTERN = re.compile(
    rf"(?<![\w$.])(?P<keyword>import|export)\s+(?P<type>type\s+)?{_CLAUSE}\bfrom\s*{_LITERAL}"
)
_SIDE_EFFECT_PATTERN = re.compile(rf"(?<![\w$.])import\s*{_LITERAL}")
_DYNAMIC_PATTERN = re.compile(rf"(?<![\w$.])import\s*\(\s*{_LITERAL}\s*\)")
_REQUIRE_PATTERN = re.compile(rf"(?<![\w$.])require\s*\(\s*{_LITERAL}\s*\)")


def mask_comments(source: str) -> str:
    """Replace comment text with spaces, keeping offsets and newlines intact."""
    chars = list(source)
    i, n = 0, len(source)
    quote: str | None = None
    while i < n:
        ch = source[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or (ch == "\n" and quote != "`"):
                quote = None
            i += 1
            continue
        if ch in "'\"`":
            quote = ch
            i += 1
            continue
        if source.startswith("//", i):
            end = source.find("\n", i)
            end = n if end == -1 else end
            for j in range(i, end):
                chars[j] = " "
            i = end
            continue
        if source.startswith("/*", i):
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
            for j in range(i, end):
                if chars[j] != "\n":
                    chars[j] = " "
            i = end
            continue
        i += 1
    return "".join(chars)


def _statement(source: str, match: re.Match[str], kind: ImportKind, is_type_only: bool = False) -> ImportStatement:
    start, end = match.span("literal")
    return ImportStatement(
        specifier=match.group("spec"),
        kind=kind,
        is_type_only=is_type_only,
        range=(start, end),
        line=source.count("\n", 0, start) + 1,
        quote=match.group("quote"),
    )


def scan_imports(source: str) -> list[ImportStatement]:
    """Find every import specifier in the source, ordered by position.

    Args:
        source: TypeScript or JavaScript source text.

    Returns:
        One ImportStatement per specifier literal.
    """
    masked = mask_comments(source)
    statements: list[ImportStatement] = []

    for match in _FROM_PATTERN.finditer(masked):
        kind = ImportKind.IMPORT if match.group("keyword") == "import" else ImportKind.EXPORT
        statements.append(_statement(masked, match, kind, is_type_only=match.group("type") is not None))
    for match in _SIDE_EFFECT_PATTERN.finditer(masked):
        statements.append(_statement(masked, match, ImportKind.SIDE_EFFECT))
    for match in _DYNAMIC_PATTERN.finditer(masked):
        statements.append(_statement(masked, match, ImportKind.DYNAMIC))
    for match in _REQUIRE_PATTERN.finditer(masked):
        statements.append(_statement(masked, match, ImportKind.REQUIRE))

    statements.sort(key=lambda s: s.range[0])
    return statements

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared type definitions for the boundary engine.

Contains the enumerations (CrossBoundaryStyle, SpecifierStyle, ImportSubject,
Relationship, ImportKind, Severity) and the Pydantic models (BoundaryConfig,
Boundary, ResolvedImport, ViolationData, Violation, ImportStatement) that flow
between path resolution, relationship detection, validation and reporting.
"""
from enum import StrEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from import_boundaries.core.constants import MessageId


class CrossBoundaryStyle(StrEnum):
    """How canonical cross-boundary specifiers are written."""

    ALIAS = "alias"
    ABSOLUTE = "absolute"


class Severity(StrEnum):
    """Severity attached to reported violations."""

    ERROR = "error"
    WARN = "warn"


class SpecifierStyle(StrEnum):
    """Syntactic form of a raw import specifier.

    Attributes:
        RELATIVE: Starts with '.' ('./x', '../x').
        ALIAS: Names a boundary alias ('@queries', '@queries/sub').
        ABSOLUTE: Root-relative path ('src/domain/queries').
        BARE: Names a boundary dir or its suffix ('entities/army').
    """

    RELATIVE = "relative"
    ALIAS = "alias"
    ABSOLUTE = "absolute"
    BARE = "bare"


class ImportSubject(StrEnum):
    """Whether a specifier names a file or a directory (its barrel file)."""

    FILE = "file"
    DIRECTORY = "directory"


class Relationship(StrEnum):
    """Structural relationship between an importing file and its target."""

    SAME_DIRECTORY = "same-directory"
    SAME_BOUNDARY = "same-boundary"
    ANCESTOR_BARREL = "ancestor-barrel"
    CROSS_BOUNDARY = "cross-boundary"


class ImportKind(StrEnum):
    """Source construct an import specifier was found in."""

    IMPORT = "import"
    EXPORT = "export"
    SIDE_EFFECT = "side-effect"
    DYNAMIC = "dynamic"
    REQUIRE = "require"


class BoundaryConfig(BaseModel):
    """One boundary as declared in configuration.

    Keys may be given in camelCase (``allowImportsFrom``) or snake_case.
    An absent list (None) is distinct from an empty one: declaring any list,
    even empty, means the boundary has rules.

    Attributes:
        dir: Directory relative to the root directory (e.g. 'domain/queries').
        alias: Import alias used from outside (e.g. '@queries').
        identifier: Name used in allow/deny lists; defaults to alias, then dir.
        allow_imports_from: Identifiers this boundary may import from.
        allow_type_imports_from: Identifiers allowed for type-only imports.
        deny_imports_from: Identifiers this boundary must never import from.
        severity: Severity override for violations raised in this boundary.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    dir: str
    alias: str | None = None
    identifier: str | None = None
    allow_imports_from: tuple[str, ...] | None = None
    allow_type_imports_from: tuple[str, ...] | None = None
    deny_imports_from: tuple[str, ...] | None = None
    severity: Severity | None = None


class Boundary(BaseModel):
    """A resolved, immutable architectural zone.

    Attributes:
        dir: Directory relative to the root directory.
        alias: Import alias, if any.
        identifier: Canonical name used by allow/deny lists and messages.
        abs_dir: Absolute, normalized, trailing-slash-free directory.
        allow_imports_from: Identifiers allowed for any import.
        allow_type_imports_from: Identifiers additionally allowed for type-only imports.
        deny_imports_from: Identifiers always denied.
        severity: Severity override for this boundary.
    """

    model_config = ConfigDict(frozen=True)

    dir: str
    alias: str | None = None
    identifier: str
    abs_dir: str
    allow_imports_from: tuple[str, ...] | None = None
    allow_type_imports_from: tuple[str, ...] | None = None
    deny_imports_from: tuple[str, ...] | None = None
    severity: Severity | None = None

    @property
    def has_rules(self) -> bool:
        """Whether any allow, type-allow or deny list is declared."""
        return (
            self.allow_imports_from is not None
            or self.allow_type_imports_from is not None
            or self.deny_imports_from is not None
        )


class ResolvedImport(BaseModel):
    """Output of path resolution for a single specifier.

    Attributes:
        target_abs: Absolute path of the target file (barrel file for directories).
        target_dir: Absolute directory containing target_abs.
        subject: Whether the specifier named a file or a directory.
        style: Syntactic style of the specifier.
        boundary: Boundary named by an alias or bare specifier.
    """

    model_config = ConfigDict(frozen=True)

    target_abs: str
    target_dir: str
    subject: ImportSubject
    style: SpecifierStyle
    boundary: Boundary | None = None


class FixResult(BaseModel):
    """A text replacement over a character range of the source."""

    model_config = ConfigDict(frozen=True)

    text: str
    range: tuple[int, int]


@runtime_checkable
class Fixer(Protocol):
    """Deferred autofix attached to a violation."""

    def apply(self) -> FixResult | None:
        """Return the replacement, or None if it cannot be applied."""
        ...


class ViolationData(BaseModel):
    """Structured fields interpolated into violation messages."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    reason: str | None = None
    expected_path: str | None = None
    actual_path: str | None = None
    alias: str | None = None
    path: str | None = None


class Violation(BaseModel):
    """A reported policy or path-format violation.

    Attributes:
        message_id: Taxonomy tag (see MessageId).
        data: Structured message fields.
        severity: Severity, or None to defer to the host default.
        fix: Optional deferred autofix.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message_id: MessageId
    data: ViolationData = Field(default_factory=ViolationData)
    severity: Severity | None = None
    fix: Fixer | None = None


class Reporter(Protocol):
    """Sink receiving violations, one call per violation."""

    def report(self, violation: Violation) -> None:
        """Record or emit a violation."""
        ...


class ImportStatement(BaseModel):
    """An import specifier found in source text.

    Attributes:
        specifier: The raw specifier string, without quotes.
        kind: Construct the specifier appeared in.
        is_type_only: Whether the import or re-export is type-only.
        range: Character offsets of the quoted literal, quotes included.
        line: 1-based line number of the literal.
        quote: Quote character the literal was written with.
    """

    model_config = ConfigDict(frozen=True)

    specifier: str
    kind: ImportKind = ImportKind.IMPORT
    is_type_only: bool = False
    range: tuple[int, int] = (0, 0)
    line: int = 1
    quote: str = "'"

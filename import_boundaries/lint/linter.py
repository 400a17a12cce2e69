# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/lint/linter.py
"""Lint source files: scan imports, run the engine, collect and fix violations."""

import fnmatch
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from import_boundaries.boundary.registry import BoundaryRegistry
from import_boundaries.config import Settings
from import_boundaries.core.constants import MESSAGES
from import_boundaries.core.types import ImportStatement, Severity, Violation
from import_boundaries.engine.handler import handle_import
from import_boundaries.lint.fixes import LiteralFixer, apply_fixes
from import_boundaries.lint.scanner import scan_imports
from import_boundaries.paths.resolution import FileExists


class CollectingReporter:
    """Reporter that keeps every violation it receives, in order."""

    def __init__(self) -> None:
        self.violations: list[Violation] = []

    def report(self, violation: Violation) -> None:
        self.violations.append(violation)


def render_message(violation: Violation) -> str:
    """Fill the message template for a violation's message id."""
    data = violation.data
    return MESSAGES[violation.message_id].format(
        expected_path=data.expected_path or "",
        actual_path=data.actual_path or "",
        alias=data.alias or "",
        path=data.path or "",
        to=data.to or "",
        from_=data.from_ or "",
        reason=data.reason or "",
    )


class Finding(BaseModel):
    """A violation located at an import statement.

    Attributes:
        statement: The import the violation was raised for.
        violation: The reported violation.
    """

    model_config = ConfigDict(frozen=True)

    statement: ImportStatement
    violation: Violation

    @property
    def severity(self) -> Severity:
        """Violation severity; unset severities count as errors."""
        return self.violation.severity or Severity.ERROR

    @property
    def message(self) -> str:
        """Rendered user-facing message."""
        return render_message(self.violation)


class FileReport(BaseModel):
    """Lint results for a single file.

    Attributes:
        path: Absolute path of the linted file.
        findings: Violations in source order.
        fixed: Number of fixes written back to the file.
    """

    path: str
    findings: list[Finding] = Field(default_factory=list)
    fixed: int = 0

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == Severity.WARN)


class LintReport(BaseModel):
    """Aggregated lint results.

    Attributes:
        files: Per-file reports for every linted file.
    """

    files: list[FileReport] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(f.error_count for f in self.files)

    @property
    def warning_count(self) -> int:
        return sum(f.warning_count for f in self.files)

    @property
    def fixed_count(self) -> int:
        return sum(f.fixed for f in self.files)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0


def lint_source(
    source: str,
    file_path: str,
    registry: BoundaryRegistry,
    settings: Settings,
    file_exists: FileExists = os.path.isfile,
) -> FileReport:
    """Lint source text as if it lived at file_path.

    Args:
        source: TypeScript or JavaScript source text.
        file_path: Absolute path the source belongs to.
        registry: Boundary registry.
        settings: Project settings.
        file_exists: Probe used to tell extensionless files from directories.

    Returns:
        FileReport with one finding per reported violation.
    """
    reporter = CollectingReporter()
    report = FileReport(path=file_path)

    for statement in scan_imports(source):
        def create_fixer(new_path: str, statement: ImportStatement = statement) -> LiteralFixer:
            return LiteralFixer(statement, new_path)

        before = len(reporter.violations)
        handle_import(statement, file_path, registry, settings, reporter, create_fixer, file_exists)
        for violation in reporter.violations[before:]:
            report.findings.append(Finding(statement=statement, violation=violation))

    return report


def lint_file(
    path: str | Path,
    registry: BoundaryRegistry,
    settings: Settings,
    fix: bool = False,
) -> FileReport:
    """Lint one file, optionally writing fixes back.

    When fixing, the file is re-linted after writing so the report lists only
    what remains.

    Raises:
        OSError: If the file cannot be read or written.
    """
    file_path = os.path.abspath(path)
    source = Path(file_path).read_text(encoding="utf-8")
    report = lint_source(source, file_path, registry, settings)

    if not fix or not report.findings:
        return report

    fixed_source, applied = apply_fixes(source, (f.violation for f in report.findings))
    if applied == 0:
        return report

    Path(file_path).write_text(fixed_source, encoding="utf-8")
    logger.info("Applied fixes", file=file_path, count=applied)
    remaining = lint_source(fixed_source, file_path, registry, settings)
    remaining.fixed = applied
    return remaining


def _is_ignored(path: Path, patterns: Iterable[str]) -> bool:
    for pattern in patterns:
        if fnmatch.fnmatch(str(path), pattern):
            return True
        if any(fnmatch.fnmatch(part, pattern) for part in path.parts):
            return True
    return False


def _is_source_file(path: Path, extensions: tuple[str, ...]) -> bool:
    # Ambient declaration files are not resolved
    if path.name.endswith(".d.ts"):
        return False
    return path.suffix in extensions


def iter_source_files(paths: Iterable[str | Path], settings: Settings) -> Iterator[Path]:
    """Yield source files under the given paths, skipping ignored ones.

    Files named explicitly are yielded even if their extension is not
    configured; directories are walked in sorted order.
    """
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            yield path
            continue
        if not path.is_dir():
            logger.warning("Path does not exist", path=str(path))
            continue
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(d for d in dirnames if not _is_ignored(Path(d), settings.ignore))
            for name in sorted(filenames):
                candidate = Path(dirpath) / name
                if _is_source_file(candidate, settings.file_extensions) and not _is_ignored(
                    candidate.relative_to(path), settings.ignore
                ):
                    yield candidate


def lint_paths(
    paths: Iterable[str | Path],
    registry: BoundaryRegistry,
    settings: Settings,
    fix: bool = False,
) -> LintReport:
    """Lint every source file under paths, sequentially.

    Args:
        paths: Files or directories.
        registry: Boundary registry.
        settings: Project settings.
        fix: Write fixes back to disk.

    Returns:
        LintReport with one FileReport per linted file.
    """
    report = LintReport()
    for file_path in iter_source_files(paths, settings):
        report.files.append(lint_file(file_path, registry, settings, fix=fix))
    logger.debug(
        "Lint finished",
        files=len(report.files),
        errors=report.error_count,
        warnings=report.warning_count,
    )
    return report

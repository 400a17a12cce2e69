# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""CLI commands for checking, explaining and listing boundaries."""

import json
import os
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from import_boundaries.boundary.registry import BoundaryRegistry
from import_boundaries.config import Settings, build_registry, load_settings, resolve_settings_path
from import_boundaries.core.exceptions import ConfigurationError
from import_boundaries.core.types import Severity
from import_boundaries.engine.relationship import explain_import
from import_boundaries.lint.linter import LintReport, lint_paths


console = Console()

# Exit code for configuration problems, distinct from "violations found"
CONFIG_ERROR_EXIT_CODE = 2


class OutputFormat(StrEnum):
    """Report format for the check command."""

    TEXT = "text"
    JSON = "json"


ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to boundaries.yaml (default: $IMPORT_BOUNDARIES_SETTINGS or ./boundaries.yaml).",
    ),
]


def _load_project(config_path: Path | None) -> tuple[Settings, BoundaryRegistry]:
    """Load settings and build the registry rooted at the config file's directory.

    Raises:
        typer.Exit: If the configuration is missing or invalid.
    """
    path = resolve_settings_path(config_path)
    try:
        settings = load_settings(path)
        registry = build_registry(settings, path.absolute().parent)
    except FileNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from None
    except yaml.YAMLError as e:
        typer.echo(f"Error: Malformed YAML in {path}: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from None
    except ValidationError as e:
        typer.echo(f"Error: Invalid configuration in {path}:\n{e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from None
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from None

    logger.debug("Loaded configuration", path=str(path), cwd=registry.cwd)
    return settings, registry


def _report_to_json(report: LintReport, cwd: str) -> str:
    entries = []
    for file_report in report.files:
        for finding in file_report.findings:
            entries.append({
                "file": os.path.relpath(file_report.path, cwd),
                "line": finding.statement.line,
                "specifier": finding.statement.specifier,
                "messageId": str(finding.violation.message_id),
                "severity": str(finding.severity),
                "message": finding.message,
                "data": finding.violation.data.model_dump(by_alias=True, exclude_none=True),
                "fixable": finding.violation.fix is not None,
            })
    return json.dumps(entries, indent=2)


def _print_text_report(report: LintReport, cwd: str) -> None:
    for file_report in report.files:
        if not file_report.findings:
            continue
        console.print(f"\n[bold]{escape(os.path.relpath(file_report.path, cwd))}[/bold]", soft_wrap=True)
        for finding in file_report.findings:
            style = "red" if finding.severity == Severity.ERROR else "yellow"
            console.print(
                f"  {finding.statement.line:>4}  [{style}]{finding.severity:<5}[/{style}]  "
                f"{escape(finding.message)}  [dim]{finding.violation.message_id}[/dim]",
                soft_wrap=True,
            )

    summary = f"{report.error_count} error(s), {report.warning_count} warning(s) in {len(report.files)} file(s)"
    if report.fixed_count:
        summary += f", {report.fixed_count} fix(es) applied"
    color = "red" if report.has_errors else "green"
    console.print(f"\n[{color}]{summary}[/{color}]", soft_wrap=True)


def check_command(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="Files or directories to check (default: the configured root directory)."),
    ] = None,
    config: ConfigOption = None,
    fix: Annotated[bool, typer.Option("--fix", help="Rewrite fixable import paths in place.")] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format."),
    ] = OutputFormat.TEXT,
) -> None:
    """Check imports against the configured boundaries.

    Exits with code 1 when any error-severity violation remains.
    """
    settings, registry = _load_project(config)
    targets = paths or [Path(registry.root_abs_dir)]

    report = lint_paths(targets, registry, settings, fix=fix)

    if output_format == OutputFormat.JSON:
        typer.echo(_report_to_json(report, registry.cwd))
    else:
        _print_text_report(report, registry.cwd)

    if report.has_errors:
        raise typer.Exit(code=1)


def explain_command(
    specifier: Annotated[str, typer.Argument(help="Import specifier as written in the source.")],
    from_file: Annotated[Path, typer.Option("--from", help="File containing the import.")],
    config: ConfigOption = None,
    type_only: Annotated[bool, typer.Option("--type-only", help="Evaluate as a type-only import.")] = False,
) -> None:
    """Explain how an import resolves and which rules apply to it."""
    settings, registry = _load_project(config)
    file_abs = os.path.abspath(from_file)

    explanation = explain_import(
        specifier,
        file_abs,
        registry,
        cross_boundary_style=settings.cross_boundary_style,
        barrel_file_name=settings.barrel_file_name,
        file_extensions=settings.file_extensions,
        is_type_only=type_only,
    )

    table = Table(title=f"Import: {escape(specifier)}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("File", escape(os.path.relpath(file_abs, registry.cwd)))
    if explanation.error is not None:
        table.add_row("Resolution", f"[yellow]external (skipped): {escape(explanation.error)}[/yellow]")
        console.print(table)
        return

    assert explanation.resolved is not None
    resolved = explanation.resolved
    table.add_row("Style", str(resolved.style))
    table.add_row("Target", escape(os.path.relpath(resolved.target_abs, registry.cwd)))
    table.add_row("Subject", str(resolved.subject))
    table.add_row("File boundary", explanation.file_boundary.identifier if explanation.file_boundary else "-")
    table.add_row("Target boundary", explanation.target_boundary.identifier if explanation.target_boundary else "-")
    table.add_row("Relationship", str(explanation.relationship))
    table.add_row("Expected specifier", escape(explanation.expected_path or "-"))
    if explanation.relative_path is not None:
        table.add_row("Relative path", escape(explanation.relative_path))
    if explanation.denial_reason is not None:
        table.add_row("Rules", f"[red]denied: {escape(explanation.denial_reason)}[/red]")
    else:
        table.add_row("Rules", "[green]allowed[/green]")

    console.print(table)


def boundaries_command(config: ConfigOption = None) -> None:
    """List the configured boundaries and their rules."""
    settings, registry = _load_project(config)

    table = Table(title=f"Boundaries ({settings.cross_boundary_style} style, root '{registry.root_dir}')")
    table.add_column("Identifier", style="cyan")
    table.add_column("Dir", style="white")
    table.add_column("Alias", style="green")
    table.add_column("Allow", style="blue")
    table.add_column("Allow (types)", style="magenta")
    table.add_column("Deny", style="red")
    table.add_column("Severity", style="yellow")

    def _fmt(values: tuple[str, ...] | None) -> str:
        if values is None:
            return "-"
        return ", ".join(values) or "(none)"

    for boundary in registry.boundaries:
        table.add_row(
            boundary.identifier,
            boundary.dir,
            boundary.alias or "-",
            _fmt(boundary.allow_imports_from),
            _fmt(boundary.allow_type_imports_from),
            _fmt(boundary.deny_imports_from),
            str(boundary.severity or settings.default_severity or "error"),
        )

    console.print(table)

"""Tests for the check, explain and boundaries CLI commands."""

import json
import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from import_boundaries.main import app


CONFIG = {
    "rootDir": "src",
    "boundaries": [
        {"dir": "domain", "alias": "@domain", "allowImportsFrom": []},
        {"dir": "application", "alias": "@application", "allowImportsFrom": ["@domain"]},
        {"dir": "infrastructure", "alias": "@infrastructure", "allowImportsFrom": ["@domain"]},
    ],
}

FILES = {
    "src/domain/index.ts": "export type User = { id: string };\n",
    "src/application/service.ts": "import { User } from '../domain';\nimport { Db } from '@infrastructure';\n",
    "src/infrastructure/index.ts": "import type { User } from '@domain';\nexport class Db {}\n",
}


def _strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """The CLI callback installs a handler on the runner's stderr; drop it afterwards."""
    yield
    logger.remove()


@pytest.fixture
def project(project_factory) -> Path:
    return project_factory(CONFIG, FILES)


def _invoke(runner: CliRunner, project: Path, *args: str):
    return runner.invoke(app, [*args, "--config", str(project / "boundaries.yaml")])


class TestCommandsRegistered:
    @pytest.mark.parametrize("command", ["check", "explain", "boundaries"])
    def test_help(self, cli_runner: CliRunner, command: str) -> None:
        result = cli_runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    def test_app_help_lists_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("check", "explain", "boundaries"):
            assert command in result.output


class TestCheckCommand:
    def test_reports_violations(self, cli_runner: CliRunner, project: Path) -> None:
        result = _invoke(cli_runner, project, "check")
        output = _strip_ansi(result.output)

        assert result.exit_code == 1
        assert "src/application/service.ts" in output
        assert "Expected '@domain' but got '../domain'." in output
        assert "boundaryViolation" in output
        assert "2 error(s), 0 warning(s) in 3 file(s)" in output

    def test_json_format(self, cli_runner: CliRunner, project: Path) -> None:
        result = _invoke(cli_runner, project, "check", "--format", "json")

        assert result.exit_code == 1
        entries = json.loads(result.stdout)
        assert [e["messageId"] for e in entries] == ["incorrectImportPath", "boundaryViolation"]

        path_entry, rule_entry = entries
        assert path_entry["file"] == "src/application/service.ts"
        assert path_entry["line"] == 1
        assert path_entry["fixable"] is True
        assert path_entry["data"] == {"expected_path": "@domain", "actual_path": "../domain"}
        assert rule_entry["severity"] == "error"
        assert rule_entry["data"]["from"] == "@application"
        assert rule_entry["data"]["to"] == "@infrastructure"
        assert rule_entry["fixable"] is False

    def test_fix(self, cli_runner: CliRunner, project: Path) -> None:
        result = _invoke(cli_runner, project, "check", "--fix")
        output = _strip_ansi(result.output)

        assert result.exit_code == 1
        assert "1 fix(es) applied" in output
        assert "1 error(s)" in output
        assert (project / "src/application/service.ts").read_text().startswith("import { User } from '@domain';")

    def test_clean_project(self, cli_runner: CliRunner, project_factory) -> None:
        project = project_factory(CONFIG, {
            "src/application/service.ts": "import { User } from '@domain';\n",
            "src/domain/index.ts": "export type User = {};\n",
        })

        result = _invoke(cli_runner, project, "check")

        assert result.exit_code == 0
        assert "0 error(s), 0 warning(s) in 2 file(s)" in _strip_ansi(result.output)

    def test_warnings_do_not_fail(self, cli_runner: CliRunner, project_factory) -> None:
        project = project_factory({**CONFIG, "defaultSeverity": "warn"}, FILES)

        result = _invoke(cli_runner, project, "check")

        assert result.exit_code == 0
        assert "0 error(s), 2 warning(s)" in _strip_ansi(result.output)

    def test_explicit_paths(self, cli_runner: CliRunner, project: Path) -> None:
        result = _invoke(cli_runner, project, "check", str(project / "src/infrastructure"))

        assert result.exit_code == 0
        assert "in 1 file(s)" in _strip_ansi(result.output)

    def test_config_from_env_var(self, cli_runner: CliRunner, project: Path, monkeypatch) -> None:
        monkeypatch.setenv("IMPORT_BOUNDARIES_SETTINGS", str(project / "boundaries.yaml"))

        result = cli_runner.invoke(app, ["check", "--format", "json"])

        assert result.exit_code == 1
        assert len(json.loads(result.stdout)) == 2


class TestConfigurationErrors:
    def test_missing_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["check", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 2
        assert "Configuration file not found" in result.output

    def test_invalid_config(self, cli_runner: CliRunner, project_factory) -> None:
        project = project_factory({"rootDir": "src", "boundaries": []})

        result = _invoke(cli_runner, project, "check")

        assert result.exit_code == 2
        assert "Invalid configuration" in result.output

    def test_inconsistent_boundaries(self, cli_runner: CliRunner, project_factory) -> None:
        project = project_factory({"boundaries": [{"dir": "domain"}]})

        result = _invoke(cli_runner, project, "boundaries")

        assert result.exit_code == 2
        assert "alias" in result.output

    def test_malformed_yaml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "boundaries.yaml"
        config.write_text("boundaries: [unclosed\n")

        result = cli_runner.invoke(app, ["check", "--config", str(config)])

        assert result.exit_code == 2
        assert "Malformed YAML" in result.output


class TestExplainCommand:
    def test_denied_import(self, cli_runner: CliRunner, project: Path) -> None:
        service = project / "src/application/service.ts"

        result = _invoke(cli_runner, project, "explain", "@infrastructure", "--from", str(service))
        output = _strip_ansi(result.output)

        assert result.exit_code == 0
        assert "cross-boundary" in output
        assert "denied" in output

    def test_type_only_allowed(self, cli_runner: CliRunner, project: Path) -> None:
        infra = project / "src/infrastructure/index.ts"

        result = _invoke(cli_runner, project, "explain", "@domain", "--from", str(infra), "--type-only")

        assert result.exit_code == 0
        assert "allowed" in _strip_ansi(result.output)

    def test_external_specifier(self, cli_runner: CliRunner, project: Path) -> None:
        service = project / "src/application/service.ts"

        result = _invoke(cli_runner, project, "explain", "react", "--from", str(service))

        assert result.exit_code == 0
        assert "external" in _strip_ansi(result.output)


class TestBoundariesCommand:
    def test_lists_boundaries(self, cli_runner: CliRunner, project: Path) -> None:
        result = _invoke(cli_runner, project, "boundaries")
        output = _strip_ansi(result.output)

        assert result.exit_code == 0
        for alias in ("@domain", "@application", "@infrastructure"):
            assert alias in output
        assert "(none)" in output

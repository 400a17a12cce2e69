# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared fixtures and helpers for all tests.

Unit tests work on a virtual project rooted at ``/project`` with sources
under ``src``; nothing there exists on disk, so extensionless specifiers
resolve as directory imports unless a test passes its own file probe.
"""
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
import yaml
from typer.testing import CliRunner

from import_boundaries.boundary.registry import BoundaryRegistry, resolve_boundary
from import_boundaries.config import Settings, build_registry
from import_boundaries.core.types import Boundary, BoundaryConfig, ImportStatement, Violation


CWD = "/project"
ROOT_DIR = "src"


def src(*parts: str) -> str:
    """Absolute path under the virtual project's root directory."""
    return "/".join([CWD, ROOT_DIR, *parts])


def reported(reporter: MagicMock) -> list[Violation]:
    """Violations handed to a MagicMock reporter, in call order."""
    return [call.args[0] for call in reporter.report.call_args_list]


@pytest.fixture
def boundary_factory() -> Callable[..., Boundary]:
    """Factory fixture for creating resolved Boundary instances under /project/src."""
    def _create(dir: str, alias: str | None = None, **kwargs: Any) -> Boundary:
        return resolve_boundary(BoundaryConfig(dir=dir, alias=alias, **kwargs), cwd=CWD, root_dir=ROOT_DIR)
    return _create


@pytest.fixture
def readme_boundaries(boundary_factory: Callable[..., Boundary]) -> dict[str, Boundary]:
    """The entities/queries/events layout used throughout the docs."""
    return {
        "entities": boundary_factory("domain/entities", "@entities", allow_imports_from=()),
        "queries": boundary_factory("domain/queries", "@queries", allow_imports_from=("@entities",)),
        "events": boundary_factory("domain/events", "@events", allow_imports_from=("@entities",)),
    }


@pytest.fixture
def mock_reporter() -> MagicMock:
    """Reporter double; inspect with ``reported(mock_reporter)``."""
    return MagicMock()


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Factory fixture for Settings with a three-layer default layout."""
    def _create(**kwargs: Any) -> Settings:
        data: dict[str, Any] = {
            "root_dir": ROOT_DIR,
            "boundaries": [
                {"dir": "domain", "alias": "@domain", "allow_imports_from": []},
                {"dir": "application", "alias": "@application", "allow_imports_from": ["@domain"]},
                {"dir": "infrastructure", "alias": "@infrastructure", "allow_imports_from": ["@domain"]},
            ],
        }
        data.update(kwargs)
        return Settings(**data)
    return _create


@pytest.fixture
def registry_factory() -> Callable[[Settings], BoundaryRegistry]:
    """Factory fixture building a registry for settings under /project."""
    def _create(settings: Settings, cwd: str = CWD) -> BoundaryRegistry:
        return build_registry(settings, cwd)
    return _create


@pytest.fixture
def statement_factory() -> Callable[..., ImportStatement]:
    """Factory fixture for ImportStatement instances."""
    def _create(specifier: str, is_type_only: bool = False, **kwargs: Any) -> ImportStatement:
        return ImportStatement(specifier=specifier, is_type_only=is_type_only, **kwargs)
    return _create


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture writing a project (boundaries.yaml plus sources) to tmp_path.

    Args passed to the factory:
        config: Settings data dumped as boundaries.yaml.
        files: Mapping of project-relative path to file contents.
    """
    def _create(config: dict[str, Any], files: dict[str, str] | None = None) -> Path:
        (tmp_path / "boundaries.yaml").write_text(yaml.safe_dump(config))
        for rel_path, content in (files or {}).items():
            target = tmp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return tmp_path
    return _create

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
import os
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from import_boundaries.boundary.registry import BoundaryRegistry, create_registry
from import_boundaries.core.constants import (
    DEFAULT_BARREL_FILE_NAME,
    DEFAULT_FILE_EXTENSIONS,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_ROOT_DIR,
    DEFAULT_SETTINGS_FILE,
    SETTINGS_ENV_VAR,
)
from import_boundaries.core.types import BoundaryConfig, CrossBoundaryStyle, Severity


class Settings(BaseModel):
    """Project-wide boundary configuration.

    Keys may be written camelCase (``rootDir``) or snake_case (``root_dir``).

    Attributes:
        root_dir: Root directory relative to the project root.
        boundaries: Boundary declarations, at least one.
        cross_boundary_style: How canonical cross-boundary specifiers are written.
        default_severity: Severity for violations when a boundary sets none.
        allow_unknown_boundaries: Allow imports of targets outside all boundaries.
        enforce_boundaries: Check allow/deny rules (path format is always checked).
        barrel_file_name: Barrel file name without extension.
        file_extensions: Candidate extensions in priority order.
        ignore: Directory or glob patterns the linter skips.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    root_dir: str = DEFAULT_ROOT_DIR
    boundaries: Annotated[list[BoundaryConfig], Field(min_length=1)]
    cross_boundary_style: CrossBoundaryStyle = CrossBoundaryStyle.ALIAS
    default_severity: Severity | None = None
    allow_unknown_boundaries: bool = False
    enforce_boundaries: bool = True
    barrel_file_name: str = DEFAULT_BARREL_FILE_NAME
    file_extensions: tuple[str, ...] = DEFAULT_FILE_EXTENSIONS
    ignore: tuple[str, ...] = DEFAULT_IGNORE_PATTERNS

    @field_validator("file_extensions", mode="after")
    @classmethod
    def validate_file_extensions(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Require at least one extension, each starting with a dot.

        Raises:
            ValueError: If the list is empty or an entry lacks a leading dot.
        """
        if not v:
            raise ValueError("file_extensions must not be empty")
        for ext in v:
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"Invalid file extension '{ext}': must look like '.ts'")
        return v

    @field_validator("root_dir", mode="after")
    @classmethod
    def validate_root_dir(cls, v: str) -> str:
        """Strip surrounding slashes; an empty root means the project root itself."""
        return v.strip("/") or "."


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Resolution order:
    1. Explicit config_path parameter (if provided)
    2. IMPORT_BOUNDARIES_SETTINGS environment variable (if set)
    3. Default: 'boundaries.yaml' in the current directory

    Args:
        config_path: Optional explicit path to the configuration file.

    Returns:
        Settings object populated from the YAML configuration.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        yaml.YAMLError: If the YAML file is malformed.
        pydantic.ValidationError: If the configuration fails validation.
    """
    config_path = resolve_settings_path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found at {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Settings(**(data or {}))


def resolve_settings_path(config_path: Path | None = None) -> Path:
    """Apply the settings resolution order without touching the file."""
    if config_path is not None:
        return config_path
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    return Path(env_path) if env_path else Path(DEFAULT_SETTINGS_FILE)


def build_registry(settings: Settings, cwd: str | Path) -> BoundaryRegistry:
    """Resolve the configured boundaries against a project root.

    Args:
        settings: Loaded settings.
        cwd: Project root the root directory is relative to.

    Returns:
        BoundaryRegistry with absolute boundary directories.

    Raises:
        ConfigurationError: If the boundary declarations are inconsistent.
    """
    return create_registry(
        settings.boundaries,
        cwd=os.path.abspath(cwd),
        root_dir=settings.root_dir,
        cross_boundary_style=settings.cross_boundary_style,
    )

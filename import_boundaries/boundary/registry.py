# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/boundary/registry.py
"""Resolved boundary configuration and lookup by alias or identifier."""

import os
from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict

from import_boundaries.core.constants import DEFAULT_ROOT_DIR
from import_boundaries.core.exceptions import ConfigurationError
from import_boundaries.core.types import Boundary, BoundaryConfig, CrossBoundaryStyle
from import_boundaries.paths.utils import normalize_path


class BoundaryRegistry(BaseModel):
    """Immutable set of boundaries plus the project root they are anchored to.

    Attributes:
        cwd: Absolute project root.
        root_dir: Root directory name relative to cwd (e.g. 'src').
        boundaries: Boundaries in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    cwd: str
    root_dir: str = DEFAULT_ROOT_DIR
    boundaries: tuple[Boundary, ...] = ()

    @property
    def root_abs_dir(self) -> str:
        """Absolute path of the root directory."""
        return normalize_path(os.path.join(self.cwd, self.root_dir))

    def by_alias(self, alias: str) -> Boundary | None:
        """Return the boundary declaring this alias, if any."""
        for boundary in self.boundaries:
            if boundary.alias == alias:
                return boundary
        return None

    def by_identifier(self, identifier: str) -> Boundary | None:
        """Return the boundary with this identifier, if any."""
        for boundary in self.boundaries:
            if boundary.identifier == identifier:
                return boundary
        return None


def resolve_boundary(config: BoundaryConfig, *, cwd: str, root_dir: str = DEFAULT_ROOT_DIR) -> Boundary:
    """Derive an immutable Boundary from its declaration.

    The identifier defaults to the alias, then to the directory. The absolute
    directory is computed once here and never recomputed.
    """
    directory = config.dir.strip("/")
    return Boundary(
        dir=directory,
        alias=config.alias,
        identifier=config.identifier or config.alias or directory,
        abs_dir=normalize_path(os.path.join(cwd, root_dir, directory)),
        allow_imports_from=config.allow_imports_from,
        allow_type_imports_from=config.allow_type_imports_from,
        deny_imports_from=config.deny_imports_from,
        severity=config.severity,
    )


def _validate_registry(boundaries: Sequence[Boundary], cross_boundary_style: CrossBoundaryStyle) -> None:
    if cross_boundary_style == CrossBoundaryStyle.ALIAS:
        missing = [b.dir for b in boundaries if not b.alias]
        if missing:
            raise ConfigurationError(
                f"When cross_boundary_style is 'alias', every boundary needs an alias. "
                f"Missing alias for: {', '.join(missing)}"
            )

    seen: set[str] = set()
    for boundary in boundaries:
        if boundary.identifier in seen:
            raise ConfigurationError(f"Duplicate boundary identifier '{boundary.identifier}'")
        seen.add(boundary.identifier)

    for boundary in boundaries:
        for field_name in ("allow_imports_from", "allow_type_imports_from", "deny_imports_from"):
            for identifier in getattr(boundary, field_name) or ():
                if identifier not in seen:
                    raise ConfigurationError(
                        f"Boundary '{boundary.identifier}' lists unknown boundary "
                        f"'{identifier}' in {field_name}"
                    )


def create_registry(
    configs: Sequence[BoundaryConfig],
    *,
    cwd: str,
    root_dir: str = DEFAULT_ROOT_DIR,
    cross_boundary_style: CrossBoundaryStyle = CrossBoundaryStyle.ALIAS,
) -> BoundaryRegistry:
    """Resolve and validate boundary declarations into a registry.

    Args:
        configs: Boundary declarations in order.
        cwd: Absolute project root.
        root_dir: Root directory name relative to cwd.
        cross_boundary_style: Style used for canonical cross-boundary specifiers.

    Returns:
        BoundaryRegistry with every boundary resolved.

    Raises:
        ConfigurationError: If an alias is missing under alias style, two
            boundaries share an identifier, or a rule list names an unknown
            boundary.
    """
    boundaries = tuple(resolve_boundary(c, cwd=cwd, root_dir=root_dir) for c in configs)
    _validate_registry(boundaries, cross_boundary_style)
    logger.debug(
        "Boundary registry created",
        cwd=cwd,
        root_dir=root_dir,
        boundary_count=len(boundaries),
    )
    return BoundaryRegistry(cwd=normalize_path(cwd), root_dir=root_dir, boundaries=boundaries)

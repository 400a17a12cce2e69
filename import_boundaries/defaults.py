# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/defaults.py
"""Preset settings for common architectures.

Both presets accept keyword overrides for any Settings field. Extra
``boundaries`` are appended to the preset's own rather than replacing them.
"""

from typing import Any

from import_boundaries.config import Settings
from import_boundaries.core.types import BoundaryConfig


HEXAGONAL_BOUNDARIES: tuple[BoundaryConfig, ...] = (
    # Domain is pure
    BoundaryConfig(
        dir="domain",
        alias="@domain",
        deny_imports_from=("@application", "@infrastructure", "@composition"),
    ),
    BoundaryConfig(
        dir="application",
        alias="@application",
        allow_imports_from=("@domain",),
        deny_imports_from=("@infrastructure", "@composition"),
    ),
    # Ports bridge application and infrastructure
    BoundaryConfig(
        dir="application/ports",
        alias="@ports",
        allow_imports_from=("@domain", "@infrastructure", "@application"),
    ),
    BoundaryConfig(
        dir="infrastructure",
        alias="@infrastructure",
        allow_imports_from=("@domain",),
        allow_type_imports_from=("@domain", "@ports"),
        deny_imports_from=("@composition",),
    ),
    # Wiring sees everything
    BoundaryConfig(
        dir="composition",
        alias="@composition",
        allow_imports_from=("@domain", "@application", "@infrastructure", "@ports"),
    ),
)

SIMPLE_BOUNDARIES: tuple[BoundaryConfig, ...] = (
    BoundaryConfig(dir="domain", alias="@domain"),
    BoundaryConfig(dir="application", alias="@application"),
    BoundaryConfig(dir="infrastructure", alias="@infrastructure"),
)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> Settings:
    extra = overrides.pop("boundaries", None)
    data = {**base, **overrides}
    if extra:
        data["boundaries"] = [*base["boundaries"], *extra]
    return Settings(**data)


def hexagonal_defaults(**overrides: Any) -> Settings:
    """Hexagonal (ports and adapters) layout under 'src'.

    Example:
        >>> settings = hexagonal_defaults(root_dir="lib")
        >>> [b.alias for b in settings.boundaries][:2]
        ['@domain', '@application']
    """
    base: dict[str, Any] = {
        "root_dir": "src",
        "cross_boundary_style": "alias",
        "boundaries": list(HEXAGONAL_BOUNDARIES),
    }
    return _merge(base, overrides)


def simple_defaults(**overrides: Any) -> Settings:
    """Three plain layers with path-format checks only (no allow/deny rules)."""
    base: dict[str, Any] = {
        "root_dir": "src",
        "cross_boundary_style": "alias",
        "enforce_boundaries": False,
        "boundaries": list(SIMPLE_BOUNDARIES),
    }
    return _merge(base, overrides)

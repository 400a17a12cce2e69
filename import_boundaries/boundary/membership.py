# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/boundary/membership.py
"""Map absolute paths to the boundary that contains them.

Overlapping (nested) boundary directories are allowed. Lookup is a ranked
search over the declared boundaries: the longest containing ``abs_dir`` wins,
so the result depends on specificity and never on declaration order.
"""

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from import_boundaries.core.types import Boundary
from import_boundaries.paths.resolution import find_alias_boundary
from import_boundaries.paths.utils import is_inside_dir


class AliasSubpath(BaseModel):
    """Result of checking whether a specifier is '<alias>/<something>'.

    Attributes:
        is_subpath: True when the specifier reaches below an alias.
        base_alias: The alias the specifier starts with, if any.
    """

    model_config = ConfigDict(frozen=True)

    is_subpath: bool = False
    base_alias: str | None = None


def _longest_containing(abs_path: str, candidates: Sequence[Boundary]) -> Boundary | None:
    best: Boundary | None = None
    for boundary in candidates:
        if not is_inside_dir(boundary.abs_dir, abs_path):
            continue
        if best is None or len(boundary.abs_dir) > len(best.abs_dir):
            best = boundary
    return best


def find_boundary_for(abs_path: str, boundaries: Sequence[Boundary]) -> Boundary | None:
    """Return the most specific boundary containing abs_path.

    Args:
        abs_path: Absolute file or directory path.
        boundaries: Configured boundaries.

    Returns:
        The boundary with the longest abs_dir that is abs_path or a
        segment-wise ancestor of it, or None when no boundary contains it.
    """
    return _longest_containing(abs_path, boundaries)


def find_ruled_boundary_for(abs_path: str, boundaries: Sequence[Boundary]) -> Boundary | None:
    """Like find_boundary_for, but only considers boundaries that declare rules.

    Importing files are attributed to the nearest boundary that carries
    allow/deny lists, so a rule-less nested boundary inherits its parent's
    policy. Falls back to plain lookup when no ruled boundary contains the path.
    """
    ruled = _longest_containing(abs_path, [b for b in boundaries if b.has_rules])
    if ruled is not None:
        return ruled
    return _longest_containing(abs_path, boundaries)


def check_alias_subpath(specifier: str, boundaries: Sequence[Boundary]) -> AliasSubpath:
    """Check whether a specifier is an alias followed by a subpath ('@entities/army')."""
    boundary = find_alias_boundary(specifier, boundaries)
    if boundary is None or boundary.alias is None:
        return AliasSubpath()
    return AliasSubpath(is_subpath=specifier != boundary.alias, base_alias=boundary.alias)

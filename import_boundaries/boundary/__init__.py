"""Boundary registry, membership lookup and allow/deny policy."""

from import_boundaries.boundary.membership import (
    AliasSubpath as AliasSubpath,
    check_alias_subpath as check_alias_subpath,
    find_boundary_for as find_boundary_for,
    find_ruled_boundary_for as find_ruled_boundary_for,
)
from import_boundaries.boundary.registry import (
    BoundaryRegistry as BoundaryRegistry,
    create_registry as create_registry,
    resolve_boundary as resolve_boundary,
)
from import_boundaries.boundary.rules import (
    check_boundary_rules as check_boundary_rules,
    is_same_boundary as is_same_boundary,
)

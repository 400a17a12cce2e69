# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/paths/resolution.py
"""Resolve raw import specifiers to absolute target paths.

Four specifier styles are handled: relative ('./x', '../x'), alias
('@queries', '@queries/sub'), absolute from the root directory
('src/domain/queries') and bare names of a boundary directory or one of its
suffixes ('entities/army'). A specifier without a known extension that does
not name an existing file is a directory import and resolves to that
directory's barrel file.
"""

import os
from collections.abc import Callable, Sequence

from import_boundaries.core.constants import DEFAULT_BARREL_FILE_NAME, DEFAULT_FILE_EXTENSIONS, DEFAULT_ROOT_DIR
from import_boundaries.core.exceptions import ResolutionError
from import_boundaries.core.types import Boundary, ImportSubject, ResolvedImport, SpecifierStyle
from import_boundaries.paths.utils import (
    barrel_path,
    has_extension,
    is_inside_dir,
    normalize_path,
    strip_trailing_slash,
)


FileExists = Callable[[str], bool]


def find_alias_boundary(specifier: str, boundaries: Sequence[Boundary]) -> Boundary | None:
    """Find the boundary whose alias the specifier names, preferring the longest alias."""
    matches = [
        b for b in boundaries
        if b.alias and (specifier == b.alias or specifier.startswith(f"{b.alias}/"))
    ]
    if not matches:
        return None
    return max(matches, key=lambda b: len(b.alias or ""))


def _bare_suffixes(boundary_dir: str) -> list[str]:
    """Trailing segment runs of a boundary dir, shortest first ('entities', 'domain/entities')."""
    parts = boundary_dir.split("/")
    return ["/".join(parts[i:]) for i in range(len(parts) - 1, -1, -1)]


def find_bare_boundary(specifier: str, boundaries: Sequence[Boundary]) -> Boundary | None:
    """Find the first declared boundary a bare specifier refers to.

    A bare specifier matches when it equals or starts with the boundary dir,
    or with a trailing suffix of it ('entities/army' matches 'domain/entities').
    """
    if not specifier:
        return None
    for boundary in boundaries:
        if not boundary.dir:
            continue
        if specifier == boundary.dir or specifier.startswith(f"{boundary.dir}/"):
            return boundary
        for suffix in _bare_suffixes(boundary.dir):
            if specifier == suffix or specifier.startswith(f"{suffix}/"):
                return boundary
    return None


def extract_bare_subpath(specifier: str, boundary: Boundary) -> str:
    """Return the part of a bare specifier below the boundary it matched."""
    if specifier == boundary.dir:
        return ""
    if specifier.startswith(f"{boundary.dir}/"):
        return specifier[len(boundary.dir) + 1:]
    for suffix in _bare_suffixes(boundary.dir):
        if specifier.startswith(f"{suffix}/"):
            return specifier[len(suffix) + 1:]
        if specifier == suffix:
            return ""
    return ""


def classify_specifier(
    raw_specifier: str,
    boundaries: Sequence[Boundary],
    root_dir: str = DEFAULT_ROOT_DIR,
) -> SpecifierStyle:
    """Determine the syntactic style of a raw specifier.

    Raises:
        ResolutionError: If the specifier is empty or looks like an alias
            ('@...') that matches no configured boundary.
    """
    if not raw_specifier or not raw_specifier.strip():
        raise ResolutionError("Empty import specifier", specifier=raw_specifier)
    if raw_specifier.startswith("."):
        return SpecifierStyle.RELATIVE
    if find_alias_boundary(raw_specifier, boundaries) is not None:
        return SpecifierStyle.ALIAS
    if raw_specifier.startswith("@"):
        raise ResolutionError(
            f"Alias '{raw_specifier}' does not match any configured boundary",
            specifier=raw_specifier,
        )
    root = strip_trailing_slash(root_dir)
    if raw_specifier == root or raw_specifier.startswith(f"{root}/"):
        return SpecifierStyle.ABSOLUTE
    return SpecifierStyle.BARE


def resolve_target(
    base_dir: str,
    specifier: str,
    barrel_file_name: str = DEFAULT_BARREL_FILE_NAME,
    file_extensions: Sequence[str] = DEFAULT_FILE_EXTENSIONS,
    file_exists: FileExists = os.path.isfile,
) -> tuple[str, str, ImportSubject]:
    """Resolve a specifier relative to base_dir.

    Args:
        base_dir: Absolute directory the specifier is relative to.
        specifier: Remaining specifier text; empty means base_dir itself.
        barrel_file_name: Barrel file name without extension.
        file_extensions: Candidate extensions in priority order.
        file_exists: Probe used to tell extensionless files from directories.

    Returns:
        Tuple of (target_abs, target_dir, subject).
    """
    extensions = tuple(file_extensions)
    resolved = normalize_path(os.path.join(base_dir, strip_trailing_slash(specifier)))

    if has_extension(resolved, extensions):
        return resolved, os.path.dirname(resolved), ImportSubject.FILE

    # './index' names the barrel file itself, not an 'index' directory
    if specifier and os.path.basename(resolved) == barrel_file_name:
        parent = os.path.dirname(resolved)
        return barrel_path(parent, barrel_file_name, extensions), parent, ImportSubject.FILE

    if file_exists(resolved):
        return resolved, os.path.dirname(resolved), ImportSubject.FILE

    return barrel_path(resolved, barrel_file_name, extensions), resolved, ImportSubject.DIRECTORY


def resolve_import(
    raw_specifier: str,
    importing_file: str,
    boundaries: Sequence[Boundary],
    *,
    cwd: str,
    root_dir: str = DEFAULT_ROOT_DIR,
    barrel_file_name: str = DEFAULT_BARREL_FILE_NAME,
    file_extensions: Sequence[str] = DEFAULT_FILE_EXTENSIONS,
    file_exists: FileExists = os.path.isfile,
) -> ResolvedImport:
    """Resolve a raw import specifier to its absolute target.

    Args:
        raw_specifier: Specifier exactly as written in the source.
        importing_file: Absolute path of the file containing the import.
        boundaries: Configured boundaries (used for alias and bare lookup).
        cwd: Absolute project root; root-relative specifiers are joined to it.
        root_dir: Root directory name relative to cwd (e.g. 'src').
        barrel_file_name: Barrel file name without extension.
        file_extensions: Candidate extensions in priority order.
        file_exists: Probe used to tell extensionless files from directories.

    Returns:
        ResolvedImport with target file, target directory, subject and style.

    Raises:
        ResolutionError: For empty specifiers, unknown aliases, bare
            specifiers naming no boundary, or specifiers of any style
            that climb out of cwd.
    """
    style = classify_specifier(raw_specifier, boundaries, root_dir)
    boundary: Boundary | None = None

    if style == SpecifierStyle.RELATIVE:
        base_dir, remainder = os.path.dirname(importing_file), raw_specifier
    elif style == SpecifierStyle.ALIAS:
        boundary = find_alias_boundary(raw_specifier, boundaries)
        assert boundary is not None and boundary.alias is not None
        base_dir, remainder = boundary.abs_dir, raw_specifier[len(boundary.alias) + 1:]
    elif style == SpecifierStyle.ABSOLUTE:
        base_dir, remainder = cwd, raw_specifier
    else:
        boundary = find_bare_boundary(raw_specifier, boundaries)
        if boundary is None:
            raise ResolutionError(
                f"Specifier '{raw_specifier}' does not name a configured boundary",
                specifier=raw_specifier,
            )
        base_dir, remainder = boundary.abs_dir, extract_bare_subpath(raw_specifier, boundary)

    target_abs, target_dir, subject = resolve_target(
        base_dir, remainder, barrel_file_name, file_extensions, file_exists
    )

    if not is_inside_dir(cwd, target_dir):
        raise ResolutionError(
            f"Specifier '{raw_specifier}' resolves to '{target_abs}' which is outside '{cwd}'",
            specifier=raw_specifier,
        )

    return ResolvedImport(
        target_abs=target_abs,
        target_dir=target_dir,
        subject=subject,
        style=style,
        boundary=boundary,
    )

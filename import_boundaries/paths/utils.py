# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
# import_boundaries/paths/utils.py
"""Pure path helpers shared by resolution and calculation.

Nothing in this module touches the filesystem. Paths are plain strings with
forward slashes; absolute paths are normalized with ``os.path.normpath``.
"""

import os

from import_boundaries.core.types import Boundary, CrossBoundaryStyle


def normalize_path(path: str) -> str:
    """Collapse '.', '..' and duplicate separators; drop any trailing slash."""
    return os.path.normpath(path)


def strip_trailing_slash(specifier: str) -> str:
    """Remove a single trailing slash, keeping a bare '/' intact."""
    if len(specifier) > 1 and specifier.endswith("/"):
        return specifier[:-1]
    return specifier


def is_inside_dir(abs_dir: str, abs_path: str) -> bool:
    """Check whether abs_path is abs_dir itself or lies beneath it.

    Comparison is segment-wise: '/a/queries2' is not inside '/a/queries'.

    Args:
        abs_dir: Absolute directory path.
        abs_path: Absolute file or directory path to check.

    Returns:
        True if abs_path equals abs_dir or is nested inside it.
    """
    directory = normalize_path(abs_dir)
    path = normalize_path(abs_path)
    if path == directory:
        return True
    prefix = directory if directory.endswith("/") else directory + "/"
    return path.startswith(prefix)


def has_extension(file_path: str, extensions: tuple[str, ...] | list[str] | None = None) -> bool:
    """Check whether a path ends in a file extension.

    Args:
        file_path: Path or specifier to inspect.
        extensions: If given, only these extensions count.

    Returns:
        True if the final segment has a (matching) extension.
    """
    _, ext = os.path.splitext(os.path.basename(file_path))
    if not ext:
        return False
    if extensions:
        return ext in extensions
    return True


def basename_without_ext(file_path: str) -> str:
    """Return the final segment of a path with any extension removed."""
    stem, _ = os.path.splitext(os.path.basename(file_path))
    return stem


def path_to_parts(relative_path: str) -> list[str]:
    """Split a relative path into segments, dropping empty and '.' segments."""
    if relative_path in ("", "."):
        return []
    return [part for part in relative_path.split("/") if part and part != "."]


def barrel_path(directory: str, barrel_file_name: str, file_extensions: tuple[str, ...] | list[str]) -> str:
    """Path of a directory's barrel file, using the first extension in priority order."""
    return os.path.join(directory, f"{barrel_file_name}{file_extensions[0]}")


def format_absolute_path(root_dir: str, *segments: str) -> str:
    """Join root_dir and segments into a forward-slash, root-relative specifier."""
    joined = os.path.normpath(os.path.join(root_dir, *segments))
    return joined.replace("\\", "/")


def absolute_to_relative_path(target_path: str, file_dir: str, barrel_file_name: str = "index") -> str:
    """Convert an absolute target into a relative specifier from file_dir.

    File extensions are dropped and a trailing barrel file name collapses to
    its directory, matching how specifiers are normally written.

    Args:
        target_path: Absolute file or directory path.
        file_dir: Directory of the importing file.
        barrel_file_name: Barrel file name without extension.

    Returns:
        A specifier such as './helper', '../utils/helper' or './'.
    """
    relative = os.path.relpath(target_path, file_dir).replace("\\", "/")
    result = relative if relative.startswith(".") else f"./{relative}"

    _, ext = os.path.splitext(relative)
    if ext:
        result = result[: -len(ext)]
        if os.path.basename(result) == barrel_file_name:
            dirname = os.path.dirname(result)
            result = "./" if dirname in (".", "./") else dirname
    return result


def choose_path_format(
    boundary: Boundary,
    segment: str,
    root_dir: str,
    cross_boundary_style: CrossBoundaryStyle,
) -> str:
    """Format '<alias>/<segment>' or '<root>/<dir>/<segment>' for a boundary.

    Absolute style always uses the root-relative form; alias style falls back
    to it when the boundary has no alias.
    """
    if cross_boundary_style == CrossBoundaryStyle.ABSOLUTE or not boundary.alias:
        return format_absolute_path(root_dir, boundary.dir, segment)
    return f"{boundary.alias}/{segment}"

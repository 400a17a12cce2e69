# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Logging configuration for the import-boundaries CLI.

Log lines go to stderr so they never mix with report output on stdout.
A lint run is short-lived, so lines carry no timestamp or module name: just
the level, the message and any structured fields.
"""

import sys
from typing import TYPE_CHECKING

from loguru import logger


if TYPE_CHECKING:
    from loguru import Record


LEVEL_COLORS = {
    "DEBUG": "#8A9AA3",
    "INFO": "#4F8FCF",
    "WARNING": "#E0A526",
    "ERROR": "#C6443A",
}
FIELD_COLOR = "#55626A"


def _escape(text: str) -> str:
    """Keep field values from being read as format fields or color tags."""
    return text.replace("{", "{{").replace("}", "}}").replace("<", r"\<")


def _log_format(record: "Record") -> str:
    """Build the loguru format string for one record.

    Keyword fields bound to the record are appended as ``key=value`` pairs,
    e.g. ``DEBUG   Skipping unresolvable import | specifier='react'``.
    """
    color = LEVEL_COLORS.get(record["level"].name, LEVEL_COLORS["INFO"])
    fmt = f"<fg {color}>{{level: <7}}</> {{message}}"

    if record["extra"]:
        fields = " ".join(f"{k}={v!r}" for k, v in record["extra"].items())
        fmt += f" <fg {FIELD_COLOR}>| {_escape(fields)}</>"

    fmt += "\n"
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def configure_logging(level: str = "WARNING") -> None:
    """Replace loguru's default handler with the colored stderr handler.

    Args:
        level: Minimum log level to display (e.g., "DEBUG", "INFO", "WARNING").
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_log_format,
        colorize=True,
    )

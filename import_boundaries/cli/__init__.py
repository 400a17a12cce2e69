"""Command-line interface commands."""

from import_boundaries.cli.commands import (
    boundaries_command as boundaries_command,
    check_command as check_command,
    explain_command as explain_command,
)

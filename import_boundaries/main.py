# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
from typing import Annotated

import typer

from import_boundaries.cli.commands import boundaries_command, check_command, explain_command
from import_boundaries.logging import configure_logging


app = typer.Typer(help="Enforce architectural import boundaries in TypeScript/JavaScript projects.")
app.command(name="check", help="Check imports against the configured boundaries.")(check_command)
app.command(name="explain", help="Explain how a single import resolves.")(explain_command)
app.command(name="boundaries", help="List the configured boundaries.")(boundaries_command)


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """
    import-boundaries: keep module dependencies pointing the right way.
    """
    configure_logging("DEBUG" if verbose else "WARNING")


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Main CLI Application for pmrm-deploy

This module contains the main Typer app and entry point for the pmrm-deploy CLI.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import sys
from typing import Annotated

import typer
from rich.traceback import install

from pmrm_deploy import __version__
from .commands import deploy, discover
from .constants import ExitCode
from .utils import console, err_console

# Install rich traceback handler; locals stay hidden since they can hold keys
install()

# Initialize the main Typer app
app = typer.Typer(
    name="pmrm-deploy",
    help="📦 pmrm-deploy - Deploy the PMRM contract with a pluggable signer",
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
app.command()(deploy)
app.command()(discover)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """
    📦 pmrm-deploy

    Acquire a signer context and deploy PMRM with it.
    """
    if version:
        console.print(
            f"📦 [bold cyan]pmrm-deploy[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit()

    # If no command is provided, show help
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


def cli_main() -> None:
    """Entry point for the CLI application."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n🛑 [yellow]Operation cancelled by user[/yellow]")
        sys.exit(ExitCode.FAILURE)
    except Exception as e:
        err_console.print(f"💥 [bold red]Unexpected error: {e}[/bold red]")
        err_console.print_exception()
        sys.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    cli_main()

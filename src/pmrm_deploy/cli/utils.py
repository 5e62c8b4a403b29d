#!/usr/bin/env python3
"""
Utility functions for pmrm-deploy CLI

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import json
import logging
from typing import Dict, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pmrm_deploy.core.errors import ErrorHandler, set_error_handler
from .constants import ExitCode


# Initialize Rich consoles; diagnostics go to stderr
console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Setup Rich logging configuration and unified error handler."""
    log_level = logging.DEBUG if verbose else logging.INFO

    rich_handler = RichHandler(
        console=err_console,
        show_time=True,
        show_path=verbose,
        markup=True,
        rich_tracebacks=True,
    )

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
        force=True,
    )

    error_handler = ErrorHandler(console=err_console, verbose=verbose)
    set_error_handler(error_handler)


def save_summary_with_feedback(summary: Dict, output_path: Optional[str]) -> None:
    """Save run summary to file with user feedback."""
    if output_path:
        try:
            with open(output_path, "w") as f:
                json.dump(summary, f, indent=2, default=str)
            console.print(f"💾 Deployment summary saved to: [cyan]{output_path}[/cyan]")
        except IOError as e:
            err_console.print(f"❌ Failed to save deployment summary: [red]{e}[/red]")
            raise typer.Exit(ExitCode.FAILURE)


def display_collaborators_table(signers: List[str], deployments: List[str]) -> None:
    """Display registered signer providers and deployers."""
    table = Table(
        title="Available Collaborators", show_header=True, header_style="bold magenta"
    )
    table.add_column("Kind", style="bold")
    table.add_column("Name", style="cyan")

    for name in signers:
        table.add_row("signer", name)
    for name in deployments:
        table.add_row("deployment", name)

    console.print(table)

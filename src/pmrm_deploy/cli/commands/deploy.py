#!/usr/bin/env python3
"""
Deploy command for pmrm-deploy CLI

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.panel import Panel

from pmrm_deploy.core.errors import ConfigurationError, handle_error
from pmrm_deploy.deployment.factory import CollaboratorFactory
from pmrm_deploy.orchestration.entrypoint import run

from ..constants import ExitCode, DEFAULT_CONFIG
from ..utils import console, err_console, setup_logging, save_summary_with_feedback
from ..validators import validate_deploy_config


def deploy(
    signer: Annotated[
        Optional[str],
        typer.Option(
            "--signer", help="Signer provider name or 'package.module:attribute'"
        ),
    ] = None,
    deployer: Annotated[
        Optional[str],
        typer.Option(
            "--deployer", "-d", help="Deployer name or 'package.module:attribute'"
        ),
    ] = None,
    network: Annotated[
        Optional[str],
        typer.Option("--network", "-n", help="Target network defined in the config"),
    ] = None,
    config: Annotated[
        str,
        typer.Option("--config", "-c", help="Configuration overrides as JSON string"),
    ] = DEFAULT_CONFIG,
    config_file: Annotated[
        Optional[str],
        typer.Option("--config-file", "-f", help="File containing configuration JSON"),
    ] = None,
    summary_output: Annotated[
        Optional[str],
        typer.Option("--summary-output", "-s", help="Output file for summary JSON"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    📦 Deploy PMRM.

    Acquires a signer context from the signer provider and hands it to the
    deployer. Exits non-zero if either step fails.
    """
    setup_logging(verbose)

    resolved = validate_deploy_config(
        config=config,
        config_file=config_file,
        signer=signer,
        deployer=deployer,
        network=network,
    )
    signer_name, deployer_name = CollaboratorFactory.collaborator_names(resolved)

    try:
        get_signer_context, deploy_pmrm = CollaboratorFactory.create_from_config(
            resolved
        )
    except ConfigurationError as e:
        handle_error(e)
        raise typer.Exit(ExitCode.INVALID_ARGS)

    console.print(
        Panel(
            f"📦 [bold cyan]Deploying PMRM[/bold cyan]\n"
            f"Signer: [yellow]{signer_name}[/yellow]\n"
            f"Deployer: [yellow]{deployer_name}[/yellow]\n"
            f"Network: [yellow]{resolved.get('network') or 'Not set'}[/yellow]",
            title="Deployment Configuration",
            border_style="green",
        )
    )

    result = asyncio.run(run(get_signer_context, deploy_pmrm))

    summary = {
        "status": result.status.value,
        "signer": signer_name,
        "deployer": deployer_name,
        "network": resolved.get("network"),
    }
    if result.is_success:
        deployment = result.deployment
        if hasattr(deployment, "to_dict"):
            summary["deployment"] = deployment.to_dict()
        message = getattr(deployment, "message", None)
        console.print(
            f"✅ [bold green]PMRM deployment completed[/bold green]"
            + (f": {message}" if message else "")
        )
    else:
        summary["error"] = f"{type(result.error).__name__}: {result.error}"
        err_console.print("❌ [bold red]PMRM deployment failed[/bold red]")

    save_summary_with_feedback(summary, summary_output)

    if result.exit_code != ExitCode.SUCCESS:
        raise typer.Exit(result.exit_code)

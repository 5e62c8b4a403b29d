#!/usr/bin/env python3
"""
Validation functions for pmrm-deploy CLI

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from typing import Any, Dict, Optional

import typer
from rich.panel import Panel

from pmrm_deploy.core.errors import ConfigurationError, handle_error
from pmrm_deploy.deployment.config_loader import ConfigLoader
from .constants import ExitCode
from .utils import err_console


def validate_deploy_config(
    config: str = "{}",
    config_file: Optional[str] = None,
    signer: Optional[str] = None,
    deployer: Optional[str] = None,
    network: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Validate and resolve the deployment configuration.

    Args:
        config: JSON string from --config
        config_file: Optional path from --config-file
        signer: Explicit signer provider name
        deployer: Explicit deployer name
        network: Explicit network name

    Returns:
        Dict containing the resolved configuration

    Raises:
        typer.Exit: If validation fails
    """
    try:
        resolved = ConfigLoader.load_config(
            config_file=config_file,
            config_json=config,
            overrides={"signer": signer, "deployer": deployer, "network": network},
        )
    except ConfigurationError as e:
        handle_error(e)
        example_panel = Panel(
            """[bold cyan]Example usage:[/bold cyan]
pmrm-deploy deploy --network sepolia --config '{"deployment": {"output_dir": "plans"}}'

[bold cyan]Or using a file:[/bold cyan]
pmrm-deploy deploy --config-file deploy.json""",
            title="Configuration Help",
            border_style="blue",
        )
        err_console.print(example_panel)
        raise typer.Exit(ExitCode.INVALID_ARGS)

    return resolved

#!/usr/bin/env python3
"""
Discover command for pmrm-deploy CLI

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from typing import Annotated

import typer

from pmrm_deploy.deployment.factory import CollaboratorFactory

from ..utils import display_collaborators_table, setup_logging


def discover(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging")
    ] = False,
) -> None:
    """
    🔍 List registered signer providers and deployers.

    Collaborators outside this list can still be used through a
    'package.module:attribute' path.
    """
    setup_logging(verbose)

    display_collaborators_table(
        CollaboratorFactory.available_signers(),
        CollaboratorFactory.available_deployments(),
    )

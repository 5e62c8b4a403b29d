#!/usr/bin/env python3
"""
CLI Package for pmrm-deploy

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from .app import app, cli_main
from .constants import ExitCode, DEFAULT_CONFIG, DEFAULT_DEPLOYER, DEFAULT_SIGNER
from .utils import (
    setup_logging,
    save_summary_with_feedback,
    display_collaborators_table,
)
from .validators import validate_deploy_config

__all__ = [
    "app",
    "cli_main",
    "ExitCode",
    "DEFAULT_CONFIG",
    "DEFAULT_DEPLOYER",
    "DEFAULT_SIGNER",
    "setup_logging",
    "save_summary_with_feedback",
    "display_collaborators_table",
    "validate_deploy_config",
]

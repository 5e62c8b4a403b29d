#!/usr/bin/env python3
"""
Process-level constants shared by the entry point and the CLI.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""


# Exit codes
class ExitCode:
    """Exit codes for the deployment entry point and CLI commands."""

    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGS = 4


# Collaborators used when the configuration names none
DEFAULT_SIGNER = "env"
DEFAULT_DEPLOYER = "dry-run"

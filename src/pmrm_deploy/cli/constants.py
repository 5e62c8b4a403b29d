#!/usr/bin/env python3
"""
Constants and configuration for pmrm-deploy CLI

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from pmrm_deploy.core.constants import DEFAULT_DEPLOYER, DEFAULT_SIGNER, ExitCode


# Default file paths and values
DEFAULT_CONFIG = "{}"

__all__ = ["ExitCode", "DEFAULT_SIGNER", "DEFAULT_DEPLOYER", "DEFAULT_CONFIG"]

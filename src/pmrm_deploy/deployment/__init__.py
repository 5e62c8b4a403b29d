"""
Deployment layer for the PMRM artifact.

Architecture:
- BaseDeployment: Abstract deployer receiving a signer context
- DryRunDeployment: Plans a deployment without touching any network
- CollaboratorFactory: Factory for creating signer providers and deployers
- ConfigLoader: Layered JSON configuration

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from .base import (
    BaseDeployment,
    DeploymentResult,
    DeploymentStatus,
)
from .config_loader import ConfigLoader
from .dry_run import DryRunDeployment
from .factory import CollaboratorFactory

__all__ = [
    "BaseDeployment",
    "DeploymentResult",
    "DeploymentStatus",
    "ConfigLoader",
    "DryRunDeployment",
    "CollaboratorFactory",
]

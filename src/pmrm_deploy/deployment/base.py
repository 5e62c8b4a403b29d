#!/usr/bin/env python3
"""
Base classes for the deployment layer.

Defines the abstract deployer that publishes the PMRM artifact given a
signer context, and the result types shared by deployers and the entry
point.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class DeploymentStatus(Enum):
    """Deployment status enumeration."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class DeploymentResult:
    """Result of a deployment operation."""

    status: DeploymentStatus
    deployment_id: str
    message: str
    address: Optional[str] = None
    tx_hash: Optional[str] = None
    artifacts: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """Check if deployment succeeded."""
        return self.status == DeploymentStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "deployment_id": self.deployment_id,
            "message": self.message,
            "address": self.address,
            "tx_hash": self.tx_hash,
            "artifacts": list(self.artifacts),
        }


class BaseDeployment(ABC):
    """
    Abstract base class for PMRM deployers.

    Deployers are callable, so ``await deployer(signer_context)`` and a
    plain ``async def deploy_pmrm(signer_context)`` function are
    interchangeable.
    """

    DEPLOYMENT_TYPE: str = "base"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize deployment.

        Args:
            config: The ``deployment`` section of the resolved configuration
        """
        self.config = dict(config or {})

    async def __call__(self, signer_context: Any) -> Any:
        return await self.deploy(signer_context)

    @abstractmethod
    async def deploy(self, signer_context: Any) -> Any:
        """
        Publish the PMRM artifact.

        Args:
            signer_context: Context returned by the signer provider

        Returns:
            Usually a DeploymentResult; the entry point does not inspect it

        Raises:
            Any error; the entry point reports it and fails the run
        """
        pass

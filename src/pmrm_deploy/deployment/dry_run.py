#!/usr/bin/env python3
"""
Dry-run deployment.

Walks through a PMRM deployment without touching any network: validates
the signer context, logs the plan and optionally writes it to disk.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Dict

from pmrm_deploy.core.errors import ValidationError, create_error_context
from .base import BaseDeployment, DeploymentResult, DeploymentStatus


logger = logging.getLogger(__name__)


class DryRunDeployment(BaseDeployment):
    """Deployer that only plans the PMRM deployment."""

    DEPLOYMENT_TYPE = "dry-run"

    def build_plan(self, signer_context: Any) -> Dict[str, Any]:
        """Describe what a real deployment would do."""
        return {
            "artifact": self.config.get("artifact", "PMRM"),
            "constructor_args": self.config.get("constructor_args", []),
            "network": getattr(signer_context, "network", None),
            "chain_id": getattr(signer_context, "chain_id", None),
            "rpc_url": getattr(signer_context, "rpc_url", None),
            "deployer": getattr(signer_context, "address", None),
        }

    async def deploy(self, signer_context: Any) -> DeploymentResult:
        if signer_context is None or not getattr(signer_context, "has_signer", True):
            raise ValidationError(
                "Signer context has no signing credential",
                context=create_error_context(
                    operation="deploy", component="DryRunDeployment"
                ),
            )

        plan = self.build_plan(signer_context)
        digest = hashlib.sha256(
            json.dumps(plan, sort_keys=True, default=str).encode()
        ).hexdigest()
        deployment_id = f"dry-run-{digest[:12]}"

        logger.info(
            "Dry run: would deploy %s to %s (chain %s)",
            plan["artifact"],
            plan["network"] or "unknown network",
            plan["chain_id"] if plan["chain_id"] is not None else "?",
        )

        artifacts = []
        output_dir = self.config.get("output_dir")
        if output_dir:
            path = Path(output_dir)
            path.mkdir(parents=True, exist_ok=True)
            plan_file = path / f"{deployment_id}.json"
            with open(plan_file, "w") as f:
                json.dump(plan, f, indent=2, default=str)
            artifacts.append(str(plan_file))
            logger.debug("Deployment plan written to %s", plan_file)

        return DeploymentResult(
            status=DeploymentStatus.SUCCESS,
            deployment_id=deployment_id,
            message=f"Dry run of {plan['artifact']} deployment completed",
            artifacts=artifacts,
        )

#!/usr/bin/env python3
"""
PMRM deployment entry point.

Acquires a signer context, hands it to the deployment routine and turns any
failure into a diagnostic on stderr plus a non-zero exit code. The exit code
is returned, never applied, so the outermost adapter decides how to leave
the process.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from pmrm_deploy.core.constants import ExitCode
from pmrm_deploy.core.errors import ErrorHandler, PMRMDeployError, get_error_handler
from pmrm_deploy.deployment.base import DeploymentStatus


logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one deployment run."""

    status: DeploymentStatus
    error: Optional[BaseException] = None
    signer_context: Any = None
    deployment: Any = None

    @property
    def is_success(self) -> bool:
        return self.status == DeploymentStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        return ExitCode.SUCCESS if self.is_success else ExitCode.FAILURE


async def run(
    get_signer_context: Callable[[], Awaitable[Any]],
    deploy_pmrm: Callable[[Any], Awaitable[Any]],
    error_handler: Optional[ErrorHandler] = None,
) -> RunResult:
    """
    Deploy PMRM with a freshly acquired signer context.

    Args:
        get_signer_context: Async callable returning the signer context
        deploy_pmrm: Async callable deploying PMRM with that context
        error_handler: Handler for the failure diagnostic; defaults to the
            global handler, or a stderr handler if none is installed

    Returns:
        RunResult; failures are reported, not raised
    """
    try:
        signer_context = await get_signer_context()
        deployment = await deploy_pmrm(signer_context)
    except Exception as e:
        _report_failure(e, error_handler)
        return RunResult(status=DeploymentStatus.FAILED, error=e)

    return RunResult(
        status=DeploymentStatus.SUCCESS,
        signer_context=signer_context,
        deployment=deployment,
    )


def _report_failure(
    error: BaseException, error_handler: Optional[ErrorHandler] = None
) -> None:
    """Report a failed run; never raises."""
    handler = error_handler or get_error_handler() or ErrorHandler()
    try:
        handler.handle_error(error)
    except Exception:
        # The error itself may be unprintable; log it with its traceback
        logger.error(
            "PMRM deployment failed with %s", type(error).__name__, exc_info=error
        )


def main(
    get_signer_context: Optional[Callable[[], Awaitable[Any]]] = None,
    deploy_pmrm: Optional[Callable[[Any], Awaitable[Any]]] = None,
) -> int:
    """
    Run one deployment on a new event loop and return the exit code.

    Collaborators default to the built-in ``env`` signer and ``dry-run``
    deployer with the preset configuration.
    """
    if get_signer_context is None or deploy_pmrm is None:
        from pmrm_deploy.deployment.config_loader import ConfigLoader
        from pmrm_deploy.deployment.factory import CollaboratorFactory

        try:
            signer, deployer = CollaboratorFactory.create_from_config(
                ConfigLoader.load_config()
            )
        except PMRMDeployError as e:
            _report_failure(e)
            return ExitCode.INVALID_ARGS
        get_signer_context = get_signer_context or signer
        deploy_pmrm = deploy_pmrm or deployer

    result = asyncio.run(run(get_signer_context, deploy_pmrm))
    return result.exit_code

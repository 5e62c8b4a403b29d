#!/usr/bin/env python3
"""
Collaborator Factory - Creates signer providers and deployers.

Implements Factory pattern to create the two collaborators of a run,
either from a registered name or from a ``package.module:attribute``
import path.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import importlib
import inspect
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Type

from pmrm_deploy.core.constants import DEFAULT_DEPLOYER, DEFAULT_SIGNER
from pmrm_deploy.core.errors import ConfigurationError, create_error_context
from pmrm_deploy.signer.base import BaseSignerProvider
from .base import BaseDeployment


SignerProvider = Callable[[], Awaitable[Any]]
Deployer = Callable[[Any], Awaitable[Any]]


class CollaboratorFactory:
    """
    Factory for creating signer providers and deployers.

    Supports dynamic registration and creation by name.
    Currently supports: signer "env", deployment "dry-run"
    """

    _signers: Dict[str, Type[BaseSignerProvider]] = {}
    _deployments: Dict[str, Type[BaseDeployment]] = {}

    @classmethod
    def register_signer(
        cls, signer_type: str, signer_class: Type[BaseSignerProvider]
    ) -> None:
        """
        Register a signer provider type.

        Args:
            signer_type: Name of provider type (e.g., "env")
            signer_class: Class implementing BaseSignerProvider
        """
        cls._signers[signer_type] = signer_class

    @classmethod
    def register_deployment(
        cls, deployment_type: str, deployment_class: Type[BaseDeployment]
    ) -> None:
        """
        Register a deployment type.

        Args:
            deployment_type: Name of deployment type (e.g., "dry-run")
            deployment_class: Class implementing BaseDeployment
        """
        cls._deployments[deployment_type] = deployment_class

    @classmethod
    def create_signer(
        cls, name: str, config: Optional[Dict[str, Any]] = None
    ) -> SignerProvider:
        """
        Create a signer provider.

        Args:
            name: Registered name or ``module:attribute`` path
            config: Signer configuration section

        Returns:
            Async callable returning a signer context

        Raises:
            ConfigurationError: If the name cannot be resolved
        """
        return cls._create(name, config, cls._signers, "signer provider")

    @classmethod
    def create_deployment(
        cls, name: str, config: Optional[Dict[str, Any]] = None
    ) -> Deployer:
        """
        Create a deployer.

        Args:
            name: Registered name or ``module:attribute`` path
            config: Deployment configuration section

        Returns:
            Async callable accepting a signer context

        Raises:
            ConfigurationError: If the name cannot be resolved
        """
        return cls._create(name, config, cls._deployments, "deployment")

    @classmethod
    def collaborator_names(cls, config: Dict[str, Any]) -> Tuple[str, str]:
        """Names of the signer provider and deployer selected by ``config``."""
        signer_name = config.get("signer", {}).get("type", DEFAULT_SIGNER)
        deployer_name = config.get("deployment", {}).get("type", DEFAULT_DEPLOYER)
        return signer_name, deployer_name

    @classmethod
    def create_from_config(
        cls, config: Dict[str, Any]
    ) -> Tuple[SignerProvider, Deployer]:
        """
        Create both collaborators from a resolved configuration.

        Args:
            config: Output of ConfigLoader.load_config

        Returns:
            (signer provider, deployer)

        Raises:
            ConfigurationError: If either name cannot be resolved
        """
        signer_name, deployer_name = cls.collaborator_names(config)
        signer = cls.create_signer(signer_name, config.get("signer", {}))
        deployer = cls.create_deployment(deployer_name, config.get("deployment", {}))
        return signer, deployer

    @classmethod
    def available_signers(cls) -> list:
        return list(cls._signers.keys())

    @classmethod
    def available_deployments(cls) -> list:
        return list(cls._deployments.keys())

    @classmethod
    def _create(
        cls,
        name: str,
        config: Optional[Dict[str, Any]],
        registry: Dict[str, type],
        kind: str,
    ) -> Any:
        target = registry.get(name) if isinstance(name, str) else None
        if target is None:
            if not isinstance(name, str) or ":" not in name:
                available = ", ".join(registry.keys())
                raise ConfigurationError(
                    f"Unknown {kind}: {name}. Available: {available}",
                    context=create_error_context(
                        operation=f"create {kind}", component="CollaboratorFactory"
                    ),
                    suggestions=[
                        "Use a registered name or a 'package.module:attribute' path"
                    ],
                )
            target = cls._import(name, kind)

        if inspect.isclass(target):
            return target(config or {})
        if not callable(target):
            raise ConfigurationError(
                f"{kind.capitalize()} {name} is not callable",
                context=create_error_context(
                    operation=f"create {kind}", component="CollaboratorFactory"
                ),
            )
        return target

    @staticmethod
    def _import(path: str, kind: str) -> Any:
        module_name, _, attribute = path.partition(":")
        try:
            module = importlib.import_module(module_name)
            return getattr(module, attribute)
        except (ImportError, AttributeError) as e:
            raise ConfigurationError(
                f"Cannot load {kind} from {path}: {e}",
                context=create_error_context(
                    operation=f"create {kind}", component="CollaboratorFactory"
                ),
                cause=e,
            ) from e


def register_default_collaborators():
    """
    Register built-in collaborators.

    Called on module import.
    """
    from pmrm_deploy.signer.env import EnvSignerProvider
    from .dry_run import DryRunDeployment

    CollaboratorFactory.register_signer("env", EnvSignerProvider)
    CollaboratorFactory.register_deployment("dry-run", DryRunDeployment)


# Auto-register on module import
register_default_collaborators()

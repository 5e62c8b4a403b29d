#!/usr/bin/env python3
"""
Base classes for signer-context providers.

A signer context is the credential/session object that authorizes a
deployment. Providers acquire one per run; the deployment entry point
treats it as opaque and hands it to the deployer unchanged.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class SignerContext:
    """Signer context produced by the built-in providers."""

    signer: Any = field(repr=False)  # private key, wallet object, session...
    address: Optional[str] = None
    network: Optional[str] = None
    chain_id: Optional[int] = None
    rpc_url: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_signer(self) -> bool:
        """Check if a credential is present."""
        return bool(self.signer)


class BaseSignerProvider(ABC):
    """
    Abstract base class for signer-context providers.

    Providers are callable, so ``await provider()`` and a plain
    ``async def get_signer_context()`` function are interchangeable.
    """

    PROVIDER_TYPE: str = "base"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize provider.

        Args:
            config: The ``signer`` section of the resolved configuration
        """
        self.config = dict(config or {})

    async def __call__(self) -> Any:
        return await self.get_signer_context()

    @abstractmethod
    async def get_signer_context(self) -> Any:
        """
        Acquire a signer context.

        Returns:
            The signer context for this run

        Raises:
            Any error; the entry point reports it and aborts the run
        """
        pass

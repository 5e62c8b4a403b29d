#!/usr/bin/env python3
"""
Environment-backed signer-context provider.

Reads the signing key and network coordinates from environment variables,
falling back to the ``signer`` configuration section. No network calls are
made; the resulting context is handed to the deployer as-is.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pmrm_deploy.core.errors import (
    AuthenticationError,
    ConfigurationError,
    create_error_context,
)
from .base import BaseSignerProvider, SignerContext


logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "PMRM_"


class EnvSignerProvider(BaseSignerProvider):
    """Build a SignerContext from ``<prefix>PRIVATE_KEY`` and friends."""

    PROVIDER_TYPE = "env"

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(config)
        self.environ = os.environ if environ is None else environ
        self.prefix = self.config.get("env_prefix", DEFAULT_ENV_PREFIX)

    def _lookup(self, name: str, config_key: str) -> Optional[str]:
        value = self.environ.get(f"{self.prefix}{name}")
        if value:
            return value
        value = self.config.get(config_key)
        return str(value) if value not in (None, "") else None

    async def get_signer_context(self) -> SignerContext:
        key_var = f"{self.prefix}PRIVATE_KEY"
        private_key = self.environ.get(key_var)
        if not private_key:
            raise AuthenticationError(
                f"No signing key found in environment variable {key_var}",
                context=create_error_context(
                    operation="get_signer_context", component="EnvSignerProvider"
                ),
                suggestions=[
                    f"export {key_var}=<hex private key>",
                    "Or select another provider with --signer",
                ],
            )

        network = self._lookup("NETWORK", "network")
        chain_id_raw = self._lookup("CHAIN_ID", "chain_id")
        chain_id = None
        if chain_id_raw is not None:
            try:
                chain_id = int(chain_id_raw, 0)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid chain id: {chain_id_raw!r}",
                    context=create_error_context(
                        operation="get_signer_context",
                        component="EnvSignerProvider",
                        network=network,
                    ),
                    cause=e,
                ) from e

        context = SignerContext(
            signer=private_key,
            address=self._lookup("SIGNER_ADDRESS", "address"),
            network=network,
            chain_id=chain_id,
            rpc_url=self._lookup("RPC_URL", "rpc_url"),
            metadata={"provider": self.PROVIDER_TYPE, "env_prefix": self.prefix},
        )
        logger.debug(
            "Signer context acquired for network=%s chain_id=%s",
            context.network,
            context.chain_id,
        )
        return context

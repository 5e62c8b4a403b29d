"""
Signer-context providers.

- BaseSignerProvider: Abstract provider acquiring a signer context
- SignerContext: Context type produced by the built-in providers
- EnvSignerProvider: Reads the signing key from environment variables

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from .base import BaseSignerProvider, SignerContext
from .env import EnvSignerProvider

__all__ = ["BaseSignerProvider", "SignerContext", "EnvSignerProvider"]

"""
Pytest configuration and shared fixtures for pmrm-deploy tests.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import io
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from pmrm_deploy.core.errors import ErrorHandler, set_error_handler
from pmrm_deploy.signer.base import SignerContext


@pytest.fixture(autouse=True)
def reset_error_handler():
    """Keep the global error handler from leaking between tests."""
    set_error_handler(None)
    yield
    set_error_handler(None)


@pytest.fixture
def signer_context():
    """Signer context as produced by the env provider."""
    return SignerContext(
        signer="0xdeadbeef",
        address="0x00000000000000000000000000000000000000aa",
        network="sepolia",
        chain_id=11155111,
        rpc_url="https://rpc.sepolia.example",
    )


@pytest.fixture
def provider(signer_context):
    """Signer provider resolving to ``signer_context``."""
    return AsyncMock(return_value=signer_context)


@pytest.fixture
def deployer():
    """Deployer that succeeds."""
    return AsyncMock(return_value="deployed")


@pytest.fixture
def error_buffer():
    return io.StringIO()


@pytest.fixture
def error_handler(error_buffer):
    """ErrorHandler writing to an in-memory buffer."""
    return ErrorHandler(console=Console(file=error_buffer, width=200))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PMRM_* variables from the environment."""
    for name in (
        "PMRM_PRIVATE_KEY",
        "PMRM_SIGNER_ADDRESS",
        "PMRM_RPC_URL",
        "PMRM_CHAIN_ID",
        "PMRM_NETWORK",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

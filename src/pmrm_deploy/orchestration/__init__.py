"""
Orchestration layer for pmrm-deploy.

Sits between the CLI (presentation) and the signer/deployment collaborators.

- run: Acquire a signer context, then deploy PMRM with it
- main: Run on a fresh event loop and return the process exit code

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from .entrypoint import RunResult, main, run

__all__ = ["RunResult", "main", "run"]

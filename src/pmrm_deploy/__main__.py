#!/usr/bin/env python3
"""
Run a PMRM deployment with the default collaborators.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import sys

from pmrm_deploy.cli.utils import setup_logging
from pmrm_deploy.orchestration.entrypoint import main


if __name__ == "__main__":
    setup_logging()
    sys.exit(main())

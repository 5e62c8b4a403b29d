"""
pmrm-deploy: deployment tooling for the PMRM contract.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

__version__ = "1.0.0"

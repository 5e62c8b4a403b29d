#!/usr/bin/env python3
"""
CLI Commands Package for pmrm-deploy

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

from .deploy import deploy
from .discover import discover

__all__ = ["deploy", "discover"]

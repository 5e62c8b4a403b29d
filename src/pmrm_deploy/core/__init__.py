"""
Core utilities for pmrm-deploy.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

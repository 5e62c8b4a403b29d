"""
Built-in configuration presets.

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

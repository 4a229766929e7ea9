"""
version.py - Fluid Space Forge
===============================
Single source of truth for the version number.
Used by:
  - pyproject.toml (dynamic version)
  - the persisted settings blob (appVersion)
  - main.py --version
"""

APP_NAME    = "FluidSpaceForge"
VERSION     = "1.0.3"
BUILD       = "2026.10.18"

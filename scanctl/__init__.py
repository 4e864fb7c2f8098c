# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: HTTP control surface for a single external scan process.
# Path: /scanctl/__init__.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

__version__ = "0.1.0"

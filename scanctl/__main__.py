# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: `python -m scanctl` launcher for the web server.
# Path: /scanctl/__main__.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

from .app import main

if __name__ == "__main__":
    main()

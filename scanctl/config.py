# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: Environment-driven settings (scanner command, bind address, logging).
# Path: /scanctl/config.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

import os
import shlex
from dataclasses import dataclass, field

DEFAULT_EXECUTABLE = "epsonscan2"
DEFAULT_ARGS = "-s ES-400 UserSettings.SF2"
DEFAULT_BIND = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class ScannerConfig:
    executable: str = DEFAULT_EXECUTABLE
    arguments: tuple = field(default_factory=lambda: tuple(shlex.split(DEFAULT_ARGS)))
    bind_host: str = DEFAULT_BIND
    bind_port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_config(environ=None) -> ScannerConfig:
    """Build a ScannerConfig from SCANCTL_* environment variables.

    Unset or blank values fall back to the defaults. SCANCTL_ARGS is split
    shell-style so quoted paths with spaces survive.
    """
    env = os.environ if environ is None else environ

    executable = (env.get("SCANCTL_EXECUTABLE") or "").strip() or DEFAULT_EXECUTABLE
    raw_args = env.get("SCANCTL_ARGS")
    if raw_args is None:
        raw_args = DEFAULT_ARGS
    port_raw = (env.get("SCANCTL_PORT") or "").strip()

    return ScannerConfig(
        executable=executable,
        arguments=tuple(shlex.split(raw_args)),
        bind_host=(env.get("SCANCTL_BIND") or "").strip() or DEFAULT_BIND,
        bind_port=int(port_raw) if port_raw else DEFAULT_PORT,
        log_level=((env.get("SCANCTL_LOG_LEVEL") or "").strip() or "INFO").upper(),
    )

# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: Scan start/status handlers on top of the process handle store.
# Path: /scanctl/controller.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

import enum
from dataclasses import dataclass

from .process_store import ProcessHandleStore, SpawnStatus


class Outcome(enum.Enum):
    OK = "ok"
    CONFLICT = "conflict"
    INTERNAL_FAULT = "internal_fault"


@dataclass(frozen=True)
class ScanReply:
    outcome: Outcome
    message: str
    pid: int | None = None


class ScanController:
    """Maps store results to outcomes. Holds no state besides the store itself."""

    def __init__(self, store: ProcessHandleStore, executable: str, arguments=()):
        self.store = store
        self.executable = executable
        self.arguments = tuple(arguments)

    def handle_scan_request(self) -> ScanReply:
        # liveness check and spawn happen under one lock inside try_spawn
        res = self.store.try_spawn(self.executable, self.arguments)
        if res.status is SpawnStatus.STARTED:
            return ScanReply(Outcome.OK, "Scan process started", pid=res.pid)
        if res.status is SpawnStatus.ALREADY_RUNNING:
            return ScanReply(Outcome.CONFLICT, "Scan process already running")
        return ScanReply(Outcome.INTERNAL_FAULT, f"Failed to start scan process: {res.reason}")

    def handle_status_request(self) -> dict:
        return {"running": self.store.check_liveness()}

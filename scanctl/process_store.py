# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: Single-slot owner of the running scan process (spawn, probe, reap).
# Path: /scanctl/process_store.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

import enum
import logging
import os
import subprocess
import threading
from dataclasses import dataclass

log = logging.getLogger(__name__)


class ProbeError(RuntimeError):
    """The liveness probe itself failed (not the same as the process exiting)."""


class SpawnStatus(enum.Enum):
    STARTED = "started"
    ALREADY_RUNNING = "already_running"
    LAUNCH_FAILED = "launch_failed"


@dataclass(frozen=True)
class SpawnResult:
    status: SpawnStatus
    reason: str = ""
    pid: int | None = None


class ProcessHandle:
    """Opaque handle to a spawned scan process.

    Only answers "has it exited yet" and "with what code". The Popen object
    stays private so callers can't wait on it or signal it.
    """

    def __init__(self, proc: subprocess.Popen):
        self._proc = proc
        self.exit_code: int | None = None

    @property
    def pid(self) -> int:
        return self._proc.pid

    def probe(self) -> int | None:
        """Non-blocking check. Returns None while running, the exit code once exited.

        Uses waitpid directly; Popen.poll() hides waitpid errors.
        """
        try:
            wp, status = os.waitpid(self.pid, os.WNOHANG)
        except OSError as e:
            raise ProbeError(f"Liveness probe failed for pid {self.pid}: {e}") from e
        if wp == 0:
            return None
        rc = os.waitstatus_to_exitcode(status)
        self.exit_code = rc
        # keep Popen from trying to reap the pid again
        self._proc.returncode = rc
        return rc


class ProcessHandleStore:
    """Holds at most one ProcessHandle behind a single lock.

    Reaping is lazy: a finished process is only noticed (and its slot freed)
    when someone calls check_liveness() or try_spawn().
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._handle: ProcessHandle | None = None

    @property
    def pid(self) -> int | None:
        handle = self._handle
        return handle.pid if handle else None

    def check_liveness(self) -> bool:
        with self._lock:
            return self._probe_locked()

    def try_spawn(self, executable: str, arguments=()) -> SpawnResult:
        # check + spawn must stay inside one critical section
        with self._lock:
            if self._probe_locked():
                return SpawnResult(SpawnStatus.ALREADY_RUNNING, pid=self._handle.pid)

            cmd = [executable, *arguments]
            try:
                proc = subprocess.Popen(
                    cmd,
                    stdin=subprocess.DEVNULL,
                )
            except (OSError, subprocess.SubprocessError) as e:
                log.error("Failure starting scan process %s: %s", cmd, e)
                return SpawnResult(SpawnStatus.LAUNCH_FAILED, reason=str(e))

            self._handle = ProcessHandle(proc)
            log.info("Spawned scan process pid=%s cmd=%s", proc.pid, cmd)
            return SpawnResult(SpawnStatus.STARTED, pid=proc.pid)

    def _probe_locked(self) -> bool:
        """Caller must hold self._lock."""
        handle = self._handle
        if handle is None:
            return False

        rc = handle.probe()
        if rc is None:
            return True

        log.info("Scan process pid=%s found exited with code %s", handle.pid, rc)
        self._handle = None
        return False

import os
import signal

import pytest

from scanctl.app import create_app
from scanctl.config import ScannerConfig
from scanctl.controller import ScanController
from scanctl.process_store import ProcessHandleStore

from helpers import PYTHON, sleeper_args, wait_until


def _kill_and_reap(store):
    pid = store.pid
    if pid is None:
        return
    try:
        os.kill(pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    wait_until(lambda: not store.check_liveness())


@pytest.fixture
def store():
    s = ProcessHandleStore()
    yield s
    _kill_and_reap(s)


@pytest.fixture
def make_controller(store):
    def _make(executable=PYTHON, arguments=sleeper_args(30)):
        return ScanController(store, executable, arguments)
    return _make


@pytest.fixture
def app():
    cfg = ScannerConfig(executable=PYTHON, arguments=sleeper_args(30))
    application = create_app(cfg)
    application.config["TESTING"] = True
    yield application
    _kill_and_reap(application.extensions["scan_controller"].store)


@pytest.fixture
def client(app):
    return app.test_client()

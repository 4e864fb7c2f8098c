import sys
import time

PYTHON = sys.executable


def sleeper_args(seconds):
    return ("-c", f"import time; time.sleep({seconds})")


def wait_until(predicate, timeout=10.0, interval=0.05):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()

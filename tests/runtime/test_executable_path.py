"""Unit tests for the ExecutablePath process-wide cache.

Verifies lazy resolution, caching after the first success, retry after a
failure, and that concurrent first callers all observe one published value.
"""

# pylint: disable=protected-access

import os
import sys
import threading
from unittest.mock import patch

import pytest

from makepath.paths.errors import OSQueryError
from makepath.runtime.executable_path import ExecutablePath


@pytest.fixture(autouse=True)
def _reset_cache():
    """Start and end every test with an empty cache."""
    ExecutablePath.reset()
    yield
    ExecutablePath.reset()


def test_get_returns_absolute_interpreter_path():
    """The resolved path is the real path of the running interpreter."""
    result = ExecutablePath.get()
    if result != os.path.realpath(sys.executable):
        raise AssertionError(f"Unexpected path: {result!r}")
    if not os.path.isabs(result):
        raise AssertionError("Expected an absolute path")


def test_get_resolves_only_once():
    """After the first success the cached value is served."""
    with patch.object(
        ExecutablePath, "_resolve", return_value="/opt/app/bin/app"
    ) as mock_resolve:
        first = ExecutablePath.get()
        second = ExecutablePath.get()
    if first != "/opt/app/bin/app" or second != first:
        raise AssertionError(f"Unexpected values: {first!r}, {second!r}")
    if mock_resolve.call_count != 1:
        raise AssertionError(f"Expected one lookup, got {mock_resolve.call_count}")


@patch("makepath.utils.io.logger.Logger.error")
def test_failure_is_not_cached(mock_error, monkeypatch):
    """A failed lookup raises OSQueryError and the next call retries."""
    monkeypatch.setattr(sys, "executable", "")
    with pytest.raises(OSQueryError, match="did not report"):
        ExecutablePath.get()
    if not mock_error.called:
        raise AssertionError("Expected the failure to be logged")
    if ExecutablePath._value is not None:
        raise AssertionError("A failure must not populate the cache")
    monkeypatch.setattr(sys, "executable", "/usr/bin/python3")
    result = ExecutablePath.get()
    if result != os.path.realpath("/usr/bin/python3"):
        raise AssertionError(f"Unexpected path after retry: {result!r}")


def test_os_error_is_wrapped():
    """Platform errors surface as OSQueryError."""
    with patch("makepath.runtime.executable_path.os.path.realpath") as mock_realpath:
        mock_realpath.side_effect = PermissionError("denied")
        with pytest.raises(OSQueryError, match="denied"):
            ExecutablePath.get()


def test_publish_keeps_first_value():
    """A losing publisher gets the already published value back."""
    winner = ExecutablePath._publish("/first")
    loser = ExecutablePath._publish("/second")
    if winner != "/first" or loser != "/first":
        raise AssertionError(f"Unexpected values: {winner!r}, {loser!r}")


def test_concurrent_first_callers_agree():
    """Threads racing on an empty cache all see the same value."""
    counter = {"value": 0}
    counter_lock = threading.Lock()
    barrier = threading.Barrier(8)

    def fake_resolve() -> str:
        with counter_lock:
            counter["value"] += 1
            candidate = f"/exe/{counter['value']}"
        return candidate

    results = []
    results_lock = threading.Lock()

    def worker():
        barrier.wait()
        value = ExecutablePath.get()
        with results_lock:
            results.append(value)

    with patch.object(ExecutablePath, "_resolve", side_effect=fake_resolve):
        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    if len(results) != 8 or len(set(results)) != 1:
        raise AssertionError(f"Threads disagreed on the cached value: {results}")
    if ExecutablePath._value != results[0]:
        raise AssertionError("Published value differs from the returned one")

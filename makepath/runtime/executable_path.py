"""Process-wide cache of the running executable's absolute path."""

import os
import sys
import threading
from typing import Optional

from makepath.paths.errors import OSQueryError
from makepath.utils.io.logger import Logger


class ExecutablePath:
    """Lazily resolves the executable path once and serves it from a shared slot.

    Concurrent first callers may each resolve the path; only the first one to
    publish wins and the others return the published value. Failures are never
    cached, so a later call retries the lookup.
    """

    _value: Optional[str] = None
    _lock = threading.Lock()

    @staticmethod
    def _resolve() -> str:
        """Ask the platform for the executable path."""
        executable = sys.executable
        if not executable:
            raise OSQueryError("The interpreter did not report its executable path")
        try:
            return os.path.realpath(executable)
        except OSError as e:
            raise OSQueryError(f"Unable to resolve executable path: {e}") from e

    @staticmethod
    def _publish(candidate: str) -> str:
        """Store ``candidate`` unless another caller already did; return the winner."""
        with ExecutablePath._lock:
            if ExecutablePath._value is None:
                ExecutablePath._value = candidate
            return ExecutablePath._value

    @staticmethod
    def get() -> str:
        """Return the absolute path of the running executable."""
        cached = ExecutablePath._value
        if cached is not None:
            return cached
        try:
            candidate = ExecutablePath._resolve()
        except OSQueryError as e:
            Logger.error(f"Executable path lookup failed: {e}")
            raise
        value = ExecutablePath._publish(candidate)
        Logger.debug(f"Executable path cached: {value}")
        return value

    @staticmethod
    def reset() -> None:
        """Forget the cached path."""
        with ExecutablePath._lock:
            ExecutablePath._value = None

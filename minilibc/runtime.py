"""Process exit handling: functions registered to run when the program exits."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable


class ExitRegistry:
    """Handlers run in reverse order of registration, then output is flushed."""

    def __init__(self) -> None:
        self._handlers: list[Callable[[], object]] = []
        self._lock = threading.Lock()

    def register(self, func: Callable[[], object]) -> None:
        """Register ``func`` to be called at exit."""
        if not callable(func):
            raise TypeError(f"{func!r} is not callable")
        with self._lock:
            self._handlers.append(func)

    def run(self) -> None:
        """Call and discard every registered handler, most recent first."""
        while True:
            with self._lock:
                if not self._handlers:
                    return
                func = self._handlers.pop()
            func()

    def exit(self, status: int) -> None:
        """Run the handlers, flush standard output and error, and exit."""
        self.run()
        for stream in (sys.stdout, sys.stderr):
            if stream is not None:
                stream.flush()
        raise SystemExit(status)
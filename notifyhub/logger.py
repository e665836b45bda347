"""Plain line-oriented logging to standard output and standard error."""

from __future__ import annotations

import os
import sys
import threading
from datetime import datetime
from typing import Protocol, TextIO


class Logger(Protocol):
    """Anything that accepts informational, error and debug messages."""

    def info(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...


class SimpleLogger:
    """Writes prefixed, timestamped lines that name the calling file and line.

    Info and debug lines go to ``out`` and error lines go to ``err``; when a
    stream is not given, the current ``sys.stdout`` or ``sys.stderr`` is used.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err
        self._lock = threading.Lock()

    def info(self, message: str) -> None:
        self._write(self._stdout(), "INFO: ", message)

    def error(self, message: str) -> None:
        self._write(self._stderr(), "ERROR: ", message)

    def debug(self, message: str) -> None:
        self._write(self._stdout(), "DEBUG: ", message)

    def _stdout(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _stderr(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, stream: TextIO, prefix: str, message: str) -> None:
        caller = sys._getframe(2)
        location = f"{os.path.basename(caller.f_code.co_filename)}:{caller.f_lineno}"
        stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        with self._lock:
            stream.write(f"{prefix}{stamp} {location}: {message}\n")
            stream.flush()
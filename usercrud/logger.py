"""A JSON line logger for the application."""

from __future__ import annotations

import inspect
import json
import os
import sys
from datetime import datetime
from typing import Any, TextIO

_RANKS = {"debug": 0, "info": 1, "warn": 2, "error": 3}

_THIS_FILE = os.path.normcase(os.path.abspath(__file__))


def parse_level(level: str) -> str:
    """Normalise a level name; anything unknown means ``info``."""
    name = level.lower()
    return name if name in _RANKS else "info"


def _is_own_frame(filename: str) -> bool:
    return os.path.normcase(os.path.abspath(filename)) == _THIS_FILE


def _caller() -> str:
    frame = inspect.currentframe()
    while frame is not None and _is_own_frame(frame.f_code.co_filename):
        frame = frame.f_back
    if frame is None:
        return ""
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


class Logger:
    """Writes one JSON object per message.

    Every message is written at the ``info`` level, so a logger set to
    ``warn`` or ``error`` writes nothing.
    """

    def __init__(self, level: str, stream: TextIO | None = None) -> None:
        self.level = parse_level(level)
        self._stream = stream

    def debug(self, message: Any, *args: Any) -> None:
        self._msg("debug", message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._log(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(message, *args)

    def error(self, message: Any, *args: Any) -> None:
        self._msg("error", message, *args)

    def fatal(self, message: Any, *args: Any) -> None:
        """Log the message, then exit the process with status 1."""
        self._msg("fatal", message, *args)
        raise SystemExit(1)

    def _msg(self, level: str, message: Any, *args: Any) -> None:
        if isinstance(message, BaseException):
            text = str(message)
        elif isinstance(message, str):
            text = message
        else:
            text = f"{level} message {message} has unknown type {message}"
        self._log(text, *args)

    def _log(self, message: str, *args: Any) -> None:
        if _RANKS[self.level] > _RANKS["info"]:
            return
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                message = " ".join([message, *map(str, args)])
        record = {
            "level": "info",
            "time": datetime.now().astimezone().isoformat(timespec="seconds"),
            "caller": _caller(),
            "message": message,
        }
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(json.dumps(record, ensure_ascii=False, separators=(",", ":")) + "\n")
        stream.flush()
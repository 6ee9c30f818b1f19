"""A small levelled logger writing timestamped lines to a stream."""

from __future__ import annotations

import re
import sys
import threading
from datetime import datetime
from enum import IntEnum
from typing import Any, TextIO


class Level(IntEnum):
    """Logging severity."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3

    def __str__(self) -> str:
        return self.name


_VERB = re.compile(r"%[%v]")


def _render(fmt: str, args: tuple[Any, ...]) -> str:
    if not args:
        return fmt
    pattern = _VERB.sub(lambda m: "%%" if m.group() == "%%" else "%s", fmt)
    try:
        return pattern % args
    except (TypeError, ValueError):
        return " ".join([fmt, *map(str, args)])


class Logger:
    """Thread-safe logger that drops messages below its level."""

    def __init__(
        self,
        output: TextIO | None = None,
        level: Level = Level.DEBUG,
        prefix: str = "",
        debug: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._output = output if output is not None else sys.stdout
        self._level = Level.DEBUG if debug else Level(level)
        self._prefix = prefix
        self._debug = debug

    @property
    def level(self) -> Level:
        return self._level

    @property
    def debug_mode(self) -> bool:
        return self._debug

    def set_level(self, level: Level) -> None:
        with self._lock:
            self._level = Level(level)

    def set_debug(self, debug: bool) -> None:
        """Toggle debug mode; turning it on lowers the level to DEBUG."""
        with self._lock:
            self._debug = debug
            if debug:
                self._level = Level.DEBUG

    def debug(self, fmt: str, *args: Any) -> None:
        self._log(Level.DEBUG, fmt, args)

    def debugf(self, fmt: str, *args: Any) -> None:
        self._log(Level.DEBUG, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._log(Level.INFO, fmt, args)

    def infof(self, fmt: str, *args: Any) -> None:
        self._log(Level.INFO, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._log(Level.WARN, fmt, args)

    def warnf(self, fmt: str, *args: Any) -> None:
        self._log(Level.WARN, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._log(Level.ERROR, fmt, args)

    def errorf(self, fmt: str, *args: Any) -> None:
        self._log(Level.ERROR, fmt, args)

    def _log(self, level: Level, fmt: str, args: tuple[Any, ...]) -> None:
        if level < self._level:
            return
        with self._lock:
            stamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            prefix = f" {self._prefix}" if self._prefix else ""
            self._output.write(f"[{stamp}] [{level}]{prefix} {_render(fmt, args)}\n")


def new_default() -> Logger:
    """Return a logger at INFO level writing to standard output."""
    return Logger(level=Level.INFO)
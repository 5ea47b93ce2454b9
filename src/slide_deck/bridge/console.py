"""
Console capture for the hosted slide page.

Replaces the page's console with one that forwards every call to the
controller frame instead of printing it.
"""

from __future__ import annotations

import logging
from typing import Callable

Forward = Callable[[str, list], None]

# stdlib level name -> browser console method
LEVEL_METHODS = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


class BridgeConsole:
    """
    Console replacement bound to a FrameBridge.

    Usage:
        bridge.console.log("ready", 42)
    """

    def __init__(self, forward: Forward):
        self._forward = forward

    def log(self, *args):
        self._forward("log", list(args))

    def info(self, *args):
        self._forward("info", list(args))

    def warn(self, *args):
        self._forward("warn", list(args))

    def error(self, *args):
        self._forward("error", list(args))

    def debug(self, *args):
        self._forward("debug", list(args))


class BridgeLogHandler(logging.Handler):
    """Forward stdlib log records through a BridgeConsole."""

    def __init__(self, console: BridgeConsole, level: int = logging.NOTSET):
        super().__init__(level)
        self.console = console

    def emit(self, record: logging.LogRecord):
        try:
            message = self.format(record)
            method = LEVEL_METHODS.get(record.levelno, "log")
            getattr(self.console, method)(message)
        except Exception:
            self.handleError(record)

"""
Frame bridge - message translation between the slide frame and a controller frame.

Runs alongside the slide document:
- Console output is forwarded to the controller (queued until one says hello)
- Location changes are forwarded once a controller is registered
- Command strings from the controller drive the slide navigator
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..config import ENVELOPE_PREFIX, HELLO_MESSAGE, URL_POLL_INTERVAL
from .commands import NAVIGATION, Command, SlideNavigator
from .console import BridgeConsole

logger = logging.getLogger(__name__)


class ControllerFrame(ABC):
    """
    One-way channel to the controller frame.

    Fire-and-forget: each post_message call delivers at most once,
    in call order, with no acknowledgment.
    """

    @abstractmethod
    def post_message(self, message: str):
        ...


def _finite(value):
    """Replace NaN and infinities with None, as JSON.stringify does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def encode_envelope(payload: dict) -> str:
    """Wrap a payload as a client-frame envelope."""
    return ENVELOPE_PREFIX + json.dumps(
        _finite(payload), separators=(",", ":"), ensure_ascii=False, default=str
    )


class FrameBridge:
    """
    Bridge between one slide frame and its controller frame.

    Create once per page load. The controller reference and the console
    backlog are owned by the instance.

    The backlog has no size bound: every console call made before the
    handshake is kept until a controller says hello.

    Usage:
        bridge = FrameBridge(navigator, location=lambda: page.url)
        bridge.start()                      # begin URL polling
        bridge.console.log("ready")         # queued until handshake
        bridge.receive("hello", controller) # flushes the backlog
        bridge.receive("nextSlide", controller)
    """

    def __init__(
        self,
        navigator: SlideNavigator,
        location: Optional[Callable[[], str]] = None,
        poll_interval: float = URL_POLL_INTERVAL,
    ):
        self.navigator = navigator
        self.poll_interval = poll_interval
        self._location = location
        self._last_url = location() if location else None
        self._controller: Optional[ControllerFrame] = None
        self._backlog: list[str] = []
        self._poll_task: Optional[asyncio.Task] = None
        self.console = BridgeConsole(self.forward_console)

    @property
    def controller(self) -> Optional[ControllerFrame]:
        return self._controller

    @property
    def is_paired(self) -> bool:
        return self._controller is not None

    @property
    def backlog(self) -> list[str]:
        """Envelopes waiting for a controller (copy)."""
        return list(self._backlog)

    @property
    def last_url(self) -> Optional[str]:
        return self._last_url

    # --- Inbound ---

    def receive(self, message, source: ControllerFrame):
        """Handle one message posted by another frame."""
        if message == HELLO_MESSAGE:
            self.register_controller(source)
            return

        command = Command.parse(message)
        if command is None:
            logger.debug(f"Ignoring message: {message!r}")
            return

        NAVIGATION[command](self.navigator)

    def register_controller(self, frame: ControllerFrame):
        """Record the controller and flush the backlog to it in order."""
        self._controller = frame
        backlog, self._backlog = self._backlog, []
        for envelope in backlog:
            frame.post_message(envelope)
        logger.info(f"Controller registered ({len(backlog)} queued messages flushed)")

    # --- Outbound ---

    def forward_console(self, method: str, arguments: list):
        """Send a console call to the controller, or queue it until handshake."""
        envelope = encode_envelope({
            "console": {"method": method, "arguments": arguments},
        })
        if self._controller is not None:
            self._controller.post_message(envelope)
        else:
            self._backlog.append(envelope)

    def check_location(self) -> bool:
        """
        Compare the current location with the last one seen.

        Returns:
            True if the location changed.
        """
        if self._location is None:
            return False

        current = self._location()
        if current == self._last_url:
            return False

        self._last_url = current
        # Changes before the handshake are dropped, not queued
        if self._controller is not None:
            self._controller.post_message(encode_envelope({"url": current}))
        return True

    # --- URL polling ---

    @property
    def is_running(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    async def watch_location(self):
        """Poll the location for the lifetime of the page."""
        while True:
            try:
                self.check_location()
            except Exception as e:
                logger.error(f"Location check failed: {e}", exc_info=True)
            await asyncio.sleep(self.poll_interval)

    def start(self) -> asyncio.Task:
        """Start URL polling on the running event loop."""
        if self.is_running:
            logger.warning("Location watcher already running")
            return self._poll_task
        self._poll_task = asyncio.ensure_future(self.watch_location())
        return self._poll_task

    async def stop(self):
        """Cancel URL polling."""
        if self._poll_task:
            self._poll_task.cancel()
            try:
                await self._poll_task
            except asyncio.CancelledError:
                pass
            self._poll_task = None

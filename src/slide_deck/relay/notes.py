"""
Notes relay - keeps a presenter's slide and notes windows in sync.

Any connection's slide or fragment change is broadcast to every other
connection in the namespace. Payloads are passed through untouched and
nothing is stored, so late joiners only see the next event.

Wire format (JSON text frames):
    in:  {"event": "slidechanged", "data": ...}
    out: {"event": "slidedata", "data": ...}
"""

from __future__ import annotations

import json
import logging
from enum import Enum

from ..config import NOTES_NAMESPACE
from .registry import Connection, ConnectionRegistry

logger = logging.getLogger(__name__)


class RelayEvent(Enum):
    """Events a client may publish."""

    SLIDE_CHANGED = "slidechanged"
    FRAGMENT_CHANGED = "fragmentchanged"


# published event -> event name delivered to the other connections
BROADCASTS = {
    RelayEvent.SLIDE_CHANGED: "slidedata",
    RelayEvent.FRAGMENT_CHANGED: "fragmentdata",
}

CONNECTED_EVENT = "connected"


class NotesRelay:
    """
    Publish/subscribe relay for one namespace.

    Usage:
        relay = NotesRelay()
        connection = await relay.connect(ws)
        await relay.handle_text(connection, msg.data)
        relay.disconnect(connection)
    """

    def __init__(self, namespace: str = NOTES_NAMESPACE):
        self.namespace = namespace
        self.registry = ConnectionRegistry(namespace)

    async def connect(self, socket) -> Connection:
        """Register a socket and tell it its connection id."""
        connection = Connection(socket)
        await connection.send(CONNECTED_EVENT, {"id": connection.id})
        self.registry.add(connection)
        logger.info(
            f"{self.namespace}: {connection.id} connected "
            f"({len(self.registry)} active)"
        )
        return connection

    def disconnect(self, connection: Connection):
        self.registry.discard(connection)
        logger.info(
            f"{self.namespace}: {connection.id} disconnected "
            f"({len(self.registry)} active)"
        )

    async def publish(self, connection: Connection, event: RelayEvent, data) -> int:
        """Broadcast a published event to everyone but its sender."""
        return await self.registry.broadcast(connection, BROADCASTS[event], data)

    async def handle_text(self, connection: Connection, text: str) -> int:
        """
        Handle one text frame from a connection.

        Returns:
            Number of connections the event was relayed to (0 if ignored).
        """
        try:
            message = json.loads(text)
        except ValueError:
            logger.warning(f"{self.namespace}: malformed message from {connection.id}")
            return 0

        if not isinstance(message, dict):
            logger.warning(f"{self.namespace}: unexpected message from {connection.id}")
            return 0

        name = message.get("event")
        try:
            event = RelayEvent(name)
        except ValueError:
            logger.debug(f"{self.namespace}: ignoring event {name!r}")
            return 0

        return await self.publish(connection, event, message.get("data"))

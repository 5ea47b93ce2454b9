"""
Connection registry - live sockets in one relay namespace.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any

from aiohttp import WSCloseCode

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Connection:
    """
    One browser tab connected to the relay.

    Compared and hashed by identity; the id is only handed to the
    client so it can name itself in URLs.
    """

    socket: Any  # web.WebSocketResponse or anything with send_json/close
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def closed(self) -> bool:
        return bool(getattr(self.socket, "closed", False))

    async def send(self, event: str, data=None):
        """Send one event frame. No retry."""
        await self.socket.send_json({"event": event, "data": data})

    async def close(self):
        await self.socket.close(code=WSCloseCode.GOING_AWAY, message=b"Server shutdown")


class ConnectionRegistry:
    """
    Set of active connections for a namespace.

    Only mutated on connect/disconnect from the event loop, so no locks.
    """

    def __init__(self, namespace: str):
        self.namespace = namespace
        # dict keeps connection order stable for broadcasts
        self._connections: dict[Connection, None] = {}

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, connection) -> bool:
        return connection in self._connections

    def __iter__(self):
        return iter(list(self._connections))

    def add(self, connection: Connection):
        self._connections[connection] = None

    def discard(self, connection: Connection):
        self._connections.pop(connection, None)

    async def broadcast(self, sender: Connection, event: str, data=None) -> int:
        """
        Send an event to every connection except the sender.

        Returns:
            Number of connections the event was written to.
        """
        delivered = 0
        for connection in list(self._connections):
            if connection is sender or connection.closed:
                continue
            try:
                await connection.send(event, data)
                delivered += 1
            except (ConnectionResetError, RuntimeError) as e:
                # The socket's own handler unregisters it on disconnect
                logger.warning(f"{self.namespace}: send to {connection.id} failed: {e}")
        return delivered

    async def close_all(self):
        """Close every connection (server shutdown)."""
        for connection in list(self._connections):
            await connection.close()

"""
Notes Relay - real-time sync between presenter windows.
"""

from .notes import BROADCASTS, CONNECTED_EVENT, NotesRelay, RelayEvent
from .registry import Connection, ConnectionRegistry

__all__ = [
    "BROADCASTS",
    "CONNECTED_EVENT",
    "Connection",
    "ConnectionRegistry",
    "NotesRelay",
    "RelayEvent",
]

"""
Frame Bridge - cross-frame messaging for the slide frame.

Provides:
- Console capture forwarded to the controller frame
- URL change notifications
- Navigation commands from the controller frame
"""

from .commands import NAVIGATION, Command, SlideNavigator
from .console import BridgeConsole, BridgeLogHandler
from .frame_bridge import ControllerFrame, FrameBridge, encode_envelope

__all__ = [
    "NAVIGATION",
    "BridgeConsole",
    "BridgeLogHandler",
    "Command",
    "ControllerFrame",
    "FrameBridge",
    "SlideNavigator",
    "encode_envelope",
]

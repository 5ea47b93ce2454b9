"""
Navigation commands accepted from the controller frame.

Each command literal maps to exactly one action on the slide library.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from operator import methodcaller


class SlideNavigator(ABC):
    """Navigation surface of the slide-rendering library."""

    @abstractmethod
    def navigate_next(self): ...

    @abstractmethod
    def navigate_previous(self): ...

    @abstractmethod
    def navigate_left(self): ...

    @abstractmethod
    def navigate_right(self): ...

    @abstractmethod
    def navigate_up(self): ...

    @abstractmethod
    def navigate_down(self): ...

    @abstractmethod
    def toggle_overview(self): ...


class Command(Enum):
    """Command literals sent by the controller frame."""

    NEXT_SLIDE = "nextSlide"
    PREVIOUS_SLIDE = "previousSlide"
    SLIDE_LEFT = "slideLeft"
    SLIDE_RIGHT = "slideRight"
    SLIDE_UP = "slideUp"
    SLIDE_DOWN = "slideDown"
    ESCAPE = "escape"

    @classmethod
    def parse(cls, message) -> Command | None:
        """Return the command for a raw message, or None if unrecognized."""
        if not isinstance(message, str):
            return None
        try:
            return cls(message)
        except ValueError:
            return None


NAVIGATION = {
    Command.NEXT_SLIDE: methodcaller("navigate_next"),
    Command.PREVIOUS_SLIDE: methodcaller("navigate_previous"),
    Command.SLIDE_LEFT: methodcaller("navigate_left"),
    Command.SLIDE_RIGHT: methodcaller("navigate_right"),
    Command.SLIDE_UP: methodcaller("navigate_up"),
    Command.SLIDE_DOWN: methodcaller("navigate_down"),
    Command.ESCAPE: methodcaller("toggle_overview"),
}

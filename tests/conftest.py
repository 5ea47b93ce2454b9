from __future__ import annotations

from pathlib import Path

import pytest

NOTES_HTML = """<!DOCTYPE html>
<html>
<head><title>Speaker Notes</title></head>
<body>
  <div id="notes"></div>
  <script>
    var socketId = '{{socketId}}';
  </script>
</body>
</html>
"""


class RecordingNavigator:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def navigate_next(self) -> None:
        self.calls.append("navigate_next")

    def navigate_previous(self) -> None:
        self.calls.append("navigate_previous")

    def navigate_left(self) -> None:
        self.calls.append("navigate_left")

    def navigate_right(self) -> None:
        self.calls.append("navigate_right")

    def navigate_up(self) -> None:
        self.calls.append("navigate_up")

    def navigate_down(self) -> None:
        self.calls.append("navigate_down")

    def toggle_overview(self) -> None:
        self.calls.append("toggle_overview")


class RecordingFrame:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def post_message(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def controller() -> RecordingFrame:
    return RecordingFrame()


@pytest.fixture
def deck(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text("<html><body>deck</body></html>")
    notes_dir = tmp_path / "plugin" / "notes-server"
    notes_dir.mkdir(parents=True)
    (notes_dir / "notes.html").write_text(NOTES_HTML)
    (tmp_path / "js").mkdir()
    (tmp_path / "js" / "reveal.js").write_text("var Reveal = {};")
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "head.min.js").write_text("/* head */")
    return tmp_path

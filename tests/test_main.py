from __future__ import annotations

from pathlib import Path

from slide_deck.config import WEB_PORT
from slide_deck.main import parse_args


def test_defaults() -> None:
    args = parse_args([])

    assert args.port == WEB_PORT == 1337
    assert args.root == Path(".")
    assert args.log_level == "INFO"


def test_overrides() -> None:
    args = parse_args(["--root", "slides", "--host", "127.0.0.1", "--port", "8000"])

    assert args.root == Path("slides")
    assert args.host == "127.0.0.1"
    assert args.port == 8000

"""
Web Layer - slide deck and speaker notes server.

Provides:
- Slide deck page and static assets
- Speaker notes page (rendered per presentation socket)
- Notes relay WebSocket
"""

from .server import WebServer, create_app, render_template, run_server

__all__ = ["WebServer", "create_app", "render_template", "run_server"]

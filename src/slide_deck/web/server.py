"""
Web server - aiohttp application for the slide deck and speaker notes.
"""

import html
import logging
import re
from pathlib import Path

from aiohttp import web

from ..config import (
    ASSET_DIRS,
    INDEX_FILE,
    NOTES_TEMPLATE,
    WEB_HOST,
    WEB_PORT,
)
from ..relay import NotesRelay

logger = logging.getLogger(__name__)

# Mustache-style {{name}} placeholder
PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def render_template(text: str, context: dict) -> str:
    """Substitute {{name}} placeholders (HTML-escaped, unknown names empty)."""
    def substitute(match):
        return html.escape(str(context.get(match.group(1), "")))

    return PLACEHOLDER.sub(substitute, text)


class WebServer:
    """
    Slide deck server.

    Provides:
    - Slide deck page
    - Speaker notes page per presentation socket
    - Static assets (markup, styles, scripts, images, plugins, libraries)
    - Notes relay WebSocket
    """

    def __init__(self, root=".", relay: NotesRelay = None):
        """
        Args:
            root: Deck directory holding index.html and the asset directories
            relay: Notes relay (a fresh one per server by default)
        """
        self.root = Path(root)
        self.relay = relay or NotesRelay()
        self.app = web.Application()
        self._setup_routes()
        self.app.on_shutdown.append(self._on_shutdown)

    def _setup_routes(self):
        """Configure routes."""
        # Pages
        self.app.router.add_get("/", self.index)
        self.app.router.add_get("/notes/{socket_id}", self.notes_page)

        # WebSocket
        self.app.router.add_get(self.relay.namespace, self.ws_notes)

        # Static files
        for name in ASSET_DIRS:
            directory = self.root / name
            if directory.is_dir():
                self.app.router.add_static(f"/{name}", directory)
            else:
                logger.debug(f"Asset directory {directory} missing, not served")

    async def index(self, request):
        """Slide deck page."""
        html_text = self._read_page(INDEX_FILE)
        return web.Response(text=html_text, content_type="text/html")

    async def notes_page(self, request):
        """Speaker notes page bound to one presentation socket."""
        socket_id = request.match_info["socket_id"]
        html_text = render_template(
            self._read_page(NOTES_TEMPLATE), {"socketId": socket_id}
        )
        return web.Response(text=html_text, content_type="text/html")

    async def ws_notes(self, request):
        """WebSocket for the notes relay namespace."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        connection = await self.relay.connect(ws)

        try:
            async for msg in ws:
                if msg.type == web.WSMsgType.TEXT:
                    await self.relay.handle_text(connection, msg.data)
                elif msg.type == web.WSMsgType.ERROR:
                    logger.error(f"Notes WebSocket error: {ws.exception()}")
                else:
                    logger.debug(f"Ignoring {msg.type.name} frame from {connection.id}")
        finally:
            self.relay.disconnect(connection)

        return ws

    async def _on_shutdown(self, app):
        """Close relay sockets so clients see the server go away."""
        await self.relay.registry.close_all()

    def _read_page(self, name: str) -> str:
        """Read a page from the deck root."""
        path = self.root / name
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise web.HTTPNotFound(text=f"{name} not found")
        except OSError as e:
            logger.error(f"Failed to read {path}: {e}")
            raise web.HTTPInternalServerError(text=f"Failed to read {name}")


def create_app(root=".", relay: NotesRelay = None) -> web.Application:
    """Create the web application."""
    server = WebServer(root, relay)
    return server.app


async def run_server(root=".", host=WEB_HOST, port=WEB_PORT):
    """Run the web server."""
    app = create_app(root)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"Web server running at http://{host}:{port}")
    return runner

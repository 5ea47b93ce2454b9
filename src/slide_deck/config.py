"""
Configuration constants for the slide deck server and frame bridge.

All tunable values in one place.
"""

# =============================================================================
# WEB INTERFACE
# =============================================================================

WEB_HOST = "0.0.0.0"
WEB_PORT = 1337

# Top-level asset directories served read-only from the deck root
ASSET_DIRS = ("m", "css", "js", "images", "plugin", "lib")

# Paths relative to the deck root
INDEX_FILE = "index.html"
NOTES_TEMPLATE = "plugin/notes-server/notes.html"

# =============================================================================
# NOTES RELAY
# =============================================================================

NOTES_NAMESPACE = "/notes"

# =============================================================================
# FRAME BRIDGE
# =============================================================================

HELLO_MESSAGE = "hello"
ENVELOPE_PREFIX = "client-frame:"
URL_POLL_INTERVAL = 0.1  # seconds

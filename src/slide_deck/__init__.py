"""
Slide deck tooling.

- bridge: cross-frame messaging between the slide frame and a controller frame
- relay: speaker notes sync between browser tabs
- web: aiohttp server for the deck, the notes page and the relay
"""

__version__ = "0.1.0"

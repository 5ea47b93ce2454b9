#!/usr/bin/env python3
"""
Slide deck speaker notes server - Main Entry Point

Usage:
    slide-deck                     # Serve the deck in the current directory
    slide-deck --root slides/      # Serve another deck directory
    slide-deck --port 8000         # Listen on another port
"""

import argparse
import asyncio
import logging
from pathlib import Path

from .config import INDEX_FILE, WEB_HOST, WEB_PORT


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Slide deck speaker notes server")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Deck directory (index.html and asset directories)",
    )
    parser.add_argument(
        "--host",
        default=WEB_HOST,
        help="Interface to listen on",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=WEB_PORT,
        help="Port to listen on",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Setup logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)

    if not (args.root / INDEX_FILE).exists():
        logger.warning(f"No {INDEX_FILE} in {args.root.resolve()}")

    from .web import run_server

    async def run_web():
        runner = await run_server(root=args.root, host=args.host, port=args.port)
        logger.info("Speaker Notes")
        logger.info(f"1. Open the slides at http://localhost:{args.port}/")
        logger.info("2. Click on the link in your JS console to go to the notes page")
        logger.info("3. Advance through your slides and your notes will advance automatically")
        logger.info("Press Ctrl+C to stop")
        try:
            while True:
                await asyncio.sleep(1)
        except asyncio.CancelledError:
            pass
        finally:
            await runner.cleanup()

    try:
        asyncio.run(run_web())
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()

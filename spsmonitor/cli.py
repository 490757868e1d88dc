"""Command-line entry point of the status service."""

from __future__ import annotations

import argparse
import logging

from spsmonitor.config import Settings, load_settings
from spsmonitor.server import run_server

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None, settings: Settings) -> argparse.Namespace:
    """Parse the command line, taking defaults from the settings."""
    parser = argparse.ArgumentParser(prog="spsmonitor", description="Service status reporter.")
    parser.add_argument("-mode", "--mode", default="server", help="server or simulator")
    parser.add_argument("-addr", "--addr", default=settings.server_addr, help="address to listen on")
    parser.add_argument("-port", "--port", default=settings.server_port, help="port to listen on")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load the configuration and start the requested mode."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        settings = load_settings()
    except (OSError, ValueError):
        logger.warning("Configuration file not loaded")
        settings = Settings()
    args = parse_args(argv, settings)
    if args.mode == "server":
        try:
            run_server(args.addr, args.port, settings)
        except KeyboardInterrupt:
            return 130
        return 0
    if args.mode == "simulator":
        logger.error("simulator mode is not available")
        return 1
    return 0
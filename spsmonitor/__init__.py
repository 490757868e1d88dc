"""Collection of service provider system status and a JSON status server."""

__version__ = "0.1.0"
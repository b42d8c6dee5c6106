"""Bare-bones HTTP/1.1 echo server over asyncio streams."""

__version__ = "0.1.0"

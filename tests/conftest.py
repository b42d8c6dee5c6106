"""Pytest configuration and shared helpers."""

import asyncio

import pytest
import structlog


def make_reader(data: bytes) -> asyncio.StreamReader:
    """Stream reader holding `data` followed by end of stream."""
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


class BufferWriter:
    """Collects everything written, like a StreamWriter with a perfect transport."""

    def __init__(self):
        self.data = bytearray()
        self.drains = 0

    def write(self, data: bytes):
        self.data += data

    async def drain(self):
        self.drains += 1


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def logger():
    return structlog.get_logger("httpecho.test")

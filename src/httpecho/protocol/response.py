import io
from typing import Any, Dict, Protocol

import orjson

from httpecho.protocol.exceptions import BodyConsumedError
from httpecho.protocol.types import Status

HTTP_VERSION = "HTTP/1.1"
COPY_CHUNK_SIZE = 64 * 1024
JSON_MIME_TYPE = "application/json"


class BodySource(Protocol):
    """Anything sequentially readable as bytes: BytesIO, a binary file, ..."""

    def read(self, size: int = -1) -> bytes: ...


class HTTPResponse:
    def __init__(self, status: Status, headers: Dict[str, str], body: BodySource):
        self.status = status
        self.headers = headers
        self.body = body
        self._consumed = False

    def __repr__(self):
        return f"HTTPResponse(status={self.status!r}, headers={self.headers!r})"

    @classmethod
    def from_string(cls, status: Status, mime_type: str, text: str) -> "HTTPResponse":
        data = text.encode("utf-8")
        headers = {
            "Content-Type": mime_type,
            "Content-Length": str(len(data)),
        }
        return cls(status=status, headers=headers, body=io.BytesIO(data))

    @classmethod
    def from_json(cls, status: Status, value: Any) -> "HTTPResponse":
        text = orjson.dumps(value, option=orjson.OPT_SORT_KEYS).decode("utf-8")
        return cls.from_string(status, JSON_MIME_TYPE, text)

    def render_head(self) -> bytes:
        status_line = f"{HTTP_VERSION} {self.status.line()}\r\n"
        header_lines = "".join(f"{k}: {v}\r\n" for k, v in self.headers.items())
        return (status_line + header_lines + "\r\n").encode("utf-8")

    async def write(self, writer) -> None:
        """Write status line, headers and the whole body, draining after each chunk.

        The body source is read exactly once; transport errors propagate.
        """
        if self._consumed:
            raise BodyConsumedError("Response body has already been written")
        self._consumed = True

        writer.write(self.render_head())
        await writer.drain()
        while True:
            chunk = self.body.read(COPY_CHUNK_SIZE)
            if not chunk:
                break
            writer.write(chunk)
            await writer.drain()

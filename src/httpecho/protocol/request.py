from dataclasses import dataclass, field
from typing import Any, Dict

from httpecho.protocol.exceptions import (
    InvalidEncodingError,
    MissingHeaderNameError,
    MissingHeaderValueError,
    MissingMethodError,
    MissingPathError,
)
from httpecho.protocol.types import Method

HEADERS_END = (b"", b"\n", b"\r\n")


@dataclass(frozen=True)
class HTTPRequest:
    method: Method
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method.variant,
            "path": self.path,
            "headers": dict(self.headers),
            "body": self.body,
        }


def _decode(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidEncodingError("Invalid encoding in request") from None


def parse_request_line(line: str) -> tuple[Method, str]:
    """Only the first two tokens are consulted, the protocol version is ignored."""
    parts = line.split()
    if not parts:
        raise MissingMethodError("Missing method")
    method = Method.parse(parts[0])
    if len(parts) < 2:
        raise MissingPathError("Missing path")
    return method, parts[1]


def parse_header_line(line: str) -> tuple[str, str]:
    name, sep, value = line.partition(":")
    if not sep:
        raise MissingHeaderNameError(f"Missing header name in {line!r}")
    if not value.rstrip("\r\n"):
        raise MissingHeaderValueError(f"Missing header value for {name!r}")
    return name, value.strip()


async def parse_request(reader) -> HTTPRequest:
    """Read one request from a line-buffered stream.

    The body is everything up to end of stream, so the call returns only once
    the peer has closed its write side.
    """
    method, path = parse_request_line(_decode(await reader.readline()))

    headers = {}
    while True:
        line = await reader.readline()
        if line in HEADERS_END:
            break
        name, value = parse_header_line(_decode(line))
        headers[name] = value

    body = _decode(await reader.read())

    return HTTPRequest(method=method, path=path, headers=headers, body=body)

from httpecho.protocol.exceptions import (
    BodyConsumedError,
    HTTPError,
    InvalidEncodingError,
    InvalidMethodError,
    InvalidStatusCodeError,
    MissingHeaderNameError,
    MissingHeaderValueError,
    MissingMethodError,
    MissingPathError,
    RequestParseError,
)
from httpecho.protocol.request import HTTPRequest, parse_request
from httpecho.protocol.response import HTTPResponse
from httpecho.protocol.types import Method, Status

__all__ = [
    "BodyConsumedError",
    "HTTPError",
    "HTTPRequest",
    "HTTPResponse",
    "InvalidEncodingError",
    "InvalidMethodError",
    "InvalidStatusCodeError",
    "Method",
    "MissingHeaderNameError",
    "MissingHeaderValueError",
    "MissingMethodError",
    "MissingPathError",
    "RequestParseError",
    "Status",
    "parse_request",
]

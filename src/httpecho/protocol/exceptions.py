"""Protocol exceptions."""


class HTTPError(Exception):
    """Base exception for protocol errors."""
    pass


class InvalidMethodError(HTTPError):
    """Raised when a method token is not GET or POST."""
    pass


class InvalidStatusCodeError(HTTPError):
    """Raised when a status code is not supported."""
    pass


class BodyConsumedError(HTTPError):
    """Raised when a response body is written a second time."""
    pass


class RequestParseError(HTTPError):
    """Base exception for malformed requests."""
    pass


class MissingMethodError(RequestParseError):
    """Raised when the request line has no method token."""
    pass


class MissingPathError(RequestParseError):
    """Raised when the request line has no path token."""
    pass


class MissingHeaderNameError(RequestParseError):
    """Raised when a header line has no name before a colon."""
    pass


class MissingHeaderValueError(RequestParseError):
    """Raised when nothing follows the colon of a header line."""
    pass


class InvalidEncodingError(RequestParseError):
    """Raised when request bytes are not valid UTF-8."""
    pass

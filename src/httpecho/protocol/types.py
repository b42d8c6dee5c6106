import enum

from httpecho.protocol.exceptions import InvalidMethodError, InvalidStatusCodeError


class Method(enum.Enum):
    GET = "GET"
    POST = "POST"

    @property
    def variant(self) -> str:
        """Echo form of the method: "Get", "Post"."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, token: str) -> "Method":
        """Exact, case-sensitive match against the request line verb"""
        try:
            return cls(token)
        except ValueError:
            raise InvalidMethodError(f"Invalid HTTP method: {token}") from None


class Status(enum.Enum):
    OK = 200
    NOT_FOUND = 404

    @classmethod
    def from_code(cls, code: int) -> "Status":
        if isinstance(code, bool) or not isinstance(code, int):
            raise InvalidStatusCodeError(f"Invalid status code: {code!r}")
        try:
            return cls(code)
        except ValueError:
            raise InvalidStatusCodeError(f"Invalid status code: {code}") from None

    @property
    def phrase(self) -> str:
        return _REASONS[self]

    def line(self) -> str:
        return f"{self.value} {self.phrase}"

    def __str__(self) -> str:
        return self.line()


_REASONS = {
    Status.OK: "OK",
    Status.NOT_FOUND: "Not Found",
}

from httpecho.protocol.request import HTTPRequest
from httpecho.protocol.response import HTTPResponse
from httpecho.protocol.types import Status


class EchoHandler:
    """Answers every request with its own parsed form as JSON."""

    def __init__(self, status: Status = Status.OK):
        self.status = status

    def __call__(self, income: HTTPRequest) -> HTTPResponse:
        return HTTPResponse.from_json(self.status, income.to_dict())

import io

import orjson
import pytest

from conftest import BufferWriter
from httpecho.protocol.exceptions import BodyConsumedError
from httpecho.protocol.response import HTTPResponse
from httpecho.protocol.types import Status


def test_from_string_sets_content_headers():
    response = HTTPResponse.from_string(Status.NOT_FOUND, "text/plain", "héllo")
    assert response.status is Status.NOT_FOUND
    assert response.headers == {
        "Content-Type": "text/plain",
        "Content-Length": str(len("héllo".encode("utf-8"))),
    }
    assert response.body.read() == "héllo".encode("utf-8")


def test_from_json_sorts_keys():
    response = HTTPResponse.from_json(Status.OK, {"b": 1, "a": {"z": 2, "y": [3]}})
    assert response.body.read() == b'{"a":{"y":[3],"z":2},"b":1}'


def test_from_json_same_value_same_bytes():
    first = HTTPResponse.from_json(Status.OK, {"b": 1, "a": 2})
    second = HTTPResponse.from_json(Status.OK, {"a": 2, "b": 1})
    assert first.body.read() == second.body.read() == b'{"a":2,"b":1}'


def test_from_json_is_compact():
    response = HTTPResponse.from_json(Status.OK, {"a": 1})
    assert response.headers == {"Content-Type": "application/json", "Content-Length": "7"}


@pytest.mark.asyncio
async def test_write_from_json():
    writer = BufferWriter()
    await HTTPResponse.from_json(Status.OK, {"a": 1}).write(writer)
    assert bytes(writer.data) == (
        b"HTTP/1.1 200 OK\r\n"
        b"Content-Type: application/json\r\n"
        b"Content-Length: 7\r\n"
        b"\r\n"
        b'{"a":1}'
    )
    assert writer.drains >= 1


@pytest.mark.asyncio
async def test_written_response_reparses():
    writer = BufferWriter()
    await HTTPResponse.from_json(Status.OK, {"a": 1}).write(writer)
    head, body = bytes(writer.data).split(b"\r\n\r\n", 1)
    status_line, *header_lines = head.decode().split("\r\n")
    headers = dict(line.split(": ", 1) for line in header_lines)
    assert status_line == "HTTP/1.1 200 OK"
    assert headers["Content-Type"] == "application/json"
    assert int(headers["Content-Length"]) == len(body)
    assert orjson.loads(body) == {"a": 1}


@pytest.mark.asyncio
async def test_write_without_headers():
    writer = BufferWriter()
    response = HTTPResponse(status=Status.NOT_FOUND, headers={}, body=io.BytesIO(b""))
    await response.write(writer)
    assert bytes(writer.data) == b"HTTP/1.1 404 Not Found\r\n\r\n"


@pytest.mark.asyncio
async def test_write_file_body(tmp_path):
    payload = bytes(range(256)) * 1024
    path = tmp_path / "blob.bin"
    path.write_bytes(payload)
    writer = BufferWriter()
    with open(path, "rb") as f:
        response = HTTPResponse(
            status=Status.OK,
            headers={"Content-Length": str(len(payload))},
            body=f,
        )
        await response.write(writer)
    assert bytes(writer.data) == response.render_head() + payload


@pytest.mark.asyncio
async def test_body_is_consumed_once():
    response = HTTPResponse.from_string(Status.OK, "text/plain", "once")
    await response.write(BufferWriter())
    with pytest.raises(BodyConsumedError):
        await response.write(BufferWriter())


@pytest.mark.asyncio
async def test_transport_error_propagates():
    class BrokenWriter(BufferWriter):
        async def drain(self):
            raise ConnectionResetError("peer went away")

    with pytest.raises(ConnectionResetError):
        await HTTPResponse.from_json(Status.OK, {}).write(BrokenWriter())

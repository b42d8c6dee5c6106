import asyncio
from typing import Callable, Optional

from structlog.typing import FilteringBoundLogger

from httpecho.protocol.exceptions import HTTPError
from httpecho.protocol.request import HTTPRequest, parse_request
from httpecho.protocol.response import HTTPResponse


class HTTPServer:
    """Accept loop running one asyncio task per connection.

    Connection tasks share nothing; a failing connection is logged and closed
    without touching the others.
    """

    def __init__(
        self,
        server_address: tuple[str, int],
        external_handler: Callable[[HTTPRequest], HTTPResponse],
        logger: FilteringBoundLogger,
    ):
        self.server_address = server_address
        self.handler = external_handler
        self.logger = logger
        self._server: Optional[asyncio.AbstractServer] = None

    async def server_bind(self):
        """Bind and start listening. OSError from a failed bind propagates."""
        host, port = self.server_address
        self._server = await asyncio.start_server(self.handle_connection, host, port)
        self.server_address = self._server.sockets[0].getsockname()[:2]
        self.logger.info(
            "server_started", host=self.server_address[0], port=self.server_address[1]
        )

    async def serve_forever(self):
        if self._server is None:
            await self.server_bind()
        try:
            await self._server.serve_forever()
        finally:
            self.server_close()

    def server_close(self):
        """Stop listening. In-flight connection tasks are abandoned, not drained."""
        if self._server is not None:
            self._server.close()
            self._server = None

    async def handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ):
        client_address = writer.get_extra_info("peername")
        log = self.logger.bind(peer=str(client_address))
        log.info("new_connection")
        try:
            try:
                request = await parse_request(reader)
            except (HTTPError, ValueError) as e:
                log.info("request_parse_failed", error=repr(e))
                return
            log.info("incoming_request", method=request.method.value, path=request.path)
            log.debug("request_parsed", headers=request.headers, body=request.body)
            response = self.handler(request)
            await response.write(writer)
            log.info("response_sent", status=response.status.value)
        except Exception as e:
            self.handle_error(log, e)
        finally:
            await self.shutdown_request(writer, log)

    def handle_error(self, log, error: Exception):
        log.exception("connection_error", error=repr(error))

    async def shutdown_request(self, writer: asyncio.StreamWriter, log):
        """Close an individual connection."""
        writer.close()
        try:
            await writer.wait_closed()
        except OSError as e:
            log.error("close_failed", error=repr(e))

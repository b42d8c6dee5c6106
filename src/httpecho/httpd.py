import argparse
import asyncio
import logging
import sys
from typing import Optional

import structlog

from httpecho import config
from httpecho.handler.handler import EchoHandler
from httpecho.server.server import HTTPServer

logger = structlog.get_logger("httpecho")


def port_number(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {port}")
    return port


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="httpecho", description="HTTP server echoing requests back as JSON"
    )
    parser.add_argument(
        "port",
        nargs="?",
        type=port_number,
        default=config.PORT,
        help=f"Port to listen on (default: {config.DEFAULT_PORT})",
    )
    return parser.parse_args(argv)


def setup_logging(level: Optional[str] = None):
    """
    Configures structured logging using structlog. Events are rendered as JSON
    lines and written to stderr through the standard logging handler.
    """
    level = level or config.LOG_LEVEL
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        logging.error("Invalid log level %r.", level)
        sys.exit(1)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def main(argv=None):
    setup_logging()
    args = parse_args(argv)

    server = HTTPServer(
        server_address=(config.HOST, args.port),
        external_handler=EchoHandler(),
        logger=logger,
    )
    try:
        asyncio.run(server.serve_forever())
    except KeyboardInterrupt:
        logger.info("server_stopped")
    except OSError as e:
        logger.error("bind_failed", host=config.HOST, port=args.port, error=repr(e))
        sys.exit(1)


if __name__ == "__main__":
    main()

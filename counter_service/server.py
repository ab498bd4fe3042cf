"""Command-line entrypoint that binds the listener and runs uvicorn."""

import argparse
import logging
import socket
from collections.abc import Sequence

import uvicorn
from pydantic import ValidationError

from counter_service.core.config import Settings, get_settings
from counter_service.core.errors import BindError
from counter_service.core.logging import configure_logging
from counter_service.main import create_application

logger = logging.getLogger(__name__)


def bind_socket(host: str, port: int) -> socket.socket:
    """Bind a TCP socket for the server, raising BindError when the address is unusable."""
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as exc:
        sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc
    sock.set_inheritable(True)
    return sock


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shared in-memory counter over HTTP")
    parser.add_argument("--host", type=str, default=None, help="Bind host (overrides HOST)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (overrides PORT)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (overrides LOG_LEVEL)")
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of the environment-driven settings."""
    settings = base or get_settings()
    overrides = {
        key: value
        for key, value in (("HOST", args.host), ("PORT", args.port), ("LOG_LEVEL", args.log_level))
        if value is not None
    }
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def server_url(host: str, port: int) -> str:
    """Format the address announced at startup; IPv6 hosts need brackets."""
    if ":" in host:
        host = f"[{host}]"
    return f"http://{host}:{port}"


def main(argv: Sequence[str] | None = None) -> int:
    """Bind the configured address and serve until interrupted.

    Returns the process exit status: 1 when the configuration is invalid or
    the address can't be bound.
    """
    args = parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as exc:
        configure_logging("INFO")
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(settings.LOG_LEVEL)

    try:
        sock = bind_socket(settings.HOST, settings.PORT)
    except BindError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Starting server at %s", server_url(settings.HOST, settings.PORT))

    config = uvicorn.Config(
        create_application(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=settings.ACCESS_LOG,
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    return 0

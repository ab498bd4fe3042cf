"""Logging setup shared by the server entrypoint and the application."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler at the requested level.

    Uvicorn keeps its own handlers for `uvicorn.error` and `uvicorn.access`;
    this only covers the service's own loggers.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)

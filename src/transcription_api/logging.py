import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_handler: logging.Handler | None = None


def setup_logging() -> logging.Logger:
    """
    Configures structured JSON logging for the application.

    The first call installs a JSON stream handler on the root logger and
    reroutes the Uvicorn loggers through it, so access logs and application
    logs share one format. Records carry trace_id and span_id when ddtrace
    log injection is active. Later calls reuse the installed handler.

    The level is read from the LOG_LEVEL environment variable (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    root_logger = logging.getLogger()
    if _handler is not None:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    return root_logger

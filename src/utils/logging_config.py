"""Logging configuration for the serverless functions, read from environment variables."""

import os
import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "hot-sheets-backend"

# Libraries that log every HTTP round trip to PostgREST
_NOISY_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest", "supabase")


class LoggingConfig:
    """Logging settings and handler setup."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "json").lower()
    LOG_MASK_SENSITIVE = os.environ.get("LOG_MASK_SENSITIVE", "true").lower() == "true"
    LOG_CORRELATION_ID_HEADER = os.environ.get("LOG_CORRELATION_ID_HEADER", "X-Correlation-ID")
    LOG_SLOW_OPERATION_THRESHOLD_MS = int(os.environ.get("LOG_SLOW_OPERATION_THRESHOLD_MS", "1000"))
    LOG_SERVICE_NAME = os.environ.get("LOG_SERVICE_NAME", SERVICE_NAME)

    @classmethod
    def build_formatter(cls) -> logging.Formatter:
        """JSON lines tagged with the service name, or plain text for local runs."""
        if cls.LOG_FORMAT != "json":
            return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        return jsonlogger.JsonFormatter(
            "%(timestamp)s %(levelname)s %(name)s %(message)s",
            timestamp=True,
            rename_fields={"levelname": "level"},
            static_fields={"service": cls.LOG_SERVICE_NAME},
        )

    @classmethod
    def setup_logging(cls) -> None:
        """Replace root handlers with a single stdout handler."""
        level = getattr(logging, cls.LOG_LEVEL, logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        # Vercel collects stdout
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(cls.build_formatter())
        root_logger.addHandler(handler)

        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)

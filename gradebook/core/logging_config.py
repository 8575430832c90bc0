# /gradebook/core/logging_config.py

"""
Structured logging configuration.

- JSON format for production (machine-parseable)
- Human-readable text for development
- Request ID middleware for tracing
- Access logging for every HTTP request
"""

from __future__ import annotations

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request

from . import config


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            entry["request_id"] = record.request_id
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False)


def configure_logging(log_level: str = config.LOG_LEVEL, log_format: str = config.LOG_FORMAT) -> None:
    """Configure the root logger once for the whole process."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove default handlers
    root.handlers.clear()

    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    root.addHandler(handler)

    # Quiet noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def init_logging(app: FastAPI) -> None:
    """Configure logging and attach the request-id / access-log middleware."""
    configure_logging()
    access_logger = logging.getLogger("gradebook.access")

    @app.middleware("http")
    async def _log_request(request: Request, call_next):
        request_id = uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        started = time.time()
        try:
            response = await call_next(request)
        except Exception:
            access_logger.exception(
                "%s %s failed %.0fms",
                request.method,
                request.url.path,
                (time.time() - started) * 1000,
                extra={"request_id": request_id},
            )
            raise
        duration_ms = (time.time() - started) * 1000
        access_logger.info(
            "%s %s %s %.0fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            extra={"request_id": request_id},
        )
        response.headers["X-Request-ID"] = request_id
        return response

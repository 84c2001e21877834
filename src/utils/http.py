"""Helpers shared by the Vercel function handlers."""

import asyncio
import json
from typing import Any, Optional

from src.utils.logging_config import LoggingConfig

JSON_HEADERS = {"Content-Type": "application/json"}

_logging_configured = False


def ensure_logging() -> None:
    """Configure logging once per cold start."""
    global _logging_configured
    if not _logging_configured:
        LoggingConfig.setup_logging()
        _logging_configured = True


def json_response(status_code: int, body: Any) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, default=str),
    }


def parse_json_body(request: dict) -> dict:
    """Request body as a dict; anything unparseable becomes {}."""
    body = request.get("body") or {}
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        try:
            body = json.loads(body) if body.strip() else {}
        except json.JSONDecodeError:
            return {}
    return body if isinstance(body, dict) else {}


def query_param(request: dict, name: str, default: Optional[str] = None) -> Optional[str]:
    params = request.get("query", {}) or {}
    value = params.get(name, default)
    # Some runtimes deliver repeated params as lists
    if isinstance(value, list):
        return value[0] if value else default
    return value


def header(request: dict, name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    wanted = name.lower()
    for key, value in (request.get("headers", {}) or {}).items():
        if key.lower() == wanted:
            return value
    return None


def correlation_header(request: dict) -> Optional[str]:
    return header(request, LoggingConfig.LOG_CORRELATION_ID_HEADER)


def run_async(coro):
    """Run a coroutine to completion from a synchronous handler."""
    try:
        loop = asyncio.get_event_loop()
    except RuntimeError:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
    if loop.is_closed():
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
    return loop.run_until_complete(coro)

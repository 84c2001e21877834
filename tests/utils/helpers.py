"""Test helper functions."""

import json
from typing import Dict, Any
from unittest.mock import MagicMock


def create_vercel_request(
    method: str = "POST",
    path: str = "/api/listings/search",
    body: Dict[str, Any] = None,
    headers: Dict[str, str] = None,
    query: Dict[str, str] = None,
) -> Dict[str, Any]:
    """Create a Vercel request object for testing."""
    if body is None:
        body = {}

    if headers is None:
        headers = {
            "content-type": "application/json"
        }

    return {
        "method": method,
        "path": path,
        "headers": headers,
        "body": json.dumps(body) if isinstance(body, dict) else body,
        "query": query or {}
    }


def create_postgrest_mock(data=None, error: Exception = None) -> MagicMock:
    """
    Chainable PostgREST request builder mock.

    Every filter method returns the same builder, so the calls made against
    it can be inspected after the fact. execute() returns an object with a
    .data attribute or raises the given error.
    """
    builder = MagicMock(name="request_builder")
    for method in ("select", "eq", "in_", "gte", "lte", "gt", "ilike", "or_", "order", "limit", "insert", "update", "is_"):
        getattr(builder, method).return_value = builder
    builder.not_ = builder
    if error is not None:
        builder.execute.side_effect = error
    else:
        builder.execute.return_value = MagicMock(data=data if data is not None else [])
    return builder


def create_supabase_mock(tables: Dict[str, MagicMock]) -> MagicMock:
    """Supabase client whose table(name) returns the builder registered for that name."""
    client = MagicMock(name="supabase_client")
    client.table.side_effect = lambda name: tables[name]
    return client

"""Custom assertion helpers."""

from typing import Any, Dict
import json


def assert_valid_email_job(row: Dict[str, Any], template: str) -> None:
    """Assert that an email_jobs row is queued with a usable payload."""
    assert row["status"] == "queued"
    assert row["max_attempts"] > 0
    payload = row["payload"]
    assert payload["provider"]
    assert payload["template"] == template
    assert "@" in payload["to"]
    assert payload["subject"]
    assert isinstance(payload["variables"], dict)


def assert_no_numeric_predicates(query) -> None:
    """Assert that a ListingsQuery carries no range filters."""
    numeric = {"price", "bedrooms", "bathrooms", "square_feet"}
    assert not numeric & set(query.columns("gte") + query.columns("lte"))


def assert_valid_response(response: Dict[str, Any], expected_status: int = 200) -> None:
    """Assert that a Vercel function response is valid."""
    assert 'statusCode' in response
    assert response['statusCode'] == expected_status
    assert 'headers' in response
    assert 'body' in response

    # Try to parse body as JSON if content-type is JSON
    if 'application/json' in response.get('headers', {}).get('Content-Type', ''):
        try:
            json.loads(response['body'])
        except json.JSONDecodeError:
            assert False, "Response body is not valid JSON"

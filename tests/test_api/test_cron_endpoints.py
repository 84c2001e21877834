"""Tests for the scheduled endpoints and client need notifications."""

import json
from unittest.mock import AsyncMock, Mock, patch

import pytest
from api.client_needs.notify import handler as notify_handler
from api.hot_sheets.digest import handler as digest_handler
from api.listings.update_statuses import handler as update_statuses_handler
from src.models.hot_sheet import NotificationSchedule
from src.services.notification_dispatcher import DigestSummary
from src.utils.errors import DispatchError
from tests.utils.assertions import assert_valid_response
from tests.utils.helpers import create_postgrest_mock, create_supabase_mock, create_vercel_request


@pytest.mark.unit
def test_update_statuses_activates_due_listings():
    """Test the cron run against a mocked listings table."""
    builder = create_postgrest_mock(data=[
        {"id": "l-1", "status": "coming_soon", "auto_activate_on": "2020-01-01T00:00:00+00:00"},
        {"id": "l-2", "status": "active", "expiration_date": "2099-01-01T00:00:00+00:00"},
    ])

    with patch("api.listings.update_statuses.get_supabase_client", return_value=create_supabase_mock({"listings": builder})):
        response = update_statuses_handler(create_vercel_request(method="GET", path="/api/listings/update_statuses"))

    assert_valid_response(response, 200)
    body = json.loads(response["body"])
    assert body["activated_ids"] == ["l-1"]
    assert body["updated_count"] == 1
    builder.update.assert_called_once_with({"status": "active"})


@pytest.mark.unit
def test_update_statuses_reports_lookup_failure():
    builder = create_postgrest_mock(error=RuntimeError("down"))

    with patch("api.listings.update_statuses.get_supabase_client", return_value=create_supabase_mock({"listings": builder})):
        response = update_statuses_handler(create_vercel_request(method="GET"))

    assert_valid_response(response, 500)


@pytest.mark.unit
def test_digest_passes_schedule():
    summary = DigestSummary(schedule="weekly", hot_sheets_processed=2, emails_enqueued=1)

    with patch("api.hot_sheets.digest.get_supabase_client", return_value=Mock()), \
            patch("api.hot_sheets.digest.run_digest", new=AsyncMock(return_value=summary)) as run:
        response = digest_handler(create_vercel_request(method="GET", query={"schedule": "Weekly"}))

    assert_valid_response(response, 200)
    assert json.loads(response["body"])["emails_enqueued"] == 1
    assert run.call_args.args[0] == NotificationSchedule.WEEKLY


@pytest.mark.unit
def test_digest_rejects_unknown_schedule():
    response = digest_handler(create_vercel_request(method="GET", query={"schedule": "hourly"}))

    assert_valid_response(response, 400)


@pytest.mark.unit
def test_digest_failure_returns_500():
    with patch("api.hot_sheets.digest.get_supabase_client", return_value=Mock()), \
            patch("api.hot_sheets.digest.run_digest", new=AsyncMock(side_effect=DispatchError("queue down"))):
        response = digest_handler(create_vercel_request(method="GET"))

    assert_valid_response(response, 500)
    assert json.loads(response["body"])["error"] == "digest failed"


@pytest.mark.unit
def test_client_need_notify_queues_agent_emails():
    """Test the legacy client_need_id body against mocked tables."""
    tables = {
        "agent_state_preferences": create_postgrest_mock(data=[{"agent_id": "a-1"}, {"agent_id": "a-2"}]),
        "agent_profiles": create_postgrest_mock(data=[
            {"id": "a-1", "email": "a1@example.com", "first_name": "Ada"},
            {"id": "a-2", "email": "a2@example.com", "first_name": "Bo"},
        ]),
        "email_jobs": create_postgrest_mock(data=[{"id": "job-1"}, {"id": "job-2"}]),
    }
    body = {"client_need_id": "need-1", "state": "MA", "city": "Salem", "property_type": "condo"}

    with patch("api.client_needs.notify.get_supabase_client", return_value=create_supabase_mock(tables)):
        response = notify_handler(create_vercel_request(body=body))

    assert_valid_response(response, 200)
    assert json.loads(response["body"]) == {"ok": True, "notified_count": 2}
    rows = tables["email_jobs"].insert.call_args.args[0]
    assert rows[0]["payload"]["variables"]["client_need_id"] == "need-1"
    assert rows[0]["payload"]["subject"] == "New Client Need in Salem, MA"


@pytest.mark.unit
def test_client_need_notify_failure_returns_500():
    tables = {"agent_state_preferences": create_postgrest_mock(error=RuntimeError("down"))}

    with patch("api.client_needs.notify.get_supabase_client", return_value=create_supabase_mock(tables)):
        response = notify_handler(create_vercel_request(body={"id": "need-1", "state": "MA"}))

    assert_valid_response(response, 500)

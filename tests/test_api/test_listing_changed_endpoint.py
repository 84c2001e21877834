"""Tests for the listing-changed endpoint."""

import json
from unittest.mock import patch

import pytest
from api.listings.changed import handler
from tests.utils.assertions import assert_valid_email_job, assert_valid_response
from tests.utils.factories import create_listing_data
from tests.utils.helpers import create_postgrest_mock, create_supabase_mock, create_vercel_request


def _client(hot_sheets, email_error=None):
    tables = {
        "hot_sheets": create_postgrest_mock(data=hot_sheets),
        "client_needs": create_postgrest_mock(data=[]),
        "hot_sheet_notifications": create_postgrest_mock(data=[]),
        "agent_profiles": create_postgrest_mock(data=[]),
        "profiles": create_postgrest_mock(data=[]),
        "email_jobs": create_postgrest_mock(data=[{"id": "job-1"}], error=email_error),
    }
    return create_supabase_mock(tables), tables


@pytest.mark.unit
def test_webhook_record_is_matched_and_queued(boston_listing, immediate_hot_sheet):
    """Test the database webhook shape end to end against mocked tables."""
    client, tables = _client([immediate_hot_sheet])
    request = create_vercel_request(path="/api/listings/changed", body={"type": "INSERT", "record": boston_listing})

    with patch("api.listings.changed.get_supabase_client", return_value=client):
        response = handler(request)

    assert_valid_response(response, 200)
    body = json.loads(response["body"])
    assert body["listing_id"] == "listing-boston-1"
    assert body["hot_sheet_matches"] == 1
    assert body["jobs_enqueued"] == 1
    assert body["ledger_rows"] == 1

    job_rows = tables["email_jobs"].insert.call_args.args[0]
    assert_valid_email_job(job_rows[0], "new-listing-alert")
    assert job_rows[0]["payload"]["to"] == "buyer@example.com"
    ledger_rows = tables["hot_sheet_notifications"].insert.call_args.args[0]
    assert ledger_rows[0]["hot_sheet_id"] == "hs-instant"
    tables["hot_sheets"].eq.assert_any_call("notification_schedule", "immediately")
    tables["client_needs"].eq.assert_called_once_with("state", "MA")


@pytest.mark.unit
@pytest.mark.parametrize("overrides", [
    {"status": "sold"},
    {"status": "draft"},
    {"listing_type": "private"},
    {"status": "off_market"},
])
def test_non_public_listings_are_skipped(overrides):
    listing = create_listing_data(listing_id="l-skip", **overrides)

    with patch("api.listings.changed.get_supabase_client") as get_client:
        response = handler(create_vercel_request(body={"listing": listing}))

    assert_valid_response(response, 200)
    assert json.loads(response["body"])["skipped"] is True
    get_client.assert_not_called()


@pytest.mark.unit
@pytest.mark.parametrize("body,status", [
    ({"record": {"id": "l-1", "price": "not a number"}}, 400),
    ({"city": "Boston"}, 400),
])
def test_bad_payloads_are_rejected(body, status):
    response = handler(create_vercel_request(body=body))

    assert_valid_response(response, status)


@pytest.mark.unit
def test_queue_failure_returns_500_and_records_nothing(boston_listing, immediate_hot_sheet):
    client, tables = _client([immediate_hot_sheet], email_error=RuntimeError("insert failed"))

    with patch("api.listings.changed.get_supabase_client", return_value=client):
        response = handler(create_vercel_request(body=boston_listing))

    assert_valid_response(response, 500)
    assert json.loads(response["body"])["error"] == "dispatch failed"
    tables["hot_sheet_notifications"].insert.assert_not_called()

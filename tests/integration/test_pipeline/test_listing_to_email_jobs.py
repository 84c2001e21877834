"""End-to-end tests: new listing to email jobs and ledger rows."""

from datetime import datetime, timezone

import pytest
from src.services.criteria_normalizer import normalize_criteria
from src.services.match_evaluator import evaluate_listing
from src.services.notification_dispatcher import dispatch_listing_matches, run_digest
from src.services.listings_query import build_listings_query, search_listings
from src.models.notification import MatchSource
from tests.utils.factories import create_hot_sheet_data, create_listing_data, create_profile_data
from tests.utils.fakes import FakeEmailQueue, FakeHotSheetStore, FakeListingsSource, FakeNotificationLedger
from tests.utils.helpers import create_postgrest_mock, create_supabase_mock

NOW = datetime(2024, 12, 9, 12, 0, tzinfo=timezone.utc)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_new_listing_alert_then_digest_does_not_repeat(boston_listing, boston_client_need, agent_profile):
    """Test that an immediate alert is not repeated by the next digest run."""
    immediate = create_hot_sheet_data(
        hot_sheet_id="hs-now",
        criteria={"state": "Massachusetts", "county": "Suffolk", "propertyTypes": ["single_family"]},
        owner=create_profile_data(profile_id="u-1", email="consumer@example.com"),
        notification_schedule="immediately",
    )
    unrelated = create_hot_sheet_data(hot_sheet_id="hs-ct", criteria={"state": "CT"})
    listing = {**boston_listing, "agent_id": "agent-1"}
    store = FakeHotSheetStore(
        hot_sheets=[immediate, unrelated],
        client_needs=[boston_client_need],
        agent_profiles={"agent-1": agent_profile},
    )
    ledger, queue = FakeNotificationLedger(), FakeEmailQueue()

    match_result = evaluate_listing(listing, await store.active_hot_sheets(), await store.client_needs("MA"))
    summary = await dispatch_listing_matches(listing, match_result, queue, ledger, directory=store)

    assert match_result.hot_sheet_ids == ["hs-now"]
    assert match_result.client_need_ids == ["need-boston"]
    # The need submitter and the hot sheet owner share an address
    assert summary.jobs_enqueued == 1
    assert queue.payloads[0].variables["match_source"] == MatchSource.HOT_SHEET.value
    assert queue.payloads[0].reply_to == "listing.agent@example.com"
    assert ledger.pairs == {("hs-now", "listing-boston-1")}

    digest = await run_digest("immediately", store, FakeListingsSource([listing]), ledger, queue, now=NOW)

    assert digest.hot_sheets_processed == 1
    assert digest.total_matches == 0
    assert len(queue.payloads) == 1


@pytest.mark.integration
@pytest.mark.asyncio
async def test_search_through_supabase_source_matches_evaluator():
    """Test that the pushed-down query and the in-memory evaluator agree on a mocked table."""
    rows = [
        create_listing_data(listing_id="a", city="Boston", price=400000, bedrooms=3),
        create_listing_data(listing_id="b", city="Chelsea", price=400000, bedrooms=3),
        create_listing_data(listing_id="c", city="Cambridge", price=400000, bedrooms=3),
    ]
    criteria = {"state": "MA", "county": "Suffolk", "cities": ["Chelsea"], "bedrooms": 2}
    builder = create_postgrest_mock(data=rows)

    found = await search_listings(create_supabase_mock({"listings": builder}), criteria, now=NOW)
    local = await FakeListingsSource(rows).search(build_listings_query(normalize_criteria(criteria).criteria, now=NOW))

    # The mocked table returns everything; only the local evaluation narrows to Chelsea
    assert len(found) == 3
    assert [row["id"] for row in local] == ["b"]
    location_filter = builder.or_.call_args.args[0]
    assert "Chelsea" in location_filter
    assert "Boston" not in location_filter

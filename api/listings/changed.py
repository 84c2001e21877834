"""Listing-changed event endpoint.

Called by a database webhook (or manually) with the new or updated listing
row; matches it against every active hot sheet and client need and queues
the resulting alerts.
"""

from pydantic import ValidationError

from src.models.hot_sheet import NotificationSchedule
from src.models.listing import Listing, PUBLIC_STATUSES
from src.services.email_queue import EmailJobQueue
from src.services.match_evaluator import evaluate_listing
from src.services.notification_dispatcher import dispatch_listing_matches
from src.services.notification_ledger import NotificationLedger
from src.services.supabase_client import HotSheetStore, get_supabase_client
from src.utils.errors import DispatchError, SupabaseError
from src.utils.http import correlation_header, ensure_logging, json_response, parse_json_body, run_async
from src.utils.logging import correlation_context, get_structured_logger

logger = get_structured_logger(__name__)


def _listing_from_body(body: dict) -> dict:
    # Database webhooks wrap the row as {"type": ..., "record": {...}}
    for key in ("record", "listing"):
        if isinstance(body.get(key), dict):
            return body[key]
    return body


async def process_listing_change(client, listing: Listing):
    store = HotSheetStore(client)
    # Daily and weekly sheets hear about this listing from their digest
    hot_sheets = await store.active_hot_sheets(NotificationSchedule.IMMEDIATELY)
    client_needs = await store.client_needs(state=listing.state)
    match_result = evaluate_listing(listing, hot_sheets, client_needs)
    return await dispatch_listing_matches(
        listing,
        match_result,
        queue=EmailJobQueue(client),
        ledger=NotificationLedger(client),
        directory=store,
    )


def handler(request):
    """Match one listing and queue new-listing alerts."""
    ensure_logging()
    with correlation_context(correlation_header(request)):
        body = parse_json_body(request)
        try:
            listing = Listing.model_validate(_listing_from_body(body))
        except ValidationError as e:
            return json_response(400, {"error": "invalid listing", "detail": str(e)})
        if not listing.id:
            return json_response(400, {"error": "listing id is required"})
        if listing.is_off_market or (listing.status and listing.status not in PUBLIC_STATUSES):
            logger.info("Listing not public; no alerts", listing_id=listing.id, status=listing.status)
            return json_response(200, {"ok": True, "skipped": True, "listing_id": listing.id})

        try:
            summary = run_async(process_listing_change(get_supabase_client(), listing))
        except DispatchError as e:
            logger.error("Listing dispatch failed", listing_id=listing.id, error=str(e))
            return json_response(500, {"error": "dispatch failed", "detail": str(e)})
        except SupabaseError as e:
            logger.error("Listing change lookup failed", listing_id=listing.id, error=str(e))
            return json_response(500, {"error": str(e)})

        return json_response(200, {"ok": True, **summary.to_dict()})

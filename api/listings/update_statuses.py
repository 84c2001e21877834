"""Listing status transition endpoint (called via Vercel cron)."""

from src.services.listing_status import run_status_transitions
from src.services.supabase_client import SupabaseListingsSource, get_supabase_client
from src.utils.errors import SupabaseError
from src.utils.http import correlation_header, ensure_logging, json_response, run_async
from src.utils.logging import correlation_context, get_structured_logger

logger = get_structured_logger(__name__)


def handler(request):
    """Activate and expire listings whose dates have passed."""
    ensure_logging()
    with correlation_context(correlation_header(request)):
        try:
            source = SupabaseListingsSource(get_supabase_client())
            summary = run_async(run_status_transitions(source))
        except SupabaseError as e:
            logger.error("Listing status update failed", error=str(e), exc_info=True)
            return json_response(500, {"error": str(e)})

        return json_response(200, {"ok": True, **summary.to_dict()})

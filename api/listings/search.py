"""Listings browse search endpoint."""

from src.services.criteria_normalizer import normalize_criteria
from src.services.listings_query import search_listings
from src.services.supabase_client import get_supabase_client
from src.utils.config import AppConfig
from src.utils.errors import SearchError, SupabaseError
from src.utils.http import correlation_header, ensure_logging, json_response, parse_json_body, run_async
from src.utils.logging import correlation_context, get_structured_logger

logger = get_structured_logger(__name__)


def _limit(body: dict) -> int:
    try:
        limit = int(body.get("limit") or AppConfig.SEARCH_RESULT_LIMIT)
    except (TypeError, ValueError):
        limit = AppConfig.SEARCH_RESULT_LIMIT
    return max(1, min(limit, AppConfig.SEARCH_RESULT_LIMIT))


def handler(request):
    """
    Search listings.

    Body is either the criteria object itself or {"criteria": {...}, "limit": n}.
    A failed search returns 502 so clients never mistake it for zero results.
    """
    ensure_logging()
    with correlation_context(correlation_header(request)):
        body = parse_json_body(request)
        raw = body.get("criteria") if isinstance(body.get("criteria"), dict) else body
        normalized = normalize_criteria(raw)

        try:
            rows = run_async(search_listings(get_supabase_client(), normalized, limit=_limit(body)))
        except SearchError:
            return json_response(502, {"error": "search failed"})
        except SupabaseError as e:
            logger.error("Search endpoint misconfigured", error=str(e))
            return json_response(500, {"error": str(e)})

        return json_response(200, {
            "listings": rows,
            "count": len(rows),
            "criteria": normalized.criteria.to_blob(),
            "warnings": [
                {"field": w.field, "value": w.value, "reason": w.reason}
                for w in normalized.warnings
            ],
        })

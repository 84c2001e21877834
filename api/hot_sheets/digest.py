"""Hot sheet digest endpoint (called via Vercel cron with ?schedule=daily|weekly|immediately)."""

from src.models.hot_sheet import NotificationSchedule
from src.services.email_queue import EmailJobQueue
from src.services.notification_dispatcher import run_digest
from src.services.notification_ledger import NotificationLedger
from src.services.supabase_client import HotSheetStore, SupabaseListingsSource, get_supabase_client
from src.utils.errors import DispatchError, SupabaseError
from src.utils.http import correlation_header, ensure_logging, json_response, query_param, run_async
from src.utils.logging import correlation_context, get_structured_logger

logger = get_structured_logger(__name__)


def handler(request):
    """Run one digest pass for the requested schedule."""
    ensure_logging()
    with correlation_context(correlation_header(request)):
        raw_schedule = (query_param(request, "schedule", NotificationSchedule.DAILY.value) or "").lower()
        try:
            schedule = NotificationSchedule(raw_schedule)
        except ValueError:
            return json_response(400, {"error": f"unknown schedule '{raw_schedule}'"})

        try:
            client = get_supabase_client()
            summary = run_async(run_digest(
                schedule,
                store=HotSheetStore(client),
                source=SupabaseListingsSource(client),
                ledger=NotificationLedger(client),
                queue=EmailJobQueue(client),
            ))
        except DispatchError as e:
            logger.error("Digest run aborted", schedule=schedule.value, error=str(e))
            return json_response(500, {"error": "digest failed", "detail": str(e)})
        except SupabaseError as e:
            logger.error("Digest run misconfigured", error=str(e))
            return json_response(500, {"error": str(e)})

        return json_response(200, {"ok": True, **summary.to_dict()})

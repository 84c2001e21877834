"""Client need notification endpoint.

Called when a consumer submits a client need; alerts every agent covering
the need's state who has buyer alerts enabled.
"""

from pydantic import ValidationError

from src.models.client_need import ClientNeed
from src.services.email_queue import EmailJobQueue
from src.services.notification_dispatcher import notify_client_need_agents
from src.services.supabase_client import HotSheetStore, get_supabase_client
from src.utils.errors import DispatchError, SupabaseError
from src.utils.http import correlation_header, ensure_logging, json_response, parse_json_body, run_async
from src.utils.logging import correlation_context, get_structured_logger

logger = get_structured_logger(__name__)


def handler(request):
    """Queue client-need notifications for covering agents."""
    ensure_logging()
    with correlation_context(correlation_header(request)):
        body = parse_json_body(request)
        raw = body.get("record") if isinstance(body.get("record"), dict) else body
        # Older callers send client_need_id instead of id
        if "id" not in raw and raw.get("client_need_id"):
            raw = {**raw, "id": raw["client_need_id"]}
        try:
            need = ClientNeed.model_validate(raw)
        except ValidationError as e:
            return json_response(400, {"error": "invalid client need", "detail": str(e)})

        try:
            client = get_supabase_client()
            summary = run_async(notify_client_need_agents(need, HotSheetStore(client), EmailJobQueue(client)))
        except (DispatchError, SupabaseError) as e:
            logger.error("Client need notification failed", client_need_id=need.id, error=str(e))
            return json_response(500, {"error": str(e)})

        return json_response(200, {"ok": True, "notified_count": summary.jobs_enqueued})

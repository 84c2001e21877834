"""Supabase client wrapper and table adapters.

The singleton is only resolved at the HTTP entry layer; adapters receive the
client explicitly so that services can be exercised with a mock client.
"""

from typing import Optional
from pydantic import ValidationError
from supabase import create_client, Client
from supabase.client import ClientOptions

from src.models.client_need import ClientNeed
from src.models.contact import Contact
from src.models.hot_sheet import HotSheet, NotificationSchedule
from src.utils.config import AppConfig
from src.utils.errors import SearchError, SupabaseError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

# Global client instance (singleton pattern)
_client: Optional[Client] = None

CONTACT_COLUMNS = "email, first_name, last_name"
HOT_SHEET_SELECT = (
    f"*, profiles!hot_sheets_user_id_fkey(id, {CONTACT_COLUMNS}), "
    f"clients(id, {CONTACT_COLUMNS})"
)
CLIENT_NEED_SELECT = f"*, profiles!client_needs_submitted_by_fkey(id, {CONTACT_COLUMNS})"


def get_supabase_client() -> Client:
    """Get or create Supabase client singleton."""
    global _client

    if _client is None:
        url = AppConfig.SUPABASE_URL
        key = AppConfig.SUPABASE_SERVICE_ROLE_KEY

        if not url or not key:
            raise SupabaseError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        # Serverless invocations never reuse a session
        options = ClientOptions(
            auto_refresh_token=False,
            persist_session=False,
        )

        _client = create_client(url, key, options)
        logger.info("Supabase client initialized", url=url)

    return _client


class SupabaseListingsSource:
    """Listings data source backed by the listings table."""

    def __init__(self, client: Client, table: str = "listings"):
        self.client = client
        self.table = table

    async def search(self, query, limit: Optional[int] = None) -> list[dict]:
        """
        Execute a ListingsQuery, applying its post-filter to the returned rows.

        Raises:
            SearchError: if the request fails
        """
        try:
            request = query.apply(self.client.table(self.table).select("*"))
            if limit:
                request = request.limit(limit)
            result = request.execute()
        except Exception as e:
            raise SearchError(f"Failed to search listings: {e}") from e

        rows = result.data or []
        return [row for row in rows if query.passes_post_filter(row)]

    async def update_status(self, listing_ids: list[str], status: str) -> int:
        """Set one status on many listings; returns the number of ids updated."""
        if not listing_ids:
            return 0
        try:
            self.client.table(self.table).update({"status": status}).in_("id", listing_ids).execute()
            return len(listing_ids)
        except Exception as e:
            raise SupabaseError(f"Failed to update listing status: {e}")

    async def status_candidates(self, statuses: list[str]) -> list[dict]:
        """Listings in any of the given statuses, with their scheduling dates."""
        try:
            result = (
                self.client.table(self.table)
                .select("id, address, status, listing_type, go_live_date, auto_activate_on, expiration_date")
                .in_("status", statuses)
                .execute()
            )
            return result.data or []
        except Exception as e:
            raise SupabaseError(f"Failed to get listings by status: {e}")


class HotSheetStore:
    """Read access to hot sheets, client needs and the profile directories."""

    def __init__(self, client: Client):
        self.client = client

    async def active_hot_sheets(self, schedule: Optional[NotificationSchedule] = None) -> list[HotSheet]:
        """Active hot sheets, optionally limited to one notification schedule."""
        try:
            request = self.client.table("hot_sheets").select(HOT_SHEET_SELECT).eq("is_active", True)
            if schedule is not None:
                request = request.eq("notification_schedule", NotificationSchedule(schedule).value)
            result = request.execute()
        except Exception as e:
            raise SupabaseError(f"Failed to get active hot sheets: {e}")

        sheets = []
        for row in result.data or []:
            try:
                sheets.append(HotSheet.model_validate(row))
            except ValidationError as e:
                logger.warning("Skipping malformed hot sheet row", hot_sheet_id=row.get("id"), error=str(e))
        return sheets

    async def client_needs(self, state: Optional[str] = None) -> list[ClientNeed]:
        try:
            request = self.client.table("client_needs").select(CLIENT_NEED_SELECT)
            if state:
                request = request.eq("state", state)
            result = request.execute()
        except Exception as e:
            raise SupabaseError(f"Failed to get client needs: {e}")
        return [ClientNeed.model_validate(row) for row in result.data or []]

    async def profile(self, user_id: str) -> Optional[Contact]:
        """User profile by id."""
        return await self._contact("profiles", user_id)

    async def agent_profile(self, agent_id: str) -> Optional[Contact]:
        """Agent profile by id."""
        return await self._contact("agent_profiles", agent_id)

    async def _contact(self, table: str, row_id: str) -> Optional[Contact]:
        if not row_id:
            return None
        try:
            result = self.client.table(table).select(f"id, {CONTACT_COLUMNS}").eq("id", row_id).limit(1).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to get {table} row {row_id}: {e}")
        return Contact.model_validate(result.data[0]) if result.data else None

    async def agents_for_state(self, state: str) -> list[Contact]:
        """Agents covering a state who opted into buyer alerts."""
        try:
            prefs = self.client.table("agent_state_preferences").select("agent_id").eq("state", state).execute()
            agent_ids = sorted({row["agent_id"] for row in prefs.data or [] if row.get("agent_id")})
            if not agent_ids:
                return []
            result = (
                self.client.table("agent_profiles")
                .select(f"id, {CONTACT_COLUMNS}, receive_buyer_alerts")
                .in_("id", agent_ids)
                .eq("receive_buyer_alerts", True)
                .execute()
            )
        except Exception as e:
            raise SupabaseError(f"Failed to get agents for state {state}: {e}")
        return [Contact.model_validate(row) for row in result.data or []]

    async def touch_last_sent(self, hot_sheet_id: str, sent_at: str) -> None:
        try:
            self.client.table("hot_sheets").update({"last_sent_at": sent_at}).eq("id", hot_sheet_id).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to update hot sheet {hot_sheet_id}: {e}")

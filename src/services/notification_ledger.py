"""Notification ledger over hot_sheet_notifications.

A row marks a (hot sheet, listing) pair as notified. Rows are only written
after the matching email job has been queued.
"""

from typing import Iterable
from supabase import Client

from src.models.notification import NotificationRecord
from src.utils.errors import SupabaseError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

LEDGER_TABLE = "hot_sheet_notifications"


class NotificationLedger:
    """Read and record notified (hot_sheet_id, listing_id) pairs."""

    def __init__(self, client: Client):
        self.client = client

    async def notified_listing_ids(self, hot_sheet_id: str) -> set[str]:
        """Listings already sent for one hot sheet."""
        try:
            result = (
                self.client.table(LEDGER_TABLE)
                .select("listing_id")
                .eq("hot_sheet_id", hot_sheet_id)
                .eq("notification_sent", True)
                .execute()
            )
        except Exception as e:
            raise SupabaseError(f"Failed to read notifications for hot sheet {hot_sheet_id}: {e}")
        return {row["listing_id"] for row in result.data or []}

    async def notified_hot_sheet_ids(self, listing_id: str, hot_sheet_ids: Iterable[str]) -> set[str]:
        """Which of the given hot sheets were already sent this listing."""
        hot_sheet_ids = list(hot_sheet_ids)
        if not hot_sheet_ids:
            return set()
        try:
            result = (
                self.client.table(LEDGER_TABLE)
                .select("hot_sheet_id")
                .eq("listing_id", listing_id)
                .in_("hot_sheet_id", hot_sheet_ids)
                .eq("notification_sent", True)
                .execute()
            )
        except Exception as e:
            raise SupabaseError(f"Failed to read notifications for listing {listing_id}: {e}")
        return {row["hot_sheet_id"] for row in result.data or []}

    async def has_been_notified(self, hot_sheet_id: str, listing_id: str) -> bool:
        return hot_sheet_id in await self.notified_hot_sheet_ids(listing_id, [hot_sheet_id])

    async def record(self, records: Iterable[NotificationRecord]) -> int:
        """Insert ledger rows; returns how many were written."""
        rows = [record.model_dump(exclude_none=True) for record in records]
        if not rows:
            return 0
        try:
            self.client.table(LEDGER_TABLE).insert(rows).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to record notifications: {e}")
        logger.debug("Notifications recorded", record_count=len(rows))
        return len(rows)

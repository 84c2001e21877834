"""In-memory stand-ins for the Supabase-backed adapters."""

from typing import Iterable, Optional

from src.models.client_need import ClientNeed
from src.models.contact import Contact
from src.models.hot_sheet import HotSheet, NotificationSchedule
from src.models.notification import EmailJobPayload, NotificationRecord
from src.utils.errors import SearchError, SupabaseError


class FakeEmailQueue:
    """Collects payloads instead of inserting email_jobs rows."""

    def __init__(self, fail: bool = False, events: Optional[list] = None):
        self.fail = fail
        self.payloads: list[EmailJobPayload] = []
        self.batches: list[list[EmailJobPayload]] = []
        self.events = events if events is not None else []

    async def enqueue(self, payloads: Iterable[EmailJobPayload]) -> list[str]:
        payloads = list(payloads)
        self.events.append("enqueue")
        if self.fail:
            raise SupabaseError("Failed to enqueue email jobs: connection reset")
        self.batches.append(payloads)
        self.payloads.extend(payloads)
        return [f"job-{len(self.payloads) - len(payloads) + i}" for i in range(len(payloads))]

    @property
    def recipients(self) -> list[str]:
        return [payload.to for payload in self.payloads]


class FakeNotificationLedger:
    """Ledger backed by a set of (hot_sheet_id, listing_id) pairs."""

    def __init__(self, pairs: Iterable[tuple] = (), fail_reads: bool = False, events: Optional[list] = None):
        self.pairs = set(pairs)
        self.records: list[NotificationRecord] = []
        self.fail_reads = fail_reads
        self.events = events if events is not None else []

    async def notified_listing_ids(self, hot_sheet_id: str) -> set[str]:
        if self.fail_reads:
            raise SupabaseError("Failed to read notifications")
        return {listing_id for sheet_id, listing_id in self.pairs if sheet_id == hot_sheet_id}

    async def notified_hot_sheet_ids(self, listing_id: str, hot_sheet_ids: Iterable[str]) -> set[str]:
        if self.fail_reads:
            raise SupabaseError("Failed to read notifications")
        wanted = set(hot_sheet_ids)
        return {sheet_id for sheet_id, lid in self.pairs if lid == listing_id and sheet_id in wanted}

    async def has_been_notified(self, hot_sheet_id: str, listing_id: str) -> bool:
        return (hot_sheet_id, listing_id) in self.pairs

    async def record(self, records: Iterable[NotificationRecord]) -> int:
        records = list(records)
        self.events.append("record")
        for record in records:
            self.pairs.add((record.hot_sheet_id, record.listing_id))
        self.records.extend(records)
        return len(records)


class FakeHotSheetStore:
    """Hot sheets, client needs and profile directories held in memory."""

    def __init__(
        self,
        hot_sheets: Iterable[dict] = (),
        client_needs: Iterable[dict] = (),
        profiles: Optional[dict] = None,
        agent_profiles: Optional[dict] = None,
        agents_by_state: Optional[dict] = None,
        failing_ids: Iterable[str] = (),
    ):
        self.hot_sheets = list(hot_sheets)
        self.needs = list(client_needs)
        self.profiles = profiles or {}
        self.agent_profiles = agent_profiles or {}
        self.agents_by_state = agents_by_state or {}
        self.failing_ids = set(failing_ids)
        self.last_sent: dict[str, str] = {}

    async def active_hot_sheets(self, schedule=None) -> list[HotSheet]:
        sheets = [HotSheet.model_validate(row) for row in self.hot_sheets]
        sheets = [sheet for sheet in sheets if sheet.is_active]
        if schedule is not None:
            sheets = [s for s in sheets if s.notification_schedule == NotificationSchedule(schedule)]
        return sheets

    async def client_needs(self, state: Optional[str] = None) -> list[ClientNeed]:
        needs = [ClientNeed.model_validate(row) for row in self.needs]
        return [n for n in needs if state is None or n.state == state]

    def _lookup(self, table: dict, row_id: str) -> Optional[Contact]:
        if row_id in self.failing_ids:
            raise SupabaseError(f"Failed to get profile {row_id}")
        row = table.get(row_id)
        return Contact.model_validate(row) if row else None

    async def profile(self, user_id: str) -> Optional[Contact]:
        return self._lookup(self.profiles, user_id)

    async def agent_profile(self, agent_id: str) -> Optional[Contact]:
        return self._lookup(self.agent_profiles, agent_id)

    async def agents_for_state(self, state: str) -> list[Contact]:
        if state in self.failing_ids:
            raise SupabaseError(f"Failed to get agents for state {state}")
        return [Contact.model_validate(row) for row in self.agents_by_state.get(state, [])]

    async def touch_last_sent(self, hot_sheet_id: str, sent_at: str) -> None:
        self.last_sent[hot_sheet_id] = sent_at


class FakeListingsSource:
    """Listings source evaluating ListingsQuery in memory."""

    def __init__(self, rows: Iterable[dict] = (), fail: bool = False):
        self.rows = list(rows)
        self.fail = fail
        self.queries = []
        self.updates: list[tuple] = []

    async def search(self, query, limit: Optional[int] = None) -> list[dict]:
        self.queries.append(query)
        if self.fail:
            raise SearchError("Failed to search listings: upstream timeout")
        rows = query.filter_rows(self.rows)
        return rows[:limit] if limit else rows

    async def status_candidates(self, statuses: list[str]) -> list[dict]:
        return [row for row in self.rows if row.get("status") in statuses]

    async def update_status(self, listing_ids: list[str], status: str) -> int:
        self.updates.append((list(listing_ids), status))
        for row in self.rows:
            if row.get("id") in listing_ids:
                row["status"] = status
        return len(listing_ids)

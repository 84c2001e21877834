"""Notification dispatcher.

Turns match results into queued email jobs and keeps the notification
ledger in step. The ordering is always: check the ledger, enqueue, then
record. A queue failure aborts the run before any ledger row is written, so
a retried run can never find a pair marked as notified without a job behind
it.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.models.client_need import ClientNeed
from src.models.contact import Contact
from src.models.hot_sheet import HotSheet, NotificationSchedule
from src.models.listing import Listing
from src.models.notification import MatchSource, NotificationRecord, Recipient
from src.services.criteria_normalizer import normalize_criteria
from src.services.email_queue import (
    build_client_need_notification,
    build_match_digest,
    build_new_listing_alert,
)
from src.services.listings_query import Predicate, build_listings_query
from src.services.match_evaluator import MatchResult
from src.utils.config import AppConfig
from src.utils.errors import DispatchError, SearchError, SupabaseError
from src.utils.logging import get_structured_logger, log_timing, mask_email

logger = get_structured_logger(__name__)


@dataclass
class DispatchSummary:
    """Outcome of dispatching one listing's matches."""
    listing_id: Optional[str]
    hot_sheet_matches: int = 0
    client_need_matches: int = 0
    already_notified: int = 0
    deferred_to_digest: int = 0
    recipients: int = 0
    jobs_enqueued: int = 0
    skipped_recipients: int = 0
    ledger_rows: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DigestSummary:
    """Outcome of one scheduled digest run."""
    schedule: str
    hot_sheets_processed: int = 0
    hot_sheets_skipped: int = 0
    total_matches: int = 0
    emails_enqueued: int = 0
    ledger_rows: int = 0
    skipped_hot_sheet_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _now_iso(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def _merge_recipient(recipients: dict, contact: Contact, source: MatchSource, record_id: Optional[str]) -> None:
    key = contact.email.strip().lower()
    existing = recipients.get(key)
    if existing is None:
        existing = Recipient(email=contact.email.strip(), source=source)
        recipients[key] = existing

    # Later matches overwrite the contact details and source
    existing.email = contact.email.strip()
    existing.first_name = contact.first_name
    existing.last_name = contact.last_name
    existing.source = source
    if source not in existing.matched_via:
        existing.matched_via.append(source)
    if record_id:
        ids = existing.hot_sheet_ids if source == MatchSource.HOT_SHEET else existing.client_need_ids
        if record_id not in ids:
            ids.append(record_id)


async def _lookup(directory, method: str, row_id: Optional[str], **context) -> Optional[Contact]:
    """Directory lookup that logs and returns None on failure."""
    if directory is None or not row_id:
        return None
    try:
        return await getattr(directory, method)(row_id)
    except SupabaseError as e:
        logger.warning("Recipient lookup failed; skipping", lookup=method, error=str(e), **context)
        return None


async def _need_contact(need: ClientNeed, directory) -> Optional[Contact]:
    if need.submitter and need.submitter.email:
        return need.submitter
    return await _lookup(directory, "profile", need.submitted_by, client_need_id=need.id)


async def _owner_contact(sheet: HotSheet, directory) -> Optional[Contact]:
    if sheet.owner and sheet.owner.email:
        return sheet.owner
    contact = await _lookup(directory, "profile", sheet.user_id, hot_sheet_id=sheet.id)
    if contact and contact.email:
        return contact
    return await _lookup(directory, "agent_profile", sheet.user_id, hot_sheet_id=sheet.id)


async def collect_recipients(match_result: MatchResult, directory=None) -> list[Recipient]:
    """
    Build the unique recipient list for one listing's matches.

    Client needs are read first and hot sheets second; when one address
    appears under both, the hot sheet source wins but every source is kept
    in matched_via. Addresses are compared case-insensitively. A recipient
    whose contact cannot be resolved is skipped.
    """
    recipients: dict[str, Recipient] = {}

    for need in match_result.client_needs:
        contact = await _need_contact(need, directory)
        if contact is None or not contact.email:
            logger.warning("Client need has no reachable submitter", client_need_id=need.id)
            continue
        _merge_recipient(recipients, contact, MatchSource.CLIENT_NEED, need.id)

    for sheet in match_result.hot_sheets:
        contact = await _owner_contact(sheet, directory)
        if contact is None or not contact.email:
            logger.warning("Hot sheet owner has no reachable email", hot_sheet_id=sheet.id)
            continue
        _merge_recipient(recipients, contact, MatchSource.HOT_SHEET, sheet.id)

    return list(recipients.values())


async def dispatch_listing_matches(
    listing,
    match_result: MatchResult,
    queue,
    ledger,
    directory=None,
    agent: Optional[Contact] = None,
    now: Optional[datetime] = None,
) -> DispatchSummary:
    """
    Queue one new-listing alert per unique recipient and record the hot sheet pairs.

    Only hot sheets on the immediately schedule are alerted here; daily and
    weekly sheets are left unrecorded for their digest run.

    Raises:
        DispatchError: if the email jobs could not be queued; nothing is
            recorded in the ledger in that case
    """
    item = listing if isinstance(listing, Listing) else Listing.model_validate(listing)
    summary = DispatchSummary(
        listing_id=item.id,
        hot_sheet_matches=len(match_result.hot_sheets),
        client_need_matches=len(match_result.client_needs),
    )

    immediate = [
        sheet for sheet in match_result.hot_sheets
        if sheet.notification_schedule == NotificationSchedule.IMMEDIATELY
    ]
    summary.deferred_to_digest = len(match_result.hot_sheets) - len(immediate)

    already = set()
    if item.id and immediate:
        try:
            already = await ledger.notified_hot_sheet_ids(item.id, [sheet.id for sheet in immediate])
        except SupabaseError as e:
            raise DispatchError(f"Failed to read notification ledger: {e}") from e
    summary.already_notified = len(already)

    pending = MatchResult(
        listing=item,
        hot_sheets=[sheet for sheet in immediate if sheet.id not in already],
        client_needs=list(match_result.client_needs),
    )

    recipients = await collect_recipients(pending, directory)
    summary.recipients = len(recipients)
    summary.skipped_recipients = len(pending.hot_sheets) + len(pending.client_needs) - sum(
        len(r.hot_sheet_ids) + len(r.client_need_ids) for r in recipients
    )
    if not recipients:
        logger.info("No recipients to notify", listing_id=item.id, already_notified=len(already))
        return summary

    if agent is None:
        agent = await _lookup(directory, "agent_profile", item.agent_id, listing_id=item.id)

    payloads = [build_new_listing_alert(recipient, item, agent) for recipient in recipients]
    try:
        await queue.enqueue(payloads)
    except SupabaseError as e:
        logger.error("Email queue insert failed; nothing recorded", listing_id=item.id, error=str(e))
        raise DispatchError(f"Failed to enqueue new listing alerts: {e}") from e
    summary.jobs_enqueued = len(payloads)

    notified_ids = {sheet_id for r in recipients for sheet_id in r.hot_sheet_ids}
    sent_at = _now_iso(now)
    records = [
        NotificationRecord(
            hot_sheet_id=sheet.id,
            listing_id=item.id,
            user_id=sheet.user_id,
            notification_sent_at=sent_at,
        )
        for sheet in pending.hot_sheets
        if sheet.id in notified_ids and item.id
    ]
    summary.ledger_rows = await _record(ledger, records, listing_id=item.id)

    logger.info(
        "Listing matches dispatched",
        listing_id=item.id,
        recipients=[mask_email(r.email) for r in recipients],
        jobs_enqueued=summary.jobs_enqueued,
        ledger_rows=summary.ledger_rows
    )
    return summary


async def _record(ledger, records: list[NotificationRecord], **context) -> int:
    """Write ledger rows after a successful enqueue; a failure here is logged, not raised."""
    if not records:
        return 0
    try:
        return await ledger.record(records)
    except SupabaseError as e:
        logger.error("Failed to record notifications after enqueue", error=str(e), **context)
        return 0


async def _digest_recipients(sheet: HotSheet, directory) -> list[Contact]:
    contacts = []
    if sheet.notify_agent_email:
        owner = await _owner_contact(sheet, directory)
        if owner and owner.email:
            contacts.append(owner)
    if sheet.notify_client_email and sheet.client and sheet.client.email:
        contacts.append(sheet.client)

    unique = {}
    for contact in contacts:
        unique.setdefault(contact.email.strip().lower(), contact)
    return list(unique.values())


async def run_digest(
    schedule,
    store,
    source,
    ledger,
    queue,
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> DigestSummary:
    """
    Send new-match digests for every active hot sheet on a schedule.

    Hot sheets are processed one at a time. Candidate listings come from the
    listings source via the query builder, restricted to listings created
    after the hot sheet itself. Lookup failures skip that hot sheet; a queue
    failure aborts the run with DispatchError.
    """
    schedule = NotificationSchedule(schedule)
    now = now or datetime.now(timezone.utc)
    limit = limit or AppConfig.SEARCH_RESULT_LIMIT
    summary = DigestSummary(schedule=schedule.value)

    with log_timing("run_digest", logger=logger, schedule=schedule.value):
        try:
            hot_sheets = await store.active_hot_sheets(schedule)
        except SupabaseError as e:
            raise DispatchError(f"Failed to load hot sheets: {e}") from e

        for sheet in hot_sheets:
            summary.hot_sheets_processed += 1
            try:
                notified = await ledger.notified_listing_ids(sheet.id)
                query = build_listings_query(normalize_criteria(sheet.criteria).criteria, now=now)
                if sheet.created_at:
                    query.predicates.append(Predicate("gte", "created_at", sheet.created_at))
                rows = await source.search(query, limit)
                recipients = await _digest_recipients(sheet, store)
            except (SupabaseError, SearchError) as e:
                logger.warning("Skipping hot sheet after lookup failure", hot_sheet_id=sheet.id, error=str(e))
                summary.hot_sheets_skipped += 1
                summary.skipped_hot_sheet_ids.append(sheet.id)
                continue

            fresh = [Listing.model_validate(row) for row in rows]
            fresh = [listing for listing in fresh if listing.id and listing.id not in notified]
            if not fresh:
                logger.debug("No new matches", hot_sheet_id=sheet.id)
                continue
            summary.total_matches += len(fresh)

            if not recipients:
                logger.warning("Hot sheet has matches but no recipients", hot_sheet_id=sheet.id)
                continue

            payloads = [build_match_digest(sheet, contact, fresh) for contact in recipients]
            try:
                await queue.enqueue(payloads)
            except SupabaseError as e:
                logger.error("Email queue insert failed; aborting digest", hot_sheet_id=sheet.id, error=str(e))
                raise DispatchError(f"Failed to enqueue digest for hot sheet {sheet.id}: {e}") from e
            summary.emails_enqueued += len(payloads)

            sent_at = now.isoformat()
            records = [
                NotificationRecord(
                    hot_sheet_id=sheet.id,
                    listing_id=listing.id,
                    user_id=sheet.user_id,
                    notification_sent_at=sent_at,
                )
                for listing in fresh
            ]
            summary.ledger_rows += await _record(ledger, records, hot_sheet_id=sheet.id)

            try:
                await store.touch_last_sent(sheet.id, sent_at)
            except SupabaseError as e:
                logger.warning("Failed to update last_sent_at", hot_sheet_id=sheet.id, error=str(e))

    logger.info("Digest run complete", **summary.to_dict())
    return summary


async def notify_client_need_agents(need, store, queue) -> DispatchSummary:
    """
    Queue one client-need notification per agent covering the need's state.

    Raises:
        DispatchError: if the agent lookup or the enqueue fails
    """
    n = need if isinstance(need, ClientNeed) else ClientNeed.model_validate(need)
    summary = DispatchSummary(listing_id=None, client_need_matches=1)

    if not n.state:
        logger.warning("Client need has no state; no agents to notify", client_need_id=n.id)
        return summary

    try:
        agents = await store.agents_for_state(n.state)
    except SupabaseError as e:
        raise DispatchError(f"Failed to load agents for state {n.state}: {e}") from e

    unique = {}
    for agent in agents:
        if agent.email:
            unique.setdefault(agent.email.strip().lower(), agent)
    summary.recipients = len(unique)
    if not unique:
        logger.info("No agents with buyer alerts enabled", state=n.state, client_need_id=n.id)
        return summary

    payloads = [build_client_need_notification(agent, n) for agent in unique.values()]
    try:
        await queue.enqueue(payloads)
    except SupabaseError as e:
        raise DispatchError(f"Failed to enqueue client need notifications: {e}") from e
    summary.jobs_enqueued = len(payloads)

    logger.info("Client need agents notified", client_need_id=n.id, state=n.state, jobs_enqueued=len(payloads))
    return summary

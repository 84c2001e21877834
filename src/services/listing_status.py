"""Scheduled listing status transitions.

Coming-soon listings go live on their activation date and live listings
expire on their expiration date. Off-market listings only change status
through an explicit promotion.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Optional

from src.models.listing import (
    Listing,
    ListingStatus,
    OFF_MARKET_STATUSES,
    PUBLIC_STATUSES,
)
from src.services.listings_query import parse_timestamp
from src.utils.errors import InvalidTransitionError
from src.utils.logging import get_structured_logger, log_timing

logger = get_structured_logger(__name__)

ACTIVATABLE_STATUSES = (ListingStatus.COMING_SOON.value, ListingStatus.NEW.value)
EXPIRABLE_STATUSES = (ListingStatus.ACTIVE.value, ListingStatus.COMING_SOON.value)


@dataclass
class StatusRunSummary:
    activated_ids: list[str] = field(default_factory=list)
    expired_ids: list[str] = field(default_factory=list)

    @property
    def updated_count(self) -> int:
        return len(self.activated_ids) + len(self.expired_ids)

    def to_dict(self) -> dict:
        return {**asdict(self), "updated_count": self.updated_count}


def _as_listings(listings: Iterable) -> list[Listing]:
    return [item if isinstance(item, Listing) else Listing.model_validate(item) for item in listings]


def activation_date(listing: Listing) -> Optional[datetime]:
    """auto_activate_on, falling back to go_live_date."""
    return parse_timestamp(listing.auto_activate_on) or parse_timestamp(listing.go_live_date)


def due_for_activation(listings: Iterable, now: Optional[datetime] = None) -> list[Listing]:
    """Coming-soon or new listings whose activation date has passed."""
    now = now or datetime.now(timezone.utc)
    due = []
    for listing in _as_listings(listings):
        if listing.status not in ACTIVATABLE_STATUSES:
            continue
        activates = activation_date(listing)
        if activates is not None and activates <= now:
            due.append(listing)
    return due


def due_for_expiration(listings: Iterable, now: Optional[datetime] = None) -> list[Listing]:
    """Active or coming-soon listings past their expiration date."""
    now = now or datetime.now(timezone.utc)
    due = []
    for listing in _as_listings(listings):
        if listing.status not in EXPIRABLE_STATUSES:
            continue
        expires = parse_timestamp(listing.expiration_date)
        if expires is not None and expires < now:
            due.append(listing)
    return due


def promote_off_market(listing, status: str) -> Listing:
    """
    Return a copy of an off-market listing moved to a public status.

    Raises:
        InvalidTransitionError: if the listing is not off-market or the target
            status is not public
    """
    item = listing if isinstance(listing, Listing) else Listing.model_validate(listing)
    target = status.value if isinstance(status, ListingStatus) else str(status)

    if item.status not in OFF_MARKET_STATUSES:
        raise InvalidTransitionError(f"Listing {item.id} is not off-market (status '{item.status}')")
    if target not in PUBLIC_STATUSES:
        raise InvalidTransitionError(f"Cannot promote listing {item.id} to non-public status '{status}'")

    return item.model_copy(update={"status": target, "listing_type": "for_sale"})


async def run_status_transitions(source, now: Optional[datetime] = None) -> StatusRunSummary:
    """
    Activate and expire listings whose dates have passed.

    A listing that is both due to activate and already expired is only
    expired.
    """
    now = now or datetime.now(timezone.utc)
    summary = StatusRunSummary()

    with log_timing("run_status_transitions", logger=logger):
        candidates = _as_listings(
            await source.status_candidates(sorted(set(ACTIVATABLE_STATUSES) | set(EXPIRABLE_STATUSES)))
        )

        expired = due_for_expiration(candidates, now)
        expired_ids = {listing.id for listing in expired}
        activated = [listing for listing in due_for_activation(candidates, now) if listing.id not in expired_ids]

        if activated:
            summary.activated_ids = [listing.id for listing in activated]
            await source.update_status(summary.activated_ids, ListingStatus.ACTIVE.value)
        if expired:
            summary.expired_ids = [listing.id for listing in expired]
            await source.update_status(summary.expired_ids, ListingStatus.EXPIRED.value)

    logger.info(
        "Listing statuses updated",
        activated=len(summary.activated_ids),
        expired=len(summary.expired_ids)
    )
    return summary

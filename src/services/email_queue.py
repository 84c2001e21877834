"""Email job queue and payload builders.

Jobs are rows of the email_jobs table consumed by a separate delivery
worker. Nothing here renders or sends mail.
"""

from typing import Iterable, Optional
from supabase import Client

from src.data.property_types import CLIENT_NEED_TYPE_LABELS
from src.models.client_need import ClientNeed
from src.models.contact import Contact
from src.models.hot_sheet import HotSheet
from src.models.listing import Listing
from src.models.notification import EmailJob, EmailJobPayload, EmailTemplate, Recipient
from src.utils.config import AppConfig
from src.utils.errors import SupabaseError
from src.utils.logging import get_structured_logger, mask_email

logger = get_structured_logger(__name__)

EMAIL_JOBS_TABLE = "email_jobs"


def format_price(price: Optional[float]) -> str:
    if price is None:
        return ""
    return f"${price:,.0f}"


def _listing_variables(listing: Listing) -> dict:
    return {
        "listing_id": listing.id,
        "address": listing.address or "",
        "city": listing.city or "",
        "state": listing.state or "",
        "zip_code": listing.zip_code or "",
        "price": format_price(listing.price),
        "property_type": listing.property_type or "",
        "bedrooms": listing.bedrooms,
        "bathrooms": listing.bathrooms,
        "square_feet": listing.square_feet,
        "listing_url": AppConfig.listing_url(listing.id) if listing.id else None,
    }


def build_new_listing_alert(recipient: Recipient, listing: Listing, agent: Optional[Contact] = None) -> EmailJobPayload:
    """Single-listing alert sent when a new listing matches a buyer's search or need."""
    variables = {
        "recipient_name": recipient.greeting_name,
        "match_source": recipient.source.value,
        "agent_name": agent.display_name if agent and agent.display_name else "An agent",
        "agent_email": agent.email if agent else None,
        **_listing_variables(listing),
    }
    return EmailJobPayload(
        provider=AppConfig.EMAIL_PROVIDER,
        template=EmailTemplate.NEW_LISTING_ALERT,
        to=recipient.email,
        subject=f"New Listing Alert: {listing.address or listing.city or 'a new property'}",
        reply_to=agent.email if agent else None,
        variables=variables,
    )


def build_match_digest(hot_sheet: HotSheet, recipient: Contact, listings: list[Listing]) -> EmailJobPayload:
    """Digest of new listings matching one hot sheet."""
    count = len(listings)
    matches = "property matches" if count == 1 else "properties match"
    return EmailJobPayload(
        provider=AppConfig.EMAIL_PROVIDER,
        template=EmailTemplate.NEW_MATCH_NOTIFICATION,
        to=recipient.email,
        subject=f'New Match Alert: {count} new {matches} your search "{hot_sheet.name}"',
        variables={
            "recipient_name": recipient.first_name or "",
            "hot_sheet_id": hot_sheet.id,
            "hot_sheet_name": hot_sheet.name,
            "match_count": count,
            "review_url": AppConfig.hot_sheet_review_url(hot_sheet.id),
            "listings": [_listing_variables(listing) for listing in listings],
        },
    )


def build_client_need_notification(agent: Contact, need: ClientNeed) -> EmailJobPayload:
    """Tell a covering agent about a new buyer need in their state."""
    property_type = CLIENT_NEED_TYPE_LABELS.get(need.property_type or "", need.property_type or "")
    return EmailJobPayload(
        provider=AppConfig.EMAIL_PROVIDER,
        template=EmailTemplate.CLIENT_NEED_NOTIFICATION,
        to=agent.email,
        subject=f"New Client Need in {need.city or 'your area'}, {need.state or ''}".rstrip(", "),
        variables={
            "agent_name": agent.display_name or "there",
            "client_need_id": need.id,
            "city": need.city or "",
            "state": need.state or "",
            "property_type": property_type,
            "max_price": format_price(need.max_price),
            "bedrooms": need.bedrooms,
            "bathrooms": need.bathrooms,
            "description": need.description or "",
        },
    )


class EmailJobQueue:
    """Producer side of the email_jobs queue."""

    def __init__(self, client: Client, max_attempts: Optional[int] = None):
        self.client = client
        self.max_attempts = max_attempts or AppConfig.EMAIL_MAX_ATTEMPTS

    async def enqueue(self, payloads: Iterable[EmailJobPayload]) -> list[str]:
        """
        Insert one queued job per payload in a single request.

        Returns:
            IDs of the inserted jobs

        Raises:
            SupabaseError: if the insert fails; no job is assumed queued
        """
        rows = [EmailJob(payload=payload, max_attempts=self.max_attempts).to_row() for payload in payloads]
        if not rows:
            return []

        try:
            result = self.client.table(EMAIL_JOBS_TABLE).insert(rows).execute()
        except Exception as e:
            raise SupabaseError(f"Failed to enqueue email jobs: {e}")

        job_ids = [row["id"] for row in result.data or [] if row.get("id")]
        logger.info(
            "Email jobs enqueued",
            job_count=len(rows),
            templates=sorted({row["payload"]["template"] for row in rows}),
            recipients=[mask_email(row["payload"]["to"]) for row in rows]
        )
        return job_ids

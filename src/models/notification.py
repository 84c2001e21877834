"""Notification models: recipients, email jobs and the hot sheet notification ledger."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class MatchSource(str, Enum):
    """What a recipient matched through."""
    HOT_SHEET = "hot_sheet"
    CLIENT_NEED = "client_need"


class EmailTemplate(str, Enum):
    """Template names understood by the email worker."""
    NEW_LISTING_ALERT = "new-listing-alert"
    NEW_MATCH_NOTIFICATION = "new-match-notification"
    CLIENT_NEED_NOTIFICATION = "client-need-notification"


class Recipient(BaseModel):
    """One unique notification recipient."""
    email: str = Field(..., description="Recipient address")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    source: MatchSource = Field(..., description="Last source seen for this address")
    matched_via: list[MatchSource] = Field(default_factory=list, description="Every source seen, in order")
    hot_sheet_ids: list[str] = Field(default_factory=list)
    client_need_ids: list[str] = Field(default_factory=list)

    @property
    def greeting_name(self) -> str:
        if not self.first_name:
            return "there"
        return f"{self.first_name} {self.last_name or ''}".strip()


class EmailJobPayload(BaseModel):
    """Opaque unit of work consumed by the email worker."""
    provider: str = Field(default="resend")
    template: EmailTemplate
    to: str
    subject: str
    reply_to: Optional[str] = None
    variables: dict[str, Any] = Field(default_factory=dict)


class EmailJob(BaseModel):
    """Row of the email_jobs table."""
    payload: EmailJobPayload
    status: str = Field(default="queued")
    max_attempts: int = Field(default=5)

    def to_row(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class NotificationRecord(BaseModel):
    """Row of hot_sheet_notifications: the de-dup ledger."""
    hot_sheet_id: str
    listing_id: str
    user_id: str
    notification_sent: bool = True
    notification_sent_at: Optional[str] = None

"""Hot sheet (saved search) models."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.models.contact import Contact
from src.models.search_criteria import SearchCriteria


class NotificationSchedule(str, Enum):
    """How often a hot sheet's owner is notified of new matches."""
    IMMEDIATELY = "immediately"
    DAILY = "daily"
    WEEKLY = "weekly"


_SCHEDULE_ALIASES = {
    "immediate": NotificationSchedule.IMMEDIATELY,
    "instant": NotificationSchedule.IMMEDIATELY,
}


class HotSheet(BaseModel):
    """Recurring saved search owned by one agent or consumer."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Hot sheet ID")
    user_id: str = Field(..., description="Owner user ID")
    client_id: Optional[str] = Field(None, description="Associated client ID")
    name: str = Field(default="", description="Display name")
    criteria: SearchCriteria = Field(default_factory=SearchCriteria)
    notification_schedule: NotificationSchedule = Field(default=NotificationSchedule.DAILY)
    is_active: bool = Field(default=True, description="Soft-disable flag")
    notify_agent_email: bool = Field(default=True)
    notify_client_email: bool = Field(default=False)
    last_sent_at: Optional[str] = None
    created_at: Optional[str] = None
    owner: Optional[Contact] = Field(None, description="Owner profile joined from profiles")
    client: Optional[Contact] = Field(None, description="Client joined from clients")

    @model_validator(mode="before")
    @classmethod
    def _collect_joined_contacts(cls, data: Any) -> Any:
        """PostgREST embeds joined rows under the relation name or alias."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("owner") is None:
            data["owner"] = data.get("profiles") or data.get("user")
        if data.get("client") is None:
            data["client"] = data.get("clients")
        return data

    @field_validator("criteria", mode="before")
    @classmethod
    def _validate_criteria(cls, value: Any) -> Any:
        if isinstance(value, SearchCriteria):
            return value
        return value if isinstance(value, dict) else {}

    @field_validator("notification_schedule", mode="before")
    @classmethod
    def _validate_schedule(cls, value: Any) -> NotificationSchedule:
        if isinstance(value, NotificationSchedule):
            return value
        key = str(value or "").strip().lower()
        if key in _SCHEDULE_ALIASES:
            return _SCHEDULE_ALIASES[key]
        try:
            return NotificationSchedule(key)
        except ValueError:
            return NotificationSchedule.DAILY

    @field_validator("notify_agent_email", "notify_client_email", "is_active", mode="before")
    @classmethod
    def _validate_flags(cls, value: Any, info) -> bool:
        if value is None:
            return cls.model_fields[info.field_name].default
        return bool(value)

    @field_validator("owner", "client", mode="before")
    @classmethod
    def _validate_contact(cls, value: Any) -> Any:
        # A to-many embed comes back as a list
        if isinstance(value, list):
            return value[0] if value else None
        return value

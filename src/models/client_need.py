"""Client need models."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.models.contact import Contact


class ClientNeed(BaseModel):
    """One-off buyer requirement submitted by a consumer."""
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    submitted_by: Optional[str] = Field(None, description="Submitting user ID")
    state: Optional[str] = None
    city: Optional[str] = None
    property_type: Optional[str] = Field(None, description="Property type code, e.g. 'single_family'")
    property_types: list[str] = Field(default_factory=list)
    max_price: Optional[float] = None
    bedrooms: Optional[float] = None
    bathrooms: Optional[float] = None
    description: Optional[str] = None
    submitter: Optional[Contact] = Field(None, description="Submitter profile joined from profiles")

    @model_validator(mode="before")
    @classmethod
    def _collect_submitter(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("submitter") is None and data.get("profiles"):
            data = {**data, "submitter": data["profiles"]}
        return data

    @field_validator("property_types", mode="before")
    @classmethod
    def _validate_property_types(cls, value: Any) -> list[str]:
        if not isinstance(value, (list, tuple)):
            return []
        return [str(v) for v in value if v]

    @field_validator("max_price", "bedrooms", "bathrooms", mode="before")
    @classmethod
    def _validate_numbers(cls, value: Any) -> Optional[float]:
        try:
            return float(value) if value not in (None, "") else None
        except (TypeError, ValueError):
            return None

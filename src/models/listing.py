"""Listing models."""

from enum import Enum
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ListingStatus(str, Enum):
    """Listing status values."""
    ACTIVE = "active"
    NEW = "new"
    COMING_SOON = "coming_soon"
    BACK_ON_MARKET = "back_on_market"
    PRICE_CHANGED = "price_changed"
    EXTENDED = "extended"
    REACTIVATED = "reactivated"
    UNDER_AGREEMENT = "under_agreement"
    PENDING = "pending"
    CONTINGENT = "contingent"
    SOLD = "sold"
    RENTED = "rented"
    WITHDRAWN = "withdrawn"
    TEMPORARILY_WITHDRAWN = "temporarily_withdrawn"
    EXPIRED = "expired"
    CANCELLED = "cancelled"
    DRAFT = "draft"
    PRIVATE = "private"
    OFF_MARKET = "off_market"


class ListingType(str, Enum):
    """Listing type values."""
    FOR_SALE = "for_sale"
    PRIVATE = "private"


# Statuses returned by a search that does not name any
DEFAULT_SEARCH_STATUSES = [ListingStatus.ACTIVE.value, ListingStatus.COMING_SOON.value]

# Statuses an off-market listing may be promoted to
PUBLIC_STATUSES = frozenset({
    ListingStatus.ACTIVE.value,
    ListingStatus.NEW.value,
    ListingStatus.COMING_SOON.value,
    ListingStatus.BACK_ON_MARKET.value,
})

OFF_MARKET_STATUSES = frozenset({ListingStatus.PRIVATE.value, ListingStatus.OFF_MARKET.value})


class Listing(BaseModel):
    """Real estate listing."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = Field(None, validation_alias=AliasChoices("id", "listing_id"), description="Listing ID")
    agent_id: Optional[str] = Field(None, description="Listing agent ID")
    listing_number: Optional[str] = Field(None, description="MLS-style listing number")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = None
    state: Optional[str] = Field(None, description="2-letter state code")
    zip_code: Optional[str] = None
    county: Optional[str] = None
    neighborhood: Optional[str] = None
    price: Optional[float] = None
    property_type: Optional[str] = Field(None, description="Property type label, e.g. 'Single Family'")
    bedrooms: Optional[float] = None
    bathrooms: Optional[float] = None
    square_feet: Optional[float] = None
    status: Optional[str] = Field(None, description="Listing status")
    listing_type: Optional[str] = Field(None, description="for_sale or private")
    open_houses: Optional[Any] = None
    photos: Optional[Any] = None
    go_live_date: Optional[str] = None
    auto_activate_on: Optional[str] = None
    expiration_date: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_off_market(self) -> bool:
        return self.listing_type == ListingType.PRIVATE.value or self.status in OFF_MARKET_STATUSES

"""Search criteria model shared by browse searches and hot sheets."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


CRITERIA_SCHEMA_VERSION = 1


def _coerce_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, (list, tuple, set)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    return []


def _coerce_positive_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").replace("$", "").strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # Zero is never a real lower/upper bound for these fields
    return number if number > 0 else None


def _coerce_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


class SearchCriteria(BaseModel):
    """
    Listing search criteria.

    Persisted hot sheet blobs are loosely typed JSON written by several
    generations of the UI, so every field is optional and malformed values
    deserialize to "unconstrained" instead of failing validation. Fields are
    accepted under their camelCase wire names or their snake_case names.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_version: int = Field(CRITERIA_SCHEMA_VERSION, alias="schemaVersion", description="Criteria blob version")
    statuses: list[str] = Field(default_factory=list, description="Listing statuses; empty means the default set")
    property_types: list[str] = Field(default_factory=list, alias="propertyTypes", description="UI property type codes or labels")
    cities: list[str] = Field(default_factory=list, description="Towns, optionally 'City-Neighborhood' or 'City, ST'")
    state: Optional[str] = Field(None, description="State code or full name")
    county: Optional[str] = Field(None, description="County name or 'all'")
    show_areas: bool = Field(False, alias="showAreas", description="Expand towns with their neighborhoods")
    zip_code: Optional[str] = Field(None, alias="zipCode", description="Full or partial zip code")
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    bedrooms: Optional[float] = Field(None, description="Minimum bedrooms")
    bathrooms: Optional[float] = Field(None, description="Minimum bathrooms")
    min_sqft: Optional[float] = Field(None, alias="minSqft")
    max_sqft: Optional[float] = Field(None, alias="maxSqft")
    listing_number: Optional[str] = Field(None, alias="listingNumber")

    # Agent-only filters
    list_date: Optional[str] = Field(None, alias="listDate", description="'today' or a number of days")
    off_market_window: Optional[str] = Field(None, alias="offMarketWindow", description="Number of days")
    only_open_houses: bool = Field(False, alias="onlyOpenHouses")
    max_price_per_sqft: Optional[float] = Field(None, alias="maxPricePerSqft")

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_location_keys(cls, data: Any) -> Any:
        """Older blobs stored a single 'city' or a 'towns' list."""
        if not isinstance(data, dict):
            return {}
        if not data.get("cities"):
            legacy = data.get("towns") or data.get("city")
            if legacy:
                data = {**data, "cities": legacy}
        return data

    @field_validator("schema_version", mode="before")
    @classmethod
    def _validate_version(cls, value: Any) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return CRITERIA_SCHEMA_VERSION

    @field_validator("statuses", "property_types", "cities", mode="before")
    @classmethod
    def _validate_lists(cls, value: Any) -> list[str]:
        return _coerce_list(value)

    @field_validator(
        "min_price", "max_price", "bedrooms", "bathrooms",
        "min_sqft", "max_sqft", "max_price_per_sqft",
        mode="before",
    )
    @classmethod
    def _validate_numbers(cls, value: Any) -> Optional[float]:
        return _coerce_positive_number(value)

    @field_validator(
        "state", "county", "zip_code", "listing_number", "list_date", "off_market_window",
        mode="before",
    )
    @classmethod
    def _validate_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)

    @field_validator("show_areas", "only_open_houses", mode="before")
    @classmethod
    def _validate_flags(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in ("yes", "true", "1")
        return bool(value)

    def to_blob(self) -> dict:
        """Serialize to the camelCase JSON shape stored on hot_sheets.criteria."""
        return self.model_dump(by_alias=True, exclude_none=True)

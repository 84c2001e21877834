"""Match evaluator - decide which saved searches and client needs a listing satisfies.

Evaluation is in memory against a single listing, so these are plain
functions of (listing, searches) with no I/O. A criterion field that is
missing or malformed leaves that field unconstrained, and a listing field
that is null never disqualifies a match on its own.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from src.data.property_types import CLIENT_NEED_TYPE_LABELS
from src.models.client_need import ClientNeed
from src.models.hot_sheet import HotSheet
from src.models.listing import Listing
from src.models.search_criteria import SearchCriteria
from src.services.criteria_normalizer import map_property_types, normalize_criteria, resolve_state
from src.services.listings_query import FULL_ZIP
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


@dataclass
class MatchResult:
    """Saved searches and client needs matched by one listing."""
    listing: Listing
    hot_sheets: list[HotSheet] = field(default_factory=list)
    client_needs: list[ClientNeed] = field(default_factory=list)

    @property
    def hot_sheet_ids(self) -> list[str]:
        return [sheet.id for sheet in self.hot_sheets]

    @property
    def client_need_ids(self) -> list[str]:
        return [need.id for need in self.client_needs if need.id]

    @property
    def has_matches(self) -> bool:
        return bool(self.hot_sheets or self.client_needs)


def _as_listing(listing: Any) -> Listing:
    if isinstance(listing, Listing):
        return listing
    return Listing.model_validate(listing or {})


def _as_criteria(criteria: Any) -> SearchCriteria:
    if isinstance(criteria, SearchCriteria):
        return criteria
    return SearchCriteria.model_validate(criteria if isinstance(criteria, dict) else {})


def _same_state(wanted: Optional[str], actual: Optional[str]) -> bool:
    return resolve_state(wanted).upper() == (actual or "").strip().upper()


def _city_listed(cities: Iterable[str], listing_city: Optional[str]) -> bool:
    city = (listing_city or "").lower()
    return any(city in entry.lower() for entry in cities)


def _at_least(actual: Optional[float], minimum: Optional[float]) -> bool:
    return minimum is None or actual is None or actual >= minimum


def _at_most(actual: Optional[float], maximum: Optional[float]) -> bool:
    return maximum is None or actual is None or actual <= maximum


def _zip_matches(wanted: Optional[str], actual: Optional[str]) -> bool:
    if not wanted or not actual:
        return True
    if FULL_ZIP.match(wanted):
        return actual == wanted
    return wanted.lower() in actual.lower()


def hot_sheet_matches(criteria, listing) -> bool:
    """
    Check a listing against one hot sheet's criteria.

    City entries match when they contain the listing's city, so both
    'Boston' and 'Boston-Back Bay' select a Boston listing. Criteria
    property types must include the listing's type once codes are mapped to
    labels; a listing without a type does not match a typed search. The
    criteria are normalized first, so a county selection narrows the towns
    the same way it does for a browse search.
    """
    c = normalize_criteria(_as_criteria(criteria)).criteria
    item = _as_listing(listing)

    if c.state and not _same_state(c.state, item.state):
        return False

    if c.cities and not _city_listed(c.cities, item.city):
        return False

    if c.property_types and item.property_type not in map_property_types(c.property_types):
        return False

    if not (_at_least(item.price, c.min_price) and _at_most(item.price, c.max_price)):
        return False

    if not (_at_least(item.bedrooms, c.bedrooms) and _at_least(item.bathrooms, c.bathrooms)):
        return False

    if not (_at_least(item.square_feet, c.min_sqft) and _at_most(item.square_feet, c.max_sqft)):
        return False

    return _zip_matches(c.zip_code, item.zip_code)


def _need_type_labels(need: ClientNeed) -> list[str]:
    codes = list(need.property_types)
    if need.property_type and need.property_type not in codes:
        codes.append(need.property_type)
    return [CLIENT_NEED_TYPE_LABELS.get(code, code) for code in codes]


def client_need_matches(need, listing) -> bool:
    """Check a listing against a one-off client need; missing fields on either side are unconstrained."""
    n = need if isinstance(need, ClientNeed) else ClientNeed.model_validate(need or {})
    item = _as_listing(listing)

    if n.state and item.state and not _same_state(n.state, item.state):
        return False

    if n.city and item.city and item.city.lower() not in n.city.lower():
        return False

    labels = _need_type_labels(n)
    if labels and item.property_type and item.property_type not in labels:
        return False

    if n.max_price and item.price is not None and item.price > n.max_price:
        return False

    return True


def evaluate_listing(listing, hot_sheets: Iterable, client_needs: Iterable = ()) -> MatchResult:
    """
    Collect every active hot sheet and client need the listing satisfies.

    Rows that cannot be read as a hot sheet or client need are logged and
    skipped. The result does not depend on input order beyond preserving it.
    """
    item = _as_listing(listing)
    result = MatchResult(listing=item)

    for raw in hot_sheets:
        try:
            sheet = raw if isinstance(raw, HotSheet) else HotSheet.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping unreadable hot sheet", listing_id=item.id, error=str(e))
            continue
        if sheet.is_active and hot_sheet_matches(sheet.criteria, item):
            result.hot_sheets.append(sheet)

    for raw in client_needs:
        try:
            need = raw if isinstance(raw, ClientNeed) else ClientNeed.model_validate(raw)
        except ValidationError as e:
            logger.warning("Skipping unreadable client need", listing_id=item.id, error=str(e))
            continue
        if client_need_matches(need, item):
            result.client_needs.append(need)

    logger.info(
        "Listing evaluated",
        listing_id=item.id,
        hot_sheet_matches=len(result.hot_sheets),
        client_need_matches=len(result.client_needs)
    )
    return result

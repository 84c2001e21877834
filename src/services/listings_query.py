"""Listings query builder.

Turns search criteria into a ListingsQuery: a flat list of column predicates
plus an OR-group of city / city+neighborhood terms. The same query can be
pushed down to PostgREST (apply) or evaluated in memory against listing rows
(matches / filter_rows), so browse searches and in-memory sources agree on
what a criterion means.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, Optional

from src.models.listing import DEFAULT_SEARCH_STATUSES
from src.models.search_criteria import SearchCriteria
from src.services.criteria_normalizer import (
    NormalizedCriteria,
    map_property_types,
    normalize_criteria,
    resolve_state,
    split_town_selector,
)
from src.services.supabase_client import SupabaseListingsSource
from src.utils.errors import SearchError
from src.utils.logging import get_structured_logger, log_timing

logger = get_structured_logger(__name__)

LISTINGS_TABLE = "listings"
FULL_ZIP = re.compile(r"^\d{5}$")
ANY_WINDOW = "any"
TODAY = "today"

_WILDCARD_UNSAFE = re.compile(r'[*",]')
_LIKE_SPECIAL = re.compile(r"[\\%_]")


def wildcard_term(value: str) -> str:
    """Make a value safe to embed in a PostgREST or-filter."""
    return _WILDCARD_UNSAFE.sub(" ", str(value)).strip()


@dataclass(frozen=True)
class Predicate:
    """One column filter: in, eq, gte, lte, gt, ilike or not_null."""
    op: str
    column: str
    value: Any = None


@dataclass(frozen=True)
class LocationTerm:
    """City with an optional neighborhood; both are partial, case-insensitive matches."""
    city: str
    neighborhood: Optional[str] = None

    def to_filter(self) -> str:
        city = f"city.ilike.*{wildcard_term(self.city)}*"
        if not self.neighborhood:
            return city
        return f"and({city},neighborhood.ilike.*{wildcard_term(self.neighborhood)}*)"


@dataclass
class ListingsQuery:
    """Composed listing filter, ordered newest first."""
    predicates: list[Predicate] = field(default_factory=list)
    locations: list[LocationTerm] = field(default_factory=list)
    max_price_per_sqft: Optional[float] = None
    order_column: str = "created_at"
    descending: bool = True

    def columns(self, op: Optional[str] = None) -> list[str]:
        return [p.column for p in self.predicates if op is None or p.op == op]

    def find(self, op: str, column: str) -> Optional[Predicate]:
        for predicate in self.predicates:
            if predicate.op == op and predicate.column == column:
                return predicate
        return None

    @property
    def location_filter(self) -> Optional[str]:
        if not self.locations:
            return None
        return ",".join(term.to_filter() for term in self.locations)

    def apply(self, request):
        """Apply every predicate to a PostgREST request builder and return it."""
        for predicate in self.predicates:
            if predicate.op == "in":
                request = request.in_(predicate.column, list(predicate.value))
            elif predicate.op == "eq":
                request = request.eq(predicate.column, predicate.value)
            elif predicate.op == "gte":
                request = request.gte(predicate.column, predicate.value)
            elif predicate.op == "lte":
                request = request.lte(predicate.column, predicate.value)
            elif predicate.op == "gt":
                request = request.gt(predicate.column, predicate.value)
            elif predicate.op == "ilike":
                request = request.ilike(predicate.column, predicate.value)
            elif predicate.op == "not_null":
                request = request.not_.is_(predicate.column, "null")
            else:
                raise ValueError(f"Unknown predicate operator: {predicate.op}")

        if self.locations:
            request = request.or_(self.location_filter)

        return request.order(self.order_column, desc=self.descending)

    def matches(self, row) -> bool:
        """Evaluate the query against one listing row (dict or model)."""
        for predicate in self.predicates:
            if not _evaluate(predicate, _get(row, predicate.column)):
                return False

        if self.locations and not any(_location_matches(term, row) for term in self.locations):
            return False

        return self.passes_post_filter(row)

    def passes_post_filter(self, row) -> bool:
        """Price per square foot, which PostgREST cannot compute."""
        if not self.max_price_per_sqft:
            return True
        price = _number(_get(row, "price"))
        sqft = _number(_get(row, "square_feet"))
        if price is None or not sqft:
            return False
        return price / sqft <= self.max_price_per_sqft

    def filter_rows(self, rows: Iterable) -> list:
        """Matching rows, newest first."""
        matched = [row for row in rows if self.matches(row)]
        matched.sort(
            key=lambda row: parse_timestamp(_get(row, self.order_column)) or datetime.min.replace(tzinfo=timezone.utc),
            reverse=self.descending,
        )
        return matched


def _get(row, column: str) -> Any:
    if isinstance(row, dict):
        return row.get(column)
    return getattr(row, column, None)


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _comparable(left: Any, right: Any):
    """Coerce both sides to timestamps or numbers, or (None, None)."""
    if isinstance(right, (str, datetime)):
        return parse_timestamp(left), parse_timestamp(right)
    return _number(left), _number(right)


def like_escape(value: Any) -> str:
    """Escape LIKE metacharacters so user input matches literally."""
    return _LIKE_SPECIAL.sub(r"\\\g<0>", str(value))


def ilike(value: Any, pattern: str) -> bool:
    """
    SQL ILIKE as PostgREST applies it.

    '%' (or '*') matches any run of characters, '_' matches exactly one, and
    a backslash makes the next character literal.
    """
    if value is None:
        return False
    parts = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            parts.append(re.escape(next(chars, "\\")))
        elif char in "%*":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.fullmatch("".join(parts), str(value), flags=re.IGNORECASE | re.DOTALL) is not None


def _evaluate(predicate: Predicate, value: Any) -> bool:
    op = predicate.op
    if op == "not_null":
        return value is not None
    if value is None:
        return False
    if op == "in":
        return value in predicate.value
    if op == "eq":
        return str(value) == str(predicate.value)
    if op == "ilike":
        return ilike(value, predicate.value)

    left, right = _comparable(value, predicate.value)
    if left is None or right is None:
        return False
    if op == "gte":
        return left >= right
    if op == "lte":
        return left <= right
    if op == "gt":
        return left > right
    raise ValueError(f"Unknown predicate operator: {op}")


def _contains(haystack: Any, needle: str) -> bool:
    if haystack is None:
        return False
    return ilike(haystack, f"%{wildcard_term(needle)}%")


def _location_matches(term: LocationTerm, row) -> bool:
    if not _contains(_get(row, "city"), term.city):
        return False
    if term.neighborhood and not _contains(_get(row, "neighborhood"), term.neighborhood):
        return False
    return True


def _window_days(value: Optional[str]) -> Optional[int]:
    if not value or value == ANY_WINDOW:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring unparseable date window", value=value)
        return None


def _list_date_cutoff(value: Optional[str], now: datetime) -> Optional[datetime]:
    if value == TODAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    days = _window_days(value)
    if days is None:
        return None
    return now - timedelta(days=days)


def location_terms(cities: Iterable[str]) -> list[LocationTerm]:
    """Plain cities first, then city+neighborhood pairs."""
    plain, paired = [], []
    for entry in cities:
        city, neighborhood = split_town_selector(entry)
        if not city:
            continue
        if neighborhood:
            paired.append(LocationTerm(city, neighborhood))
        else:
            plain.append(LocationTerm(city))
    return plain + paired


def build_listings_query(criteria, now: Optional[datetime] = None) -> ListingsQuery:
    """
    Compose a ListingsQuery from criteria.

    Works on a copy of the criteria; the caller's object is left untouched.
    Omitted statuses fall back to the default search set. Numeric bounds that
    are zero or unset produce no predicate.
    """
    if isinstance(criteria, SearchCriteria):
        c = criteria.model_copy(deep=True)
    else:
        c = SearchCriteria.model_validate(criteria if isinstance(criteria, dict) else {})
    now = now or datetime.now(timezone.utc)

    predicates: list[Predicate] = []

    statuses = c.statuses or list(DEFAULT_SEARCH_STATUSES)
    predicates.append(Predicate("in", "status", tuple(statuses)))

    if c.property_types:
        predicates.append(Predicate("in", "property_type", tuple(map_property_types(c.property_types))))

    for column, op, bound in (
        ("price", "gte", c.min_price),
        ("price", "lte", c.max_price),
        ("bedrooms", "gte", c.bedrooms),
        ("bathrooms", "gte", c.bathrooms),
        ("square_feet", "gte", c.min_sqft),
        ("square_feet", "lte", c.max_sqft),
    ):
        if bound and bound > 0:
            predicates.append(Predicate(op, column, bound))

    state = resolve_state(c.state)
    if state:
        predicates.append(Predicate("ilike", "state", like_escape(state)))

    if c.zip_code:
        if FULL_ZIP.match(c.zip_code):
            predicates.append(Predicate("eq", "zip_code", c.zip_code))
        else:
            predicates.append(Predicate("ilike", "zip_code", f"%{like_escape(c.zip_code)}%"))

    if c.listing_number:
        predicates.append(Predicate("ilike", "listing_number", f"%{like_escape(c.listing_number)}%"))

    listed_since = _list_date_cutoff(c.list_date, now)
    if listed_since:
        predicates.append(Predicate("gte", "created_at", listed_since.isoformat()))

    window = _window_days(c.off_market_window)
    if window is not None:
        predicates.append(Predicate("gte", "updated_at", (now - timedelta(days=window)).isoformat()))

    if c.only_open_houses:
        predicates.append(Predicate("not_null", "open_houses"))

    max_ppsf = c.max_price_per_sqft if c.max_price_per_sqft and c.max_price_per_sqft > 0 else None
    if max_ppsf:
        predicates.append(Predicate("not_null", "square_feet"))
        predicates.append(Predicate("gt", "square_feet", 0))

    return ListingsQuery(
        predicates=predicates,
        locations=location_terms(c.cities),
        max_price_per_sqft=max_ppsf,
    )


async def search_listings(client, criteria, limit: Optional[int] = None, now: Optional[datetime] = None) -> list[dict]:
    """
    Run a browse search against the listings table.

    Accepts raw criteria or an already normalized result, which is used as is.

    Raises:
        SearchError: when the store fails, so callers can tell a failed
            search apart from an empty result
    """
    normalized = criteria if isinstance(criteria, NormalizedCriteria) else normalize_criteria(criteria)
    query = build_listings_query(normalized.criteria, now=now)

    with log_timing("search_listings", logger=logger, predicate_count=len(query.predicates)):
        try:
            rows = await SupabaseListingsSource(client, LISTINGS_TABLE).search(query, limit)
        except SearchError as e:
            logger.error("Listings search failed", error=str(e))
            raise

    logger.info(
        "Listings search completed",
        result_count=len(rows),
        warning_count=len(normalized.warnings)
    )
    return rows

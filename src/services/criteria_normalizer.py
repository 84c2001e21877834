"""Criteria normalizer - resolve user-entered search criteria into a canonical filter.

Every lookup here fails open: an unknown state, county or property type is
passed through as entered so that a search is never blocked. Each pass-through
is reported as a NormalizationWarning so callers can tell it apart from a
successful resolution.
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.data.county_towns import COUNTY_TOWNS_BY_STATE
from src.data.neighborhoods import NEIGHBORHOODS_BY_CITY
from src.data.property_types import PROPERTY_TYPE_LABELS
from src.data.us_states import STATE_CODE_BY_NAME
from src.models.search_criteria import SearchCriteria
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

ALL_COUNTIES = "all"
NEIGHBORHOOD_SEPARATOR = "-"

_COUNTY_SUFFIX = re.compile(r"\s+county\s*$", re.IGNORECASE)

# Town names that contain the neighborhood separator themselves
HYPHENATED_TOWNS = frozenset(
    town
    for counties in COUNTY_TOWNS_BY_STATE.values()
    for towns in counties.values()
    for town in towns
    if NEIGHBORHOOD_SEPARATOR in town
)


@dataclass(frozen=True)
class NormalizationWarning:
    """A raw value that could not be resolved and was passed through."""
    field: str
    value: str
    reason: str


@dataclass
class NormalizedCriteria:
    """Canonical criteria plus the lookups that fell back to raw values."""
    criteria: SearchCriteria
    warnings: list[NormalizationWarning] = field(default_factory=list)

    @property
    def fully_resolved(self) -> bool:
        return not self.warnings


def resolve_state(value: Optional[str], warnings: Optional[list] = None) -> str:
    """
    Resolve a state name or code to its 2-letter code.

    Inputs longer than two characters are looked up by full name,
    case-insensitively. Shorter inputs are treated as codes and uppercased.
    Unknown names come back trimmed but otherwise unchanged.
    """
    raw = (value or "").strip()
    if not raw:
        return ""
    if len(raw) <= 2:
        return raw.upper()

    code = STATE_CODE_BY_NAME.get(raw.lower())
    if code:
        return code

    if warnings is not None:
        warnings.append(NormalizationWarning("state", raw, "unknown state name"))
    return raw


def normalize_county(value: Optional[str]) -> str:
    """Strip a trailing 'County' suffix and surrounding whitespace."""
    raw = (value or "").strip()
    return _COUNTY_SUFFIX.sub("", raw).strip()


def _lookup_county(state_code: str, county: str) -> Optional[list[str]]:
    counties = COUNTY_TOWNS_BY_STATE.get(state_code)
    if not counties:
        return None
    wanted = county.lower()
    for name, towns in counties.items():
        if name.lower() == wanted:
            return towns
    return None


def _dedupe(items: Iterable[str]) -> list[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def towns_for_county(state_code: str, county: Optional[str], warnings: Optional[list] = None) -> list[str]:
    """
    Towns in a county, or in every county of the state for 'all'.

    States without county data and unknown counties yield an empty list.
    """
    counties = COUNTY_TOWNS_BY_STATE.get(state_code)
    if not counties:
        if warnings is not None and county:
            warnings.append(NormalizationWarning("county", county, f"no county data for state '{state_code}'"))
        return []

    name = normalize_county(county)
    if not name or name.lower() == ALL_COUNTIES:
        return _dedupe(town for towns in counties.values() for town in towns)

    towns = _lookup_county(state_code, name)
    if towns is None:
        if warnings is not None:
            warnings.append(NormalizationWarning("county", county or "", "unknown county"))
        return []
    return list(towns)


def split_town_selector(value: str) -> tuple[str, Optional[str]]:
    """
    Split a town selector into (city, neighborhood).

    Accepts 'City', 'City, ST' and 'City-Neighborhood'. Only the first
    separator splits, so hyphenated neighborhoods survive; hyphenated town
    names such as 'Manchester-by-the-Sea' are kept whole.
    """
    city_part = value.split(",")[0].strip()

    for town in HYPHENATED_TOWNS:
        if city_part == town:
            return town, None
        if city_part.startswith(town + NEIGHBORHOOD_SEPARATOR):
            neighborhood = city_part[len(town) + 1:].strip()
            return town, neighborhood or None

    if NEIGHBORHOOD_SEPARATOR not in city_part:
        return city_part, None

    city, neighborhood = city_part.split(NEIGHBORHOOD_SEPARATOR, 1)
    city, neighborhood = city.strip(), neighborhood.strip()
    if not city:
        return city_part, None
    return city, neighborhood or None


def neighborhoods_for_town(town: str, state_code: str, raw_towns: Iterable[str] = ()) -> list[str]:
    """
    Known neighborhoods of a town.

    Falls back to neighborhoods derived from 'Town-Neighborhood' entries
    already present in the caller's list when nothing is curated.
    """
    curated = NEIGHBORHOODS_BY_CITY.get((town, state_code))
    if curated:
        return list(curated)

    prefix = f"{town}{NEIGHBORHOOD_SEPARATOR}"
    return _dedupe(
        entry[len(prefix):].strip()
        for entry in raw_towns
        if entry.startswith(prefix) and entry[len(prefix):].strip()
    )


def expand_neighborhoods(towns: Iterable[str], state_code: str, raw_towns: Iterable[str] = ()) -> list[str]:
    """Follow every base town with its 'Town-Neighborhood' entries."""
    raw_towns = list(raw_towns)
    expanded = []
    for town in towns:
        expanded.append(town)
        for neighborhood in neighborhoods_for_town(town, state_code, raw_towns):
            expanded.append(f"{town}{NEIGHBORHOOD_SEPARATOR}{neighborhood}")
    return _dedupe(expanded)


def map_property_types(codes: Iterable[str], warnings: Optional[list] = None) -> list[str]:
    """Translate UI property type codes to listing labels; unknown codes pass through."""
    labels = set(PROPERTY_TYPE_LABELS.values())
    mapped = []
    for code in codes:
        label = PROPERTY_TYPE_LABELS.get(code)
        if label is None:
            label = code
            if code not in labels and warnings is not None:
                warnings.append(NormalizationWarning("property_types", code, "unknown property type code"))
        mapped.append(label)
    return _dedupe(mapped)


def normalize_criteria(raw) -> NormalizedCriteria:
    """
    Produce canonical criteria from raw user input.

    Accepts a SearchCriteria or a raw dict. The input is never mutated. The
    state is resolved to its code, a county selection is expanded to its
    towns (merged with any explicitly chosen towns), neighborhoods are added
    when show_areas is set, and property type codes become listing labels.
    """
    if isinstance(raw, SearchCriteria):
        criteria = raw.model_copy(deep=True)
    else:
        criteria = SearchCriteria.model_validate(raw if isinstance(raw, dict) else {})

    warnings: list[NormalizationWarning] = []
    state_code = resolve_state(criteria.state, warnings)

    raw_towns = list(criteria.cities)
    base_towns = [town for town in raw_towns if split_town_selector(town)[1] is None]
    selected = list(raw_towns)

    if criteria.county and state_code:
        county_towns = towns_for_county(state_code, criteria.county, warnings)
        # Explicitly chosen towns narrow a county selection
        if not base_towns:
            base_towns = county_towns
            selected = county_towns + [t for t in raw_towns if t not in county_towns]

    if criteria.show_areas and state_code:
        selected = expand_neighborhoods(base_towns, state_code, raw_towns) + [
            t for t in selected if t not in base_towns
        ]

    normalized = criteria.model_copy(update={
        "state": state_code or None,
        "county": normalize_county(criteria.county) or None,
        "cities": _dedupe(selected),
        "property_types": map_property_types(criteria.property_types, warnings),
    })

    if warnings:
        logger.info(
            "Criteria normalized with pass-through values",
            warnings=[f"{w.field}={w.value}: {w.reason}" for w in warnings]
        )

    return NormalizedCriteria(criteria=normalized, warnings=warnings)

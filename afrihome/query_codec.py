"""
afrihome/query_codec.py

Two-way mapping between SearchCriteria and a URL query string, so a search
can be shared, bookmarked and restored after navigation.

Encoding:
- one parameter per present field, camelCase names (listingType, minPrice, ...)
- features -> a single comma-joined value
- integral numbers are written without a trailing ".0"

Decoding:
- numeric fields are parsed to numbers; absent or unparsable -> absent
- bedrooms/bathrooms/yearBuilt accept integral floats ("2.0"), anything else
  non-integral is treated as unparsable
- features are split on commas
- blank values and unknown parameters are ignored
- a full URL or a leading "?" is accepted

decode_criteria() validates the result, so an out-of-range number (for
example minPrice=-5) raises pydantic.ValidationError rather than vanishing.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from afrihome.schemas import INTEGER_CRITERIA, NUMERIC_CRITERIA, SearchCriteria

SEARCH_PATH = "/properties"
SORT_PARAM = "sort"


def _param_name(field_name: str) -> str:
    return SearchCriteria.model_fields[field_name].alias or field_name


# Canonical parameter order: declaration order of SearchCriteria
CRITERIA_PARAMS: List[Tuple[str, str]] = [
    (name, _param_name(name)) for name in SearchCriteria.model_fields
]


def format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(raw: Optional[str], integral: bool = False) -> Optional[float]:
    """Parse a query value to a number, or None when it is not one."""
    if raw is None:
        return None
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    if integral:
        if not value.is_integer():
            return None
        return int(value)
    return value


def _query_part(query: str) -> str:
    query = query or ""
    if "://" in query or query.startswith("/"):
        return urlsplit(query).query
    return query.lstrip("?")


def criteria_params(criteria: SearchCriteria) -> List[Tuple[str, str]]:
    """The (name, value) pairs encode_criteria() writes, in canonical order."""
    params: List[Tuple[str, str]] = []
    for field_name, param in CRITERIA_PARAMS:
        value = getattr(criteria, field_name)
        if value is None:
            continue
        if field_name == "features":
            params.append((param, ",".join(value)))
        elif field_name in NUMERIC_CRITERIA:
            params.append((param, format_number(value)))
        else:
            params.append((param, str(value)))
    return params


def encode_criteria(criteria: SearchCriteria) -> str:
    return urlencode(criteria_params(criteria))


def _first_values(query: str) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for key, value in parse_qsl(_query_part(query), keep_blank_values=True):
        values.setdefault(key, value)
    return values


def decode_criteria(query: str) -> SearchCriteria:
    raw = _first_values(query)
    data: Dict[str, Any] = {}

    for field_name, param in CRITERIA_PARAMS:
        if param not in raw:
            continue
        value = raw[param]
        if field_name == "features":
            tags = [tag.strip() for tag in value.split(",") if tag.strip()]
            if tags:
                data[param] = tags
        elif field_name in NUMERIC_CRITERIA:
            number = parse_number(value, integral=field_name in INTEGER_CRITERIA)
            if number is not None:
                data[param] = number
        elif value.strip():
            data[param] = value

    return SearchCriteria(**data)


def split_sort(query: str) -> Tuple[SearchCriteria, Optional[str]]:
    """Decode criteria plus the sort parameter carried next to them."""
    sort = _first_values(query).get(SORT_PARAM) or None
    return decode_criteria(query), sort


def build_search_path(criteria: SearchCriteria, sort: Optional[str] = None, base: str = SEARCH_PATH) -> str:
    """Shareable location for a search: "/properties?country=Kenya&sort=price-asc"."""
    params = criteria_params(criteria)
    if sort:
        params.append((SORT_PARAM, sort))
    if not params:
        return base
    return f"{base}?{urlencode(params)}"

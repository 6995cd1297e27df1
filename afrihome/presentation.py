"""
afrihome/presentation.py

Ordering and display formatting for listing results.

- sort_properties(): price-asc, price-desc, newest, oldest (stable on ties)
- format_price(): "$450,000"
- time_since(): relative age such as "3 days", recomputed on every call
- summarize(): Property -> PropertySummary with decoded features/images
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from afrihome.config import DEFAULT_SORT
from afrihome.models import Property
from afrihome.payloads import decode_string_list
from afrihome.schemas import PropertySummary


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _created_key(prop: Property) -> datetime:
    return parse_timestamp(prop.created_at) or _EPOCH


# key function, descending
SORT_KEYS: Dict[str, Tuple[Callable[[Property], object], bool]] = {
    "price-asc": (lambda p: p.price, False),
    "price-desc": (lambda p: p.price, True),
    "newest": (_created_key, True),
    "oldest": (_created_key, False),
}


def sort_properties(properties: Iterable[Property], sort: Optional[str] = None) -> List[Property]:
    """
    Return a new list ordered by `sort` (default "newest").

    Python's sort is stable, including with reverse=True, so listings that tie
    keep their original relative order.

    Raises:
        ValueError: unknown sort key
    """
    sort = sort or DEFAULT_SORT
    if sort not in SORT_KEYS:
        raise ValueError(f"Unknown sort option: {sort!r} (expected one of {', '.join(SORT_KEYS)})")
    key, descending = SORT_KEYS[sort]
    return sorted(properties, key=key, reverse=descending)


def format_price(price: float) -> str:
    """USD, no decimals, thousands separators."""
    if price < 0:
        return f"-${abs(price):,.0f}"
    return f"${price:,.0f}"


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def time_since(created_at: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Human readable distance between `created_at` and now, without suffix.

    Buckets follow the usual "time ago" wording: "less than a minute",
    "5 minutes", "about 2 hours", "1 day", "3 days", "about 1 month",
    "4 months", "about 1 year", "over 2 years", "almost 3 years".
    """
    created = parse_timestamp(created_at)
    if created is None:
        return ""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = abs((now - created).total_seconds())
    minutes = round(seconds / 60)

    if minutes < 1:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < 1440:
        return f"about {_plural(round(minutes / 60), 'hour')}"
    if minutes < 2520:
        return "1 day"
    if minutes < 43200:
        return _plural(round(minutes / 1440), "day")
    if minutes < 86400:
        return f"about {_plural(round(minutes / 43200), 'month')}"

    months = int(minutes // 43200)
    if months < 12:
        return _plural(round(minutes / 43200), "month")

    years, remainder = divmod(months, 12)
    if remainder < 3:
        return f"about {_plural(years, 'year')}"
    if remainder < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"


def gallery(prop: Property) -> List[str]:
    """Additional images, falling back to the main image alone."""
    images = decode_string_list(prop.images)
    return images or [prop.main_image]


def summarize(prop: Property, now: Optional[datetime] = None) -> PropertySummary:
    return PropertySummary(
        id=prop.id,
        title=prop.title,
        city=prop.city,
        country=prop.country,
        neighborhood=prop.neighborhood,
        property_type=prop.property_type,
        listing_type=prop.listing_type,
        status=prop.status,
        featured=prop.featured,
        price=prop.price,
        formatted_price=format_price(prop.price),
        bedrooms=prop.bedrooms,
        bathrooms=prop.bathrooms,
        area=prop.area,
        year_built=prop.year_built,
        main_image=prop.main_image,
        images=gallery(prop),
        features=decode_string_list(prop.features),
        created_at=prop.created_at,
        listed_ago=time_since(prop.created_at, now=now),
    )

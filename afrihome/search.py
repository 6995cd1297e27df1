"""
afrihome/search.py

Property search/filter engine.

filter_properties() keeps, in input order, the listings that satisfy every
constraint present in a SearchCriteria (logical AND). Absent criteria fields
impose nothing, and neither does a numeric bound of 0. A listing that lacks
an optional attribute (bedrooms, area, yearBuilt, ...) is not excluded by a
bound on that attribute. A listing whose feature payload is missing or
malformed has no features.

The engine assumes criteria were validated at the HTTP boundary and never
raises for an empty result.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from afrihome.models import Property
from afrihome.payloads import decode_tag_set
from afrihome.schemas import SearchCriteria

Predicate = Callable[[Property], bool]


def _at_least(value: Optional[float], bound: float) -> bool:
    return value is None or value >= bound


def _at_most(value: Optional[float], bound: float) -> bool:
    return value is None or value <= bound


def build_predicates(criteria: SearchCriteria) -> List[Predicate]:
    """Translate the present criteria fields into one predicate each."""
    c = criteria
    checks: List[Predicate] = []

    if c.listing_type is not None:
        checks.append(lambda p: p.listing_type == c.listing_type)
    if c.country is not None:
        checks.append(lambda p: p.country == c.country)
    if c.property_type is not None:
        checks.append(lambda p: p.property_type == c.property_type)

    # zero bounds are no constraint
    if c.min_price:
        checks.append(lambda p: p.price >= c.min_price)
    if c.max_price:
        checks.append(lambda p: p.price <= c.max_price)

    if c.bedrooms:
        checks.append(lambda p: _at_least(p.bedrooms, c.bedrooms))
    if c.bathrooms:
        checks.append(lambda p: _at_least(p.bathrooms, c.bathrooms))

    if c.min_area:
        checks.append(lambda p: _at_least(p.area, c.min_area))
    if c.max_area:
        checks.append(lambda p: _at_most(p.area, c.max_area))

    if c.year_built:
        checks.append(lambda p: _at_least(p.year_built, c.year_built))

    if c.features:
        required = frozenset(c.features)
        checks.append(lambda p: required <= decode_tag_set(p.features))

    return checks


def filter_properties(properties: Iterable[Property], criteria: SearchCriteria) -> List[Property]:
    """Return the listings matching every present criterion, order preserved."""
    checks = build_predicates(criteria)
    return [p for p in properties if all(check(p) for check in checks)]

"""
afrihome/routes_properties.py

Property catalog endpoints.

- Reads are public.
- POST /api/properties requires a logged-in user (401 before the body is
  validated); the owner is always the caller, never a client-supplied id.
- POST /api/properties/search is a read: idempotent, no side effects. It is a
  POST only because structured criteria travel more cleanly as a JSON body.
  GET /api/properties/search takes the same criteria as a query string for
  shareable links.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from afrihome.auth_context import AuthContext, require_auth_context
from afrihome.config import IS_DEV
from afrihome.models import Property
from afrihome.presentation import DEFAULT_SORT, SORT_KEYS, sort_properties, summarize
from afrihome.query_codec import build_search_path, encode_criteria, split_sort
from afrihome.schemas import PropertyCreateRequest, PropertySearchResponse, PropertySummary, SearchCriteria
from afrihome.storage import PropertyStore, get_store


router = APIRouter(prefix="/api", tags=["properties"])


def _require_property(store: PropertyStore, property_id: int) -> Property:
    prop = store.get_property(property_id)
    if prop is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


@router.get("/properties", response_model=List[Property])
def list_properties(store: PropertyStore = Depends(get_store)) -> List[Property]:
    """All listings in insertion order."""
    return store.get_all_properties()


@router.get("/properties/featured", response_model=List[Property])
def list_featured_properties(store: PropertyStore = Depends(get_store)) -> List[Property]:
    return store.get_featured_properties()


@router.get("/properties/search", response_model=PropertySearchResponse)
def search_properties_by_query(
    request: Request,
    store: PropertyStore = Depends(get_store),
) -> PropertySearchResponse:
    """
    Search with criteria encoded in the query string, e.g.
    /api/properties/search?country=Kenya&minPrice=100000&features=Pool,Gym&sort=price-asc

    Returns display-ready summaries, sorted, plus the canonical shareable path.

    Raises:
        HTTPException(400): out-of-range criteria or unknown sort key
    """
    try:
        criteria, sort = split_sort(request.url.query)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False))

    sort = sort or DEFAULT_SORT
    if sort not in SORT_KEYS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid sort option: {sort!r} (expected one of {', '.join(SORT_KEYS)})",
        )

    results = sort_properties(store.search_properties(criteria), sort)

    if IS_DEV:
        print(f"[SEARCH] GET criteria={criteria.active_fields()}, sort={sort}, results={len(results)}")

    return PropertySearchResponse(
        criteria=criteria,
        sort=sort,
        query=encode_criteria(criteria),
        path=build_search_path(criteria, sort),
        total=len(results),
        results=[summarize(p) for p in results],
    )


@router.post("/properties/search", response_model=List[Property])
def search_properties(
    criteria: SearchCriteria,
    store: PropertyStore = Depends(get_store),
) -> List[Property]:
    """Listings matching every criterion present in the body, insertion order."""
    results = store.search_properties(criteria)

    if IS_DEV:
        print(f"[SEARCH] POST criteria={criteria.active_fields()}, results={len(results)}")

    return results


@router.get("/properties/{property_id}", response_model=Property)
def get_property(property_id: int, store: PropertyStore = Depends(get_store)) -> Property:
    return _require_property(store, property_id)


@router.get("/properties/{property_id}/summary", response_model=PropertySummary)
def get_property_summary(property_id: int, store: PropertyStore = Depends(get_store)) -> PropertySummary:
    """Display-ready view: formatted price, relative age, decoded features and gallery."""
    return summarize(_require_property(store, property_id))


@router.post("/properties", response_model=Property, status_code=201)
def create_property(
    request: PropertyCreateRequest,
    ctx: AuthContext = Depends(require_auth_context),
    store: PropertyStore = Depends(get_store),
) -> Property:
    """
    Create a listing owned by the caller.

    Raises:
        HTTPException(401): not logged in (checked before body validation)
        400: body fails PropertyCreateRequest validation
    """
    prop = store.create_property(request.model_dump(), owner_id=ctx.user_id)

    if IS_DEV:
        print(f"[PROPERTIES] Created property_id={prop.id}, user_id={ctx.user_id}")

    return prop


@router.get("/user/{user_id}/properties", response_model=List[Property])
def list_user_properties(user_id: int, store: PropertyStore = Depends(get_store)) -> List[Property]:
    return store.get_user_properties(user_id)

"""
afrihome/routes_reference.py

Lookup lists for the web forms and the financing-request intake.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from afrihome.config import IS_DEV
from afrihome.reference_data import COUNTRIES, CURRENCIES, FEATURE_OPTIONS
from afrihome.schemas import Currency, FinancingRequest, FinancingResponse
from afrihome.storage import PropertyStore, get_store


router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/countries", response_model=List[str])
def list_countries() -> List[str]:
    return list(COUNTRIES)


@router.get("/currencies", response_model=List[Currency])
def list_currencies() -> List[Currency]:
    return [Currency(**c) for c in CURRENCIES]


@router.get("/features", response_model=List[str])
def list_feature_options() -> List[str]:
    return list(FEATURE_OPTIONS)


@router.post("/financing", response_model=FinancingResponse, status_code=201)
def submit_financing_request(
    req: FinancingRequest,
    store: PropertyStore = Depends(get_store),
) -> FinancingResponse:
    """Record a financing request; no login required."""
    result = store.submit_financing_request(req.model_dump())

    if IS_DEV:
        print(f"[FINANCING] Request id={result['id']} currency={req.preferred_currency}")

    return FinancingResponse(**result)

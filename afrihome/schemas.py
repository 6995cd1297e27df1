"""
afrihome/schemas.py

Pydantic schemas for every request body the API accepts, plus the search
response shapes. All validation of client input happens here, at the HTTP
boundary; the store and the filter engine trust what they are given.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from afrihome.models import CamelModel, ListingType, PropertyStatus, PropertyType, User
from afrihome.payloads import normalize_list_payload


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


# ========================================================================
# SEARCH SCHEMAS
# ========================================================================

NUMERIC_CRITERIA = ("min_price", "max_price", "bedrooms", "bathrooms", "min_area", "max_area", "year_built")
INTEGER_CRITERIA = ("bedrooms", "bathrooms", "year_built")


class SearchCriteria(CamelModel):
    """Optional constraints for a property search; an absent field means "any".

    Unknown keys are ignored. Blank strings and an empty features list are
    normalized to absent so that equivalent requests compare equal.
    """
    model_config = ConfigDict(extra="ignore")

    listing_type: Optional[str] = Field(None, max_length=50)
    country: Optional[str] = Field(None, max_length=100)
    property_type: Optional[str] = Field(None, max_length=50)
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    min_area: Optional[float] = Field(None, ge=0)
    max_area: Optional[float] = Field(None, ge=0)
    year_built: Optional[int] = Field(None, ge=0)
    features: Optional[List[str]] = None

    @field_validator("listing_type", "country", "property_type", mode="before")
    @classmethod
    def blank_strings_are_absent(cls, v):
        return _blank_to_none(v)

    @field_validator("features")
    @classmethod
    def dedupe_features(cls, v):
        """Features are a set: drop blanks and repeats, keep first-seen order.

        Tags travel comma-joined in shareable search URLs, so a tag may not
        contain a comma.
        """
        if v is None:
            return None
        seen: List[str] = []
        for tag in v:
            tag = tag.strip()
            if "," in tag:
                raise ValueError(f"feature tag may not contain a comma: {tag!r}")
            if tag and tag not in seen:
                seen.append(tag)
        return seen or None

    def active_fields(self) -> List[str]:
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    def is_empty(self) -> bool:
        return not self.active_fields()


class PropertySummary(CamelModel):
    """Display-ready view of a listing."""
    id: int
    title: str
    city: str
    country: str
    neighborhood: Optional[str] = None
    property_type: str
    listing_type: str
    status: str
    featured: bool
    price: float
    formatted_price: str
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    area: Optional[float] = None
    year_built: Optional[int] = None
    main_image: str
    images: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    created_at: str
    listed_ago: str


class PropertySearchResponse(CamelModel):
    """Response for the shareable (query string) search."""
    criteria: SearchCriteria
    sort: str
    query: str
    path: str
    total: int = 0
    results: List[PropertySummary] = Field(default_factory=list)


# ========================================================================
# PROPERTY SCHEMAS
# ========================================================================

class PropertyCreateRequest(CamelModel):
    """Body for POST /api/properties.

    id, userId and createdAt are assigned server side and ignored if sent.
    features/images accept a JSON-encoded array or a native list and are
    stored in the encoded form.
    """
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    price: float = Field(..., gt=0)
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    area: Optional[float] = Field(None, gt=0)
    country: str = Field(..., min_length=1, max_length=100)
    city: str = Field(..., min_length=1, max_length=100)
    neighborhood: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=200)
    property_type: PropertyType
    listing_type: ListingType
    year_built: Optional[int] = Field(None, ge=1800)
    features: Optional[str] = None
    main_image: str = Field(..., min_length=1, max_length=2000)
    images: Optional[str] = None
    featured: bool = False
    status: PropertyStatus = PropertyStatus.active

    @field_validator("title", "description", "country", "city", "main_image", mode="before")
    @classmethod
    def trim_required(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("neighborhood", "address", mode="before")
    @classmethod
    def trim_optional(cls, v):
        return _blank_to_none(v)

    @field_validator("year_built")
    @classmethod
    def year_not_in_future(cls, v):
        if v is not None and v > datetime.now().year + 5:
            raise ValueError("yearBuilt is too far in the future")
        return v

    @field_validator("main_image")
    @classmethod
    def main_image_is_url(cls, v):
        if not v.startswith(("http://", "https://")):
            raise ValueError("mainImage must be an http(s) URL")
        return v

    @field_validator("features", "images", mode="before")
    @classmethod
    def encode_list_payload(cls, v):
        return normalize_list_payload(v)

    @field_validator("features", "images")
    @classmethod
    def payload_is_string_array(cls, v):
        if v is None:
            return None
        try:
            decoded = json.loads(v)
        except json.JSONDecodeError:
            raise ValueError("must be a JSON-encoded array of strings")
        if not isinstance(decoded, list) or not all(isinstance(i, str) for i in decoded):
            raise ValueError("must be a JSON-encoded array of strings")
        return v


# ========================================================================
# AUTH SCHEMAS
# ========================================================================

class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=200)
    email: EmailStr
    full_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    is_agent: bool = False

    @field_validator("username", mode="before")
    @classmethod
    def trim_username(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("full_name", "phone", mode="before")
    @classmethod
    def trim_optional(cls, v):
        return _blank_to_none(v)


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: User


# ========================================================================
# FINANCING SCHEMAS
# ========================================================================

class FinancingRequest(CamelModel):
    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)
    salary: float = Field(..., gt=0)
    job_title: str = Field(..., min_length=1, max_length=100)
    loan_amount: float = Field(..., gt=0)
    monthly_payment: float = Field(..., gt=0)
    preferred_currency: str = Field(..., min_length=1, max_length=10)
    phone_number: Optional[str] = Field(None, max_length=30)
    additional_comments: Optional[str] = Field(None, max_length=2000)

    @field_validator("full_name", "city", "country", "job_title", "preferred_currency", mode="before")
    @classmethod
    def trim_required(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class FinancingResponse(CamelModel):
    id: int
    success: bool


class Currency(CamelModel):
    code: str
    name: str

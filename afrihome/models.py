from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime, timezone
from enum import Enum


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# Enums
class PropertyType(str, Enum):
    apartment = "apartment"
    house = "house"
    villa = "villa"
    land = "land"
    commercial = "commercial"

class ListingType(str, Enum):
    sale = "sale"
    rent = "rent"

class PropertyStatus(str, Enum):
    active = "active"
    sold = "sold"
    rented = "rented"


class CamelModel(BaseModel):
    """Base for every model exchanged with the web client (camelCase on the wire)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


# Models
class User(CamelModel):
    id: int
    username: str
    password_hash: str = Field(exclude=True, repr=False)
    email: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    is_agent: bool = False
    created_at: str = Field(default_factory=utc_now_iso)

class Property(CamelModel):
    id: int
    title: str
    description: str
    price: float
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    area: Optional[float] = None
    country: str
    city: str
    neighborhood: Optional[str] = None
    address: Optional[str] = None
    property_type: PropertyType
    listing_type: ListingType
    year_built: Optional[int] = None
    features: Optional[str] = None  # JSON-encoded array of tags
    main_image: str
    images: Optional[str] = None  # JSON-encoded array of URLs
    user_id: int
    featured: bool = False
    status: PropertyStatus = PropertyStatus.active
    created_at: str = Field(default_factory=utc_now_iso)

class FinancingRecord(CamelModel):
    id: int
    full_name: str
    email: str
    city: str
    country: str
    salary: float
    job_title: str
    loan_amount: float
    monthly_payment: float
    preferred_currency: str
    phone_number: Optional[str] = None
    additional_comments: Optional[str] = None
    timestamp: str = Field(default_factory=utc_now_iso)

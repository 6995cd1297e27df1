"""
afrihome/seed.py

Demo data for a fresh store: one agent account and six listings across
Lagos, Nairobi, Cape Town, Accra, Cairo and Dar es Salaam. Featured status is
set at creation time (Lagos, Cape Town and Dar es Salaam).
"""

from __future__ import annotations

from typing import Any, Dict, List

from afrihome.auth_context import hash_password
from afrihome.config import IS_DEV
from afrihome.models import Property, User
from afrihome.payloads import encode_string_list
from afrihome.storage import PropertyStore

DEMO_AGENT: Dict[str, Any] = {
    "username": "demo_agent",
    "password": "password123",
    "email": "agent@afrihome.com",
    "full_name": "Demo Agent",
    "phone": "+234 123 4567 890",
    "is_agent": True,
}

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=800&q=80"


def _listing(photo_ids: List[str], features: List[str], **fields: Any) -> Dict[str, Any]:
    urls = [_UNSPLASH.format(photo_id) for photo_id in photo_ids]
    return {
        **fields,
        "listing_type": "sale",
        "features": encode_string_list(features),
        "main_image": urls[0],
        "images": encode_string_list(urls),
    }


DEMO_LISTINGS: List[Dict[str, Any]] = [
    _listing(
        ["1512917774080-9991f1c4c750", "1560448204-e02f11c3d0e2"],
        ["Pool", "Garden", "Security", "Garage"],
        title="Luxury Villa in Lagos",
        description="Beautiful luxury villa with modern amenities in the heart of Lagos.",
        price=450000, bedrooms=4, bathrooms=3, area=350,
        country="Nigeria", city="Lagos", neighborhood="Lekki", address="123 Lekki Road, Lagos",
        property_type="villa", year_built=2020, featured=True,
    ),
    _listing(
        ["1600596542815-ffad4c1539a9", "1567767292278-a4f21aa2d36e"],
        ["Security", "Parking", "Gym", "Furnished"],
        title="Modern Apartment in Nairobi",
        description="Stylish modern apartment in the upscale Westlands area.",
        price=220000, bedrooms=2, bathrooms=2, area=120,
        country="Kenya", city="Nairobi", neighborhood="Westlands", address="45 Westlands Avenue, Nairobi",
        property_type="apartment", year_built=2018, featured=False,
    ),
    _listing(
        ["1564013799919-ab600027ffc6", "1576941089067-2de3c901e126"],
        ["Pool", "Garden", "Garage", "Security"],
        title="Family Home in Cape Town",
        description="Spacious family home with garden and swimming pool in Constantia.",
        price=380000, bedrooms=5, bathrooms=3, area=420,
        country="South Africa", city="Cape Town", neighborhood="Constantia", address="78 Constantia Road, Cape Town",
        property_type="house", year_built=2010, featured=True,
    ),
    _listing(
        ["1448630360428-65456885c650", "1505081598304-3bee85f930d4"],
        ["Beach Access", "Pool", "Security", "Furnished"],
        title="Beachfront Property in Accra",
        description="Stunning beachfront property with amazing sea views in Labadi.",
        price=530000, bedrooms=4, bathrooms=4, area=380,
        country="Ghana", city="Accra", neighborhood="Labadi", address="12 Labadi Beach Road, Accra",
        property_type="villa", year_built=2015, featured=False,
    ),
    _listing(
        ["1605276374104-dee2a0ed3cd6", "1502672260266-1c1ef2d93688"],
        ["Security", "Gym", "Parking", "River View"],
        title="Luxury Apartment in Cairo",
        description="Elegant luxury apartment in the prestigious Zamalek district.",
        price=280000, bedrooms=3, bathrooms=2, area=180,
        country="Egypt", city="Cairo", neighborhood="Zamalek", address="35 Zamalek Street, Cairo",
        property_type="apartment", year_built=2017, featured=False,
    ),
    _listing(
        ["1600607687939-ce8a6c25118c", "1574739782594-db4ead022697"],
        ["Ocean View", "Garden", "Security", "Garage"],
        title="Modern House in Dar es Salaam",
        description="Contemporary house with panoramic views in the Masaki area.",
        price=320000, bedrooms=4, bathrooms=3, area=310,
        country="Tanzania", city="Dar es Salaam", neighborhood="Masaki", address="56 Masaki Road, Dar es Salaam",
        property_type="house", year_built=2019, featured=True,
    ),
]


def seed_demo_data(store: PropertyStore) -> List[Property]:
    """Create the demo agent and the six demo listings; returns the listings."""
    agent_data = dict(DEMO_AGENT)
    agent_data["password_hash"] = hash_password(agent_data.pop("password"))
    agent: User = store.create_user(agent_data)

    created = [store.create_property(listing, owner_id=agent.id) for listing in DEMO_LISTINGS]

    if IS_DEV:
        print(f"[SEED] Seeded {len(created)} listings for user_id={agent.id}")
    return created

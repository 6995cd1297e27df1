"""
afrihome/storage.py

In-memory record store for users, property listings, financing requests and
login sessions.

Each PropertyStore instance owns its tables (id -> record) and one monotonic
id counter per table, starting at 1. Ids are never reused. Nothing survives a
process restart.

FastAPI runs sync endpoints on a thread pool, so every mutation and every
scan happens under the store's lock; scans return lists built under the lock.

The store performs no validation: request bodies are validated by the
schemas in afrihome/schemas.py before they get here.
"""

from __future__ import annotations

import secrets
import threading
from typing import Any, Dict, List, Optional

from afrihome.config import IS_DEV
from afrihome.models import FinancingRecord, Property, PropertyStatus, User, utc_now_iso
from afrihome.schemas import SearchCriteria
from afrihome.search import filter_properties


class DuplicateUsernameError(ValueError):
    pass


class PropertyStore:
    """Process-lifetime table of users, listings and financing requests."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._users: Dict[int, User] = {}
        self._properties: Dict[int, Property] = {}
        self._financing_requests: Dict[int, FinancingRecord] = {}
        self._sessions: Dict[str, int] = {}
        self._next_user_id = 1
        self._next_property_id = 1
        self._next_financing_id = 1

    # ---------------------------------------------------------
    # Users
    # ---------------------------------------------------------
    def create_user(self, data: Dict[str, Any]) -> User:
        """
        Assign an id, stamp createdAt and store the user.

        Raises:
            DuplicateUsernameError: username already taken (checked under the lock)
        """
        with self._lock:
            if self._find_username(data.get("username")) is not None:
                raise DuplicateUsernameError("Username already exists")
            user_id = self._next_user_id
            self._next_user_id += 1
            user = User(**{**data, "id": user_id, "created_at": utc_now_iso()})
            self._users[user_id] = user

        if IS_DEV:
            print(f"[STORE] Created user_id={user_id}, username={user.username!r}")
        return user

    def _find_username(self, username: Optional[str]) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return self._find_username(username)

    # ---------------------------------------------------------
    # Properties
    # ---------------------------------------------------------
    def create_property(self, data: Dict[str, Any], owner_id: int) -> Property:
        """
        Assign an id, stamp createdAt, force status=active and store the listing.

        `featured` is taken from data when present (defaults to False).
        Caller-supplied id, userId, createdAt and status are overwritten.
        """
        with self._lock:
            property_id = self._next_property_id
            self._next_property_id += 1
            prop = Property(**{
                **data,
                "id": property_id,
                "user_id": owner_id,
                "created_at": utc_now_iso(),
                "status": PropertyStatus.active.value,
                "featured": bool(data.get("featured", False)),
            })
            self._properties[property_id] = prop

        if IS_DEV:
            print(f"[STORE] Created property_id={property_id}, owner_id={owner_id}, featured={prop.featured}")
        return prop

    def get_property(self, property_id: int) -> Optional[Property]:
        with self._lock:
            return self._properties.get(property_id)

    def get_all_properties(self) -> List[Property]:
        with self._lock:
            return list(self._properties.values())

    def get_featured_properties(self) -> List[Property]:
        with self._lock:
            return [p for p in self._properties.values() if p.featured]

    def get_user_properties(self, owner_id: int) -> List[Property]:
        with self._lock:
            return [p for p in self._properties.values() if p.user_id == owner_id]

    def search_properties(self, criteria: SearchCriteria) -> List[Property]:
        """Filter a snapshot of the table; insertion order is preserved."""
        return filter_properties(self.get_all_properties(), criteria)

    def count_properties(self) -> int:
        with self._lock:
            return len(self._properties)

    # ---------------------------------------------------------
    # Financing requests
    # ---------------------------------------------------------
    def submit_financing_request(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            request_id = self._next_financing_id
            self._next_financing_id += 1
            self._financing_requests[request_id] = FinancingRecord(
                **{**data, "id": request_id, "timestamp": utc_now_iso()}
            )

        if IS_DEV:
            print(f"[STORE] Stored financing request id={request_id}")
        return {"id": request_id, "success": True}

    def get_financing_request(self, request_id: int) -> Optional[FinancingRecord]:
        with self._lock:
            return self._financing_requests.get(request_id)

    # ---------------------------------------------------------
    # Sessions
    # ---------------------------------------------------------
    def open_session(self, user_id: int) -> str:
        session_id = secrets.token_urlsafe(16)
        with self._lock:
            self._sessions[session_id] = user_id
        return session_id

    def session_user_id(self, session_id: Optional[str]) -> Optional[int]:
        if not session_id:
            return None
        with self._lock:
            return self._sessions.get(session_id)

    def close_session(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


# ---------------------------------------------------------
# Default store (FastAPI dependency)
# ---------------------------------------------------------
_default_store: Optional[PropertyStore] = None
_default_lock = threading.Lock()


def get_store() -> PropertyStore:
    """
    Return the process-wide store, creating (and seeding) it on first use.
    Tests replace this dependency via app.dependency_overrides.
    """
    global _default_store
    if _default_store is None:
        with _default_lock:
            if _default_store is None:
                from afrihome.config import SEED_DEMO_DATA
                from afrihome.seed import seed_demo_data

                store = PropertyStore()
                if SEED_DEMO_DATA:
                    seed_demo_data(store)
                _default_store = store
    return _default_store

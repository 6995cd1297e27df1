"""
afrihome/client.py
Python client for the AfriHome API.

This module ensures:
1. Every call returns an ApiResult tagged "success" or "error" instead of
   raising, so callers branch on one value rather than ad hoc flags
2. The bearer token from login/register is attached automatically
3. Search state round-trips through shareable URLs via the query codec
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

import requests

from afrihome.config import IS_DEV
from afrihome.query_codec import build_search_path, encode_criteria, split_sort
from afrihome.schemas import SearchCriteria

DEFAULT_BASE_URL = "http://127.0.0.1:8000"


def get_api_base_url() -> str:
    """
    Priority:
    1. AFRIHOME_API_URL environment variable
    2. Local default (http://127.0.0.1:8000)
    """
    return os.environ.get("AFRIHOME_API_URL", "").strip().rstrip("/") or DEFAULT_BASE_URL


@dataclass
class ApiResult:
    status: Literal["success", "error"]
    data: Any = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200] or f"HTTP {resp.status_code}"
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return f"HTTP {resp.status_code}"


class AfrihomeClient:
    def __init__(self, base_url: Optional[str] = None, token: Optional[str] = None, timeout: int = 20) -> None:
        self.base_url = (base_url or get_api_base_url()).rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = requests.Session()

    # ---------------------------------------------------------
    # Transport
    # ---------------------------------------------------------
    def request(
        self,
        method: Literal["GET", "POST"],
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[str] = None,
    ) -> ApiResult:
        """Make a request; never raises for HTTP or connection failures."""
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{params}"

        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        try:
            resp = self.session.request(method, url, json=json, headers=headers, timeout=self.timeout)
        except requests.exceptions.Timeout:
            if IS_DEV:
                print(f"[API] Timeout on {method} {path}")
            return ApiResult(status="error", error=f"Request timed out after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            if IS_DEV:
                print(f"[API] Connection error on {method} {path}: {type(e).__name__}")
            return ApiResult(status="error", error=f"Cannot connect to {self.base_url}")

        if resp.status_code >= 400:
            if IS_DEV:
                print(f"[API] {resp.status_code} on {method} {path}")
            return ApiResult(status="error", status_code=resp.status_code, error=_error_message(resp))

        try:
            data = resp.json()
        except ValueError:
            data = None
        return ApiResult(status="success", data=data, status_code=resp.status_code)

    # ---------------------------------------------------------
    # Accounts
    # ---------------------------------------------------------
    def _store_token(self, result: ApiResult) -> ApiResult:
        if result.ok and isinstance(result.data, dict):
            self.token = result.data.get("accessToken")
        return result

    def register(self, username: str, password: str, email: str, **extra: Any) -> ApiResult:
        body = {"username": username, "password": password, "email": email, **extra}
        return self._store_token(self.request("POST", "/api/register", json=body))

    def login(self, username: str, password: str) -> ApiResult:
        body = {"username": username, "password": password}
        return self._store_token(self.request("POST", "/api/login", json=body))

    def logout(self) -> ApiResult:
        result = self.request("POST", "/api/logout")
        self.token = None
        return result

    # ---------------------------------------------------------
    # Listings
    # ---------------------------------------------------------
    def list_properties(self) -> ApiResult:
        return self.request("GET", "/api/properties")

    def featured_properties(self) -> ApiResult:
        return self.request("GET", "/api/properties/featured")

    def get_property(self, property_id: int) -> ApiResult:
        return self.request("GET", f"/api/properties/{property_id}")

    def user_properties(self, user_id: int) -> ApiResult:
        return self.request("GET", f"/api/user/{user_id}/properties")

    def create_property(self, listing: Dict[str, Any]) -> ApiResult:
        return self.request("POST", "/api/properties", json=listing)

    def search(self, criteria: SearchCriteria) -> ApiResult:
        """POST search; returns raw listings in insertion order."""
        body = criteria.model_dump(by_alias=True, exclude_none=True)
        return self.request("POST", "/api/properties/search", json=body)

    def search_by_query(self, criteria: SearchCriteria, sort: Optional[str] = None) -> ApiResult:
        """GET search; returns sorted summaries plus the shareable path."""
        query = encode_criteria(criteria)
        if sort:
            query = f"{query}&sort={sort}" if query else f"sort={sort}"
        return self.request("GET", "/api/properties/search", params=query)

    # ---------------------------------------------------------
    # Financing
    # ---------------------------------------------------------
    def submit_financing(self, request: Dict[str, Any]) -> ApiResult:
        return self.request("POST", "/api/financing", json=request)

    # ---------------------------------------------------------
    # Shareable search URLs
    # ---------------------------------------------------------
    def share_url(self, criteria: SearchCriteria, sort: Optional[str] = None) -> str:
        return f"{self.base_url}{build_search_path(criteria, sort)}"

    @staticmethod
    def criteria_from_url(url: str) -> SearchCriteria:
        criteria, _ = split_sort(url)
        return criteria

    @staticmethod
    def sort_from_url(url: str) -> Optional[str]:
        _, sort = split_sort(url)
        return sort


def summaries(result: ApiResult) -> List[Dict[str, Any]]:
    """Result list of a search_by_query() call (empty on error)."""
    if not result.ok or not isinstance(result.data, dict):
        return []
    return list(result.data.get("results", []))

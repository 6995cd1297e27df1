"""
afrihome/auth_context.py

Authentication primitives for FastAPI dependency injection.

Contains:
- hash_password / verify_password: salted SHA-256 credentials
- create_access_token / verify_token: HS256 JWTs carrying user id + session id
- AuthContext: immutable identity of the caller
- require_auth_context: FastAPI dependency that turns a bearer token into an
  AuthContext or fails with 401

Sessions live in the store; logging out closes the session and every token
issued for it stops working, even before it expires.
"""

from __future__ import annotations

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict

from afrihome.config import ACCESS_TOKEN_MINUTES, ALGORITHM, IS_DEV, SECRET_KEY
from afrihome.storage import PropertyStore, get_store

# auto_error=False: a missing header must produce 401, not FastAPI's default
security = HTTPBearer(auto_error=False)


# ---------------------------------------------------------
# Password hashing
# ---------------------------------------------------------
def hash_password(password: str, salt: Optional[str] = None) -> str:
    salt = salt or secrets.token_hex(8)
    digest = hashlib.sha256(f"{salt}{password}".encode()).hexdigest()
    return f"{salt}${digest}"


def verify_password(password: str, password_hash: str) -> bool:
    salt, sep, _ = password_hash.partition("$")
    if not sep:
        return False
    return hmac.compare_digest(hash_password(password, salt), password_hash)


# ---------------------------------------------------------
# JWT
# ---------------------------------------------------------
def create_access_token(user_id: int, session_id: str) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_MINUTES)
    payload = {"sub": str(user_id), "session_id": session_id, "exp": expires}
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Verify JWT access token and return decoded payload.

    Raises:
        HTTPException(401): If token is expired or invalid
    """
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


# ---------------------------------------------------------
# AuthContext
# ---------------------------------------------------------
class AuthContext(BaseModel):
    """
    Identity of an authenticated caller, derived from the token and the store.
    Never trust a user id taken from a request body.
    """
    model_config = ConfigDict(frozen=True)

    user_id: int
    username: str
    session_id: str
    is_agent: bool = False


def require_auth_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: PropertyStore = Depends(get_store),
) -> AuthContext:
    """
    FastAPI dependency for routes that need a logged-in user.

    Process:
    1. Require an Authorization: Bearer header
    2. Verify JWT signature and expiry
    3. Check the session is still open and belongs to the token's user
    4. Load the user record (store is source of truth)

    Raises:
        HTTPException(401): on any failure
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="You must be logged in")

    payload = verify_token(credentials.credentials)
    user_id = payload.get("sub")
    session_id = payload.get("session_id")

    if not user_id or not session_id:
        if IS_DEV:
            print("[AUTH] Missing sub or session_id in token payload")
        raise HTTPException(status_code=401, detail="Invalid token payload")

    try:
        user_id = int(user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid token payload")

    if store.session_user_id(session_id) != user_id:
        if IS_DEV:
            print(f"[AUTH] Session not active: user_id={user_id}")
        raise HTTPException(status_code=401, detail="Session expired")

    user = store.get_user(user_id)
    if user is None:
        if IS_DEV:
            print(f"[AUTH] User not found: user_id={user_id}")
        raise HTTPException(status_code=401, detail="User not found")

    return AuthContext(
        user_id=user.id,
        username=user.username,
        session_id=session_id,
        is_agent=user.is_agent,
    )

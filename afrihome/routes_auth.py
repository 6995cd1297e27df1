"""
afrihome/routes_auth.py

Registration, login, logout and current-user endpoints.

Passwords are never returned or logged; the User model excludes the hash
from every serialization.
"""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException

from afrihome.auth_context import (
    AuthContext,
    create_access_token,
    hash_password,
    require_auth_context,
    verify_password,
)
from afrihome.config import IS_DEV
from afrihome.models import User
from afrihome.schemas import LoginRequest, RegisterRequest, TokenResponse
from afrihome.storage import DuplicateUsernameError, PropertyStore, get_store


router = APIRouter(prefix="/api", tags=["auth"])


def _issue_token(store: PropertyStore, user: User) -> TokenResponse:
    session_id = store.open_session(user.id)
    return TokenResponse(access_token=create_access_token(user.id, session_id), user=user)


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(req: RegisterRequest, store: PropertyStore = Depends(get_store)) -> TokenResponse:
    data = req.model_dump(exclude={"password"})
    data["password_hash"] = hash_password(req.password)

    try:
        user = store.create_user(data)
    except DuplicateUsernameError as e:
        if IS_DEV:
            print(f"[REGISTER] Username taken: {req.username!r}")
        raise HTTPException(status_code=400, detail=str(e))

    if IS_DEV:
        print(f"[REGISTER] User created with id={user.id}, is_agent={user.is_agent}")

    return _issue_token(store, user)


@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest, store: PropertyStore = Depends(get_store)) -> TokenResponse:
    user = store.get_user_by_username(req.username.strip())

    if user is None or not verify_password(req.password, user.password_hash):
        if IS_DEV:
            print("[LOGIN] Invalid credentials")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    if IS_DEV:
        print(f"[LOGIN] Session created: user_id={user.id}")

    return _issue_token(store, user)


@router.post("/logout")
def logout(
    ctx: AuthContext = Depends(require_auth_context),
    store: PropertyStore = Depends(get_store),
) -> Dict[str, bool]:
    store.close_session(ctx.session_id)

    if IS_DEV:
        print(f"[LOGOUT] Session closed: user_id={ctx.user_id}")

    return {"success": True}


@router.get("/user", response_model=User)
def current_user(
    ctx: AuthContext = Depends(require_auth_context),
    store: PropertyStore = Depends(get_store),
) -> User:
    user = store.get_user(ctx.user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="User not found")
    return user

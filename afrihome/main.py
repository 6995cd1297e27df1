# ---------------------------------------------------------
# afrihome/main.py
# AfriHome - real-estate marketplace backend
#
# Run: uvicorn afrihome.main:app --reload (from repo root)
#
# - FastAPI + in-memory store
# - /api/properties          : catalog, featured, lookup, create
# - /api/properties/search   : filter engine (JSON body or query string)
# - /api/user/{id}/properties: listings owned by a user
# - /api/register, /api/login, /api/logout, /api/user : accounts
# - /api/countries, /api/currencies, /api/features, /api/financing
# ---------------------------------------------------------

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from afrihome.config import CORS_ORIGINS, IS_DEV, IS_PROD
from afrihome.routes_auth import router as auth_router
from afrihome.routes_properties import router as properties_router
from afrihome.routes_reference import router as reference_router

# ---------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------
app = FastAPI(title="AfriHome Backend", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS if IS_PROD else ["*"],  # Restrict origins in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(properties_router)
app.include_router(auth_router)
app.include_router(reference_router)


# ---------------------------------------------------------
# Error handling
# ---------------------------------------------------------
VALIDATION_MESSAGES = {
    "/api/properties/search": "Invalid search parameters",
    "/api/properties": "Invalid property data",
    "/api/register": "Invalid registration data",
    "/api/login": "Invalid login data",
    "/api/financing": "Invalid financing request",
}

_LOCATION_PREFIXES = ("body", "query", "path", "header", "cookie")


def field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic/FastAPI errors into {field, message, type} entries."""
    flattened = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        flattened.append({
            "field": ".".join(loc) or "body",
            "message": str(err.get("msg", "Invalid value")),
            "type": str(err.get("type", "value_error")),
        })
    return flattened


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = VALIDATION_MESSAGES.get(request.url.path.rstrip("/"), "Invalid request")
    errors = field_errors(list(exc.errors()))

    if IS_DEV:
        print(f"[API] 400 {request.method} {request.url.path}: {[e['field'] for e in errors]}")

    return JSONResponse(status_code=400, content={"detail": detail, "errors": errors})


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if IS_DEV:
        print(f"[API] 500 {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ---------------------------------------------------------
# Routes
# ---------------------------------------------------------
@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}

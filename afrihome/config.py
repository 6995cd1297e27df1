# afrihome/config.py
# Environment-aware configuration for the AfriHome backend

import os
from typing import Literal

# Environment detection
ENV: Literal["dev", "staging", "prod"] = os.environ.get("ENV", "dev")  # type: ignore
IS_DEV = (ENV == "dev")
IS_STAGING = (ENV == "staging")
IS_PROD = (ENV == "prod")

# JWT and session configuration
SECRET_KEY = os.environ.get("SECRET_KEY", "afrihome-dev-secret")
ALGORITHM = "HS256"

# Token lifetime
ACCESS_TOKEN_MINUTES = int(os.environ.get("ACCESS_TOKEN_MINUTES", "60"))

# Seed the default in-memory store with the demo listings on startup
SEED_DEMO_DATA = os.environ.get("SEED_DEMO_DATA", "true").lower() in ("1", "true", "yes")

# Sort applied to listing pages when the caller does not pick one
DEFAULT_SORT = "newest"

# CORS origins (expand for staging/prod)
CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

if IS_STAGING:
    staging_url = os.environ.get("CORS_ORIGINS", "")
    if staging_url:
        CORS_ORIGINS.extend(staging_url.split(","))
    else:
        CORS_ORIGINS.append("https://staging.afrihome.com")

if IS_PROD:
    prod_origins = os.environ.get("CORS_ORIGINS", "")
    if prod_origins:
        CORS_ORIGINS.extend(prod_origins.split(","))
    else:
        CORS_ORIGINS.append("https://afrihome.com")

print(f"[CONFIG] Environment: {ENV}")
print(f"[CONFIG] Storage: in-memory (seed demo data: {SEED_DEMO_DATA})")
print(f"[CONFIG] Access token: {ACCESS_TOKEN_MINUTES} minutes")

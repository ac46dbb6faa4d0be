from __future__ import annotations

import os

STORE_MEMORY = "memory"
STORE_SQL = "sql"

_DEV_SESSION_SECRET = "autohaven-dev-session-secret"
_TRUTHY = {"1", "true", "yes", "on"}


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def store_backend() -> str:
    """Which RecordStore backs the API: 'memory' (default) or 'sql'."""
    backend = os.getenv("AUTOHAVEN_STORE", STORE_MEMORY).strip().lower()

    if backend not in (STORE_MEMORY, STORE_SQL):
        raise RuntimeError(
            f"AUTOHAVEN_STORE must be '{STORE_MEMORY}' or '{STORE_SQL}', got '{backend}'"
        )

    return backend


def seed_sample_data() -> bool:
    return os.getenv("AUTOHAVEN_SEED_SAMPLE_DATA", "true").strip().lower() in _TRUTHY


def session_secret() -> str:
    return os.getenv("AUTOHAVEN_SESSION_SECRET") or _DEV_SESSION_SECRET

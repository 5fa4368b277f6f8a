"""Database configuration and engine management for the dashboard seed service.

Exports:
- Base: declarative base for models
- engine: SQLAlchemy engine
- get_engine: FastAPI dependency that returns the engine used for seeding
- resolve_database_url(): pick and normalise the connection URL from env

Behavior:
- Reads POSTGRES_URL, then DATABASE_URL from env, falls back to a local SQLite
  file `dashboard_seed.db` in the project root.
- PostgreSQL URLs get `sslmode=require` unless they already set an sslmode.
- Uses connect_args for SQLite to allow multi-threaded access in dev.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

DB_SSLMODE: str = os.getenv("DB_SSLMODE", "require")


def _default_sqlite_url() -> str:
    db_path = PROJECT_ROOT / "dashboard_seed.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path.as_posix()}"


def normalize_database_url(url: str, sslmode: Optional[str] = DB_SSLMODE) -> str:
    """Return `url` in the form SQLAlchemy expects.

    Hosted Postgres providers hand out `postgres://` URLs which SQLAlchemy
    no longer accepts. For PostgreSQL an `sslmode` query parameter is added
    when missing, so transport is encrypted unless explicitly configured
    otherwise.
    """
    url = url.strip()
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]

    parsed = make_url(url)
    if parsed.get_backend_name() == "postgresql" and sslmode and "sslmode" not in parsed.query:
        parsed = parsed.update_query_dict({"sslmode": sslmode})
        url = parsed.render_as_string(hide_password=False)
    return url


def resolve_database_url() -> str:
    raw = os.getenv("POSTGRES_URL") or os.getenv("DATABASE_URL") or _default_sqlite_url()
    return normalize_database_url(raw)


def build_engine(url: str) -> Engine:
    engine_kwargs = {"future": True}
    if url.startswith("sqlite"):
        # SQLite requires `check_same_thread=False` when used from uvicorn threads
        return create_engine(url, connect_args={"check_same_thread": False}, **engine_kwargs)
    return create_engine(url, pool_pre_ping=True, **engine_kwargs)


DATABASE_URL: str = resolve_database_url()

engine = build_engine(DATABASE_URL)

# Declarative base for models
Base = declarative_base()


def get_engine() -> Engine:
    """Return the engine the seed endpoint runs against.

    Tests override this dependency to point the endpoint at their own database.
    """
    return engine


__all__ = [
    "Base",
    "engine",
    "DATABASE_URL",
    "build_engine",
    "get_engine",
    "normalize_database_url",
    "resolve_database_url",
]

"""Seed utilities for populating the dashboard database with placeholder data.

Contains `seed_database` which is reused by the system router and the
`scripts/seed_db.py` CLI.

One run works on a single connection and a single transaction:
- the "uuid-ossp" extension (PostgreSQL only) and the four tables are created
  if absent,
- users, customers, invoices and revenue are inserted in that order, each
  dataset as one multi-row INSERT that skips rows whose key already exists,
- any failure rolls everything back and surfaces as a `SeedError`.
"""
from __future__ import annotations

import logging
import os
import uuid
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from sqlalchemy import func, inspect, select, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from dashboard_seed.errors import SeedConstraintError, SeedError, SeedSetupError
from dashboard_seed.models import SEED_TABLES
from dashboard_seed.placeholder_data import SeedDatasets, default_datasets
from dashboard_seed.schemas import CustomerSeed, InvoiceSeed, RevenueSeed, UserSeed
from dashboard_seed.security import get_password_hash

logger = logging.getLogger(__name__)

HASH_WORKERS = int(os.getenv("SEED_HASH_WORKERS", "4"))

# Dialects with INSERT ... ON CONFLICT DO NOTHING support
_INSERT_BUILDERS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _error_details(exc: BaseException, dataset: Optional[str] = None) -> dict:
    orig = getattr(exc, "orig", None) or exc
    return {
        "dataset": dataset,
        "type": type(orig).__name__,
        "message": str(orig).strip(),
        "sqlstate": getattr(orig, "pgcode", None) or getattr(orig, "sqlite_errorname", None),
    }


def ensure_schema(conn: Connection) -> None:
    """Create the UUID extension and the seed tables if they do not exist."""
    dialect = conn.dialect.name
    if dialect not in _INSERT_BUILDERS:
        raise SeedSetupError(f"Unsupported database dialect: {dialect}", {"dialect": dialect})

    stage: Optional[str] = None
    try:
        if dialect == "postgresql":
            conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
        for stage, (table, _key) in SEED_TABLES.items():
            table.create(bind=conn, checkfirst=True)
            # Tables created by an earlier schema may lack the conflict-key index
            for index in table.indexes:
                index.create(bind=conn, checkfirst=True)
    except SQLAlchemyError as exc:
        message = f"Failed to create seed schema: {exc.__class__.__name__}"
        raise SeedSetupError(message, _error_details(exc, stage)) from exc


def _record_id(record) -> uuid.UUID:
    """Return the record's id, or one derived from its email.

    A derived id is stable across runs, so conflict-skip on `id` also covers
    records that were seeded without one.
    """
    if record.id is not None:
        return record.id
    return uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{record.email.lower()}")


def _user_rows(users: Sequence[UserSeed]) -> List[dict]:
    if not users:
        return []
    # Hashing dominates the cost of a user row; fan it out and join before inserting
    with ThreadPoolExecutor(max_workers=max(1, min(HASH_WORKERS, len(users)))) as pool:
        hashes = list(pool.map(get_password_hash, [u.password for u in users]))
    return [
        {"id": _record_id(u), "name": u.name, "email": u.email, "password": hashed}
        for u, hashed in zip(users, hashes)
    ]


def _customer_rows(customers: Sequence[CustomerSeed]) -> List[dict]:
    return [{**c.model_dump(), "id": _record_id(c)} for c in customers]


def _invoice_rows(invoices: Sequence[InvoiceSeed]) -> List[dict]:
    return [i.model_dump() for i in invoices]


def _revenue_rows(revenue: Sequence[RevenueSeed]) -> List[dict]:
    return [r.model_dump() for r in revenue]


_ROW_BUILDERS = {
    "users": _user_rows,
    "customers": _customer_rows,
    "invoices": _invoice_rows,
    "revenue": _revenue_rows,
}


def insert_dataset(conn: Connection, name: str, rows: List[dict]) -> None:
    """Insert `rows` into the table for `name`, skipping rows whose key exists."""
    if not rows:
        return
    table, conflict_key = SEED_TABLES[name]
    stmt = _INSERT_BUILDERS[conn.dialect.name](table).on_conflict_do_nothing(index_elements=list(conflict_key))
    try:
        conn.execute(stmt, rows)
    except IntegrityError as exc:
        raise SeedConstraintError(f"Constraint violation while seeding {name}", _error_details(exc, name)) from exc
    except SQLAlchemyError as exc:
        raise SeedError(f"Database error while seeding {name}", _error_details(exc, name)) from exc


def seed_database(engine: Engine, datasets: Optional[SeedDatasets] = None, commit: bool = True) -> dict:
    """Create the seed tables and insert every dataset in one transaction.

    Returns a dict mapping dataset name to the number of records processed,
    which is the length of each input dataset whether or not its rows were
    new. With `commit=False` all work is rolled back at the end (dry run).

    Raises `SeedError` (or a subclass) on any failure; nothing is committed
    in that case. The connection is released on every path.
    """
    if datasets is None:
        datasets = default_datasets()

    logger.info("Starting database seeding...")
    try:
        conn = engine.connect()
    except SQLAlchemyError as exc:
        raise SeedSetupError("Could not connect to the database", _error_details(exc)) from exc

    with conn:
        try:
            with conn.begin() as trans:
                try:
                    ensure_schema(conn)
                    for name, build_rows in _ROW_BUILDERS.items():
                        records = getattr(datasets, name)
                        logger.info("Seeding %s...", name)
                        insert_dataset(conn, name, build_rows(records))
                        logger.info("%s seeded: %d records processed", name.capitalize(), len(records))
                except SeedError:
                    logger.error("Database seeding failed; rolling back")
                    raise
                except Exception as exc:
                    logger.error("Database seeding failed unexpectedly; rolling back")
                    raise SeedError(f"Unexpected error while seeding: {exc}", _error_details(exc)) from exc

                if not commit:
                    trans.rollback()
                    logger.info("Dry run: seeding rolled back")
        except SQLAlchemyError as exc:
            # Raised by COMMIT or ROLLBACK themselves
            raise SeedError("Failed to finish the seed transaction", _error_details(exc)) from exc

    summary = datasets.counts()
    if commit:
        logger.info("Database seeded successfully: %s", summary)
    return summary


def count_rows(engine: Engine) -> dict:
    """Return the current row count per seed table (0 when a table is missing)."""
    counts = {}
    with engine.connect() as conn:
        existing = set(inspect(conn).get_table_names())
        for name, (table, _key) in SEED_TABLES.items():
            if table.name not in existing:
                counts[name] = 0
                continue
            counts[name] = conn.execute(select(func.count()).select_from(table)).scalar_one()
    return counts


__all__ = ["seed_database", "ensure_schema", "insert_dataset", "count_rows"]

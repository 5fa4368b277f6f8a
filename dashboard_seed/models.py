"""SQLAlchemy models for the dashboard seed tables.

Models implemented:
- UserModel
- CustomerModel
- InvoiceModel
- RevenueModel

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from
`dashboard_seed.database`. Ids default to `uuid_generate_v4()` on the server and
to `uuid.uuid4()` when inserted through SQLAlchemy without one.
"""

from __future__ import annotations

import datetime
import uuid

from sqlalchemy import Date, Index, Integer, String, Text, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.expression import FunctionElement

from dashboard_seed.database import Base


class uuid_generate_v4(FunctionElement):
    """Server-side UUID default, rendered per dialect."""

    type = Uuid()
    inherit_cache = True


@compiles(uuid_generate_v4)
def _compile_uuid_default(element, compiler, **kw):
    # Provided by the "uuid-ossp" extension on PostgreSQL
    return "uuid_generate_v4()"


@compiles(uuid_generate_v4, "sqlite")
def _compile_uuid_default_sqlite(element, compiler, **kw):
    # SQLite stores Uuid as 32 hex chars without dashes
    return "lower(hex(randomblob(16)))"


def _uuid_pk() -> Mapped[uuid.UUID]:
    return mapped_column(Uuid, primary_key=True, default=uuid.uuid4, server_default=uuid_generate_v4())


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = _uuid_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = _uuid_pk()
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email}>"


class InvoiceModel(Base):
    __tablename__ = "invoices"
    # Also added to invoices tables that predate it, see seed.ensure_schema
    __table_args__ = (
        Index("invoices_natural_key", "customer_id", "amount", "status", "date", unique=True),
    )

    id: Mapped[uuid.UUID] = _uuid_pk()
    # References customers.id without a foreign key
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Invoice id={self.id} customer_id={self.customer_id} amount={self.amount} status={self.status}>"


class RevenueModel(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), unique=True, nullable=False)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)

    # The table has no primary key; `month` identifies rows for the mapper
    __mapper_args__ = {"primary_key": [month]}

    def __repr__(self) -> str:
        return f"<Revenue month={self.month} revenue={self.revenue}>"


# Seed order and the key each dataset skips on conflict
SEED_TABLES = {
    "users": (UserModel.__table__, ("id",)),
    "customers": (CustomerModel.__table__, ("id",)),
    "invoices": (InvoiceModel.__table__, ("customer_id", "amount", "status", "date")),
    "revenue": (RevenueModel.__table__, ("month",)),
}


__all__ = [
    "UserModel",
    "CustomerModel",
    "InvoiceModel",
    "RevenueModel",
    "SEED_TABLES",
    "uuid_generate_v4",
]

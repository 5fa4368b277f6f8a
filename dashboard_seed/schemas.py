"""Pydantic schemas for seed records and the seed endpoint responses."""

from __future__ import annotations

import datetime
import uuid
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


# ----------------------------- Seed records ---------------------------
class UserSeed(BaseModel):
    id: Optional[uuid.UUID] = None
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    # Plain text; hashed before insert
    password: str = Field(..., min_length=6)


class CustomerSeed(BaseModel):
    id: Optional[uuid.UUID] = None
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    image_url: str = Field(..., max_length=255)


class InvoiceSeed(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    customer_id: uuid.UUID
    amount: int = Field(..., ge=0, description="Amount in cents")
    status: InvoiceStatus
    date: datetime.date


class RevenueSeed(BaseModel):
    month: str = Field(..., min_length=1, max_length=4)
    revenue: int = Field(..., ge=0)


# ----------------------------- Responses ------------------------------
class SeedSummary(BaseModel):
    users: int
    customers: int
    invoices: int
    revenue: int


class SeedResponse(BaseModel):
    message: str
    summary: SeedSummary


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None


class ErrorResponse(BaseModel):
    error: ErrorBody

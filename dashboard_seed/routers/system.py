"""System routes: the database seed endpoint.

`GET /api/seed` creates the dashboard tables if needed and inserts the
placeholder datasets using the shared `dashboard_seed.seed.seed_database`
function. It takes no parameters and requires no authentication; calling it
repeatedly leaves existing rows untouched.

Failures raise `SeedError`, which the application-level exception handler in
`dashboard_seed.main` turns into a 500 response.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from dashboard_seed import schemas
from dashboard_seed.database import get_engine
from dashboard_seed.placeholder_data import SeedDatasets, default_datasets
from dashboard_seed.seed import seed_database

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["System"])


def get_seed_datasets() -> SeedDatasets:
    return default_datasets()


@router.get(
    "/seed",
    response_model=schemas.SeedResponse,
    responses={500: {"model": schemas.ErrorResponse, "description": "Seeding failed and was rolled back"}},
)
def seed_data(engine: Engine = Depends(get_engine), datasets: SeedDatasets = Depends(get_seed_datasets)) -> schemas.SeedResponse:
    """Seed the dashboard database with placeholder data (idempotent)."""
    summary = seed_database(engine, datasets)
    return schemas.SeedResponse(message="Database seeded successfully", summary=schemas.SeedSummary(**summary))

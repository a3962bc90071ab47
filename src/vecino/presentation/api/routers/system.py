"""Operational endpoints: database status and demo seeding."""

import logging

from fastapi import APIRouter, HTTPException, status

from vecino.domain.shared.time import utc_now
from vecino.presentation.api.dependencies import (
    DataStoreDep,
    PasswordServiceDep,
    SettingsDep,
)
from vecino.presentation.api.schemas.common import (
    DatabaseStatus,
    ErrorResponse,
    StatusResponse,
)
from vecino_demo.seed import seed_demo_data

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/status", summary="Database and service status")
async def get_status(store: DataStoreDep, settings: SettingsDep) -> StatusResponse:
    connected = False
    if store.is_available and store.connection is not None:
        report = await store.connection.health_check()
        connected = report["connected"]

    return StatusResponse(
        app=settings.app_name,
        database=DatabaseStatus(
            connected=connected,
            state="connected" if connected else "disconnected",
            type="MongoDB" if store.is_available else "simulated",
        ),
        timestamp=utc_now(),
    )


@router.post(
    "/seed",
    summary="Create demo data",
    responses={
        403: {"model": ErrorResponse, "description": "Demo seeding disabled"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
async def seed(
    store: DataStoreDep,
    settings: SettingsDep,
    password_service: PasswordServiceDep,
) -> dict:
    """Insert the demo user and provider. Enabled by DEMO_SEED_ENABLED."""
    if not settings.demo_seed_enabled:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Demo seeding is disabled",
        )

    user, provider = await seed_demo_data(store, password_service)
    logger.info("Demo data seeded (user %s, provider %s)", user.id, provider.id)
    return {
        "success": True,
        "message": "Demo data created successfully",
        "user": {"id": user.id, "email": user.email},
        "provider": {"id": provider.id, "name": provider.business_name},
    }

"""
Endpoints de salud del servicio de rentas.

/health informa el modo de disponibilidad y el almacenamiento activos;
/health/db sólo consulta la base cuando USE_IN_MEMORY=false.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.config import Settings, get_settings
from car_rental.infrastructure.db.engine import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter()


def _storage(settings: Settings) -> str:
    return "in-memory" if settings.use_in_memory else "sql"


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": "car-rental-api",
        "storage": _storage(settings),
        "availability_mode": settings.availability_mode.value,
    }


@router.get("/health/db")
async def health_check_db(
    settings: Settings = Depends(get_settings),
    session: AsyncSession = Depends(get_db_session),
):
    """Devuelve 503 si la base SQL no responde."""
    if settings.use_in_memory:
        return {"status": "healthy", "storage": "in-memory"}

    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Base de datos no disponible", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "storage": "sql", "error": "Database connection failed"},
        )
    return {"status": "healthy", "storage": "sql"}

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError

from ..database import ping
from ..dependencies import get_engine
from ..schemas.responses import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(db = Depends(get_engine)):
    """Liveness plus a store round-trip"""
    try:
        await ping(db)
        database = "connected"
    except SQLAlchemyError as e:
        logger.error("Database ping failed", extra={"error": str(e)})
        database = "unavailable"

    return HealthResponse(status="ok", message="BingeBase API is running", database=database)

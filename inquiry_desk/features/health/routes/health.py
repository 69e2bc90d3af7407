from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inquiry_desk.platform.config import settings
from inquiry_desk.platform.db.session import get_db
from inquiry_desk.platform.logger import get_logger
from inquiry_desk.platform.response import api_response
from inquiry_desk.platform.schemas import APIResponse, HealthData

logger = get_logger("health")

router = APIRouter()


@router.get("/health", tags=["health"], response_model=APIResponse[HealthData])
async def health_check(db: AsyncSession = Depends(get_db)):
    """Liveness plus a round trip to the inquiry store."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check could not reach the database: {e}")
        return api_response(
            data=HealthData(status="degraded", service=settings.APP_NAME, database="unavailable"),
            message="Database unavailable",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return api_response(
        data=HealthData(status="ok", service=settings.APP_NAME, database="ok"),
        message="Service is healthy",
        status_code=status.HTTP_200_OK,
    )

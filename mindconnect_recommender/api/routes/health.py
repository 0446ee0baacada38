"""헬스 체크 API 라우터."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mindconnect_recommender.core.config.settings import settings
from mindconnect_recommender.core.models.api import HealthCheckResponse
from mindconnect_recommender.infrastructure.database.connection import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthCheckResponse,
    summary="헬스 체크",
    description="서비스와 센터 데이터베이스 연결 상태를 확인합니다.",
)
async def health_check(db: AsyncSession = Depends(get_db)) -> HealthCheckResponse:
    """헬스 체크 엔드포인트.

    데이터베이스에 연결할 수 없으면 status가 degraded로 표시됩니다.

    Returns:
        서비스 상태 정보
    """
    try:
        await db.execute(text("SELECT 1"))
        database = "up"
    except SQLAlchemyError as e:
        logger.warning("데이터베이스 헬스 체크 실패", extra={"error": str(e)})
        database = "down"

    return HealthCheckResponse(
        status="healthy" if database == "up" else "degraded",
        version=settings.app_version,
        service=settings.app_name,
        database=database,
    )

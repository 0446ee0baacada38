"""API 의존성 주입."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mindconnect_recommender.core.config.settings import settings
from mindconnect_recommender.infrastructure.database.connection import get_db
from mindconnect_recommender.infrastructure.database.repository import (
    PostgresCenterRepository,
)
from mindconnect_recommender.infrastructure.external.holiday_client import (
    PublicHolidayClient,
)
from mindconnect_recommender.services.recommendation_service import RecommendationService


@lru_cache
def get_holiday_client() -> PublicHolidayClient:
    """공휴일 클라이언트 (프로세스 단위 공유, 연도별 결과 보관)."""
    return PublicHolidayClient()


def get_recommendation_service(
    db: AsyncSession = Depends(get_db),
) -> RecommendationService:
    """요청 단위 추천 서비스."""
    return RecommendationService(
        center_repo=PostgresCenterRepository(db),
        holiday_client=get_holiday_client() if settings.apply_public_holidays else None,
    )

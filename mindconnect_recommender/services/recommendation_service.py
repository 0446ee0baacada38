"""추천 서비스 - 애플리케이션 계층."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from mindconnect_recommender.core.config.settings import settings
from mindconnect_recommender.domain.center.models import Center, Holiday
from mindconnect_recommender.domain.center.repository import CenterRepository
from mindconnect_recommender.domain.recommendation.models import (
    RecommendationRequest,
    RecommendationResult,
)
from mindconnect_recommender.domain.scoring.aggregator import RecommendationAggregator
from mindconnect_recommender.domain.scoring.distance import bounding_box
from mindconnect_recommender.domain.scoring.operating import (
    DEFAULT_MAX_DAYS_AHEAD,
    OperatingStatusInfo,
    get_operating_status,
)
from mindconnect_recommender.infrastructure.external.holiday_client import (
    PublicHolidayClient,
)

logger = logging.getLogger(__name__)


def default_clock() -> datetime:
    """설정된 시간대의 현재 시각."""
    return datetime.now(ZoneInfo(settings.timezone))


@dataclass(frozen=True)
class CenterOperatingStatus:
    """센터 운영 상태 조회 결과."""

    center: Center
    status: OperatingStatusInfo
    upcoming_holidays: list[Holiday] = field(default_factory=list)


class RecommendationService:
    """정신건강 센터 추천 서비스.

    사용자 위치와 자가진단 결과를 바탕으로 주변 센터를 추천합니다.
    데이터 조회와 시각 결정은 이 계층에서 하고, 점수 계산은
    RecommendationAggregator에 맡깁니다.
    """

    def __init__(
        self,
        center_repo: CenterRepository,
        holiday_client: PublicHolidayClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """추천 서비스를 초기화합니다.

        Args:
            center_repo: 후보 센터 조회 레포지토리
            holiday_client: 공휴일 클라이언트 (None이면 공휴일 미반영)
            clock: 현재 시각 함수 (None이면 설정된 시간대의 현재 시각)
        """
        self.center_repo = center_repo
        self.holiday_client = holiday_client
        self.clock = clock or default_clock
        self.aggregator = RecommendationAggregator()

    async def get_recommendations(
        self, request: RecommendationRequest
    ) -> RecommendationResult:
        """위치와 프로필을 기반으로 센터를 추천합니다.

        Args:
            request: 위치, 프로필, 검색 조건이 포함된 추천 요청

        Returns:
            종합 점수 순으로 정렬된 추천 결과 (반경 내 센터가 없으면 빈 결과)
        """
        now = self.clock()

        # 1. 검색 영역 안의 후보 센터 조회
        bounds = bounding_box(request.location, request.filters.max_distance)
        candidates = await self.center_repo.find_candidates(bounds)

        # 2. 호출자가 공휴일 클라이언트를 제공한 경우에만 공휴일 반영
        holidays = await self._load_public_holidays(now.date())

        # 3. 점수 계산 및 순위 결정
        result = self.aggregator.rank(
            user_location=request.location,
            user_profile=request.user_profile,
            filters=request.filters,
            candidates=candidates,
            now=now,
            holidays=holidays,
        )

        logger.info(
            "센터 추천 완료",
            extra={
                "request": repr(request),
                "candidate_count": len(candidates),
                "recommendation_count": result.total_count,
            },
        )
        return result

    async def get_operating_status(self, center_id: str) -> CenterOperatingStatus | None:
        """센터의 현재 운영 상태를 조회합니다.

        센터 자체 휴무일과 (제공된 경우) 공휴일을 함께 반영합니다.

        Args:
            center_id: 센터 ID

        Returns:
            운영 상태 조회 결과, 센터가 없으면 None
        """
        center = await self.center_repo.get_by_id(center_id)
        if center is None:
            return None

        now = self.clock()
        holidays = list(center.holidays) + (await self._load_public_holidays(now.date()) or [])
        window_end = now.date() + timedelta(days=DEFAULT_MAX_DAYS_AHEAD)

        return CenterOperatingStatus(
            center=center,
            status=get_operating_status(center.operating_hours, now, holidays),
            upcoming_holidays=sorted(
                (h for h in holidays if now.date() <= h.holiday_date <= window_end),
                key=lambda h: h.holiday_date,
            ),
        )

    async def _load_public_holidays(self, today: date) -> list[Holiday] | None:
        """다음 운영 탐색 기간의 공휴일을 조회합니다."""
        if self.holiday_client is None:
            return None
        return await self.holiday_client.fetch_holidays_between(
            today, today + timedelta(days=DEFAULT_MAX_DAYS_AHEAD)
        )

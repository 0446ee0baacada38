"""Service layer tests for recommendation."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from factories import SEOUL_CITY_HALL, kst, make_center, weekday_schedule
from mindconnect_recommender.domain.center.models import Holiday, HolidayType
from mindconnect_recommender.domain.recommendation.models import (
    RecommendationFilters,
    RecommendationRequest,
    UserLocation,
)
from mindconnect_recommender.domain.scoring.distance import BoundingBox
from mindconnect_recommender.domain.scoring.operating import OperatingStatus
from mindconnect_recommender.services.recommendation_service import RecommendationService

# 2025-01-06 월요일 10:00
FIXED_NOW = kst(2025, 1, 6, 10)


@pytest.fixture
def mock_center_repo() -> AsyncMock:
    """Mock center repository."""
    return AsyncMock()


@pytest.fixture
def mock_holiday_client() -> AsyncMock:
    """Mock public holiday client."""
    client = AsyncMock()
    client.fetch_holidays_between = AsyncMock(return_value=[])
    return client


@pytest.fixture
def request_near_city_hall() -> RecommendationRequest:
    """서울시청 기준 추천 요청."""
    return RecommendationRequest(
        location=UserLocation(latitude=SEOUL_CITY_HALL[0], longitude=SEOUL_CITY_HALL[1]),
        filters=RecommendationFilters(max_distance=5, limit=2),
    )


class TestRecommendationService:
    """RecommendationService 테스트."""

    async def test_정상적으로_추천을_반환한다(
        self,
        mock_center_repo: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """후보 센터를 점수 순으로 반환한다."""
        # Given
        mock_center_repo.find_candidates.return_value = [
            make_center("1", operating_hours=weekday_schedule()),
            make_center("2", 37.5700, 126.9800),
            make_center("3", 37.5800, 126.9780),
        ]
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        # When
        result = await service.get_recommendations(request_near_city_hall)

        # Then
        assert result.total_count == 2
        assert result.recommendations[0].center_id == "1"
        assert result.recommendations[0].is_open is True

    async def test_검색_반경을_감싸는_영역으로_후보를_조회한다(
        self,
        mock_center_repo: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """Repository에는 사용자 위치를 포함하는 영역이 전달된다."""
        # Given
        mock_center_repo.find_candidates.return_value = []
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        # When
        await service.get_recommendations(request_near_city_hall)

        # Then
        mock_center_repo.find_candidates.assert_called_once()
        bounds = mock_center_repo.find_candidates.call_args.args[0]
        assert isinstance(bounds, BoundingBox)
        assert bounds.min_latitude < SEOUL_CITY_HALL[0] < bounds.max_latitude
        assert bounds.min_longitude < SEOUL_CITY_HALL[1] < bounds.max_longitude

    async def test_후보가_없으면_빈_결과를_반환한다(
        self,
        mock_center_repo: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """센터가 없어도 에러 없이 안내 메시지를 반환한다."""
        # Given
        mock_center_repo.find_candidates.return_value = []
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        # When
        result = await service.get_recommendations(request_near_city_hall)

        # Then
        assert result.total_count == 0
        assert result.message is not None

    async def test_공휴일_클라이언트가_있으면_공휴일을_반영한다(
        self,
        mock_center_repo: AsyncMock,
        mock_holiday_client: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """오늘이 공휴일이면 운영 중이 아니다."""
        # Given
        mock_center_repo.find_candidates.return_value = [
            make_center("1", operating_hours=weekday_schedule())
        ]
        mock_holiday_client.fetch_holidays_between.return_value = [
            Holiday(holiday_date=date(2025, 1, 6), name="대체공휴일")
        ]
        service = RecommendationService(
            mock_center_repo, holiday_client=mock_holiday_client, clock=lambda: FIXED_NOW
        )

        # When
        result = await service.get_recommendations(request_near_city_hall)

        # Then
        mock_holiday_client.fetch_holidays_between.assert_called_once_with(
            date(2025, 1, 6), date(2025, 1, 20)
        )
        assert result.recommendations[0].is_open is False

    async def test_공휴일_클라이언트가_없으면_공휴일을_반영하지_않는다(
        self,
        mock_center_repo: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """센터 운영시간만으로 판단한다."""
        mock_center_repo.find_candidates.return_value = [
            make_center("1", operating_hours=weekday_schedule())
        ]
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        result = await service.get_recommendations(request_near_city_hall)

        assert result.recommendations[0].is_open is True

    async def test_Repository_오류는_전파된다(
        self,
        mock_center_repo: AsyncMock,
        request_near_city_hall: RecommendationRequest,
    ) -> None:
        """데이터 계층 오류는 API 계층에서 처리한다."""
        mock_center_repo.find_candidates.side_effect = RuntimeError("connection lost")
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        with pytest.raises(RuntimeError):
            await service.get_recommendations(request_near_city_hall)


class TestOperatingStatusLookup:
    """RecommendationService.get_operating_status 테스트."""

    async def test_센터가_없으면_None(self, mock_center_repo: AsyncMock) -> None:
        """존재하지 않는 센터."""
        # Given
        mock_center_repo.get_by_id.return_value = None
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        # When & Then
        assert await service.get_operating_status("999") is None

    async def test_운영_상태와_예정된_휴무일을_반환한다(
        self,
        mock_center_repo: AsyncMock,
        mock_holiday_client: AsyncMock,
    ) -> None:
        """센터 휴무일과 공휴일을 합쳐 14일 이내 휴무일만 날짜순으로 반환한다."""
        # Given
        mock_center_repo.get_by_id.return_value = make_center(
            "1",
            operating_hours=weekday_schedule(),
            holidays=[
                Holiday(holiday_date=date(2025, 1, 15), holiday_type=HolidayType.TEMPORARY),
                Holiday(holiday_date=date(2025, 3, 1), holiday_type=HolidayType.TEMPORARY),
            ],
        )
        mock_holiday_client.fetch_holidays_between.return_value = [
            Holiday(holiday_date=date(2025, 1, 8), name="공휴일")
        ]
        service = RecommendationService(
            mock_center_repo, holiday_client=mock_holiday_client, clock=lambda: FIXED_NOW
        )

        # When
        result = await service.get_operating_status("1")

        # Then
        assert result is not None
        assert result.status.status == OperatingStatus.OPEN
        assert [h.holiday_date for h in result.upcoming_holidays] == [
            date(2025, 1, 8),
            date(2025, 1, 15),
        ]

    async def test_오늘이_임시_휴무면_임시_휴무_상태(self, mock_center_repo: AsyncMock) -> None:
        """센터 자체 휴무일은 공휴일 클라이언트 없이도 반영된다."""
        mock_center_repo.get_by_id.return_value = make_center(
            "1",
            operating_hours=weekday_schedule(),
            holidays=[Holiday(holiday_date=date(2025, 1, 6), holiday_type=HolidayType.TEMPORARY)],
        )
        service = RecommendationService(mock_center_repo, clock=lambda: FIXED_NOW)

        result = await service.get_operating_status("1")

        assert result.status.status == OperatingStatus.TEMPORARY_CLOSED

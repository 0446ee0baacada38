"""API 요청/응답 모델 (DTO)."""

from datetime import datetime

from pydantic import BaseModel, Field

from mindconnect_recommender.core.config.settings import settings
from mindconnect_recommender.domain.center.models import Holiday, OperatingHours
from mindconnect_recommender.domain.recommendation.models import (
    RecommendationFilters,
    RecommendationRequest,
    ScoredCenter,
    UserLocation,
    UserProfile,
)
from mindconnect_recommender.domain.scoring.operating import OperatingStatus


class RecommendationFiltersDTO(BaseModel):
    """추천 검색 조건 DTO."""

    max_distance: float = Field(
        default=settings.default_max_distance_km,
        ge=1,
        le=settings.max_distance_limit_km,
        description="최대 검색 거리 (km)",
    )
    limit: int = Field(
        default=settings.default_recommendation_limit,
        ge=1,
        le=settings.max_recommendation_limit,
        description="반환할 추천 센터 수",
    )


class RecommendationRequestDTO(BaseModel):
    """센터 추천 요청 DTO.

    클라이언트에서 전송하는 추천 요청의 형식을 정의합니다.
    """

    location: UserLocation = Field(description="사용자 위치")
    user_profile: UserProfile = Field(
        default_factory=UserProfile, description="사용자 프로필 (자가진단 결과, 연령)"
    )
    filters: RecommendationFiltersDTO = Field(
        default_factory=RecommendationFiltersDTO, description="검색 조건"
    )

    class Config:
        """Pydantic 설정."""

        json_schema_extra = {
            "example": {
                "location": {"latitude": 37.5665, "longitude": 126.978},
                "user_profile": {
                    "assessment_result": {"severity": "MID", "category": "depression"},
                    "age": 34,
                },
                "filters": {"max_distance": 10, "limit": 5},
            }
        }

    def to_domain(self) -> RecommendationRequest:
        """도메인 요청 객체로 변환합니다."""
        return RecommendationRequest(
            location=self.location,
            user_profile=self.user_profile,
            filters=RecommendationFilters(
                max_distance=self.filters.max_distance,
                limit=self.filters.limit,
            ),
        )


class RecommendationResponseDTO(BaseModel):
    """센터 추천 응답 DTO.

    추천 결과를 클라이언트에 반환하는 형식을 정의합니다.
    """

    recommendations: list[ScoredCenter] = Field(
        description="추천 센터 목록 (종합 점수 순으로 정렬)"
    )
    total_count: int = Field(description="반환된 추천 센터 수")
    message: str | None = Field(default=None, description="결과가 없을 때의 안내 메시지")


class OperatingStatusResponseDTO(BaseModel):
    """센터 운영 상태 응답 DTO."""

    center_id: str = Field(description="센터 ID")
    center_name: str = Field(description="센터명")
    status: OperatingStatus = Field(description="현재 운영 상태")
    message: str = Field(description="운영 상태 안내 메시지")
    minutes_until_close: int | None = Field(default=None, description="운영 종료까지 남은 분")
    next_open_time: datetime | None = Field(default=None, description="다음 운영 시작 시각")
    weekly_hours: list[OperatingHours] = Field(description="요일별 운영시간")
    upcoming_holidays: list[Holiday] = Field(description="14일 이내 휴무일")


class HealthCheckResponse(BaseModel):
    """헬스 체크 응답 모델.

    서비스 상태 확인 API의 응답 형식을 정의합니다.
    """

    status: str = Field(default="healthy", description="서비스 상태")
    version: str = Field(description="애플리케이션 버전")
    service: str = Field(description="서비스 이름")
    database: str = Field(default="up", description="데이터베이스 연결 상태 (up/down)")

"""추천 도메인 모델.

센터 추천 요청의 입력(위치, 사용자 프로필, 검색 조건)과
점수가 매겨진 추천 결과 모델을 정의합니다.
"""

from pydantic import BaseModel, ConfigDict, Field

from mindconnect_recommender.domain.center.models import Severity


class UserLocation(BaseModel):
    """사용자 위치 (위도/경도, 도 단위)."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0, description="위도")
    longitude: float = Field(..., ge=-180.0, le=180.0, description="경도")


class AssessmentResult(BaseModel):
    """자가진단 결과.

    심각도 분류는 자가진단 서비스에서 끝난 상태로 전달됩니다.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    severity: Severity = Field(..., description="심각도 (LOW/MID/HIGH)")
    category: str = Field(..., min_length=1, description="분야 (예: depression)")


class UserProfile(BaseModel):
    """사용자 프로필 (요청 단위)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    assessment_result: AssessmentResult | None = Field(
        default=None, description="자가진단 결과 (없으면 None)"
    )
    age: int | None = Field(default=None, ge=0, le=150, strict=True, description="연령")


class RecommendationFilters(BaseModel):
    """추천 검색 조건.

    요청 계층의 상한(거리 50km, 개수 20개)은 API DTO에서 검증합니다.
    """

    model_config = ConfigDict(frozen=True)

    max_distance: float = Field(default=10.0, gt=0, description="최대 검색 거리 (km)")
    limit: int = Field(default=5, ge=1, description="반환할 추천 센터 수")


class RecommendationRequest:
    """센터 추천 요청 도메인 모델.

    위치, 프로필, 검색 조건을 하나의 요청 형식으로 묶습니다.
    """

    def __init__(
        self,
        location: UserLocation,
        user_profile: UserProfile | None = None,
        filters: RecommendationFilters | None = None,
    ) -> None:
        """추천 요청을 초기화합니다.

        Args:
            location: 사용자 위치
            user_profile: 사용자 프로필 (없으면 빈 프로필)
            filters: 검색 조건 (없으면 기본값)
        """
        self.location = location
        self.user_profile = user_profile or UserProfile()
        self.filters = filters or RecommendationFilters()

    def __repr__(self) -> str:
        """문자열 표현을 반환합니다."""
        return (
            f"<RecommendationRequest "
            f"lat={self.location.latitude} lng={self.location.longitude} "
            f"max_distance={self.filters.max_distance} limit={self.filters.limit}>"
        )


class ComponentScores(BaseModel):
    """요소별 점수 (각 0-100)."""

    distance: float = Field(ge=0.0, le=100.0, description="거리 점수")
    operating: float = Field(ge=0.0, le=100.0, description="운영시간 점수")
    specialty: float = Field(ge=0.0, le=100.0, description="전문인력 점수")
    program: float = Field(ge=0.0, le=100.0, description="프로그램 점수")


class ScoredCenter(BaseModel):
    """개별 센터 추천 결과.

    표시 계층이 의존하는 안정된 응답 형식입니다.
    """

    center_id: str = Field(description="센터 ID")
    center_name: str = Field(description="센터명")
    center_type: str | None = Field(default=None, description="센터 유형")
    road_address: str | None = Field(default=None, description="도로명 주소")
    phone_number: str | None = Field(default=None, description="전화번호")
    distance: float = Field(ge=0.0, description="직선 거리 (km)")
    distance_text: str = Field(description="표시용 거리 (예: 1.2km)")
    walk_time: str = Field(description="도보 소요 시간")
    is_open: bool = Field(description="현재 운영 여부")
    total_score: float = Field(ge=0.0, le=100.0, description="종합 점수 (소수점 2자리)")
    scores: ComponentScores = Field(description="요소별 점수")
    reasons: list[str] = Field(default_factory=list, max_length=3, description="추천 이유")

    class Config:
        """Pydantic 설정."""

        json_schema_extra = {
            "example": {
                "center_id": "101",
                "center_name": "강남구정신건강복지센터",
                "center_type": "기초정신건강복지센터",
                "road_address": "서울특별시 강남구 선릉로 668",
                "phone_number": "02-2226-0344",
                "distance": 1.23,
                "distance_text": "1.2km",
                "walk_time": "도보 16분",
                "is_open": True,
                "total_score": 91.39,
                "scores": {
                    "distance": 87.7,
                    "operating": 100,
                    "specialty": 100,
                    "program": 70,
                },
                "reasons": ["현재 운영 중", "정신건강의학과 전문의 상주", "가까운 거리 (1.2km)"],
            }
        }


class RecommendationResult:
    """추천 결과 도메인 모델.

    점수 순으로 정렬된 추천 목록을 캡슐화합니다.
    """

    def __init__(
        self,
        recommendations: list[ScoredCenter],
        total_count: int,
        message: str | None = None,
    ) -> None:
        """추천 결과를 초기화합니다.

        Args:
            recommendations: 추천 센터 목록 (종합 점수 내림차순)
            total_count: 반환된 추천 센터 수
            message: 결과가 없을 때의 안내 메시지
        """
        self.recommendations = recommendations
        self.total_count = total_count
        self.message = message

    @classmethod
    def empty(cls, message: str) -> "RecommendationResult":
        """빈 추천 결과를 생성합니다."""
        return cls(recommendations=[], total_count=0, message=message)

    def get_top_recommendation(self) -> ScoredCenter | None:
        """최상위 추천 센터를 반환합니다.

        Returns:
            가장 높은 점수의 추천 센터, 없으면 None
        """
        return self.recommendations[0] if self.recommendations else None

    def __repr__(self) -> str:
        """문자열 표현을 반환합니다."""
        return (
            f"<RecommendationResult "
            f"count={len(self.recommendations)} "
            f"total={self.total_count}>"
        )

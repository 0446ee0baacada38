"""추천 점수 통합.

거리, 운영시간, 전문인력, 프로그램 점수를 고정 가중치로 합산해
센터 순위를 매기고 상위 N개에 추천 이유를 붙입니다.
"""

import logging
from collections.abc import Sequence
from datetime import datetime

from mindconnect_recommender.domain.center.models import Center, Holiday
from mindconnect_recommender.domain.recommendation.models import (
    ComponentScores,
    RecommendationFilters,
    RecommendationResult,
    ScoredCenter,
    UserLocation,
    UserProfile,
)
from mindconnect_recommender.domain.scoring.distance import (
    DistanceScoredCenter,
    calculate_walk_time,
    filter_centers_by_distance,
    format_distance,
)
from mindconnect_recommender.domain.scoring.operating import (
    calculate_operating_score,
    is_currently_open,
)
from mindconnect_recommender.domain.scoring.program import (
    calculate_program_score,
    match_programs_by_assessment,
)
from mindconnect_recommender.domain.scoring.specialty import calculate_specialty_score

logger = logging.getLogger(__name__)

DISTANCE_WEIGHT = 0.35
OPERATING_WEIGHT = 0.25
SPECIALTY_WEIGHT = 0.20
PROGRAM_WEIGHT = 0.20

MAX_REASONS = 3
NO_CENTERS_MESSAGE = "검색 조건에 맞는 센터가 없습니다"


def calculate_total_score(
    distance: float, operating: float, specialty: float, program: float
) -> float:
    """가중 합산 종합 점수 (소수점 2자리)."""
    total = (
        distance * DISTANCE_WEIGHT
        + operating * OPERATING_WEIGHT
        + specialty * SPECIALTY_WEIGHT
        + program * PROGRAM_WEIGHT
    )
    return round(total, 2)


class RecommendationAggregator:
    """규칙 기반 센터 추천 점수 통합기.

    요청 단위 상태를 갖지 않으며 입력 센터 목록을 변경하지 않습니다.

    사용법:
        aggregator = RecommendationAggregator()
        result = aggregator.rank(location, profile, filters, centers, now)
    """

    def rank(
        self,
        user_location: UserLocation,
        user_profile: UserProfile,
        filters: RecommendationFilters,
        candidates: Sequence[Center],
        now: datetime,
        holidays: Sequence[Holiday] | None = None,
    ) -> RecommendationResult:
        """후보 센터의 추천 순위를 계산합니다.

        동점 센터는 정렬 전 순서(거리 오름차순)를 유지합니다.
        점수 계산에 실패한 센터는 경고 로그를 남기고 건너뜁니다.

        Args:
            user_location: 사용자 위치
            user_profile: 사용자 프로필
            filters: 검색 조건 (최대 거리, 반환 개수)
            candidates: 데이터 계층이 조회한 후보 센터 목록
            now: 운영 여부를 판단할 기준 시각
            holidays: 호출자가 제공한 휴무일 (None이면 휴무일 없음).
                center.holidays는 여기서 반영하지 않으므로 센터 자체 휴무일에는
                운영 상태 조회 결과와 달리 운영 중으로 판단될 수 있습니다.

        Returns:
            종합 점수 내림차순 추천 결과

        Raises:
            TypeError: 후보 목록이나 사용자 위치 형식이 잘못된 경우
            ValueError: 최대 거리가 0 이하인 경우
        """
        nearby = filter_centers_by_distance(
            candidates, user_location, filters.max_distance
        )
        if not nearby:
            logger.info(
                "검색 반경 내 센터 없음",
                extra={
                    "candidate_count": len(candidates),
                    "max_distance": filters.max_distance,
                },
            )
            return RecommendationResult.empty(NO_CENTERS_MESSAGE)

        holiday_list = list(holidays) if holidays is not None else []

        scored: list[ScoredCenter] = []
        for item in nearby:
            try:
                scored.append(self._score_center(item, user_profile, now, holiday_list))
            except Exception as e:
                logger.warning(
                    "센터 점수 계산 실패, 추천에서 제외",
                    extra={"center_id": item.center.id, "error": str(e)},
                )

        scored.sort(key=lambda center: center.total_score, reverse=True)
        recommendations = scored[: filters.limit]

        logger.info(
            "추천 순위 계산 완료",
            extra={
                "candidate_count": len(candidates),
                "nearby_count": len(nearby),
                "scored_count": len(scored),
                "returned_count": len(recommendations),
            },
        )

        if not recommendations:
            return RecommendationResult.empty(NO_CENTERS_MESSAGE)

        return RecommendationResult(
            recommendations=recommendations,
            total_count=len(recommendations),
        )

    def _score_center(
        self,
        item: DistanceScoredCenter,
        user_profile: UserProfile,
        now: datetime,
        holidays: list[Holiday],
    ) -> ScoredCenter:
        """센터 하나의 요소별 점수와 종합 점수를 계산합니다."""
        center = item.center

        operating_score = calculate_operating_score(center.operating_hours, now, holidays)
        specialty_score = calculate_specialty_score(center.staff_info)
        program_score = calculate_program_score(center.programs, user_profile)

        scores = ComponentScores(
            distance=item.distance_score,
            operating=operating_score,
            specialty=specialty_score,
            program=program_score,
        )
        distance_text = format_distance(item.distance)

        return ScoredCenter(
            center_id=center.id,
            center_name=center.center_name,
            center_type=center.center_type,
            road_address=center.road_address,
            phone_number=center.phone_number,
            distance=item.distance,
            distance_text=distance_text,
            walk_time=calculate_walk_time(item.distance),
            is_open=is_currently_open(center.operating_hours, now, holidays),
            total_score=calculate_total_score(
                item.distance_score, operating_score, specialty_score, program_score
            ),
            scores=scores,
            reasons=self._build_reasons(center, scores, distance_text, user_profile),
        )

    def _build_reasons(
        self,
        center: Center,
        scores: ComponentScores,
        distance_text: str,
        user_profile: UserProfile,
    ) -> list[str]:
        """점수가 높은 요소부터 최대 3개의 추천 이유를 만듭니다."""
        reasons: list[tuple[float, str]] = []

        if scores.distance >= 80:
            reasons.append((scores.distance, f"가까운 거리 ({distance_text})"))

        if scores.operating == 100:
            reasons.append((scores.operating, "현재 운영 중"))
        elif scores.operating == 80:
            reasons.append((scores.operating, "1시간 이내 운영 시작"))

        if scores.specialty == 100:
            reasons.append((scores.specialty, "정신건강의학과 전문의 상주"))
        elif scores.specialty == 80:
            reasons.append((scores.specialty, "정신건강 간호사·사회복지사 상주"))

        assessment = user_profile.assessment_result
        if assessment is not None and scores.program >= 70:
            matches = match_programs_by_assessment(center.programs, assessment)
            if matches:
                top = matches[0].program
                label = top.program_name or top.category
                reasons.append((scores.program, f"{label} 프로그램 매칭"))
            else:
                reasons.append((scores.program, f"{assessment.category} 관련 프로그램 운영"))

        # 정렬은 안정적이므로 동점이면 가중치 순서(거리, 운영, 전문인력, 프로그램)를 따름
        reasons.sort(key=lambda reason: reason[0], reverse=True)
        return [text for _, text in reasons[:MAX_REASONS]]

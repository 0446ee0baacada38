"""추천 점수 계산 코어."""

from mindconnect_recommender.domain.scoring.aggregator import (
    RecommendationAggregator,
    calculate_total_score,
)
from mindconnect_recommender.domain.scoring.distance import (
    BoundingBox,
    DistanceScoredCenter,
    bounding_box,
    calculate_distance,
    calculate_distance_score,
    filter_centers_by_distance,
)
from mindconnect_recommender.domain.scoring.operating import (
    OperatingStatus,
    OperatingStatusInfo,
    calculate_operating_score,
    get_next_open_time,
    get_operating_status,
    is_currently_open,
)
from mindconnect_recommender.domain.scoring.program import (
    ProgramMatch,
    calculate_program_score,
    match_programs_by_assessment,
)
from mindconnect_recommender.domain.scoring.specialty import calculate_specialty_score

__all__ = [
    "RecommendationAggregator",
    "calculate_total_score",
    "BoundingBox",
    "DistanceScoredCenter",
    "bounding_box",
    "calculate_distance",
    "calculate_distance_score",
    "filter_centers_by_distance",
    "OperatingStatus",
    "OperatingStatusInfo",
    "calculate_operating_score",
    "get_next_open_time",
    "get_operating_status",
    "is_currently_open",
    "ProgramMatch",
    "calculate_program_score",
    "match_programs_by_assessment",
    "calculate_specialty_score",
]

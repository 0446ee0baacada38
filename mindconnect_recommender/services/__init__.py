"""Service layer.

Provides the recommendation service that ties data access to the scoring core.
"""

from mindconnect_recommender.services.recommendation_service import (
    CenterOperatingStatus,
    RecommendationService,
)

__all__ = [
    "CenterOperatingStatus",
    "RecommendationService",
]

"""추천 API 라우터."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mindconnect_recommender.api.dependencies import get_recommendation_service
from mindconnect_recommender.core.models.api import (
    RecommendationRequestDTO,
    RecommendationResponseDTO,
)
from mindconnect_recommender.services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post(
    "",
    response_model=RecommendationResponseDTO,
    summary="정신건강 센터 추천",
    description="사용자 위치와 자가진단 결과를 기반으로 주변 센터를 추천합니다.",
)
async def create_recommendation(
    request: RecommendationRequestDTO,
    service: RecommendationService = Depends(get_recommendation_service),
) -> RecommendationResponseDTO:
    """센터 추천 API.

    거리, 운영시간, 전문인력, 프로그램 매칭 점수를 가중 합산해
    상위 센터를 추천 이유와 함께 반환합니다. 반경 내 센터가 없으면
    빈 목록과 안내 메시지를 반환합니다.

    Args:
        request: 추천 요청 (위치, 프로필, 검색 조건)
        service: 추천 서비스

    Returns:
        추천 결과 (센터 목록, 요소별 점수, 추천 이유)

    Raises:
        HTTPException: 400 - 유효성 검증 실패, 500 - 서비스 오류
    """
    try:
        result = await service.get_recommendations(request.to_domain())

        return RecommendationResponseDTO(
            recommendations=result.recommendations,
            total_count=result.total_count,
            message=result.message,
        )

    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("센터 추천 실패")
        raise HTTPException(status_code=500, detail=f"내부 서버 오류: {str(e)}")

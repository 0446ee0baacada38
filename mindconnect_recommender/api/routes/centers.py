"""센터 API 라우터."""

from fastapi import APIRouter, Depends, HTTPException

from mindconnect_recommender.api.dependencies import get_recommendation_service
from mindconnect_recommender.core.models.api import OperatingStatusResponseDTO
from mindconnect_recommender.services.recommendation_service import RecommendationService

router = APIRouter(prefix="/centers", tags=["centers"])


@router.get(
    "/{center_id}/operating-status",
    response_model=OperatingStatusResponseDTO,
    summary="센터 운영 상태",
    description="센터의 현재 운영 상태와 다음 운영 시작 시각을 조회합니다.",
)
async def get_operating_status(
    center_id: str,
    service: RecommendationService = Depends(get_recommendation_service),
) -> OperatingStatusResponseDTO:
    """센터 운영 상태 API.

    Args:
        center_id: 센터 ID
        service: 추천 서비스

    Returns:
        운영 상태, 요일별 운영시간, 14일 이내 휴무일

    Raises:
        HTTPException: 404 - 센터 없음
    """
    result = await service.get_operating_status(center_id)
    if result is None:
        raise HTTPException(status_code=404, detail="센터를 찾을 수 없습니다")

    return OperatingStatusResponseDTO(
        center_id=result.center.id,
        center_name=result.center.center_name,
        status=result.status.status,
        message=result.status.message,
        minutes_until_close=result.status.minutes_until_close,
        next_open_time=result.status.next_open_time,
        weekly_hours=sorted(result.center.operating_hours, key=lambda h: h.day_of_week),
        upcoming_holidays=result.upcoming_holidays,
    )

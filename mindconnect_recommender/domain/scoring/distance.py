"""거리 점수 계산.

Haversine 공식으로 사용자와 센터 간 직선 거리를 구하고,
검색 반경 안의 센터만 남겨 0-100 거리 점수를 매깁니다.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from mindconnect_recommender.domain.center.models import Center
from mindconnect_recommender.domain.recommendation.models import UserLocation

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
WALKING_SPEED_METERS_PER_MINUTE = 80


@dataclass(frozen=True)
class DistanceScoredCenter:
    """검색 반경을 통과한 센터와 거리 정보."""

    center: Center
    distance: float  # km
    distance_score: float


@dataclass(frozen=True)
class BoundingBox:
    """후보 센터 조회용 위경도 사각 영역."""

    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_coordinate(latitude: object, longitude: object) -> bool:
    if not _is_number(latitude) or not _is_number(longitude):
        return False
    if math.isnan(latitude) or math.isnan(longitude):
        return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def _haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """두 지점 간 대권 거리를 계산합니다.

    Args:
        lat1: 시작점 위도
        lng1: 시작점 경도
        lat2: 종료점 위도
        lng2: 종료점 경도

    Returns:
        거리 (km, 소수점 2자리)

    Raises:
        TypeError: 좌표가 숫자가 아닌 경우
        ValueError: 위도/경도가 범위를 벗어난 경우
    """
    if not all(_is_number(v) for v in (lat1, lng1, lat2, lng2)):
        raise TypeError("좌표는 모두 숫자여야 합니다")
    if not (-90 <= lat1 <= 90 and -90 <= lat2 <= 90):
        raise ValueError(f"위도는 -90 ~ 90 사이여야 합니다: lat1={lat1}, lat2={lat2}")
    if not (-180 <= lng1 <= 180 and -180 <= lng2 <= 180):
        raise ValueError(f"경도는 -180 ~ 180 사이여야 합니다: lng1={lng1}, lng2={lng2}")

    return round(_haversine_km(lat1, lng1, lat2, lng2), 2)


def calculate_distance_score(distance: float, max_distance: float) -> float:
    """거리를 0-100 점수로 변환합니다.

    0km는 100점, 최대 거리는 0점이며 그 사이는 선형으로 감소합니다.

    Args:
        distance: 거리 (km)
        max_distance: 최대 검색 거리 (km)

    Returns:
        거리 점수 (소수점 2자리)

    Raises:
        ValueError: 거리가 음수이거나 최대 거리가 0 이하인 경우
    """
    if distance < 0:
        raise ValueError("거리는 0 이상이어야 합니다")
    if max_distance <= 0:
        raise ValueError("최대 거리는 0보다 커야 합니다")

    ratio = min(distance / max_distance, 1.0)
    return round(100 * (1 - ratio), 2)


def filter_centers_by_distance(
    centers: Sequence[Center],
    user_location: UserLocation,
    max_distance: float,
) -> list[DistanceScoredCenter]:
    """검색 반경 안의 센터를 거리 점수와 함께 반환합니다.

    센터가 아닌 후보와 좌표가 없거나 유효하지 않은 센터는 경고 로그를 남기고
    제외합니다. 반경 판정은 반올림 전 거리로 합니다.
    결과는 거리 오름차순으로 정렬됩니다.

    Args:
        centers: 후보 센터 목록
        user_location: 사용자 위치
        max_distance: 최대 검색 거리 (km, 경계 포함)

    Returns:
        반경 안의 센터 목록 (없으면 빈 목록)

    Raises:
        TypeError: 센터 목록이나 사용자 위치 형식이 잘못된 경우
        ValueError: 최대 거리가 0 이하인 경우
    """
    if not isinstance(centers, (list, tuple)):
        raise TypeError("centers는 리스트여야 합니다")
    if not isinstance(user_location, UserLocation):
        raise TypeError("user_location은 UserLocation이어야 합니다")
    if not _is_number(max_distance) or max_distance <= 0:
        raise ValueError("최대 거리는 0보다 큰 숫자여야 합니다")

    results: list[DistanceScoredCenter] = []
    for center in centers:
        if not isinstance(center, Center):
            logger.warning(
                "센터 형식이 아닌 후보 제외",
                extra={"candidate_type": type(center).__name__},
            )
            continue

        if not _is_valid_coordinate(center.latitude, center.longitude):
            logger.warning(
                "좌표가 유효하지 않은 센터 제외",
                extra={"center_id": center.id},
            )
            continue

        # 반경 판정은 반올림 전 거리로 수행
        raw_distance = _haversine_km(
            user_location.latitude,
            user_location.longitude,
            center.latitude,
            center.longitude,
        )
        if raw_distance > max_distance:
            continue

        distance = round(raw_distance, 2)

        results.append(
            DistanceScoredCenter(
                center=center,
                distance=distance,
                distance_score=calculate_distance_score(distance, max_distance),
            )
        )

    results.sort(key=lambda item: item.distance)
    return results


def bounding_box(location: UserLocation, radius_km: float) -> BoundingBox:
    """반경을 감싸는 위경도 사각 영역을 계산합니다.

    정확한 반경 필터는 filter_centers_by_distance가 수행하므로
    이 영역은 데이터베이스 조회 범위를 줄이는 용도입니다.
    """
    if radius_km <= 0:
        raise ValueError("반경은 0보다 커야 합니다")

    delta_lat = math.degrees(radius_km / EARTH_RADIUS_KM)
    cos_lat = math.cos(math.radians(location.latitude))
    # 극지방에서는 경도 폭이 의미 없으므로 전체 경도를 사용
    if cos_lat < 1e-6:
        delta_lng = 180.0
    else:
        delta_lng = min(math.degrees(radius_km / (EARTH_RADIUS_KM * cos_lat)), 180.0)

    return BoundingBox(
        min_latitude=max(location.latitude - delta_lat, -90.0),
        max_latitude=min(location.latitude + delta_lat, 90.0),
        min_longitude=max(location.longitude - delta_lng, -180.0),
        max_longitude=min(location.longitude + delta_lng, 180.0),
    )


def format_distance(distance_km: float) -> str:
    """표시용 거리 문자열 (1km 미만은 m, 이상은 km)."""
    meters = distance_km * 1000
    if meters < 1000:
        return f"{round(meters)}m"
    return f"{distance_km:.1f}km"


def calculate_walk_time(distance_km: float) -> str:
    """도보 소요 시간 문자열 (최소 1분)."""
    minutes = math.ceil(distance_km * 1000 / WALKING_SPEED_METERS_PER_MINUTE)
    return f"도보 {max(minutes, 1)}분"

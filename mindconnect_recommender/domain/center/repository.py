"""센터 조회 인터페이스.

추천 점수 계산 코어는 데이터베이스를 직접 다루지 않습니다.
서비스 계층이 이 인터페이스로 후보 센터를 조회해 전달합니다.
"""

from typing import Protocol

from mindconnect_recommender.domain.center.models import Center
from mindconnect_recommender.domain.scoring.distance import BoundingBox


class CenterRepository(Protocol):
    """후보 센터 조회 레포지토리."""

    async def find_candidates(self, bounds: BoundingBox) -> list[Center]:
        """검색 영역 안의 운영 중인 센터를 조회합니다."""
        ...

    async def get_by_id(self, center_id: str) -> Center | None:
        """ID로 센터를 조회합니다."""
        ...

"""공용 테스트 픽스처."""

import pytest

from factories import weekday_schedule
from mindconnect_recommender.domain.center.models import OperatingHours


@pytest.fixture
def weekday_hours() -> list[OperatingHours]:
    """월~금 09:00-18:00 운영시간."""
    return weekday_schedule()

"""External API 클라이언트 모듈."""

from mindconnect_recommender.infrastructure.external.holiday_client import (
    HolidayClientError,
    PublicHolidayClient,
    get_builtin_holidays,
)

__all__ = [
    "PublicHolidayClient",
    "HolidayClientError",
    "get_builtin_holidays",
]

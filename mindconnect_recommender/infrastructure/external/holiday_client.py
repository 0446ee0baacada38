"""공휴일 API 클라이언트.

공공데이터포털 특일 정보 API(getRestDeInfo)로 연도별 공휴일을 조회합니다.
API 키가 없거나 호출에 실패하면 내장 공휴일 표를 사용합니다.
"""

import logging
from datetime import date

import httpx

from mindconnect_recommender.core.config.settings import settings
from mindconnect_recommender.domain.center.models import Holiday, HolidayType

logger = logging.getLogger(__name__)

# (월, 일, 이름)
FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "신정"),
    (3, 1, "삼일절"),
    (5, 5, "어린이날"),
    (6, 6, "현충일"),
    (8, 15, "광복절"),
    (10, 3, "개천절"),
    (10, 9, "한글날"),
    (12, 25, "기독탄신일"),
)

# 음력 공휴일은 해마다 양력 날짜가 달라 연도별로 관리
LUNAR_HOLIDAYS: dict[int, tuple[tuple[int, int, str], ...]] = {
    2025: (
        (1, 28, "설날 전날"),
        (1, 29, "설날"),
        (1, 30, "설날 다음날"),
        (5, 5, "부처님오신날"),
        (10, 5, "추석 전날"),
        (10, 6, "추석"),
        (10, 7, "추석 다음날"),
    ),
    2026: (
        (2, 16, "설날 전날"),
        (2, 17, "설날"),
        (2, 18, "설날 다음날"),
        (5, 24, "부처님오신날"),
        (9, 24, "추석 전날"),
        (9, 25, "추석"),
        (9, 26, "추석 다음날"),
    ),
}


class HolidayClientError(Exception):
    """공휴일 API 클라이언트 에러."""

    pass


def get_builtin_holidays(year: int) -> list[Holiday]:
    """내장 공휴일 표에서 연도별 공휴일을 반환합니다.

    등록되지 않은 연도는 양력 고정 공휴일만 포함합니다.
    """
    entries = FIXED_HOLIDAYS + LUNAR_HOLIDAYS.get(year, ())
    return [
        Holiday(holiday_date=date(year, month, day), holiday_type=HolidayType.PUBLIC, name=name)
        for month, day, name in entries
    ]


def _parse_locdate(value: int | str) -> date:
    text = str(value)
    return date(int(text[:4]), int(text[4:6]), int(text[6:8]))


class PublicHolidayClient:
    """공휴일 API 클라이언트.

    연도별 조회 결과는 인스턴스 안에 보관합니다.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """클라이언트 초기화.

        Args:
            base_url: 공휴일 API URL. None이면 설정에서 가져옴.
            api_key: 서비스 키. None이면 설정에서 가져옴.
            timeout: HTTP 요청 타임아웃 (초). None이면 설정에서 가져옴.
            transport: httpx 전송 계층 (테스트용)
        """
        self.base_url = (base_url or settings.holiday_api_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.holiday_api_key
        self.timeout = timeout or settings.holiday_api_timeout
        self._transport = transport
        self._cache: dict[int, list[Holiday]] = {}

    async def fetch_public_holidays(self, year: int) -> list[Holiday]:
        """연도별 공휴일을 조회합니다.

        API 키가 없거나 호출이 실패하면 내장 공휴일 표로 대체합니다.

        Args:
            year: 조회 연도

        Returns:
            공휴일 목록
        """
        if year in self._cache:
            return self._cache[year]

        if not self.api_key:
            logger.warning(
                "공휴일 API 키 미설정, 내장 공휴일 사용",
                extra={"year": year},
            )
            holidays = get_builtin_holidays(year)
        else:
            try:
                holidays = await self._request_holidays(year)
            except HolidayClientError as e:
                logger.warning(
                    "공휴일 API 조회 실패, 내장 공휴일 사용",
                    extra={"year": year, "error": str(e)},
                )
                holidays = get_builtin_holidays(year)

        self._cache[year] = holidays
        return holidays

    async def fetch_holidays_between(self, start: date, end: date) -> list[Holiday]:
        """기간 안의 공휴일을 조회합니다 (양 끝 포함)."""
        holidays: list[Holiday] = []
        for year in range(start.year, end.year + 1):
            holidays.extend(
                h for h in await self.fetch_public_holidays(year)
                if start <= h.holiday_date <= end
            )
        return holidays

    async def _request_holidays(self, year: int) -> list[Holiday]:
        """공휴일 API를 호출합니다.

        Raises:
            HolidayClientError: API 호출 또는 응답 해석 실패 시
        """
        url = f"{self.base_url}/getRestDeInfo"
        params = {
            "serviceKey": self.api_key,
            "solYear": year,
            "numOfRows": 100,
            "_type": "json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            raise HolidayClientError(f"공휴일 API 호출 실패: {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise HolidayClientError(f"공휴일 API 연결 실패: {e}") from e
        except ValueError as e:
            raise HolidayClientError(f"공휴일 API 응답 해석 실패: {e}") from e

        if not isinstance(data, dict):
            raise HolidayClientError("공휴일 API 응답 형식이 올바르지 않습니다")

        body = (data.get("response") or {}).get("body") or {}
        items = body.get("items") or {}
        if not isinstance(items, dict) or not items.get("item"):
            raise HolidayClientError("공휴일 API 응답에 항목이 없습니다")

        raw_items = items["item"]
        if isinstance(raw_items, dict):
            raw_items = [raw_items]

        try:
            holidays = [
                Holiday(
                    holiday_date=_parse_locdate(item["locdate"]),
                    holiday_type=HolidayType.PUBLIC,
                    name=item.get("dateName"),
                )
                for item in raw_items
                if item.get("isHoliday") == "Y"
            ]
        except (KeyError, ValueError) as e:
            raise HolidayClientError(f"공휴일 API 항목 형식 오류: {e}") from e

        logger.info(
            "공휴일 API 조회 성공",
            extra={"year": year, "holiday_count": len(holidays)},
        )
        return holidays

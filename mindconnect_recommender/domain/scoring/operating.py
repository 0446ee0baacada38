"""운영시간 점수 계산.

요일별 운영시간과 휴무일로 현재 운영 여부를 판단하고,
다음 운영 시작까지 남은 시간을 0-100 점수로 변환합니다.

운영시간은 [open_time, close_time) 반개구간입니다.
종료 시각 정각은 운영 종료로 봅니다.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

from mindconnect_recommender.domain.center.models import (
    Holiday,
    HolidayType,
    OperatingHours,
)

DEFAULT_MAX_DAYS_AHEAD = 14
CLOSING_SOON_THRESHOLD_MINUTES = 30

# (다음 운영까지 남은 시간 상한, 점수)
NEXT_OPEN_SCORE_TIERS: tuple[tuple[float, int], ...] = (
    (1, 80),
    (3, 60),
    (6, 40),
    (24, 20),
)

DAY_NAMES = ("일요일", "월요일", "화요일", "수요일", "목요일", "금요일", "토요일")


class OperatingStatus(str, Enum):
    """센터 운영 상태."""

    OPEN = "OPEN"  # 운영 중
    CLOSING_SOON = "CLOSING_SOON"  # 곧 마감
    CLOSED = "CLOSED"  # 운영 시간 아님
    HOLIDAY = "HOLIDAY"  # 휴무일
    TEMPORARY_CLOSED = "TEMPORARY_CLOSED"  # 임시 휴무
    NO_INFORMATION = "NO_INFORMATION"  # 정보 없음


@dataclass(frozen=True)
class OperatingStatusInfo:
    """운영 상태 상세 정보."""

    status: OperatingStatus
    message: str
    minutes_until_close: int | None = None
    next_open_time: datetime | None = None


def _validate_inputs(
    hours: Sequence[OperatingHours], now: datetime, holidays: Sequence[Holiday]
) -> None:
    if not isinstance(hours, (list, tuple)):
        raise TypeError("hours는 리스트여야 합니다")
    if not isinstance(holidays, (list, tuple)):
        raise TypeError("holidays는 리스트여야 합니다")
    if not isinstance(now, datetime):
        raise TypeError("now는 유효한 datetime이어야 합니다")


def _to_minutes(hhmm: str) -> int:
    hour, minute = hhmm.split(":")
    return int(hour) * 60 + int(minute)


def _day_of_week(day: date) -> int:
    """일요일=0 기준 요일."""
    return (day.weekday() + 1) % 7


def _is_holiday(day: date, holidays: Sequence[Holiday]) -> bool:
    return any(holiday.holiday_date == day for holiday in holidays)


def _find_hours(hours: Sequence[OperatingHours], day: date) -> OperatingHours | None:
    """해당 날짜의 운영시간 (시작/종료 시각이 모두 있는 경우만)."""
    day_of_week = _day_of_week(day)
    for entry in hours:
        if entry.day_of_week == day_of_week:
            if entry.open_time and entry.close_time:
                return entry
            return None
    return None


def is_currently_open(
    hours: Sequence[OperatingHours],
    now: datetime,
    holidays: Sequence[Holiday] = (),
) -> bool:
    """현재 운영 중인지 확인합니다.

    Args:
        hours: 요일별 운영시간 목록
        now: 평가 시각
        holidays: 휴무일 목록

    Returns:
        운영 중이면 True

    Raises:
        TypeError: 입력 형식이 잘못된 경우
    """
    _validate_inputs(hours, now, holidays)

    if _is_holiday(now.date(), holidays):
        return False

    today = _find_hours(hours, now.date())
    if today is None:
        return False

    current = now.hour * 60 + now.minute
    return _to_minutes(today.open_time) <= current < _to_minutes(today.close_time)


def get_next_open_time(
    hours: Sequence[OperatingHours],
    now: datetime,
    holidays: Sequence[Holiday] = (),
    max_days_ahead: int = DEFAULT_MAX_DAYS_AHEAD,
) -> datetime | None:
    """다음 운영 시작 시각을 찾습니다.

    오늘은 아직 시작 전인 경우에만 해당하며, 이미 운영 중이거나
    운영이 끝났으면 다음 날부터 찾습니다. 휴무일은 건너뜁니다.

    Args:
        hours: 요일별 운영시간 목록
        now: 평가 시각
        holidays: 휴무일 목록
        max_days_ahead: 탐색할 최대 일수 (오늘 포함 max_days_ahead일 뒤까지)

    Returns:
        다음 운영 시작 시각 (now와 같은 tzinfo), 기간 내에 없으면 None

    Raises:
        TypeError: 입력 형식이 잘못된 경우
        ValueError: max_days_ahead가 양의 정수가 아닌 경우
    """
    _validate_inputs(hours, now, holidays)
    if not isinstance(max_days_ahead, int) or isinstance(max_days_ahead, bool):
        raise TypeError("max_days_ahead는 정수여야 합니다")
    if max_days_ahead <= 0:
        raise ValueError("max_days_ahead는 양의 정수여야 합니다")

    for days_ahead in range(max_days_ahead + 1):
        check_date = now.date() + timedelta(days=days_ahead)
        if _is_holiday(check_date, holidays):
            continue

        day_hours = _find_hours(hours, check_date)
        if day_hours is None:
            continue

        open_minutes = _to_minutes(day_hours.open_time)
        if days_ahead == 0 and now.hour * 60 + now.minute >= open_minutes:
            continue

        return datetime.combine(
            check_date,
            time(open_minutes // 60, open_minutes % 60),
            tzinfo=now.tzinfo,
        )

    return None


def calculate_operating_score(
    hours: Sequence[OperatingHours],
    now: datetime,
    holidays: Sequence[Holiday] = (),
) -> int:
    """운영시간 점수를 계산합니다.

    운영 중이면 100점, 아니면 다음 운영까지 남은 시간에 따라
    1시간 이내 80, 3시간 이내 60, 6시간 이내 40, 24시간 이내 20,
    그 외 0점입니다.

    Args:
        hours: 요일별 운영시간 목록
        now: 평가 시각
        holidays: 휴무일 목록

    Returns:
        운영시간 점수

    Raises:
        TypeError: 입력 형식이 잘못된 경우
    """
    if is_currently_open(hours, now, holidays):
        return 100

    next_open = get_next_open_time(hours, now, holidays)
    if next_open is None:
        return 0

    hours_until_open = (next_open - now).total_seconds() / 3600
    for limit, score in NEXT_OPEN_SCORE_TIERS:
        if hours_until_open <= limit:
            return score
    return 0


def get_minutes_until_close(
    hours: Sequence[OperatingHours],
    now: datetime,
    holidays: Sequence[Holiday] = (),
) -> int | None:
    """운영 종료까지 남은 분. 운영 중이 아니면 None."""
    if not is_currently_open(hours, now, holidays):
        return None

    today = _find_hours(hours, now.date())
    return _to_minutes(today.close_time) - (now.hour * 60 + now.minute)


def _next_open_message(now: datetime, next_open: datetime | None) -> str:
    if next_open is None:
        return "현재 운영 시간이 아닙니다"

    days_diff = (next_open.date() - now.date()).days
    open_label = f"{next_open.hour}시" + (f" {next_open.minute}분" if next_open.minute else "")
    if days_diff == 0:
        return f"오늘 {open_label}에 운영 시작 예정"
    if days_diff == 1:
        return f"내일 {open_label}에 운영 시작 예정"
    return f"{DAY_NAMES[_day_of_week(next_open.date())]} {open_label}에 운영 시작 예정"


def get_operating_status(
    hours: Sequence[OperatingHours],
    now: datetime,
    holidays: Sequence[Holiday] = (),
) -> OperatingStatusInfo:
    """센터의 현재 운영 상태를 분류합니다.

    Args:
        hours: 요일별 운영시간 목록
        now: 평가 시각
        holidays: 휴무일 목록

    Returns:
        운영 상태 상세 정보
    """
    _validate_inputs(hours, now, holidays)

    if not hours:
        return OperatingStatusInfo(
            status=OperatingStatus.NO_INFORMATION,
            message="운영 시간 정보가 없습니다",
        )

    today_holiday = next((h for h in holidays if h.holiday_date == now.date()), None)
    if today_holiday is not None:
        next_open = get_next_open_time(hours, now, holidays)
        if today_holiday.holiday_type == HolidayType.TEMPORARY:
            return OperatingStatusInfo(
                status=OperatingStatus.TEMPORARY_CLOSED,
                message="임시 휴무입니다",
                next_open_time=next_open,
            )
        return OperatingStatusInfo(
            status=OperatingStatus.HOLIDAY,
            message="휴무일입니다",
            next_open_time=next_open,
        )

    minutes_until_close = get_minutes_until_close(hours, now, holidays)
    if minutes_until_close is not None:
        if minutes_until_close <= CLOSING_SOON_THRESHOLD_MINUTES:
            return OperatingStatusInfo(
                status=OperatingStatus.CLOSING_SOON,
                message=f"곧 마감합니다 ({minutes_until_close}분 후)",
                minutes_until_close=minutes_until_close,
            )
        return OperatingStatusInfo(
            status=OperatingStatus.OPEN,
            message="현재 운영 중입니다",
            minutes_until_close=minutes_until_close,
        )

    next_open = get_next_open_time(hours, now, holidays)
    return OperatingStatusInfo(
        status=OperatingStatus.CLOSED,
        message=_next_open_message(now, next_open),
        next_open_time=next_open,
    )

"""운영시간 점수 계산 테스트."""

from datetime import date, timedelta

import pytest

from factories import kst
from mindconnect_recommender.domain.center.models import (
    Holiday,
    HolidayType,
    OperatingHours,
)
from mindconnect_recommender.domain.scoring.operating import (
    OperatingStatus,
    calculate_operating_score,
    get_minutes_until_close,
    get_next_open_time,
    get_operating_status,
    is_currently_open,
)

# 2025-01-06은 월요일
MONDAY = (2025, 1, 6)


class TestIsCurrentlyOpen:
    """is_currently_open 테스트."""

    def test_운영시간_중이면_True(self, weekday_hours: list[OperatingHours]) -> None:
        """월요일 10:00은 운영 중이다."""
        assert is_currently_open(weekday_hours, kst(*MONDAY, 10)) is True

    def test_시작_시각_정각은_운영_중이다(self, weekday_hours: list[OperatingHours]) -> None:
        """시작 시각은 구간에 포함된다."""
        assert is_currently_open(weekday_hours, kst(*MONDAY, 9)) is True

    def test_종료_시각_정각은_운영_종료다(self, weekday_hours: list[OperatingHours]) -> None:
        """종료 시각은 구간에 포함되지 않는다."""
        assert is_currently_open(weekday_hours, kst(*MONDAY, 18)) is False
        assert is_currently_open(weekday_hours, kst(*MONDAY, 17, 59)) is True

    def test_운영시간이_없는_요일은_휴무(self, weekday_hours: list[OperatingHours]) -> None:
        """일요일 항목이 없으면 휴무로 본다."""
        # 2025-01-05는 일요일
        assert is_currently_open(weekday_hours, kst(2025, 1, 5, 10)) is False

    def test_휴무일이면_운영시간과_관계없이_False(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """휴무일 목록이 요일별 운영시간보다 우선한다."""
        # Given
        holidays = [Holiday(holiday_date=date(*MONDAY), name="임시 휴무")]

        # When & Then
        assert is_currently_open(weekday_hours, kst(*MONDAY, 10), holidays) is False

    def test_시작_또는_종료_시각이_없으면_휴무(self) -> None:
        """시각 정보가 비어 있는 요일은 휴무로 본다."""
        hours = [OperatingHours(day_of_week=1, open_time="09:00", close_time=None)]
        assert is_currently_open(hours, kst(*MONDAY, 10)) is False

    def test_자정을_넘기는_운영시간은_운영_중으로_보지_않는다(self) -> None:
        """종료 시각이 시작 시각보다 이르면 빈 구간이다."""
        hours = [OperatingHours(day_of_week=1, open_time="22:00", close_time="02:00")]
        assert is_currently_open(hours, kst(*MONDAY, 23)) is False

    def test_리스트가_아닌_운영시간은_TypeError(self) -> None:
        """hours가 리스트가 아니면 TypeError를 발생시킨다."""
        with pytest.raises(TypeError):
            is_currently_open(None, kst(*MONDAY, 10))  # type: ignore[arg-type]

    def test_datetime이_아닌_시각은_TypeError(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """now가 datetime이 아니면 TypeError를 발생시킨다."""
        with pytest.raises(TypeError):
            is_currently_open(weekday_hours, "2025-01-06T10:00")  # type: ignore[arg-type]


class TestGetNextOpenTime:
    """get_next_open_time 테스트."""

    def test_시작_전이면_오늘_시작_시각(self, weekday_hours: list[OperatingHours]) -> None:
        """월요일 08:30이면 같은 날 09:00이다."""
        # When
        next_open = get_next_open_time(weekday_hours, kst(*MONDAY, 8, 30))

        # Then
        assert next_open == kst(*MONDAY, 9)

    def test_운영_종료_후면_다음_운영일(self, weekday_hours: list[OperatingHours]) -> None:
        """월요일 19:00이면 화요일 09:00이다."""
        next_open = get_next_open_time(weekday_hours, kst(*MONDAY, 19))
        assert next_open == kst(2025, 1, 7, 9)

    def test_운영_중이면_다음_날_시작_시각(self, weekday_hours: list[OperatingHours]) -> None:
        """이미 시작한 날은 건너뛴다."""
        next_open = get_next_open_time(weekday_hours, kst(*MONDAY, 10))
        assert next_open == kst(2025, 1, 7, 9)

    def test_금요일_저녁이면_다음_월요일(self, weekday_hours: list[OperatingHours]) -> None:
        """주말은 운영시간이 없어 건너뛴다."""
        next_open = get_next_open_time(weekday_hours, kst(2025, 1, 10, 19))
        assert next_open == kst(2025, 1, 13, 9)

    def test_휴무일은_건너뛴다(self, weekday_hours: list[OperatingHours]) -> None:
        """다음 운영일이 휴무일이면 그 다음 운영일을 찾는다."""
        # Given
        holidays = [Holiday(holiday_date=date(2025, 1, 7), holiday_type=HolidayType.TEMPORARY)]

        # When
        next_open = get_next_open_time(weekday_hours, kst(*MONDAY, 19), holidays)

        # Then
        assert next_open == kst(2025, 1, 8, 9)

    def test_운영시간이_없으면_None(self) -> None:
        """운영 요일이 없으면 None을 반환한다."""
        assert get_next_open_time([], kst(*MONDAY, 10)) is None

    def test_탐색_기간_안에_운영일이_없으면_None(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """15일 연속 휴무이면 찾지 못한다."""
        # Given
        holidays = [
            Holiday(holiday_date=date(*MONDAY) + timedelta(days=i)) for i in range(15)
        ]

        # When & Then
        assert get_next_open_time(weekday_hours, kst(*MONDAY, 8), holidays) is None

    def test_결과는_입력과_같은_시간대다(self, weekday_hours: list[OperatingHours]) -> None:
        """반환된 시각은 now의 tzinfo를 유지한다."""
        now = kst(*MONDAY, 8)
        assert get_next_open_time(weekday_hours, now).tzinfo == now.tzinfo

    def test_max_days_ahead가_정수가_아니면_TypeError(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """bool이나 실수는 허용하지 않는다."""
        with pytest.raises(TypeError):
            get_next_open_time(weekday_hours, kst(*MONDAY, 8), max_days_ahead=1.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            get_next_open_time(weekday_hours, kst(*MONDAY, 8), max_days_ahead=True)

    def test_max_days_ahead가_0이하면_ValueError(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """탐색 일수는 양수여야 한다."""
        with pytest.raises(ValueError):
            get_next_open_time(weekday_hours, kst(*MONDAY, 8), max_days_ahead=0)


class TestCalculateOperatingScore:
    """calculate_operating_score 테스트."""

    @pytest.mark.parametrize(
        ("hour", "minute", "expected"),
        [
            (10, 0, 100),  # 운영 중
            (8, 30, 80),  # 30분 후 시작
            (8, 0, 80),  # 정확히 1시간 후
            (6, 30, 60),  # 2.5시간 후
            (4, 0, 40),  # 5시간 후
            (19, 0, 20),  # 14시간 후
        ],
    )
    def test_다음_운영까지_남은_시간에_따른_점수(
        self,
        weekday_hours: list[OperatingHours],
        hour: int,
        minute: int,
        expected: int,
    ) -> None:
        """운영 중 100, 이후 1/3/6/24시간 구간별 80/60/40/20점."""
        assert calculate_operating_score(weekday_hours, kst(*MONDAY, hour, minute)) == expected

    def test_24시간_넘게_남으면_0점(self, weekday_hours: list[OperatingHours]) -> None:
        """토요일 저녁은 월요일 시작까지 24시간이 넘는다."""
        assert calculate_operating_score(weekday_hours, kst(2025, 1, 11, 19)) == 0

    def test_운영시간이_없으면_0점(self) -> None:
        """운영 정보가 없으면 0점이다."""
        assert calculate_operating_score([], kst(*MONDAY, 10)) == 0

    def test_휴무일이면_다음_운영일_기준으로_계산한다(
        self, weekday_hours: list[OperatingHours]
    ) -> None:
        """월요일 10:00 휴무면 화요일 09:00까지 23시간으로 20점이다."""
        holidays = [Holiday(holiday_date=date(*MONDAY))]
        assert calculate_operating_score(weekday_hours, kst(*MONDAY, 10), holidays) == 20


class TestOperatingStatus:
    """get_operating_status 테스트."""

    def test_운영_중(self, weekday_hours: list[OperatingHours]) -> None:
        """마감까지 30분 넘게 남으면 OPEN이다."""
        # When
        info = get_operating_status(weekday_hours, kst(*MONDAY, 10))

        # Then
        assert info.status == OperatingStatus.OPEN
        assert info.message == "현재 운영 중입니다"
        assert info.minutes_until_close == 480

    def test_곧_마감(self, weekday_hours: list[OperatingHours]) -> None:
        """마감 30분 이내면 CLOSING_SOON이다."""
        info = get_operating_status(weekday_hours, kst(*MONDAY, 17, 40))

        assert info.status == OperatingStatus.CLOSING_SOON
        assert info.minutes_until_close == 20
        assert "20분" in info.message

    def test_운영_시간_아님_내일_안내(self, weekday_hours: list[OperatingHours]) -> None:
        """운영 종료 후에는 다음 운영 시작을 안내한다."""
        info = get_operating_status(weekday_hours, kst(*MONDAY, 19))

        assert info.status == OperatingStatus.CLOSED
        assert info.next_open_time == kst(2025, 1, 7, 9)
        assert info.message == "내일 9시에 운영 시작 예정"

    def test_운영_시간_아님_오늘_안내(self) -> None:
        """시작 전이면 오늘 시작 시각을 안내한다."""
        hours = [OperatingHours(day_of_week=1, open_time="09:30", close_time="18:00")]
        info = get_operating_status(hours, kst(*MONDAY, 8))

        assert info.message == "오늘 9시 30분에 운영 시작 예정"

    def test_운영_시간_아님_요일_안내(self, weekday_hours: list[OperatingHours]) -> None:
        """이틀 이상 뒤면 요일로 안내한다."""
        info = get_operating_status(weekday_hours, kst(2025, 1, 10, 19))

        assert info.message == "월요일 9시에 운영 시작 예정"

    def test_공휴일(self, weekday_hours: list[OperatingHours]) -> None:
        """공휴일이나 정기 휴무는 HOLIDAY이다."""
        holidays = [Holiday(holiday_date=date(*MONDAY), holiday_type=HolidayType.PUBLIC)]
        info = get_operating_status(weekday_hours, kst(*MONDAY, 10), holidays)

        assert info.status == OperatingStatus.HOLIDAY
        assert info.next_open_time == kst(2025, 1, 7, 9)

    def test_임시_휴무(self, weekday_hours: list[OperatingHours]) -> None:
        """임시 휴무는 별도 상태로 구분한다."""
        holidays = [Holiday(holiday_date=date(*MONDAY), holiday_type=HolidayType.TEMPORARY)]
        info = get_operating_status(weekday_hours, kst(*MONDAY, 10), holidays)

        assert info.status == OperatingStatus.TEMPORARY_CLOSED
        assert info.message == "임시 휴무입니다"

    def test_운영시간_정보_없음(self) -> None:
        """운영시간이 비어 있으면 NO_INFORMATION이다."""
        info = get_operating_status([], kst(*MONDAY, 10))
        assert info.status == OperatingStatus.NO_INFORMATION


def test_운영_종료까지_남은_분(weekday_hours: list[OperatingHours]) -> None:
    """운영 중이 아니면 None이다."""
    assert get_minutes_until_close(weekday_hours, kst(*MONDAY, 17)) == 60
    assert get_minutes_until_close(weekday_hours, kst(*MONDAY, 19)) is None

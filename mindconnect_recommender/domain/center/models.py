"""센터 도메인 모델.

정신건강 센터와 운영시간, 휴무일, 프로그램, 인력 구성 등
추천 점수 계산에 필요한 읽기 전용 스냅샷 모델을 정의합니다.
"""

from collections.abc import Iterable
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# "HH:MM" (00:00 ~ 23:59)
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

GENERAL_CATEGORY = "general"


class Severity(str, Enum):
    """자가진단 심각도."""

    LOW = "LOW"  # 낮음
    MID = "MID"  # 중간
    HIGH = "HIGH"  # 높음


class HolidayType(str, Enum):
    """휴무일 유형."""

    PUBLIC = "PUBLIC"  # 공휴일
    REGULAR = "REGULAR"  # 정기 휴무
    TEMPORARY = "TEMPORARY"  # 임시 휴무


class StaffType(str, Enum):
    """인력 유형 태그."""

    PSYCHIATRIST = "psychiatrist"  # 정신건강의학과 전문의
    NURSE = "nurse"  # 정신건강간호사
    SOCIAL_WORKER = "social_worker"  # 정신건강사회복지사


class OperatingHours(BaseModel):
    """요일별 운영시간.

    해당 요일 항목이 없으면 그 요일은 휴무로 간주합니다.
    """

    model_config = ConfigDict(frozen=True)

    day_of_week: int = Field(..., ge=0, le=6, description="요일 (0=일요일 ~ 6=토요일)")
    open_time: str | None = Field(
        default=None, pattern=TIME_PATTERN, description="운영 시작 시각 (HH:MM)"
    )
    close_time: str | None = Field(
        default=None, pattern=TIME_PATTERN, description="운영 종료 시각 (HH:MM)"
    )


class Holiday(BaseModel):
    """휴무일.

    휴무일에는 요일별 운영시간과 관계없이 휴무로 처리합니다.
    """

    model_config = ConfigDict(frozen=True)

    holiday_date: date = Field(..., description="휴무 날짜 (YYYY-MM-DD)")
    holiday_type: HolidayType = Field(default=HolidayType.PUBLIC, description="휴무 유형")
    name: str | None = Field(default=None, description="휴무일 이름")


class AgeRange(BaseModel):
    """프로그램 대상 연령 범위 (양 끝 포함)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_age: int = Field(..., ge=0, alias="min", description="최소 연령")
    max_age: int = Field(..., ge=0, alias="max", description="최대 연령")

    @model_validator(mode="after")
    def _check_order(self) -> "AgeRange":
        if self.min_age > self.max_age:
            raise ValueError("최소 연령은 최대 연령보다 클 수 없습니다")
        return self

    def contains(self, age: int) -> bool:
        """연령이 범위 안에 있는지 확인합니다."""
        return self.min_age <= age <= self.max_age


class Program(BaseModel):
    """센터 프로그램."""

    model_config = ConfigDict(frozen=True)

    program_name: str = Field(default="", description="프로그램명")
    category: str = Field(..., description="프로그램 분야 (예: depression, general)")
    target_severity: list[Severity] | None = Field(
        default=None, description="대상 심각도 목록 (None이면 제한 없음)"
    )
    target_age: AgeRange | None = Field(default=None, description="대상 연령 범위")


class StaffInfo(BaseModel):
    """센터 인력 구성 요약.

    알 수 없는 키나 bool이 아닌 값은 ValidationError로 거부합니다.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    has_psychiatrist: bool = False
    has_nurse: bool = False
    has_social_worker: bool = False
    has_others: bool = False

    @classmethod
    def from_staff_types(cls, staff_types: Iterable[str]) -> "StaffInfo":
        """인력 유형 태그 목록을 인력 구성 요약으로 변환합니다.

        Args:
            staff_types: 인력 유형 태그 목록 (psychiatrist, nurse, social_worker, 기타)

        Returns:
            인력 구성 요약
        """
        types = set(staff_types)
        known = {staff_type.value for staff_type in StaffType}
        return cls(
            has_psychiatrist=StaffType.PSYCHIATRIST.value in types,
            has_nurse=StaffType.NURSE.value in types,
            has_social_worker=StaffType.SOCIAL_WORKER.value in types,
            has_others=any(t not in known for t in types),
        )


class Center(BaseModel):
    """정신건강 센터 스냅샷 (읽기 전용).

    데이터 계층에서 조회한 센터 정보를 요청 단위로 담습니다.
    좌표가 없는 센터는 거리 점수를 계산할 수 없어 추천에서 제외됩니다.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="센터 ID")
    center_name: str = Field(..., description="센터명")
    center_type: str | None = Field(default=None, description="센터 유형")
    road_address: str | None = Field(default=None, description="도로명 주소")
    phone_number: str | None = Field(default=None, description="전화번호")
    latitude: float | None = Field(default=None, description="위도")
    longitude: float | None = Field(default=None, description="경도")
    operating_hours: list[OperatingHours] = Field(default_factory=list)
    programs: list[Program] = Field(default_factory=list)
    staff_types: list[str] = Field(default_factory=list)
    holidays: list[Holiday] = Field(default_factory=list)

    @field_validator("operating_hours")
    @classmethod
    def _unique_day_of_week(cls, value: list[OperatingHours]) -> list[OperatingHours]:
        days = [hours.day_of_week for hours in value]
        if len(days) != len(set(days)):
            raise ValueError("요일별 운영시간은 하루에 하나만 등록할 수 있습니다")
        return value

    @property
    def staff_info(self) -> StaffInfo:
        """인력 구성 요약."""
        return StaffInfo.from_staff_types(self.staff_types)

    def __repr__(self) -> str:
        """문자열 표현을 반환합니다."""
        return f"<Center id={self.id} name={self.center_name}>"

"""Database ORM models (read-only)."""

from sqlalchemy import (
    ARRAY,
    BigInteger,
    Boolean,
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    SmallInteger,
    String,
    Time,
)
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CenterORM(Base):
    """정신건강 센터 ORM 모델 (읽기 전용)."""

    __tablename__ = "centers"

    id = Column(BigInteger, primary_key=True)
    center_name = Column(String(200), nullable=False)
    center_type = Column(String(100), nullable=True)
    road_address = Column(String(500), nullable=True)
    phone_number = Column(String(50), nullable=True)
    latitude = Column(Numeric(10, 8), nullable=True)
    longitude = Column(Numeric(11, 8), nullable=True)
    is_active = Column(Boolean, default=True)

    operating_hours = relationship("CenterOperatingHourORM", lazy="raise")
    programs = relationship("CenterProgramORM", lazy="raise")
    staff = relationship("CenterStaffORM", lazy="raise")
    holidays = relationship("CenterHolidayORM", lazy="raise")


class CenterOperatingHourORM(Base):
    """센터 요일별 운영시간 ORM 모델 (읽기 전용)."""

    __tablename__ = "center_operating_hours"

    id = Column(BigInteger, primary_key=True)
    center_id = Column(BigInteger, ForeignKey("centers.id"), nullable=False)
    day_of_week = Column(SmallInteger, nullable=False)  # 0=일요일
    open_time = Column(Time, nullable=True)
    close_time = Column(Time, nullable=True)
    is_open = Column(Boolean, default=True)


class CenterProgramORM(Base):
    """센터 프로그램 ORM 모델 (읽기 전용)."""

    __tablename__ = "center_programs"

    id = Column(BigInteger, primary_key=True)
    center_id = Column(BigInteger, ForeignKey("centers.id"), nullable=False)
    program_name = Column(String(200), nullable=False)
    category = Column(String(50), nullable=False)
    target_severity = Column(ARRAY(String(10)), nullable=True)
    target_age_min = Column(Integer, nullable=True)
    target_age_max = Column(Integer, nullable=True)
    is_active = Column(Boolean, default=True)


class CenterStaffORM(Base):
    """센터 인력 ORM 모델 (읽기 전용)."""

    __tablename__ = "center_staff"

    id = Column(BigInteger, primary_key=True)
    center_id = Column(BigInteger, ForeignKey("centers.id"), nullable=False)
    staff_type = Column(String(50), nullable=False)
    staff_count = Column(Integer, default=1)


class CenterHolidayORM(Base):
    """센터 휴무일 ORM 모델 (읽기 전용)."""

    __tablename__ = "center_holidays"

    id = Column(BigInteger, primary_key=True)
    center_id = Column(BigInteger, ForeignKey("centers.id"), nullable=False)
    holiday_date = Column(Date, nullable=False)
    holiday_name = Column(String(100), nullable=True)
    is_regular = Column(Boolean, default=False)

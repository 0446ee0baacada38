"""센터 레포지토리 - 데이터베이스 접근 계층."""

import structlog
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from mindconnect_recommender.domain.center.models import (
    AgeRange,
    Center,
    Holiday,
    HolidayType,
    OperatingHours,
    Program,
)
from mindconnect_recommender.domain.scoring.distance import BoundingBox
from mindconnect_recommender.infrastructure.database.models import (
    CenterHolidayORM,
    CenterOperatingHourORM,
    CenterORM,
    CenterProgramORM,
)

logger = structlog.get_logger(__name__)


class PostgresCenterRepository:
    """정신건강 센터 레포지토리 (읽기 전용).

    메인 백엔드의 centers 테이블과 운영시간, 프로그램, 인력, 휴무일
    테이블을 함께 조회해 센터 도메인 모델로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """레포지토리를 초기화합니다.

        Args:
            session: 비동기 데이터베이스 세션
        """
        self.session = session

    def _base_query(self):
        return select(CenterORM).options(
            selectinload(CenterORM.operating_hours),
            selectinload(CenterORM.programs.and_(CenterProgramORM.is_active.is_(True))),
            selectinload(CenterORM.staff),
            selectinload(CenterORM.holidays),
        )

    async def find_candidates(self, bounds: BoundingBox) -> list[Center]:
        """검색 영역 안의 운영 중인 센터를 조회합니다.

        정확한 반경 필터는 점수 계산 코어가 수행합니다.
        도메인 모델로 변환할 수 없는 센터는 경고 로그를 남기고 제외합니다.

        Args:
            bounds: 위경도 사각 검색 영역

        Returns:
            후보 센터 도메인 모델 목록
        """
        stmt = (
            self._base_query()
            .where(CenterORM.is_active.is_(True))
            .where(CenterORM.latitude.is_not(None))
            .where(CenterORM.longitude.is_not(None))
            .where(CenterORM.latitude.between(bounds.min_latitude, bounds.max_latitude))
            .where(CenterORM.longitude.between(bounds.min_longitude, bounds.max_longitude))
            .order_by(CenterORM.id)
        )
        result = await self.session.execute(stmt)
        orm_centers = result.scalars().all()

        centers: list[Center] = []
        for orm_center in orm_centers:
            try:
                centers.append(self._to_domain(orm_center))
            except ValidationError as e:
                logger.warning(
                    "센터 데이터 변환 실패",
                    center_id=orm_center.id,
                    error=str(e),
                )

        logger.info(
            "후보 센터 조회 완료",
            fetched=len(orm_centers),
            converted=len(centers),
        )
        return centers

    async def get_by_id(self, center_id: str) -> Center | None:
        """ID로 운영 중인 센터를 조회합니다.

        비활성 센터와 도메인 모델로 변환할 수 없는 센터는 없는 센터로 취급합니다.

        Args:
            center_id: 센터 ID

        Returns:
            센터가 존재하면 도메인 모델, 없으면 None
        """
        try:
            numeric_id = int(center_id)
        except ValueError:
            return None

        result = await self.session.execute(
            self._base_query()
            .where(CenterORM.id == numeric_id)
            .where(CenterORM.is_active.is_(True))
        )
        orm_center = result.scalar_one_or_none()
        if orm_center is None:
            return None

        try:
            return self._to_domain(orm_center)
        except ValidationError as e:
            logger.warning(
                "센터 데이터 변환 실패",
                center_id=orm_center.id,
                error=str(e),
            )
            return None

    def _to_domain(self, orm_center: CenterORM) -> Center:
        """ORM 모델을 도메인 모델로 변환합니다.

        Args:
            orm_center: ORM 센터 엔티티

        Returns:
            센터 도메인 모델

        Raises:
            ValidationError: 운영시간, 프로그램 등의 데이터가 유효하지 않은 경우
        """
        return Center(
            id=str(orm_center.id),
            center_name=orm_center.center_name,
            center_type=orm_center.center_type,
            road_address=orm_center.road_address,
            phone_number=orm_center.phone_number,
            latitude=float(orm_center.latitude) if orm_center.latitude is not None else None,
            longitude=float(orm_center.longitude) if orm_center.longitude is not None else None,
            operating_hours=[
                self._to_operating_hours(oh) for oh in orm_center.operating_hours if oh.is_open
            ],
            programs=[self._to_program(p) for p in orm_center.programs],
            staff_types=[s.staff_type for s in orm_center.staff],
            holidays=[self._to_holiday(h) for h in orm_center.holidays],
        )

    @staticmethod
    def _to_operating_hours(orm_hours: CenterOperatingHourORM) -> OperatingHours:
        return OperatingHours(
            day_of_week=orm_hours.day_of_week,
            open_time=orm_hours.open_time.strftime("%H:%M") if orm_hours.open_time else None,
            close_time=orm_hours.close_time.strftime("%H:%M") if orm_hours.close_time else None,
        )

    @staticmethod
    def _to_program(orm_program: CenterProgramORM) -> Program:
        target_age = None
        if orm_program.target_age_min is not None and orm_program.target_age_max is not None:
            target_age = AgeRange(
                min_age=orm_program.target_age_min, max_age=orm_program.target_age_max
            )
        return Program(
            program_name=orm_program.program_name,
            category=orm_program.category,
            target_severity=(
                list(orm_program.target_severity)
                if orm_program.target_severity is not None
                else None
            ),
            target_age=target_age,
        )

    @staticmethod
    def _to_holiday(orm_holiday: CenterHolidayORM) -> Holiday:
        return Holiday(
            holiday_date=orm_holiday.holiday_date,
            holiday_type=HolidayType.REGULAR if orm_holiday.is_regular else HolidayType.TEMPORARY,
            name=orm_holiday.holiday_name,
        )

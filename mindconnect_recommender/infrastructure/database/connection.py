"""데이터베이스 연결 관리.

MindConnect 메인 백엔드 PostgreSQL에 읽기 전용 트랜잭션으로 연결합니다.
스키마와 데이터는 메인 백엔드가 관리합니다.
"""

from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from mindconnect_recommender.core.config.settings import settings


def _async_url(url: str) -> str:
    """동기 PostgreSQL URL을 psycopg 비동기 드라이버 URL로 변환합니다."""
    return url.replace("postgresql://", "postgresql+psycopg://", 1)


engine: AsyncEngine = create_async_engine(
    _async_url(str(settings.database_url)),
    echo=settings.debug,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
    execution_options={"postgresql_readonly": True},
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def check_connection() -> None:
    """데이터베이스 연결을 확인합니다 (애플리케이션 시작 시)."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 읽기 전용 세션 의존성.

    Yields:
        비동기 데이터베이스 세션
    """
    async with AsyncSessionLocal() as session:
        yield session

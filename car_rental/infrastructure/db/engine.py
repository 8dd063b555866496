from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from car_rental.config import get_settings
from car_rental.infrastructure.db.tables import metadata

settings = get_settings()

# Sin DATABASE_URL se usa SQLite en memoria (dev/test)
DB_URL = settings.database_url or "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(DB_URL, echo=settings.sql_echo)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(target: AsyncEngine = engine) -> None:
    async with target.begin() as conn:
        await conn.run_sync(metadata.create_all)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session

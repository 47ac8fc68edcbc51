from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from telemedicine.config import settings

# SQLite deployments (and the test suite) run without Alembic or pool tuning
USES_SQLITE = settings.database_url.startswith("sqlite")


def _engine_options() -> dict:
    options: dict = {"echo": settings.debug}
    if not USES_SQLITE:
        options.update(pool_size=20, max_overflow=10, pool_pre_ping=True)
    return options


engine = create_async_engine(settings.database_url, **_engine_options())
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: committed when the handler returns, rolled back if it raises."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def ensure_schema() -> None:
    """Create missing tables on SQLite; PostgreSQL schemas are owned by Alembic."""
    if not USES_SQLITE:
        return
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

"""
Асинхронный движок и фабрика сессий БД.
"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from app.core.config import settings


def async_database_url(url: str) -> str:
    """Переводит обычный postgres-URL на драйвер asyncpg."""
    for prefix in ("postgresql+asyncpg://", "postgresql://", "postgres://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


engine = create_async_engine(
    async_database_url(settings.DATABASE_URL),
    echo=settings.SQL_ECHO,
    pool_pre_ping=True,
)

# expire_on_commit=False: план и сессии отдаются в ответ уже после commit генерации
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db():
    """Одна сессия на запрос; незафиксированное откатывается при закрытии."""
    async with AsyncSessionLocal() as session:
        yield session

import logging
import ssl

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker

from config import get_settings
from db.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()
DATABASE_URL = settings.database_url
logger.debug("DB URL: %s", DATABASE_URL)


def build_engine(url: str, use_ssl: bool = False, **kwargs) -> AsyncEngine:
    connect_args = {}
    if use_ssl:
        connect_args["ssl"] = ssl.create_default_context()

    return create_async_engine(
        url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        connect_args=connect_args,
        **kwargs
    )


engine = build_engine(DATABASE_URL, use_ssl=settings.database_ssl)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create every table known to the declarative Base."""
    # Table classes register themselves on Base at import time
    import models.candidate.model  # noqa: F401
    import models.jobs.model  # noqa: F401
    import models.applications.model  # noqa: F401

    bind = bind or engine
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")

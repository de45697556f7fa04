from typing import AsyncGenerator
from sqlmodel.ext.asyncio.session import AsyncSession
from .sql_driver import SQLDriver


class DatabaseManager:
    _instance = None

    def __init__(self, settings):
        self.sql = SQLDriver(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    def reset(cls):
        cls._instance = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency: request-scoped persistence context."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

"""
Opt-in registration of QueryFactory as a FastAPI dependency.

Endpoints declare `Depends(get_query_factory)`. Until `register_query_factory`
runs with the feature enabled, resolving that dependency raises
QueryFactoryDisabled.
"""

from typing import Optional
from fastapi import Depends, FastAPI
from loguru import logger
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import settings
from framework.database.manager import get_db
from framework.exceptions.handler import QueryFactoryDisabled
from .factory import QueryFactory, create_query_factory


async def get_query_factory() -> QueryFactory:
    """Placeholder provider used while the query factory is not registered."""
    raise QueryFactoryDisabled()


async def _session_query_factory(db: AsyncSession = Depends(get_db)) -> QueryFactory:
    return create_query_factory(db)


def register_query_factory(app: FastAPI, enabled: Optional[bool] = None) -> bool:
    """Bind get_query_factory to the request session; returns whether it was bound."""
    if enabled is None:
        enabled = settings.QUERY_FACTORY_ENABLED

    if not enabled:
        logger.debug("Query factory registration skipped (QUERY_FACTORY_ENABLED is off)")
        return False

    app.dependency_overrides[get_query_factory] = _session_query_factory
    logger.info("Query factory registered on request sessions")
    return True

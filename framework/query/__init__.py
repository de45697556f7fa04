"""
Query helper bound to a persistence context (AsyncSession), plus its opt-in FastAPI provider.
"""

from .factory import QueryFactory, create_query_factory
from .provider import get_query_factory, register_query_factory

__all__ = ["QueryFactory", "create_query_factory", "get_query_factory", "register_query_factory"]

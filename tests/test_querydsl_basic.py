"""
Harness check: a test receives a persistence context inside a rolled-back transaction.
"""
import pytest
from sqlmodel.ext.asyncio.session import AsyncSession


class TestQuerydslBasic:

    @pytest.mark.asyncio
    async def test_before(self, em: AsyncSession):
        pass

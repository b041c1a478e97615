from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.errors import storage_errors


class HealthService:
    """Database round-trip used by the readiness probe."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def ok(self) -> dict:
        async with self._session_factory() as session:
            with storage_errors("readyz"):
                await session.execute(text("SELECT 1"))
        return {"ok": True}

"""Unit of Work abstraction used by the service layer."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.errors import storage_errors
from app.repositories.interfaces import (
    BrandRepository,
    EquipmentRepository,
    EquipmentTypeRepository,
    UserEquipmentRepository,
)
from app.repositories.sqlalchemy import (
    SqlAlchemyBrandRepository,
    SqlAlchemyEquipmentRepository,
    SqlAlchemyEquipmentTypeRepository,
    SqlAlchemyUserEquipmentRepository,
)


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    """Defines the repository boundary exposed to services."""

    equipments: EquipmentRepository
    equipment_types: EquipmentTypeRepository
    brands: BrandRepository
    user_equipments: UserEquipmentRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of Work backed by SQLAlchemy async sessions.

    Commits when the block exits cleanly and rolls back otherwise.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self.equipments: EquipmentRepository
        self.equipment_types: EquipmentTypeRepository
        self.brands: BrandRepository
        self.user_equipments: UserEquipmentRepository

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        session = self._session_factory()
        self._session = session
        self.equipments = SqlAlchemyEquipmentRepository(session)
        self.equipment_types = SqlAlchemyEquipmentTypeRepository(session)
        self.brands = SqlAlchemyBrandRepository(session)
        self.user_equipments = SqlAlchemyUserEquipmentRepository(session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is None:
            return
        try:
            if exc_type:
                await self._session.rollback()
            else:
                await self.commit()
        finally:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        if self._session is not None:
            with storage_errors("commit"):
                await self._session.commit()

    async def rollback(self) -> None:
        if self._session is not None:
            await self._session.rollback()

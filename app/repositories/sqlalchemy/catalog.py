"""Brand and equipment type repositories (add + list only)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Brand, EquipmentType
from app.repositories.errors import storage_errors
from app.repositories.interfaces import (
    BrandRepository,
    BrandRow,
    EquipmentTypeRepository,
    EquipmentTypeRow,
)


class SqlAlchemyEquipmentTypeRepository(EquipmentTypeRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, values: Mapping[str, Any]) -> EquipmentTypeRow:
        stmt = insert(EquipmentType).values(**values).returning(EquipmentType.id, EquipmentType.type)
        with storage_errors("equipment_type.add"):
            row = (await self._session.execute(stmt)).one()
        return EquipmentTypeRow(id=row.id, type=row.type)

    async def list_all(self) -> list[EquipmentTypeRow]:
        stmt = select(EquipmentType.id, EquipmentType.type).order_by(EquipmentType.id.asc())
        with storage_errors("equipment_type.list_all"):
            rows = (await self._session.execute(stmt)).all()
        return [EquipmentTypeRow(id=row.id, type=row.type) for row in rows]


class SqlAlchemyBrandRepository(BrandRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, values: Mapping[str, Any]) -> BrandRow:
        stmt = insert(Brand).values(**values).returning(Brand.id, Brand.name)
        with storage_errors("brand.add"):
            row = (await self._session.execute(stmt)).one()
        return BrandRow(id=row.id, name=row.name)

    async def list_all(self) -> list[BrandRow]:
        stmt = select(Brand.id, Brand.name).order_by(Brand.id.asc())
        with storage_errors("brand.list_all"):
            rows = (await self._session.execute(stmt)).all()
        return [BrandRow(id=row.id, name=row.name) for row in rows]

"""SQLAlchemy implementation of the equipment catalog repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Equipment
from app.repositories.errors import storage_errors
from app.repositories.interfaces import EquipmentRepository, EquipmentRow

_COLUMNS = (
    Equipment.id,
    Equipment.name,
    Equipment.brand_id,
    Equipment.equipment_type_id,
    Equipment.model,
    Equipment.description,
)


def _to_row(row) -> EquipmentRow:  # type: ignore[no-untyped-def]
    return EquipmentRow(
        id=row.id,
        name=row.name,
        brand_id=row.brand_id,
        equipment_type_id=row.equipment_type_id,
        model=row.model,
        description=row.description,
    )


class SqlAlchemyEquipmentRepository(EquipmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, values: Mapping[str, Any]) -> EquipmentRow:
        stmt = insert(Equipment).values(**values).returning(*_COLUMNS)
        with storage_errors("equipment.add"):
            row = (await self._session.execute(stmt)).one()
        return _to_row(row)

    async def get_by_id(self, equipment_id: int) -> EquipmentRow | None:
        stmt = select(*_COLUMNS).where(Equipment.id == equipment_id)
        with storage_errors("equipment.get_by_id"):
            row = (await self._session.execute(stmt)).first()
        return _to_row(row) if row is not None else None

    async def list_all(self) -> list[EquipmentRow]:
        stmt = select(*_COLUMNS).order_by(Equipment.id.asc())
        with storage_errors("equipment.list_all"):
            rows = (await self._session.execute(stmt)).all()
        return [_to_row(row) for row in rows]

    async def update(self, equipment_id: int, values: Mapping[str, Any]) -> EquipmentRow | None:
        stmt = (
            update(Equipment)
            .where(Equipment.id == equipment_id)
            .values(**values)
            .returning(*_COLUMNS)
        )
        with storage_errors("equipment.update"):
            row = (await self._session.execute(stmt)).first()
        return _to_row(row) if row is not None else None

    async def delete(self, equipment_id: int) -> EquipmentRow | None:
        # Registrations referencing this row go with it (ON DELETE CASCADE).
        stmt = delete(Equipment).where(Equipment.id == equipment_id).returning(*_COLUMNS)
        with storage_errors("equipment.delete"):
            row = (await self._session.execute(stmt)).first()
        return _to_row(row) if row is not None else None

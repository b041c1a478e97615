"""SQLAlchemy implementation of the registration repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Brand, Equipment, UserEquipment
from app.repositories.errors import storage_errors
from app.repositories.interfaces import (
    UserEquipmentDetailRow,
    UserEquipmentRepository,
    UserEquipmentRow,
)

_COLUMNS = (
    UserEquipment.id,
    UserEquipment.user_id,
    UserEquipment.equipment_id,
    UserEquipment.equipment_reg_number,
    UserEquipment.equipment_reg_year,
    UserEquipment.equipment_reg_location,
    UserEquipment.state,
    UserEquipment.district,
    UserEquipment.equipment_details,
    UserEquipment.equipment_image,
)
_FIELDS = tuple(col.key for col in _COLUMNS)


class SqlAlchemyUserEquipmentRepository(UserEquipmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, values: Mapping[str, Any]) -> UserEquipmentRow:
        stmt = insert(UserEquipment).values(**values).returning(*_COLUMNS)
        with storage_errors("user_equipment.add"):
            row = (await self._session.execute(stmt)).one()
        return UserEquipmentRow(**{f: getattr(row, f) for f in _FIELDS})

    async def list_for_owner(self, owner_id: int) -> list[UserEquipmentDetailRow]:
        # Inner joins: registrations whose equipment or brand is gone drop out.
        stmt = (
            select(
                *_COLUMNS,
                Equipment.name.label("name"),
                Brand.name.label("brand_name"),
            )
            .select_from(UserEquipment)
            .join(Equipment, Equipment.id == UserEquipment.equipment_id)
            .join(Brand, Brand.id == Equipment.brand_id)
            .where(UserEquipment.user_id == owner_id)
            .order_by(UserEquipment.id.asc())
        )
        with storage_errors("user_equipment.list_for_owner"):
            rows = (await self._session.execute(stmt)).all()
        return [
            UserEquipmentDetailRow(
                **{f: getattr(row, f) for f in _FIELDS},
                name=row.name,
                brand_name=row.brand_name,
            )
            for row in rows
        ]

    async def delete_for_owner(self, owner_id: int, equipment_id: int) -> int:
        stmt = delete(UserEquipment).where(
            UserEquipment.user_id == owner_id,
            UserEquipment.equipment_id == equipment_id,
        )
        with storage_errors("user_equipment.delete_for_owner"):
            result = await self._session.execute(stmt)
        return int(result.rowcount or 0)

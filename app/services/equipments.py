"""Catalog use cases: equipment, equipment types and brands."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from app.core.exceptions import NotFoundError
from app.dto import BrandDTO, EquipmentDTO, EquipmentTypeDTO
from app.infra.unit_of_work import UnitOfWork
from app.schemas.equipment import (
    BrandCreateRequest,
    EquipmentCreateRequest,
    EquipmentTypeCreateRequest,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]

logger = structlog.get_logger(__name__)


class EquipmentService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    # --- equipment ---

    async def add_equipment(self, payload: EquipmentCreateRequest) -> EquipmentDTO:
        async with self._uow_factory() as uow:
            row = await uow.equipments.add(payload.model_dump())
        logger.info("equipment_created", equipment_id=row.id)
        return EquipmentDTO.model_validate(row)

    async def get_equipment_by_id(self, equipment_id: int) -> EquipmentDTO | None:
        """Return the equipment or ``None`` when the id is unknown."""
        async with self._uow_factory() as uow:
            row = await uow.equipments.get_by_id(equipment_id)
        return EquipmentDTO.model_validate(row) if row is not None else None

    async def get_all_equipments(self) -> list[EquipmentDTO]:
        async with self._uow_factory() as uow:
            rows = await uow.equipments.list_all()
        return [EquipmentDTO.model_validate(r) for r in rows]

    async def update_equipment(
        self, equipment_id: int, payload: EquipmentCreateRequest
    ) -> EquipmentDTO:
        async with self._uow_factory() as uow:
            row = await uow.equipments.update(equipment_id, payload.model_dump())
            if row is None:
                raise NotFoundError(f"equipment {equipment_id} not found")
        logger.info("equipment_updated", equipment_id=equipment_id)
        return EquipmentDTO.model_validate(row)

    async def delete_equipment(self, equipment_id: int) -> EquipmentDTO:
        async with self._uow_factory() as uow:
            row = await uow.equipments.delete(equipment_id)
            if row is None:
                raise NotFoundError(f"equipment {equipment_id} not found")
        logger.info("equipment_deleted", equipment_id=equipment_id)
        return EquipmentDTO.model_validate(row)

    # --- equipment types ---

    async def add_equipment_type(self, payload: EquipmentTypeCreateRequest) -> EquipmentTypeDTO:
        async with self._uow_factory() as uow:
            row = await uow.equipment_types.add(payload.model_dump())
        logger.info("equipment_type_created", equipment_type_id=row.id)
        return EquipmentTypeDTO.model_validate(row)

    async def get_equipment_types(self) -> list[EquipmentTypeDTO]:
        async with self._uow_factory() as uow:
            rows = await uow.equipment_types.list_all()
        return [EquipmentTypeDTO.model_validate(r) for r in rows]

    # --- brands ---

    async def add_brand(self, payload: BrandCreateRequest) -> BrandDTO:
        async with self._uow_factory() as uow:
            row = await uow.brands.add(payload.model_dump())
        logger.info("brand_created", brand_id=row.id)
        return BrandDTO.model_validate(row)

    async def get_all_brands(self) -> list[BrandDTO]:
        async with self._uow_factory() as uow:
            rows = await uow.brands.list_all()
        return [BrandDTO.model_validate(r) for r in rows]

"""Repository abstractions for the service layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class BrandRow:
    id: int
    name: str


@dataclass
class EquipmentTypeRow:
    id: int
    type: str


@dataclass
class EquipmentRow:
    id: int
    name: str
    brand_id: int
    equipment_type_id: int
    model: str | None
    description: str | None


@dataclass
class UserEquipmentRow:
    id: int
    user_id: int
    equipment_id: int
    equipment_reg_number: str
    equipment_reg_year: str
    equipment_reg_location: str
    state: str
    district: str
    equipment_details: str
    equipment_image: str


@dataclass
class UserEquipmentDetailRow(UserEquipmentRow):
    """Registration joined with its catalog equipment and brand."""

    name: str
    brand_name: str


class EquipmentRepository(Protocol):
    """Catalog equipment persistence boundary."""

    async def add(self, values: Mapping[str, Any]) -> EquipmentRow: ...

    async def get_by_id(self, equipment_id: int) -> EquipmentRow | None: ...

    async def list_all(self) -> list[EquipmentRow]: ...

    async def update(
        self, equipment_id: int, values: Mapping[str, Any]
    ) -> EquipmentRow | None: ...

    async def delete(self, equipment_id: int) -> EquipmentRow | None: ...


class EquipmentTypeRepository(Protocol):
    async def add(self, values: Mapping[str, Any]) -> EquipmentTypeRow: ...

    async def list_all(self) -> list[EquipmentTypeRow]: ...


class BrandRepository(Protocol):
    async def add(self, values: Mapping[str, Any]) -> BrandRow: ...

    async def list_all(self) -> list[BrandRow]: ...


class UserEquipmentRepository(Protocol):
    """Registrations scoped by owner."""

    async def add(self, values: Mapping[str, Any]) -> UserEquipmentRow: ...

    async def list_for_owner(self, owner_id: int) -> list[UserEquipmentDetailRow]: ...

    async def delete_for_owner(self, owner_id: int, equipment_id: int) -> int: ...

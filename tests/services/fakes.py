"""In-memory doubles for the unit of work and repositories."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError

from app.repositories.interfaces import (
    BrandRow,
    EquipmentRow,
    EquipmentTypeRow,
    UserEquipmentDetailRow,
    UserEquipmentRow,
)


class StubUnitOfWork:
    def __init__(self, *, equipments=None, equipment_types=None, brands=None, user_equipments=None):
        self.equipments = equipments
        self.equipment_types = equipment_types
        self.brands = brands
        self.user_equipments = user_equipments
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type:
            self.rolled_back = True
        else:
            self.committed = True
        return False

    async def commit(self) -> None:  # pragma: no cover - not used
        self.committed = True

    async def rollback(self) -> None:  # pragma: no cover - not used
        self.rolled_back = True


class FakeEquipmentRepository:
    def __init__(self) -> None:
        self.rows: dict[int, EquipmentRow] = {}
        self._next_id = 1

    async def add(self, values):
        row = EquipmentRow(id=self._next_id, **values)
        self.rows[row.id] = row
        self._next_id += 1
        return row

    async def get_by_id(self, equipment_id):
        return self.rows.get(equipment_id)

    async def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    async def update(self, equipment_id, values):
        if equipment_id not in self.rows:
            return None
        self.rows[equipment_id] = replace(self.rows[equipment_id], **values)
        return self.rows[equipment_id]

    async def delete(self, equipment_id):
        return self.rows.pop(equipment_id, None)


class FakeCatalogRepository:
    def __init__(self, row_type) -> None:
        self._row_type = row_type
        self.rows: list = []

    async def add(self, values):
        row = self._row_type(id=len(self.rows) + 1, **values)
        self.rows.append(row)
        return row

    async def list_all(self):
        return list(self.rows)


def fake_brand_repository() -> FakeCatalogRepository:
    return FakeCatalogRepository(BrandRow)


def fake_equipment_type_repository() -> FakeCatalogRepository:
    return FakeCatalogRepository(EquipmentTypeRow)


class FakeUserEquipmentRepository:
    """Stores registrations; listing joins against a name/brand lookup."""

    def __init__(self, catalog: dict[int, tuple[str, str]] | None = None) -> None:
        self.rows: list[UserEquipmentRow] = []
        self.catalog = catalog if catalog is not None else {7: ("Tiller", "Acme")}
        self.last_insert: dict | None = None

    async def add(self, values):
        self.last_insert = dict(values)
        row = UserEquipmentRow(id=len(self.rows) + 1, **values)
        self.rows.append(row)
        return row

    async def list_for_owner(self, owner_id):
        out = []
        for row in self.rows:
            if row.user_id != owner_id or row.equipment_id not in self.catalog:
                continue
            name, brand_name = self.catalog[row.equipment_id]
            out.append(UserEquipmentDetailRow(**vars(row), name=name, brand_name=brand_name))
        return out

    async def delete_for_owner(self, owner_id, equipment_id):
        keep = [r for r in self.rows if not (r.user_id == owner_id and r.equipment_id == equipment_id)]
        deleted = len(self.rows) - len(keep)
        self.rows = keep
        return deleted


class FailingRepository:
    async def add(self, values):
        raise SQLAlchemyError("db error")

from __future__ import annotations

import pytest
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import StorageError
from app.models import Brand, Equipment, Role, UserEquipment
from app.repositories.sqlalchemy import (
    SqlAlchemyEquipmentRepository,
    SqlAlchemyUserEquipmentRepository,
)


def _values(owner: int, equipment_id: int = 7, reg: str = "KA01AB1234") -> dict:
    return {
        "user_id": owner,
        "equipment_id": equipment_id,
        "equipment_reg_number": reg,
        "equipment_reg_year": "2020",
        "equipment_reg_location": "Pune",
        "state": "MH",
        "district": "Pune",
        "equipment_details": "...",
        "equipment_image": "url",
    }


@pytest.mark.asyncio
async def test_list_for_owner_joins_equipment_and_brand(session_factory, catalog):
    async with session_factory() as s:
        repo = SqlAlchemyUserEquipmentRepository(s)
        await repo.add(_values(42))
        await s.commit()

    async with session_factory() as s:
        repo = SqlAlchemyUserEquipmentRepository(s)
        mine = await repo.list_for_owner(42)
        theirs = await repo.list_for_owner(43)

    assert theirs == []
    assert len(mine) == 1
    row = mine[0]
    assert row.name == "Tiller"
    assert row.brand_name == "Acme"
    assert row.user_id == 42
    assert row.equipment_reg_number == "KA01AB1234"


@pytest.mark.asyncio
async def test_duplicate_owner_equipment_pairs_are_allowed(session_factory, catalog):
    async with session_factory() as s:
        repo = SqlAlchemyUserEquipmentRepository(s)
        a = await repo.add(_values(42, reg="KA01AB0001"))
        b = await repo.add(_values(42, reg="KA01AB0002"))
        await s.commit()
        rows = await repo.list_for_owner(42)

    assert a.id != b.id
    assert [r.equipment_reg_number for r in rows] == ["KA01AB0001", "KA01AB0002"]


@pytest.mark.asyncio
async def test_add_with_unknown_equipment_raises_storage_error(session_factory, catalog):
    async with session_factory() as s:
        with pytest.raises(StorageError):
            await SqlAlchemyUserEquipmentRepository(s).add(_values(42, equipment_id=999))


@pytest.mark.asyncio
async def test_delete_for_owner_only_touches_matching_owner(session_factory, catalog):
    async with session_factory() as s:
        repo = SqlAlchemyUserEquipmentRepository(s)
        await repo.add(_values(42))
        await repo.add(_values(43))
        await s.commit()

    async with session_factory() as s:
        repo = SqlAlchemyUserEquipmentRepository(s)
        wrong_owner = await repo.delete_for_owner(44, 7)
        removed = await repo.delete_for_owner(42, 7)
        noop = await repo.delete_for_owner(42, 7)
        await s.commit()
        remaining = (await s.scalars(select(UserEquipment.user_id))).all()

    assert wrong_owner == 0
    assert removed == 1
    assert noop == 0
    assert remaining == [43]


@pytest.mark.asyncio
async def test_deleting_equipment_cascades_to_registrations(session_factory, catalog):
    async with session_factory() as s:
        await SqlAlchemyUserEquipmentRepository(s).add(_values(42))
        await s.commit()

    async with session_factory() as s:
        await SqlAlchemyEquipmentRepository(s).delete(7)
        await s.commit()

    async with session_factory() as s:
        assert await SqlAlchemyUserEquipmentRepository(s).list_for_owner(42) == []
        assert (await s.scalars(select(UserEquipment.id))).all() == []


@pytest.mark.asyncio
async def test_registration_with_missing_brand_is_excluded(engine, session_factory, catalog):
    # Second equipment under its own brand; the brand row disappears with FK
    # enforcement off, leaving a dangling reference the join must skip.
    async with session_factory() as s:
        s.add(Brand(id=2, name="Gone"))
        await s.flush()
        s.add(Equipment(id=8, name="Baler", brand_id=2, equipment_type_id=1))
        await s.flush()
        repo = SqlAlchemyUserEquipmentRepository(s)
        await repo.add(_values(42))
        await repo.add(_values(42, equipment_id=8, reg="MH12XY0001"))
        await s.commit()

    async with engine.connect() as conn:
        await conn.exec_driver_sql("PRAGMA foreign_keys=OFF")
        await conn.execute(delete(Brand).where(Brand.id == 2))
        await conn.commit()
        await conn.exec_driver_sql("PRAGMA foreign_keys=ON")

    async with session_factory() as s:
        rows = await SqlAlchemyUserEquipmentRepository(s).list_for_owner(42)

    assert [(r.name, r.brand_name) for r in rows] == [("Tiller", "Acme")]


@pytest.mark.asyncio
async def test_role_names_are_unique(session_factory):
    async with session_factory() as s:
        s.add(Role(role="admin"))
        await s.commit()
        s.add(Role(role="admin"))
        with pytest.raises(IntegrityError):
            await s.commit()

# tests/conftest.py
import os

# Must be set before app.main is imported: skips startup migrations and
# disables rate limiting unless a test turns it back on.
os.environ.setdefault("TESTING", "1")
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import Callable  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from dotenv import load_dotenv  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.api.deps import get_session_factory  # noqa: E402
from app.api.security import create_access_token  # noqa: E402
from app.core.config import get_settings  # noqa: E402
from app.core.permissions import ALL_PERMISSIONS  # noqa: E402
from app.main import create_app  # noqa: E402
from app.middleware.rate_limit import reset_rate_limits  # noqa: E402
from app.models import Base, Brand, Equipment, EquipmentType  # noqa: E402

load_dotenv(".env.test", override=False)


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests that monkeypatch env need a reload.
    get_settings.cache_clear()
    reset_rate_limits()
    yield
    get_settings.cache_clear()


# ==== Engine / Schema: in-memory SQLite with FK enforcement ====
@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)

    @event.listens_for(eng.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def catalog(session_factory) -> dict[str, int]:
    """Brand "Acme" (id=1), type "tiller" (id=1), equipment "Tiller" (id=7)."""
    async with session_factory() as s:
        s.add_all([Brand(id=1, name="Acme"), EquipmentType(id=1, type="tiller")])
        await s.flush()
        s.add(Equipment(id=7, name="Tiller", brand_id=1, equipment_type_id=1))
        await s.commit()
    return {"brand_id": 1, "equipment_type_id": 1, "equipment_id": 7}


@pytest_asyncio.fixture
async def app_client(session_factory):
    app = create_app()
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[..., dict[str, str]]:
    """Build an Authorization header; all permissions unless told otherwise."""

    def _build(uid: int = 42, *, permissions=ALL_PERMISSIONS, role: str | None = None):
        token = create_access_token(uid, role=role, permissions=permissions)
        return {"Authorization": f"Bearer {token}"}

    return _build


@pytest.fixture
def registration_payload() -> dict:
    return {
        "equipment_id": 7,
        "equipment_reg_number": "KA01AB1234",
        "equipment_reg_year": "2020",
        "equipment_reg_location": "Pune",
        "state": "MH",
        "district": "Pune",
        "equipment_details": "...",
        "equipment_image": "url",
    }

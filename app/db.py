# app/db.py
from __future__ import annotations

from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import get_settings

DATABASE_URL: str

engine: AsyncEngine
SessionLocal: async_sessionmaker[AsyncSession]

def normalize_database_url(database_url: str) -> str:
    """Force the asyncpg driver for any Postgres URL; leave other backends alone."""
    for prefix in ("postgresql+psycopg://", "postgresql+psycopg2://", "postgresql://", "postgres://"):
        if database_url.startswith(prefix):
            return database_url.replace(prefix, "postgresql+asyncpg://", 1)
    return database_url

def _create_engine(database_url: str) -> AsyncEngine:
    url = make_url(database_url)
    connect_args = {}

    if url.get_backend_name() == "postgresql" and url.get_driver_name() == "asyncpg":
        query = dict(url.query)
        if "sslmode" in query:
            # asyncpg takes the libpq sslmode value through ``ssl``
            connect_args["ssl"] = query.pop("sslmode")
        # asyncpg does not understand channel_binding
        query.pop("channel_binding", None)
        url = url._replace(query=query)

    return create_async_engine(
        url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

def configure_engine(database_url: str | None = None) -> None:
    """Configure SQLAlchemy engine and session factory."""

    global engine, SessionLocal, DATABASE_URL

    DATABASE_URL = normalize_database_url(database_url or get_settings().database_url)
    engine = _create_engine(DATABASE_URL)
    SessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


configure_engine()

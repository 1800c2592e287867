"""Async SQLAlchemy engine, session factory, and session dependency."""

from collections.abc import AsyncGenerator

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./servicebase.db"
    database_echo: bool = False


def configure_sqlite(engine: AsyncEngine) -> None:
    """Enforce foreign keys and let SQLAlchemy own transaction boundaries.

    SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless the pragma is set on
    every connection. The driver's own implicit BEGIN is switched off and
    emitted from the "begin" event instead, so SAVEPOINTs nest correctly.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(connection):  # type: ignore[no-untyped-def]
        connection.exec_driver_sql("BEGIN")


settings = Settings()

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

if engine.dialect.name == "sqlite":
    configure_sqlite(engine)

# expire_on_commit=False: repositories commit per call, and rows returned to
# the caller must stay readable without a lazy refresh.
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per logical operation.

    No outer transaction is opened here: repository mutations commit (or roll
    back) themselves.
    """
    async with AsyncSessionLocal() as session:
        yield session

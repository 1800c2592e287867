"""Shared fixtures: an in-memory SQLite database per test (aiosqlite)."""

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import servicebase.infrastructure.persistence  # noqa: F401 — registers all mappers
from servicebase.infrastructure.database import Base, configure_sqlite
from servicebase.infrastructure.persistence.models.examples import ExampleClass, NavigationClass


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def navigation(session):
    """Two navigation classes, committed."""
    rows = [NavigationClass(name="primary"), NavigationClass(name="secondary")]
    session.add_all(rows)
    await session.commit()
    return rows


@pytest.fixture
def add_examples(session):
    """Insert ExampleClass rows in the given order and return them."""

    async def _add(navigation_class, names):
        rows = [ExampleClass(navigation_class_id=navigation_class.id, name=n) for n in names]
        session.add_all(rows)
        await session.commit()
        return rows

    return _add

"""Tests for servicebase/domain/repositories/base.py."""

import pytest

from servicebase.domain.models.results import WriteResult
from servicebase.domain.repositories.base import Repository
from servicebase.domain.repositories.examples import ExampleRepository


class _Full(Repository):
    def __init__(self):
        self.calls = []

    async def count(self, where=None): return 0
    async def create(self, entity): return WriteResult.success()
    async def create_many(self, entities): return WriteResult.success()
    async def update(self, entity): return WriteResult.success()
    async def delete(self, *key_values): return WriteResult.success()
    async def clear(self): return WriteResult.success()

    async def get_by_ids(self, *key_values, includes=None):
        self.calls.append((key_values, includes))
        return None

    async def get_single(self, where=None, order_by=None, includes=None): return None
    async def get_many(self, where=None, order_by=None, includes=None): return []
    async def get_many_paged(self, page, where=None, order_by=None, includes=None): return page


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def count(self, where=None): return 0
        # missing create, update, delete, retrieval ...

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    assert _Full() is not None


async def test_get_by_id_delegates_to_get_by_ids():
    repo = _Full()
    await repo.get_by_id(7, includes=["navigation_class"])
    assert repo.calls == [((7,), ["navigation_class"])]


def test_example_repository_requires_canned_queries():
    class _NoQueries(_Full, ExampleRepository):
        pass

    with pytest.raises(TypeError):
        _NoQueries()  # type: ignore[abstract]

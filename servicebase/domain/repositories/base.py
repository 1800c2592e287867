"""Generic repository base interface.

Repository[T] is the root abstraction for data access.  The concrete
implementation lives in servicebase/infrastructure/persistence/ and is wired
at the application boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (aiosqlite / asyncpg).
  - T is the mapped entity class.
  - Retrieval methods take optional where / order_by / includes keywords in
    place of one overload per combination; missing rows come back as None.
  - Mutations never raise persistence errors: they return a WriteResult.
    Invalid arguments (None entity, missing ordering on a paged call) raise
    ContractViolationError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from servicebase.domain.models.ordering import OrderBy
from servicebase.domain.models.paging import Page
from servicebase.domain.models.results import WriteResult

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD and query interface for one entity type."""

    @abstractmethod
    async def count(self, where: Any = None) -> int:
        """Return the number of rows matching where (all rows when None)."""

    @abstractmethod
    async def create(self, entity: T) -> WriteResult:
        """Persist a new entity and commit."""

    @abstractmethod
    async def create_many(self, entities: Iterable[T]) -> WriteResult:
        """Persist several entities in a single commit (all or nothing)."""

    @abstractmethod
    async def update(self, entity: T) -> WriteResult:
        """Copy the entity's column values onto the persisted row with the same key."""

    @abstractmethod
    async def delete(self, *key_values: Any) -> WriteResult:
        """Remove the row whose key equals key_values (declared key order)."""

    @abstractmethod
    async def clear(self) -> WriteResult:
        """Remove every row of the entity."""

    async def get_by_id(self, key_value: Any, includes: Sequence[Any] | None = None) -> T | None:
        """Single-column-key convenience for get_by_ids."""
        return await self.get_by_ids(key_value, includes=includes)

    @abstractmethod
    async def get_by_ids(self, *key_values: Any, includes: Sequence[Any] | None = None) -> T | None:
        """Return the row whose key equals key_values (declared key order), or None."""

    @abstractmethod
    async def get_single(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> T | None:
        """Return the first row of the filtered, ordered set, or None."""

    @abstractmethod
    async def get_many(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> list[T]:
        """Return every row of the filtered, ordered set."""

    @abstractmethod
    async def get_many_paged(
        self,
        page: Page[T],
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> Page[T]:
        """Return one page of the filtered set.  order_by must not be empty."""

"""SQLAlchemy implementation of the generic Repository interface.

SqlRepository[T] works for any mapped class.  Subclasses either set the
``model`` class attribute or pass the class to __init__:

    class SqlNavigationRepository(SqlRepository[NavigationClass]):
        model = NavigationClass

    repo = SqlRepository(session, ExampleClass)

Retrieval methods compose filter -> includes -> order -> page on a select()
statement; the *_query variants return that statement unexecuted.
Mutations commit through save_changes() and report persistence failures as a
WriteResult instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, delete, inspect, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from servicebase.domain.errors import ContractViolationError
from servicebase.domain.models.options import QueryOptions
from servicebase.domain.models.ordering import OrderBy
from servicebase.domain.models.paging import Page
from servicebase.domain.models.results import WriteResult
from servicebase.domain.repositories.base import Repository
from servicebase.infrastructure.persistence.fields import FieldResolver, SqlAlchemyFieldResolver
from servicebase.infrastructure.persistence.metadata import KeyMetadata, SqlAlchemyKeyMetadata
from servicebase.infrastructure.persistence.query import (
    apply_filter,
    apply_includes,
    apply_order,
    apply_paging,
    count_statement,
    key_filter,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlRepository(Repository[T], Generic[T]):
    model: type[T] | None = None

    def __init__(
        self,
        session: AsyncSession,
        model: type[T] | None = None,
        key_metadata: KeyMetadata | None = None,
        field_resolver: FieldResolver | None = None,
    ) -> None:
        if session is None:
            raise ContractViolationError("session must not be None")
        model = model or type(self).model
        if model is None:
            raise ContractViolationError(f"{type(self).__name__} has no entity class")
        self._session = session
        self.model = model
        self._keys = key_metadata or SqlAlchemyKeyMetadata()
        self._fields = field_resolver or SqlAlchemyFieldResolver()

    @property
    def session(self) -> AsyncSession:
        return self._session

    # --- composition ---

    def compose(self, options: QueryOptions) -> Select:
        """Build the select for options: filter -> includes -> order -> page."""
        stmt = select(self.model)
        stmt = apply_filter(stmt, options.where)
        stmt = apply_includes(stmt, self.model, options.includes, self._fields)
        stmt = apply_order(stmt, self.model, options.order_by, self._fields, self._keys)
        return apply_paging(stmt, options.page)

    def get_by_id_query(self, key_value: Any, includes: Sequence[Any] | None = None) -> Select:
        return self.get_by_ids_query(key_value, includes=includes)

    def get_by_ids_query(self, *key_values: Any, includes: Sequence[Any] | None = None) -> Select:
        """Key values must follow the declared key column order."""
        condition = key_filter(self.model, self._keys, key_values)
        return self.compose(QueryOptions(where=condition, includes=includes))

    def get_single_query(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> Select:
        return self.get_many_query(where, order_by, includes).limit(1)

    def get_many_query(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> Select:
        return self.compose(QueryOptions(where=where, order_by=order_by, includes=includes))

    # --- retrieval ---

    async def count(self, where: Any = None) -> int:
        return await self._session.scalar(count_statement(self.model, where))

    async def get_by_ids(self, *key_values: Any, includes: Sequence[Any] | None = None) -> T | None:
        result = await self._session.execute(self.get_by_ids_query(*key_values, includes=includes))
        return result.scalars().first()

    async def get_single(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> T | None:
        result = await self._session.execute(self.get_single_query(where, order_by, includes))
        return result.scalars().first()

    async def get_many(
        self,
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> list[T]:
        result = await self._session.execute(self.get_many_query(where, order_by, includes))
        return list(result.scalars().all())

    async def get_many_paged(
        self,
        page: Page[T],
        where: Any = None,
        order_by: Sequence[OrderBy] | None = None,
        includes: Sequence[Any] | None = None,
    ) -> Page[T]:
        if page is None:
            raise ContractViolationError("page must not be None")
        if not order_by:
            raise ContractViolationError("There are no OrderBy items in the list.")

        total_rows = await self.count(where)
        stmt = self.compose(
            QueryOptions(where=where, order_by=order_by, includes=includes, page=page)
        )
        result = await self._session.execute(stmt)
        return type(page)(
            page_number=page.page_number,
            page_size=page.page_size,
            rows=list(result.scalars().all()),
            total_rows=total_rows,
        )

    # --- mutation ---
    #
    # Each write runs inside a SAVEPOINT and is flushed there, so a failed
    # statement rolls back only its own changes: rows the caller already read
    # through this session stay loaded. Only a failed commit rolls back the
    # whole session.

    async def save_changes(self) -> None:
        await self._session.commit()

    async def create(self, entity: T) -> WriteResult:
        self._check_entity(entity)
        try:
            async with self._session.begin_nested():
                self._session.add(entity)
                await self._session.flush()
        except SQLAlchemyError as exc:
            return self._failure("create", exc)
        return await self._commit("create")

    async def create_many(self, entities: Iterable[T]) -> WriteResult:
        if entities is None:
            raise ContractViolationError("entities must not be None")
        entities = list(entities)
        for entity in entities:
            self._check_entity(entity)
        try:
            async with self._session.begin_nested():
                self._session.add_all(entities)
                await self._session.flush()
        except SQLAlchemyError as exc:
            return self._failure("create_many", exc)
        return await self._commit("create_many")

    async def update(self, entity: T) -> WriteResult:
        self._check_entity(entity)
        key = tuple(getattr(entity, name) for name in self._keys.key_names(self.model))
        if any(value is None for value in key):
            return WriteResult.not_found(f"{self.model.__name__} key is not set")
        try:
            async with self._session.begin_nested():
                existing = await self._session.get(self.model, key)
                if existing is None:
                    return WriteResult.not_found(f"{self.model.__name__} {key} not found")
                if existing is not entity:
                    for column in inspect(self.model).column_attrs:
                        setattr(existing, column.key, getattr(entity, column.key))
                await self._session.flush()
        except SQLAlchemyError as exc:
            return self._failure("update", exc)
        return await self._commit("update")

    async def delete(self, *key_values: Any) -> WriteResult:
        """Key values must follow the declared key column order."""
        stmt = self.get_by_ids_query(*key_values)
        try:
            async with self._session.begin_nested():
                entity = (await self._session.execute(stmt)).scalars().first()
                if entity is None:
                    return WriteResult.not_found(f"{self.model.__name__} {key_values} not found")
                await self._session.delete(entity)
                await self._session.flush()
        except SQLAlchemyError as exc:
            return self._failure("delete", exc)
        return await self._commit("delete")

    async def clear(self) -> WriteResult:
        try:
            async with self._session.begin_nested():
                await self._session.execute(delete(self.model))
        except SQLAlchemyError as exc:
            return self._failure("clear", exc)
        return await self._commit("clear")

    # --- helpers ---

    def _check_entity(self, entity: Any) -> None:
        if entity is None:
            raise ContractViolationError("entity must not be None")
        if not isinstance(entity, self.model):
            raise ContractViolationError(
                f"Expected {self.model.__name__}, got {type(entity).__name__}"
            )

    async def _commit(self, operation: str) -> WriteResult:
        try:
            await self.save_changes()
        except SQLAlchemyError as exc:
            try:
                await self._session.rollback()
            except SQLAlchemyError:
                logger.exception("%s %s rollback failed", self.model.__name__, operation)
            return self._failure(operation, exc)
        return WriteResult.success()

    def _failure(self, operation: str, exc: SQLAlchemyError) -> WriteResult:
        logger.warning("%s %s failed: %s", self.model.__name__, operation, exc)
        if isinstance(exc, IntegrityError):
            return WriteResult.conflict(str(exc.orig or exc))
        return WriteResult.failed(str(exc))

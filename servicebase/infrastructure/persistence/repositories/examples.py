"""SQLAlchemy repositories for the example consumer models."""

from __future__ import annotations

from servicebase.domain.models.enums import OrderDirection
from servicebase.domain.models.ordering import OrderBy
from servicebase.domain.models.paging import Page
from servicebase.domain.repositories.examples import ExampleRepository
from servicebase.infrastructure.persistence.models.examples import (
    ExampleClass,
    ExampleTag,
    NavigationClass,
)

from .base import SqlRepository


class SqlNavigationRepository(SqlRepository[NavigationClass]):
    model = NavigationClass


class SqlExampleTagRepository(SqlRepository[ExampleTag]):
    model = ExampleTag


class SqlExampleRepository(SqlRepository[ExampleClass], ExampleRepository):
    model = ExampleClass

    async def get_many_by_navigation_class_id(self, navigation_class_id: int) -> list[ExampleClass]:
        return await self.get_many(
            where=ExampleClass.navigation_class_id == navigation_class_id,
            order_by=[OrderBy(ExampleClass.name, OrderDirection.ASCENDING)],
            includes=[ExampleClass.navigation_class],
        )

    async def get_page_by_navigation_class_id(
        self, navigation_class_id: int, page: Page[ExampleClass] | None = None
    ) -> Page[ExampleClass]:
        return await self.get_many_paged(
            page or Page[ExampleClass](),
            where=ExampleClass.navigation_class_id == navigation_class_id,
            order_by=[OrderBy(ExampleClass.name, OrderDirection.ASCENDING)],
        )

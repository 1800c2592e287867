"""Example consumer repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from servicebase.domain.models.paging import Page

from .base import Repository


class ExampleRepository(Repository[Any]):
    """Read/write interface for ExampleClass rows, plus two canned queries.

    Both queries order by name ascending.
    """

    @abstractmethod
    async def get_many_by_navigation_class_id(self, navigation_class_id: int) -> list[Any]:
        """Return the navigation class's examples with navigation_class eager-loaded."""

    @abstractmethod
    async def get_page_by_navigation_class_id(
        self, navigation_class_id: int, page: Page | None = None
    ) -> Page:
        """Return one page of the navigation class's examples (default: first page of 10)."""

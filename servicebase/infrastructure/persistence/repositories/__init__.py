"""Concrete SQLAlchemy repository implementations.

Exports the generic SqlRepository, the example consumer repositories and the
get_repositories() factory function for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .base import SqlRepository
from .examples import SqlExampleRepository, SqlExampleTagRepository, SqlNavigationRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    navigation: SqlNavigationRepository
    examples: SqlExampleRepository
    tags: SqlExampleTagRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use with the get_session() dependency:

        async for session in get_session():
            repos = get_repositories(session)
            page = await repos.examples.get_page_by_navigation_class_id(nav_id)
    """
    return Repositories(
        navigation=SqlNavigationRepository(session),
        examples=SqlExampleRepository(session),
        tags=SqlExampleTagRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlNavigationRepository",
    "SqlExampleRepository",
    "SqlExampleTagRepository",
    "Repositories",
    "get_repositories",
]

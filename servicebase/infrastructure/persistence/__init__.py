"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the repository implementations and the DI factory.
"""

from servicebase.infrastructure.persistence.fields import FieldResolver, SqlAlchemyFieldResolver
from servicebase.infrastructure.persistence.metadata import KeyMetadata, SqlAlchemyKeyMetadata
from servicebase.infrastructure.persistence.models import *  # noqa: F401, F403
from servicebase.infrastructure.persistence.models import __all__ as _orm_all
from servicebase.infrastructure.persistence.repositories import (
    Repositories,
    SqlExampleRepository,
    SqlExampleTagRepository,
    SqlNavigationRepository,
    SqlRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "FieldResolver",
    "SqlAlchemyFieldResolver",
    "KeyMetadata",
    "SqlAlchemyKeyMetadata",
    "Repositories",
    "SqlRepository",
    "SqlNavigationRepository",
    "SqlExampleRepository",
    "SqlExampleTagRepository",
    "get_repositories",
]

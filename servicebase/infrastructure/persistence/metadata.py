"""Primary-key metadata lookup.

The repository never inspects mapper internals itself; it asks a KeyMetadata
provider for the ordered key attribute names of an entity class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable

from servicebase.domain.errors import ContractViolationError


class KeyMetadata(ABC):
    @abstractmethod
    def key_names(self, model: type[Any]) -> tuple[str, ...]:
        """Return the entity's primary-key attribute names in declared column order."""


@lru_cache(maxsize=None)
def _mapped_key_names(model: type[Any]) -> tuple[str, ...]:
    try:
        mapper = inspect(model)
    except NoInspectionAvailable as exc:
        raise ContractViolationError(f"{model!r} is not a mapped class") from exc
    return tuple(mapper.get_property_by_column(column).key for column in mapper.primary_key)


class SqlAlchemyKeyMetadata(KeyMetadata):
    """Reads the key from the SQLAlchemy mapper (primary_key column order)."""

    def key_names(self, model: type[Any]) -> tuple[str, ...]:
        return _mapped_key_names(model)

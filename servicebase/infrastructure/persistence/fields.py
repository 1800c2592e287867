"""Dynamic field-path resolution.

Turns a dotted path such as "navigation_class.name" into the ordered list
of mapped attributes it walks, validated against the entity's mapper.
Kept behind the FieldResolver interface so the mechanism that builds
queries from runtime field names can be swapped.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import ColumnProperty, QueryableAttribute, RelationshipProperty, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from servicebase.domain.errors import ContractViolationError

logger = logging.getLogger(__name__)


class FieldResolver(ABC):
    """Resolves field paths against a mapped entity class."""

    @abstractmethod
    def resolve(self, model: type[Any], path: Sequence[str]) -> list[QueryableAttribute]:
        """Return the mapped attributes walked by path, left to right."""

    @abstractmethod
    def sort_key(self, model: type[Any], path: Sequence[str]) -> list[QueryableAttribute]:
        """Resolve a path usable as a sort key.

        Every hop but the last must be a many-to-one relationship and the last
        segment must be a scalar column.
        """

    @abstractmethod
    def loader_option(self, model: type[Any], include: Any) -> LoaderOption:
        """Return an eager-load option for a relationship attribute or dotted path."""


class SqlAlchemyFieldResolver(FieldResolver):
    def resolve(self, model: type[Any], path: Sequence[str]) -> list[QueryableAttribute]:
        if not path:
            raise ContractViolationError("Field path must not be empty")
        try:
            mapper = inspect(model)
        except NoInspectionAvailable as exc:
            raise ContractViolationError(f"{model!r} is not a mapped class") from exc

        attributes: list[QueryableAttribute] = []
        for position, name in enumerate(path):
            if mapper is None:
                raise ContractViolationError(
                    f"Cannot navigate past scalar field {path[position - 1]!r} "
                    f"in {'.'.join(path)!r}"
                )
            if not name or name not in mapper.attrs:
                raise ContractViolationError(
                    f"{mapper.class_.__name__} has no mapped field {name!r} "
                    f"(path {'.'.join(path)!r})"
                )
            prop = mapper.attrs[name]
            attributes.append(getattr(mapper.class_, name))
            mapper = prop.mapper if isinstance(prop, RelationshipProperty) else None
        return attributes

    def sort_key(self, model: type[Any], path: Sequence[str]) -> list[QueryableAttribute]:
        attributes = self.resolve(model, path)
        *hops, last = attributes
        for hop in hops:
            if hop.property.uselist:
                raise ContractViolationError(
                    f"Cannot sort through to-many relationship {hop.key!r}"
                )
        if not isinstance(last.property, ColumnProperty):
            raise ContractViolationError(f"Sort key {'.'.join(path)!r} is not a scalar field")
        return attributes

    def loader_option(self, model: type[Any], include: Any) -> LoaderOption:
        if isinstance(include, LoaderOption):
            return include
        if isinstance(include, str):
            attributes = self.resolve(model, tuple(include.strip().split(".")))
        elif isinstance(include, QueryableAttribute):
            if not issubclass(model, include.class_):
                raise ContractViolationError(
                    f"Include {include.key!r} does not belong to {model.__name__}"
                )
            attributes = [include]
        else:
            raise ContractViolationError(f"Unsupported include {include!r}")

        option = None
        for attribute in attributes:
            if not isinstance(attribute.property, RelationshipProperty):
                raise ContractViolationError(f"Include {attribute.key!r} is not a relationship")
            option = selectinload(attribute) if option is None else option.selectinload(attribute)
        logger.debug("Resolved include %r on %s", include, model.__name__)
        return option

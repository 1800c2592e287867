"""Select-statement modifiers shared by every repository retrieval path.

Modifiers are applied in a fixed order: filter -> includes -> order -> page.
The count for a paged call is taken from the filtered statement before the
page window is applied.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Select, and_, func, select
from sqlalchemy.orm import QueryableAttribute, aliased

from servicebase.domain.errors import ContractViolationError
from servicebase.domain.models.ordering import OrderBy
from servicebase.domain.models.paging import Page

from .fields import FieldResolver
from .metadata import KeyMetadata


def apply_filter(stmt: Select, where: Any) -> Select:
    if where is None:
        return stmt
    if isinstance(where, (list, tuple)):
        return stmt.where(*where) if where else stmt
    return stmt.where(where)


def apply_includes(
    stmt: Select, model: type[Any], includes: Sequence[Any], resolver: FieldResolver
) -> Select:
    if not includes:
        return stmt
    return stmt.options(*(resolver.loader_option(model, include) for include in includes))


def _check_owner(model: type[Any], column: Any) -> None:
    if isinstance(column, QueryableAttribute) and not issubclass(model, column.class_):
        raise ContractViolationError(f"Sort key {column.key!r} does not belong to {model.__name__}")


def _join_sort_path(
    stmt: Select,
    attributes: list[QueryableAttribute],
    joined: dict[tuple[str, ...], Any],
) -> tuple[Select, Any]:
    """Outer-join each relationship hop once and return the sort column."""
    target = None
    prefix: tuple[str, ...] = ()
    for hop in attributes[:-1]:
        prefix += (hop.key,)
        if prefix not in joined:
            alias = aliased(hop.property.mapper.class_)
            relationship = hop if target is None else getattr(target, hop.key)
            stmt = stmt.outerjoin(relationship.of_type(alias))
            joined[prefix] = alias
        target = joined[prefix]
    last = attributes[-1]
    return stmt, (last if target is None else getattr(target, last.key))


def apply_order(
    stmt: Select,
    model: type[Any],
    order_by: Sequence[OrderBy],
    resolver: FieldResolver,
    key_metadata: KeyMetadata,
) -> Select:
    """Append ORDER BY clauses for every effective OrderBy.

    When any clause is added the primary key follows ascending, so rows with
    equal sort keys keep a deterministic relative order.
    """
    joined: dict[tuple[str, ...], Any] = {}
    clauses = []
    for order in order_by:
        if order.is_noop:
            continue
        if order.path is not None:
            stmt, column = _join_sort_path(stmt, resolver.sort_key(model, order.path), joined)
        else:
            _check_owner(model, order.column)
            column = order.column
        clauses.append(column.desc() if order.is_descending else column.asc())
    if not clauses:
        return stmt
    clauses.extend(getattr(model, name).asc() for name in key_metadata.key_names(model))
    return stmt.order_by(*clauses)


def apply_paging(stmt: Select, page: Page | None) -> Select:
    if page is None:
        return stmt
    return stmt.offset(page.skip_count).limit(page.page_size)


def count_statement(model: type[Any], where: Any = None) -> Select:
    return apply_filter(select(func.count()).select_from(model), where)


def key_filter(model: type[Any], key_metadata: KeyMetadata, key_values: Sequence[Any]) -> Any:
    """Build the composite equality clause key1 == v1 AND key2 == v2 ..."""
    key_names = key_metadata.key_names(model)
    if not key_values:
        raise ContractViolationError("At least one key value is required")
    if len(key_values) != len(key_names):
        raise ContractViolationError(
            f"{model.__name__} has {len(key_names)} key field(s) {key_names}, "
            f"got {len(key_values)} value(s)"
        )
    return and_(*(getattr(model, name) == value for name, value in zip(key_names, key_values)))

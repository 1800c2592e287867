"""Sort specification: one sort key plus a direction.

A sort key is given either as a dotted field path ("navigation_class.name"),
resolved against the repository's entity class when the query is composed,
or as a typed accessor: a mapped column attribute such as ExampleClass.name.
Typed accessors are validated here, at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import ColumnProperty, QueryableAttribute
from sqlalchemy.sql.elements import Cast, ColumnClause, Grouping, Label, TypeCoerce

from servicebase.domain.errors import ContractViolationError

from .enums import OrderDirection


def _unwrap(selector: Any) -> Any:
    """Strip label / cast / type_coerce / grouping wrappers off an expression."""
    while True:
        if isinstance(selector, (Label, Grouping)):
            selector = selector.element
        elif isinstance(selector, (Cast, TypeCoerce)):
            selector = selector.clause
        else:
            return selector


def _column_selector(selector: Any) -> Any:
    column = _unwrap(selector)
    if isinstance(column, QueryableAttribute):
        if isinstance(column.property, ColumnProperty):
            return column
    elif isinstance(column, ColumnClause):
        return column
    raise ContractViolationError("Unable to determine operand of expression.")


# eq=False: column expressions overload == to build SQL, so the generated
# dataclass __eq__ cannot compare them.
@dataclass(frozen=True, eq=False)
class OrderBy:
    """A {selector, direction} pair.

    A blank string selector is a no-op: composing it is identical to
    supplying no ordering at all.
    """

    selector: Any
    direction: OrderDirection = OrderDirection.ASCENDING
    path: tuple[str, ...] | None = field(init=False, default=None)
    column: Any = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.selector is None:
            raise ContractViolationError("OrderBy selector must not be None")
        try:
            direction = OrderDirection(self.direction)
        except ValueError as exc:
            raise ContractViolationError(f"Unknown order direction {self.direction!r}") from exc
        object.__setattr__(self, "direction", direction)
        if isinstance(self.selector, str):
            if self.selector.strip():
                object.__setattr__(self, "path", tuple(self.selector.strip().split(".")))
        else:
            object.__setattr__(self, "column", _column_selector(self.selector))

    @classmethod
    def ascending(cls, selector: Any) -> OrderBy:
        return cls(selector, OrderDirection.ASCENDING)

    @classmethod
    def descending(cls, selector: Any) -> OrderBy:
        return cls(selector, OrderDirection.DESCENDING)

    @property
    def is_noop(self) -> bool:
        return self.path is None and self.column is None

    @property
    def is_descending(self) -> bool:
        return self.direction is OrderDirection.DESCENDING

    def __repr__(self) -> str:
        key = ".".join(self.path) if self.path else self.column
        return f"OrderBy({key!r}, {self.direction.value})"

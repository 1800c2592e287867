"""Query configuration struct shared by every retrieval path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .ordering import OrderBy
from .paging import Page


@dataclass(frozen=True, eq=False)
class QueryOptions:
    """Optional filter / includes / ordering / paging for one query.

    where is a SQLAlchemy boolean clause, or a sequence of clauses that are
    ANDed together.  includes holds relationship attributes, dotted
    relationship paths, or ready-made loader options.  Modifiers are always
    applied in the order filter -> includes -> order -> page.
    """

    where: Any = None
    order_by: Sequence[OrderBy] = field(default_factory=tuple)
    includes: Sequence[Any] = field(default_factory=tuple)
    page: Page | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "order_by", tuple(self.order_by or ()))
        object.__setattr__(self, "includes", tuple(self.includes or ()))

    @property
    def has_ordering(self) -> bool:
        return any(not order.is_noop for order in self.order_by)

"""Paged retrieval request/response model."""

from __future__ import annotations

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


class Page(BaseModel, Generic[T]):
    """One window of an ordered result set.

    page_number and page_size are the caller-supplied request; a value of
    0 (or None) is replaced by the default rather than rejected.
    rows and total_rows are filled in by the repository, which returns a new
    Page instead of mutating the request.  total_rows is the count of the
    filtered set before the window is applied.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    page_number: int = Field(default=DEFAULT_PAGE_NUMBER, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    rows: list[T] = Field(default_factory=list)
    total_rows: int = Field(default=0, ge=0)

    @field_validator("page_number", mode="before")
    @classmethod
    def _default_page_number(cls, v: Any) -> Any:
        return DEFAULT_PAGE_NUMBER if v is None or v == 0 else v

    @field_validator("page_size", mode="before")
    @classmethod
    def _default_page_size(cls, v: Any) -> Any:
        return DEFAULT_PAGE_SIZE if v is None or v == 0 else v

    @property
    def skip_count(self) -> int:
        """Number of rows preceding this page."""
        return (self.page_number - 1) * self.page_size

    @property
    def page_count(self) -> int:
        return math.ceil(self.total_rows / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page_number < self.page_count

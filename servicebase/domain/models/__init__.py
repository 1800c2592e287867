"""Domain model package.

Request/response types for the repository layer: sort specifications,
pages, query options and write results.  Import from this package to avoid
coupling application code to individual module paths.
"""

from .enums import OrderDirection, WriteStatus
from .options import QueryOptions
from .ordering import OrderBy
from .paging import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, Page
from .results import WriteResult

__all__ = [
    "DEFAULT_PAGE_NUMBER",
    "DEFAULT_PAGE_SIZE",
    "OrderBy",
    "OrderDirection",
    "Page",
    "QueryOptions",
    "WriteResult",
    "WriteStatus",
]

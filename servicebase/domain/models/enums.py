"""Domain enumerations for the repository layer.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings.
"""

from enum import Enum


class OrderDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class WriteStatus(str, Enum):
    """Outcome of a repository mutation."""

    OK = "ok"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"  # integrity / constraint violation
    FAILED = "failed"

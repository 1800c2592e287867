"""Mutation outcome model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .enums import WriteStatus


class WriteResult(BaseModel):
    """Result of create / update / delete / clear.

    Truthiness follows ok, so callers that only need success/failure can
    keep writing ``if await repo.create(entity): ...``.  status and reason
    distinguish a missing row from a write conflict from any other failure.
    """

    model_config = ConfigDict(frozen=True)

    status: WriteStatus
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is WriteStatus.OK

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> WriteResult:
        return cls(status=WriteStatus.OK)

    @classmethod
    def not_found(cls, reason: str | None = None) -> WriteResult:
        return cls(status=WriteStatus.NOT_FOUND, reason=reason)

    @classmethod
    def conflict(cls, reason: str | None = None) -> WriteResult:
        return cls(status=WriteStatus.CONFLICT, reason=reason)

    @classmethod
    def failed(cls, reason: str | None = None) -> WriteResult:
        return cls(status=WriteStatus.FAILED, reason=reason)

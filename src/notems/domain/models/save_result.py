"""Outcome of a single save against a note.ms slot."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from notems.domain.models.enums import FailureReason, SaveMode


class SaveResult(BaseModel):
    """Result of one ``NoteClient.save`` call.

    Truthiness mirrors ``success`` so callers can keep writing
    ``if client.save(...):``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    mode: SaveMode
    url: str
    content: str = Field(
        default="",
        description="Final text that was posted (or would have been).",
    )
    status_code: Optional[int] = Field(
        default=None,
        description="HTTP status of the POST; None when no response arrived.",
    )
    reason: Optional[FailureReason] = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success

    @property
    def retryable(self) -> bool:
        """True when a later attempt could plausibly succeed.

        Transport failures and 5xx responses are transient; 4xx responses
        and missing content markers are not.
        """
        if self.reason is FailureReason.NETWORK:
            return True
        if self.reason is FailureReason.REJECTED:
            return self.status_code is not None and self.status_code >= 500
        return False

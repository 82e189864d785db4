"""Enumerations for note.ms clipboard operations."""

from enum import Enum


class SaveMode(str, Enum):
    """How a save combines new text with what the slot already holds."""

    REPLACE = "replace"
    APPEND = "append"


class EventKind(str, Enum):
    """Progress milestones reported by the client."""

    FETCH_STARTED = "fetch_started"
    FETCH_SUCCEEDED = "fetch_succeeded"
    FETCH_FAILED = "fetch_failed"
    APPEND_STARTED = "append_started"
    APPEND_MERGED = "append_merged"
    APPEND_EMPTY_ORIGINAL = "append_empty_original"
    APPEND_ABORTED = "append_aborted"
    SAVE_STARTED = "save_started"
    SAVE_SUCCEEDED = "save_succeeded"
    SAVE_FAILED = "save_failed"

    @property
    def is_failure(self) -> bool:
        return self in (EventKind.FETCH_FAILED, EventKind.APPEND_ABORTED, EventKind.SAVE_FAILED)


class FailureReason(str, Enum):
    """Why a save did not reach a 2xx response."""

    NETWORK = "network"  # transport failed on the pre-read or the POST
    PARSE = "parse"  # pre-read page had no content marker
    REJECTED = "rejected"  # server answered outside 200-299

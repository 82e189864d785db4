"""Domain models: public API."""

from notems.domain.models.enums import EventKind, FailureReason, SaveMode
from notems.domain.models.save_result import SaveResult

__all__ = ["EventKind", "FailureReason", "SaveMode", "SaveResult"]

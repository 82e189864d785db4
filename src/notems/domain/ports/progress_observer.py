"""Port: Progress observer — receive narration of client operations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from notems.domain.models.enums import EventKind


@dataclass(frozen=True)
class ProgressEvent:
    """A single progress milestone of a fetch or save."""

    kind: EventKind
    url: str
    message: str
    status_code: Optional[int] = None


class ProgressObserver(ABC):
    """Contract for anything that wants to follow client progress."""

    @abstractmethod
    def notify(self, event: ProgressEvent) -> None:
        """Handle one progress event. Must not raise."""
        ...


class NullObserver(ProgressObserver):
    """Observer that discards every event."""

    def notify(self, event: ProgressEvent) -> None:
        pass

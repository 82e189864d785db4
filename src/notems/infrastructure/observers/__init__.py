"""Progress observers that route client narration somewhere useful."""

from notems.domain.ports.progress_observer import NullObserver
from notems.infrastructure.observers.logging_observer import LoggingObserver

__all__ = ["LoggingObserver", "NullObserver"]

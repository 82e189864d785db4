"""Logging observer — implements ProgressObserver on top of ``logging``."""

from __future__ import annotations

import logging
from typing import Optional

from notems.domain.ports.progress_observer import ProgressEvent, ProgressObserver

_DEFAULT_LOGGER = "notems.client"


class LoggingObserver(ProgressObserver):
    """Write progress events to a logger.

    Failures go out at WARNING, everything else at INFO.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(_DEFAULT_LOGGER)

    def notify(self, event: ProgressEvent) -> None:
        level = logging.WARNING if event.kind.is_failure else logging.INFO
        if event.status_code is not None:
            self._logger.log(
                level, "[%s] %s (HTTP %d)", event.url, event.message, event.status_code
            )
        else:
            self._logger.log(level, "[%s] %s", event.url, event.message)

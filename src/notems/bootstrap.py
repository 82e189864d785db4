"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.
"""

from __future__ import annotations

from typing import Optional

from notems.application.use_cases.run_demo import RunDemoUseCase
from notems.config.loader import get_config, load_config
from notems.config.models import ClientSettings
from notems.domain.ports.progress_observer import ProgressObserver
from notems.infrastructure.http.note_client import NoteClient
from notems.infrastructure.observers.logging_observer import LoggingObserver


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        client = container.client("happyyy")
        client.append("one more line")
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        observer: Optional[ProgressObserver] = None,
    ) -> None:
        self._settings: ClientSettings = load_config(config_path) if config_path else get_config()
        self._observer = observer or LoggingObserver()

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    def client(self, slot_id: str) -> NoteClient:
        return NoteClient(slot_id, settings=self._settings, observer=self._observer)

    def run_demo(self, slot_id: str) -> RunDemoUseCase:
        return RunDemoUseCase(self.client(slot_id))

"""Shared fixtures: an in-memory stand-in for the note.ms HTTP service."""

from __future__ import annotations

import html
from typing import Optional

import pytest
import requests

from notems.config.loader import clear_cache
from notems.config.models import ClientSettings
from notems.domain.ports.progress_observer import ProgressEvent, ProgressObserver


def render_page(content: Optional[str]) -> str:
    """Render a slot page the way note.ms does; ``None`` drops the marker."""
    if content is None:
        return "<html><body><div class='maintenance'>Be right back</div></body></html>"
    return (
        "<html><head><title>note.ms</title></head><body>"
        '<div class="stack"><div class="layer">'
        f'<textarea class="content">{html.escape(content)}</textarea>'
        "</div></div></body></html>"
    )


def make_response(
    status_code: int = 200,
    text: str = "",
    content_type: str = "text/html; charset=utf-8",
) -> requests.Response:
    """Build a real ``requests.Response`` carrying *text* as UTF-8 bytes.

    The encoding is derived from *content_type* the way requests does it
    for responses that come off the wire.
    """
    resp = requests.Response()
    resp.status_code = status_code
    resp.headers["Content-Type"] = content_type
    resp._content = text.encode("utf-8")
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    return resp


class FakeNoteService:
    """Session double that stores posted text and serves it back on GET.

    Set ``get_error`` / ``post_error`` to an exception to simulate
    transport failures, ``post_status`` to simulate a rejected write and
    ``page_without_marker`` to serve a page the client cannot parse.
    """

    def __init__(self, initial: str = "", form_field: str = "t") -> None:
        self.stored = initial
        self.form_field = form_field
        self.get_error: Optional[Exception] = None
        self.post_error: Optional[Exception] = None
        self.post_status = 200
        self.page_without_marker = False
        self.get_calls: list[dict] = []
        self.post_calls: list[dict] = []
        self.closed = False

    def get(self, url, **kwargs):
        self.get_calls.append({"url": url, **kwargs})
        if self.get_error is not None:
            raise self.get_error
        content = None if self.page_without_marker else self.stored
        return make_response(200, render_page(content))

    def post(self, url, **kwargs):
        self.post_calls.append({"url": url, **kwargs})
        if self.post_error is not None:
            raise self.post_error
        if 200 <= self.post_status < 300:
            self.stored = kwargs["data"][self.form_field]
        return make_response(self.post_status, render_page(self.stored))

    def close(self):
        self.closed = True


class RecordingObserver(ProgressObserver):
    """Observer that keeps every event for later assertions."""

    def __init__(self) -> None:
        self.events: list[ProgressEvent] = []

    def notify(self, event: ProgressEvent) -> None:
        self.events.append(event)

    @property
    def kinds(self):
        return [e.kind for e in self.events]


@pytest.fixture(autouse=True)
def _fresh_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings()


@pytest.fixture
def service() -> FakeNoteService:
    return FakeNoteService()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()

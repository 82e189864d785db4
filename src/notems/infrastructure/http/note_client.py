"""HTTP client for a single note.ms clipboard slot.

Reads the note by scraping the ``<textarea class="content">`` element out
of the slot page, and writes by posting the full text back as a form.
Appending is a read-modify-write with no locking on the server side, so
two concurrent appends to the same slot can lose one of the updates.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

import requests  # type: ignore[import-untyped]
from bs4 import BeautifulSoup

from notems.config.loader import get_config
from notems.config.models import ClientSettings, ContentSelector
from notems.domain.errors import InvalidSlotError, NetworkError, ParseError
from notems.domain.models.enums import EventKind, FailureReason, SaveMode
from notems.domain.models.save_result import SaveResult
from notems.domain.ports.progress_observer import ProgressEvent, ProgressObserver
from notems.infrastructure.observers.logging_observer import LoggingObserver

logger = logging.getLogger(__name__)

# "." and ".." are dot segments; URL normalization would drop them from the path
_SLOT_REGEX = re.compile(r"^(?!\.{1,2}$)[^\s/?#]+$")


def validate_slot_id(slot_id: str) -> bool:
    """Return True if *slot_id* can be used as the last URL path segment."""
    return bool(_SLOT_REGEX.match(slot_id))


def extract_content(html: Union[str, bytes], selector: ContentSelector) -> Optional[str]:
    """Pull the note text out of a slot page.

    The service stores the text HTML-escaped inside the marker element;
    the parser decodes the entities, so the returned string is the raw
    note. An empty marker yields ``""``; a missing one yields ``None``.

    Pass raw bytes to let the parser pick the charset from the page's
    ``<meta charset>`` declaration.
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.find(selector.tag, class_=selector.css_class)
    if element is None:
        return None
    return element.get_text()


def _page_markup(resp: requests.Response) -> Union[str, bytes]:
    """Return decoded text only when the server named a charset.

    Without one, requests assumes ISO-8859-1 for text/html and garbles
    UTF-8 notes, so the raw bytes go to the parser instead.
    """
    content_type = resp.headers.get("Content-Type", "")
    if "charset=" in content_type.lower():
        return resp.text
    return resp.content


class NoteClient:
    """Read and write one note.ms slot.

    Parameters
    ----------
    slot_id : str
        Name of the slot, used as the last path segment of the URL.
    settings : ClientSettings | None
        Service configuration; defaults to the built-in config.
    observer : ProgressObserver | None
        Receives progress narration; defaults to a ``LoggingObserver``.
    session : requests.Session | None
        HTTP session to send requests through.

    Construction does no network I/O.
    """

    def __init__(
        self,
        slot_id: str,
        settings: Optional[ClientSettings] = None,
        observer: Optional[ProgressObserver] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not slot_id or not validate_slot_id(slot_id):
            raise InvalidSlotError(f"Invalid slot id: {slot_id!r}")

        self._slot_id = slot_id
        self._settings = settings or get_config()
        self._url = f"{self._settings.base_url}/{slot_id}"
        self._observer = observer or LoggingObserver()
        self._session = session or requests.Session()

    # -- Properties ----------------------------------------------------------

    @property
    def slot_id(self) -> str:
        return self._slot_id

    @property
    def url(self) -> str:
        return self._url

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    # -- Reading -------------------------------------------------------------

    def fetch(self) -> str:
        """Return the current text of the slot.

        Returns:
            The decoded note text. ``""`` for an empty slot.

        Raises:
            NetworkError: The GET request failed at the transport level.
            ParseError: The page did not contain the content marker.
        """
        self._emit(EventKind.FETCH_STARTED, "Reading note content")

        try:
            resp = self._session.get(
                self._url,
                headers=self._headers(),
                timeout=self._settings.timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            self._emit(EventKind.FETCH_FAILED, f"Read failed, network error: {exc}")
            raise NetworkError(f"Failed to fetch {self._url}: {exc}") from exc

        content = extract_content(_page_markup(resp), self._settings.content_selector)
        if content is None:
            selector = self._settings.content_selector
            self._emit(
                EventKind.FETCH_FAILED,
                "Read failed, content area not found on page",
                status_code=resp.status_code,
            )
            raise ParseError(
                f"No <{selector.tag} class=\"{selector.css_class}\"> found at {self._url}"
            )

        self._emit(EventKind.FETCH_SUCCEEDED, "Read succeeded")
        return content

    def try_fetch(self) -> Optional[str]:
        """Like :meth:`fetch`, but return ``None`` instead of raising."""
        try:
            return self.fetch()
        except (NetworkError, ParseError) as exc:
            logger.debug("try_fetch swallowed %s: %s", type(exc).__name__, exc)
            return None

    # -- Writing -------------------------------------------------------------

    def save(
        self,
        content: str,
        append: bool = False,
        separator: Optional[str] = None,
    ) -> SaveResult:
        """Write *content* to the slot, replacing or appending.

        In append mode the current text is fetched first. If that read
        fails the save is aborted and nothing is posted, so unknown remote
        text is never overwritten.

        Args:
            content: Text to write.
            append: Join onto the existing text instead of replacing it.
            separator: Placed between existing and new text when appending
                to a non-empty note. Defaults to the configured separator.

        Returns:
            A ``SaveResult``; truthy only on a 2xx response.
        """
        mode = SaveMode.APPEND if append else SaveMode.REPLACE
        sep = self._settings.default_separator if separator is None else separator
        final_content = content

        if append:
            self._emit(EventKind.APPEND_STARTED, "Append mode, fetching original content")
            try:
                original = self.fetch()
            except (NetworkError, ParseError) as exc:
                reason = (
                    FailureReason.NETWORK if isinstance(exc, NetworkError) else FailureReason.PARSE
                )
                self._emit(
                    EventKind.APPEND_ABORTED,
                    "Could not read original content, save aborted",
                )
                return SaveResult(
                    success=False,
                    mode=mode,
                    url=self._url,
                    content=content,
                    reason=reason,
                    error=str(exc),
                )

            if original:
                final_content = f"{original}{sep}{content}"
                self._emit(EventKind.APPEND_MERGED, "Original content read, joining")
            else:
                self._emit(EventKind.APPEND_EMPTY_ORIGINAL, "Original content empty, writing new text")

        return self._post(final_content, mode)

    def replace(self, content: str) -> SaveResult:
        """Overwrite the slot with *content*."""
        return self.save(content, append=False)

    def append(self, content: str, separator: Optional[str] = None) -> SaveResult:
        """Append *content* to the slot."""
        return self.save(content, append=True, separator=separator)

    # -- Lifecycle -----------------------------------------------------------

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> NoteClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"NoteClient(slot_id={self._slot_id!r}, url={self._url!r})"

    # -- Internal helpers ----------------------------------------------------

    def _post(self, final_content: str, mode: SaveMode) -> SaveResult:
        self._emit(EventKind.SAVE_STARTED, "Saving final content")

        try:
            resp = self._session.post(
                self._url,
                data={self._settings.form_field: final_content},
                headers=self._headers(),
                timeout=self._settings.timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            self._emit(EventKind.SAVE_FAILED, f"Save failed, network error: {exc}")
            return SaveResult(
                success=False,
                mode=mode,
                url=self._url,
                content=final_content,
                reason=FailureReason.NETWORK,
                error=f"Failed to post to {self._url}: {exc}",
            )

        status = resp.status_code
        if 200 <= status < 300:
            self._emit(EventKind.SAVE_SUCCEEDED, "Save succeeded", status_code=status)
            return SaveResult(
                success=True,
                mode=mode,
                url=self._url,
                content=final_content,
                status_code=status,
            )

        self._emit(EventKind.SAVE_FAILED, "Save failed, server rejected the write", status_code=status)
        return SaveResult(
            success=False,
            mode=mode,
            url=self._url,
            content=final_content,
            status_code=status,
            reason=FailureReason.REJECTED,
            error=f"Server returned HTTP {status}",
        )

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._settings.user_agent,
            "Referer": self._url,
        }

    def _emit(self, kind: EventKind, message: str, status_code: Optional[int] = None) -> None:
        self._observer.notify(
            ProgressEvent(kind=kind, url=self._url, message=message, status_code=status_code)
        )

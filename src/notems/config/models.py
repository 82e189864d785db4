"""Pydantic models for the note.ms client configuration.

These models validate and type the JSON configuration file that
describes the remote service: where it lives, how requests are dressed,
and where the note text sits inside the returned page.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Page parsing
# ---------------------------------------------------------------------------


class ContentSelector(BaseModel):
    """Locates the element holding the note text in the GET response."""

    tag: str = "textarea"
    css_class: str = "content"


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class ClientSettings(BaseModel):
    """Root configuration for ``NoteClient``."""

    base_url: str = "https://note.ms"
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:142.0) "
        "Gecko/20100101 Firefox/142.0"
    )
    timeout_seconds: Optional[float] = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout; null leaves requests without one.",
    )
    form_field: str = Field(default="t", min_length=1)
    default_separator: str = "\n"
    content_selector: ContentSelector = Field(default_factory=ContentSelector)

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

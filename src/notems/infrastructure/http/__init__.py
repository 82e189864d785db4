"""HTTP adapters for the note.ms service."""

from notems.infrastructure.http.note_client import NoteClient, extract_content, validate_slot_id

__all__ = ["NoteClient", "extract_content", "validate_slot_id"]

"""Client for the note.ms online plaintext clipboard."""

__version__ = "0.1.0"

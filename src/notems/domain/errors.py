"""Domain errors — custom exceptions for the note.ms client.

Raised by the HTTP client and the config loader, caught by the CLI.
They carry no infrastructure dependencies.
"""


class NoteMSError(Exception):
    """Base exception for all note.ms client errors."""


class NetworkError(NoteMSError):
    """Raised on transport failure (DNS, connect, TLS, timeout, reset)."""


class ParseError(NoteMSError):
    """Raised when the page does not contain the expected content marker."""


class InvalidSlotError(NoteMSError, ValueError):
    """Raised when a slot identifier cannot form a valid note URL."""


class ConfigurationError(NoteMSError):
    """Raised when configuration is invalid or missing."""

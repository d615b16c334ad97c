"""
Error types shared by the parsers, use-cases and both front-ends.

Nothing here terminates the process: the REPL reports these and reads the
next line, the HTTP layer maps them to 4xx responses.
"""

from typing import Any, Dict, Optional


class NoteLayerError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(NoteLayerError):
    """Input could not be turned into a use-case message."""


class UnknownCommandError(ParseError):
    """REPL keyword that maps to no use-case."""

    def __init__(self, command: str):
        super().__init__(f"Unknown command: {command!r}", {"command": command})
        self.command = command


class NoteNotFoundError(NoteLayerError):
    """No note is stored under the requested id."""

    def __init__(self, note_id: int):
        super().__init__(f"Note {note_id} not found", {"id": note_id})
        self.note_id = note_id


class ConfigurationError(NoteLayerError):
    """Unknown application mode or storage backend."""

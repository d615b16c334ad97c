"""
Use-case layer: one command per note operation.
"""

from .interfaces import ICommand
from .notes import (
    CreateCommand,
    DeleteCommand,
    NoteUsecases,
    ReadAllCommand,
    ReadCommand,
    UpdateCommand,
    new_usecases,
)

__all__ = [
    # Interfaces
    "ICommand",
    # Implementations
    "ReadAllCommand",
    "ReadCommand",
    "CreateCommand",
    "UpdateCommand",
    "DeleteCommand",
    "NoteUsecases",
    "new_usecases",
]

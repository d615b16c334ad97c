"""
Storage interface for NoteLayer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..schemas.notes import Note


class IStorage(ABC):
    """Capability set every note storage backend provides.

    Absence is reported as ``None``; the use-cases decide what that means.
    """

    name: str = "abstract"

    async def init(self) -> None:
        """Prepare the backend before first use."""

    async def close(self) -> None:
        """Release backend resources."""

    @abstractmethod
    async def read_all(self) -> List[Note]:
        """Get all notes."""
        pass

    @abstractmethod
    async def read(self, note_id: int) -> Optional[Note]:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create(self, name: str, content: str) -> Note:
        """Store a new note under the next id."""
        pass

    @abstractmethod
    async def update(self, note_id: int, name: str, content: str) -> Optional[Note]:
        """Overwrite the non-empty fields of an existing note."""
        pass

    @abstractmethod
    async def delete(self, note_id: int) -> Optional[Note]:
        """Remove note and return its last value."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored notes."""
        pass

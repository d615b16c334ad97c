"""In-memory note storage."""

import asyncio
from typing import Dict, List, Optional

from ..logging import get_logger
from ..schemas.notes import Note
from .interfaces import IStorage

logger = get_logger("storage.memory")


class InMemoryStorage(IStorage):
    """Keeps notes in a dict for the lifetime of the object.

    Nothing is persisted. All access goes through one lock so concurrent
    requests see a consistent map and id counter.
    """

    name = "memory"

    def __init__(self):
        self._notes: Dict[int, Note] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def read_all(self) -> List[Note]:
        async with self._lock:
            return [self._notes[note_id] for note_id in sorted(self._notes)]

    async def read(self, note_id: int) -> Optional[Note]:
        async with self._lock:
            return self._notes.get(note_id)

    async def create(self, name: str, content: str) -> Note:
        async with self._lock:
            # ids are never reused, even after the last note is deleted
            self._last_id += 1
            note = Note(id=self._last_id, name=name, content=content)
            self._notes[note.id] = note
            logger.debug(f"Created note {note.id}")
            return note

    async def update(self, note_id: int, name: str, content: str) -> Optional[Note]:
        async with self._lock:
            note = self._notes.get(note_id)
            if note is None:
                logger.debug(f"Update skipped, note {note_id} not found")
                return None

            changes = {}
            if name:
                changes["name"] = name
            if content:
                changes["content"] = content

            if changes:
                note = note.model_copy(update=changes)
                self._notes[note_id] = note
                logger.debug(f"Updated note {note_id}: {sorted(changes)}")
            return note

    async def delete(self, note_id: int) -> Optional[Note]:
        async with self._lock:
            note = self._notes.pop(note_id, None)
            if note is None:
                logger.debug(f"Delete skipped, note {note_id} not found")
            else:
                logger.debug(f"Deleted note {note_id}")
            return note

    async def count(self) -> int:
        async with self._lock:
            return len(self._notes)

"""
Use-case interfaces for NoteLayer.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..storage.interfaces import IStorage

MessageT = TypeVar("MessageT")
ResultT = TypeVar("ResultT")


class ICommand(ABC, Generic[MessageT, ResultT]):
    """A single operation: message in, result out.

    Commands only know the storage interface, never a concrete backend.
    """

    def __init__(self, storage: IStorage):
        self.storage = storage

    @abstractmethod
    async def execute(self, message: MessageT) -> ResultT:
        """Run the use-case."""
        pass

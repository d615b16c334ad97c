"""Note use-cases."""

from dataclasses import dataclass

from ..exceptions import NoteNotFoundError
from ..schemas.notes import (
    CreateMessage,
    CreateResult,
    DeleteMessage,
    DeleteResult,
    ReadAllMessage,
    ReadAllResult,
    ReadMessage,
    ReadResult,
    UpdateMessage,
    UpdateResult,
)
from ..storage.interfaces import IStorage
from .interfaces import ICommand


class ReadAllCommand(ICommand[ReadAllMessage, ReadAllResult]):
    async def execute(self, message: ReadAllMessage) -> ReadAllResult:
        notes = await self.storage.read_all()
        return ReadAllResult(notes)


class ReadCommand(ICommand[ReadMessage, ReadResult]):
    async def execute(self, message: ReadMessage) -> ReadResult:
        note = await self.storage.read(message.id)
        if note is None:
            raise NoteNotFoundError(message.id)
        return ReadResult(note)


class CreateCommand(ICommand[CreateMessage, CreateResult]):
    async def execute(self, message: CreateMessage) -> CreateResult:
        note = await self.storage.create(message.name, message.content)
        return CreateResult(note)


class UpdateCommand(ICommand[UpdateMessage, UpdateResult]):
    async def execute(self, message: UpdateMessage) -> UpdateResult:
        note = await self.storage.update(message.id, message.name, message.content)
        if note is None:
            raise NoteNotFoundError(message.id)
        return UpdateResult(note)


class DeleteCommand(ICommand[DeleteMessage, DeleteResult]):
    async def execute(self, message: DeleteMessage) -> DeleteResult:
        note = await self.storage.delete(message.id)
        if note is None:
            raise NoteNotFoundError(message.id)
        return DeleteResult(note)


@dataclass(frozen=True)
class NoteUsecases:
    """The five note commands sharing one storage."""

    read: ReadCommand
    read_all: ReadAllCommand
    create: CreateCommand
    update: UpdateCommand
    delete: DeleteCommand


def new_usecases(storage: IStorage) -> NoteUsecases:
    """Bind every command to ``storage``.

    This is the inversion-of-control seam: swap the storage argument to
    run the same use-cases against another backend.
    """
    return NoteUsecases(
        read=ReadCommand(storage),
        read_all=ReadAllCommand(storage),
        create=CreateCommand(storage),
        update=UpdateCommand(storage),
        delete=DeleteCommand(storage),
    )

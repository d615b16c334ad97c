"""
Note entity plus the message and result contracts of every use-case.

Messages are what a parser builds from raw input; results are what a
use-case hands to a presenter. Results are root models so they serialize
straight to the note (or list of notes) they carry.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, RootModel


class Note(BaseModel):
    """A stored note. Instances are immutable copies of storage state."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {"id": 1, "name": "groceries", "content": "milk, eggs"}
        },
    )

    id: int = Field(description="Note identifier, assigned by storage")
    name: str = Field(default="", description="Note name")
    content: str = Field(default="", description="Note content")


# Messages


class ReadAllMessage(BaseModel):
    """Read every stored note."""


class ReadMessage(BaseModel):
    """Read a single note."""

    id: int


class CreateMessage(BaseModel):
    """Create a note."""

    name: str = Field(description="Note name")
    content: str = Field(description="Note content")

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "groceries", "content": "milk, eggs"}}
    )


class UpdateMessage(BaseModel):
    """Update a note. Empty name/content leaves that field unchanged."""

    id: int
    name: str = Field(default="", description="New name, empty to keep the current one")
    content: str = Field(default="", description="New content, empty to keep the current one")


class DeleteMessage(BaseModel):
    """Delete a note."""

    id: int


# Results


class ReadAllResult(RootModel[List[Note]]):
    """All notes currently stored."""

    @property
    def notes(self) -> List[Note]:
        return self.root


class ReadResult(RootModel[Note]):
    """The requested note."""

    @property
    def note(self) -> Note:
        return self.root


class CreateResult(RootModel[Note]):
    """The newly created note."""

    @property
    def note(self) -> Note:
        return self.root


class UpdateResult(RootModel[Note]):
    """The note after the update."""

    @property
    def note(self) -> Note:
        return self.root


class DeleteResult(RootModel[Note]):
    """The note as it was before deletion."""

    @property
    def note(self) -> Note:
        return self.root

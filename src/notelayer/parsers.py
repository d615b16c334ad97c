"""
Input adapters: turn REPL tokens or an HTTP request into a use-case message.

REPL tokens arrive already split on ``;`` and trimmed, with the command
keyword at index 0. HTTP requests carry the note id in the ``id`` query
parameter and write payloads as a JSON object body.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from .core.exceptions import ParseError
from .core.schemas.notes import (
    CreateMessage,
    DeleteMessage,
    ReadAllMessage,
    ReadMessage,
    UpdateMessage,
)

MessageT = TypeVar("MessageT", bound=BaseModel)


# ids are stored as signed 64-bit integers
MIN_NOTE_ID = -(2**63)
MAX_NOTE_ID = 2**63 - 1


def parse_id(value: Optional[str]) -> int:
    """Parse a note id, raising ParseError when it is missing, not an integer or out of range."""
    if value is None or value.strip() == "":
        raise ParseError("Missing note id")
    try:
        note_id = int(value)
    except ValueError:
        raise ParseError(f"Invalid note id: {value!r}", {"id": value}) from None
    if not MIN_NOTE_ID <= note_id <= MAX_NOTE_ID:
        raise ParseError(f"Note id out of range: {value!r}", {"id": value})
    return note_id


def _token(tokens: List[str], index: int, label: str, required: bool = True) -> str:
    if index < len(tokens):
        return tokens[index]
    if required:
        raise ParseError(f"Missing {label}", {"expected_tokens": index + 1, "got": len(tokens)})
    return ""


async def _json_body(request: Request) -> Dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise ParseError("Request body must be valid JSON") from None
    if not isinstance(body, dict):
        raise ParseError("Request body must be a JSON object")
    return body


def _validate(model: type, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise ParseError(f"Invalid {model.__name__}", {"errors": errors}) from None


class IParser(ABC, Generic[MessageT]):
    """Builds one kind of message from either front-end."""

    @abstractmethod
    def from_repl(self, tokens: List[str]) -> MessageT:
        pass

    @abstractmethod
    async def from_http(self, request: Request) -> MessageT:
        pass


class ReadAllParser(IParser[ReadAllMessage]):
    def from_repl(self, tokens: List[str]) -> ReadAllMessage:
        return ReadAllMessage()

    async def from_http(self, request: Request) -> ReadAllMessage:
        return ReadAllMessage()


class ReadParser(IParser[ReadMessage]):
    """``READ;<id>`` or ``GET ?id=<id>``."""

    def from_repl(self, tokens: List[str]) -> ReadMessage:
        return ReadMessage(id=parse_id(_token(tokens, 1, "note id")))

    async def from_http(self, request: Request) -> ReadMessage:
        return ReadMessage(id=parse_id(request.query_params.get("id")))


class CreateParser(IParser[CreateMessage]):
    """``CREATE;<name>;<content>`` or ``POST {"name": ..., "content": ...}``."""

    def from_repl(self, tokens: List[str]) -> CreateMessage:
        return CreateMessage(
            name=_token(tokens, 1, "note name"),
            content=_token(tokens, 2, "note content"),
        )

    async def from_http(self, request: Request) -> CreateMessage:
        return _validate(CreateMessage, await _json_body(request))


class UpdateParser(IParser[UpdateMessage]):
    """``UPDATE;<id>;<name>;<content>`` or ``PUT ?id=<id>`` with a JSON body.

    Missing or empty name/content mean "leave unchanged".
    """

    def from_repl(self, tokens: List[str]) -> UpdateMessage:
        return UpdateMessage(
            id=parse_id(_token(tokens, 1, "note id")),
            name=_token(tokens, 2, "note name", required=False),
            content=_token(tokens, 3, "note content", required=False),
        )

    async def from_http(self, request: Request) -> UpdateMessage:
        note_id = parse_id(request.query_params.get("id"))
        body = await _json_body(request)
        return _validate(UpdateMessage, {**body, "id": note_id})


class DeleteParser(IParser[DeleteMessage]):
    """``DELETE;<id>`` or ``DELETE ?id=<id>``."""

    def from_repl(self, tokens: List[str]) -> DeleteMessage:
        return DeleteMessage(id=parse_id(_token(tokens, 1, "note id")))

    async def from_http(self, request: Request) -> DeleteMessage:
        return DeleteMessage(id=parse_id(request.query_params.get("id")))


@dataclass(frozen=True)
class NoteParsers:
    """One parser per use-case."""

    read: ReadParser = field(default_factory=ReadParser)
    read_all: ReadAllParser = field(default_factory=ReadAllParser)
    create: CreateParser = field(default_factory=CreateParser)
    update: UpdateParser = field(default_factory=UpdateParser)
    delete: DeleteParser = field(default_factory=DeleteParser)

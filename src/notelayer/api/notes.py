"""Notes API endpoints.

A single ``/notes/`` route dispatched on the HTTP method. The note id
travels in the ``id`` query parameter; create and update take a JSON body.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from ..core.usecases import NoteUsecases
from ..parsers import NoteParsers
from ..presenters import JsonPresenter
from .dependencies import get_parsers, get_presenter, get_usecases

router = APIRouter(prefix="/notes", tags=["notes"])

ID_DESCRIPTION = "Note id (integer)"


@router.get("/")
async def read_notes(
    request: Request,
    note_id: Optional[str] = Query(None, alias="id", description=ID_DESCRIPTION),
    usecases: NoteUsecases = Depends(get_usecases),
    parsers: NoteParsers = Depends(get_parsers),
    presenter: JsonPresenter = Depends(get_presenter),
) -> JSONResponse:
    """List all notes, or get one note when ``id`` is given."""
    if not note_id:
        message = await parsers.read_all.from_http(request)
        result = await usecases.read_all.execute(message)
        return presenter.present(result)

    message = await parsers.read.from_http(request)
    result = await usecases.read.execute(message)
    return presenter.present(result)


@router.post("/", status_code=201)
async def create_note(
    request: Request,
    usecases: NoteUsecases = Depends(get_usecases),
    parsers: NoteParsers = Depends(get_parsers),
    presenter: JsonPresenter = Depends(get_presenter),
) -> JSONResponse:
    """Create a new note from ``{"name": ..., "content": ...}``."""
    message = await parsers.create.from_http(request)
    result = await usecases.create.execute(message)
    return presenter.present(result, status_code=201)


@router.put("/")
async def update_note(
    request: Request,
    note_id: Optional[str] = Query(None, alias="id", description=ID_DESCRIPTION),
    usecases: NoteUsecases = Depends(get_usecases),
    parsers: NoteParsers = Depends(get_parsers),
    presenter: JsonPresenter = Depends(get_presenter),
) -> JSONResponse:
    """Update a note. Omitted or empty fields keep their current value."""
    message = await parsers.update.from_http(request)
    result = await usecases.update.execute(message)
    return presenter.present(result)


@router.delete("/")
async def delete_note(
    request: Request,
    note_id: Optional[str] = Query(None, alias="id", description=ID_DESCRIPTION),
    usecases: NoteUsecases = Depends(get_usecases),
    parsers: NoteParsers = Depends(get_parsers),
    presenter: JsonPresenter = Depends(get_presenter),
) -> JSONResponse:
    """Delete a note and return it as it was."""
    message = await parsers.delete.from_http(request)
    result = await usecases.delete.execute(message)
    return presenter.present(result)

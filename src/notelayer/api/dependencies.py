"""FastAPI dependencies wiring the notes route to its collaborators."""

from fastapi import Depends, Request

from ..config import Settings
from ..core.storage.interfaces import IStorage
from ..core.usecases import NoteUsecases, new_usecases
from ..parsers import NoteParsers
from ..presenters import JsonPresenter


def get_storage(request: Request) -> IStorage:
    """Storage owned by the running application."""
    return request.app.state.storage


def get_usecases(storage: IStorage = Depends(get_storage)) -> NoteUsecases:
    return new_usecases(storage)


def get_parsers() -> NoteParsers:
    return NoteParsers()


def get_presenter() -> JsonPresenter:
    return JsonPresenter()


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings

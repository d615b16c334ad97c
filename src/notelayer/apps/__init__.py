"""Front-ends and the composition root that builds them."""

from typing import Optional, Union

from ..config import Settings, get_settings
from ..core.exceptions import ConfigurationError
from ..core.storage import IStorage, create_storage
from ..core.usecases import new_usecases
from ..parsers import NoteParsers
from ..presenters import ReplPresenter
from .base import Application, AppMode
from .http import HttpApplication
from .repl import ReplApplication

__all__ = [
    "AppMode",
    "Application",
    "HttpApplication",
    "ReplApplication",
    "new_application",
]


def new_application(
    mode: Union[AppMode, str],
    settings: Optional[Settings] = None,
    storage: Optional[IStorage] = None,
) -> Application:
    """Wire storage, use-cases, parsers and a presenter into a front-end."""
    settings = settings or get_settings()
    if not isinstance(mode, AppMode):
        try:
            mode = AppMode(str(mode).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown application mode: {mode!r}", {"mode": mode}) from None

    storage = storage if storage is not None else create_storage(settings)

    if mode is AppMode.REPL:
        return ReplApplication(
            usecases=new_usecases(storage),
            parsers=NoteParsers(),
            presenter=ReplPresenter(),
            prompt=settings.repl_prompt,
            storage=storage,
        )
    return HttpApplication(storage, settings)

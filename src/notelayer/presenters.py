"""Output adapters for use-case results."""

import sys
from abc import ABC, abstractmethod
from typing import Any, Optional, TextIO

from fastapi.responses import JSONResponse
from pydantic import RootModel

from .core.schemas.notes import ReadAllResult


class IPresenter(ABC):
    """Renders a use-case result for one front-end."""

    @abstractmethod
    def present(self, result: RootModel) -> Any:
        pass


class JsonPresenter(IPresenter):
    """Encodes the result as the body of a JSON response."""

    def present(self, result: RootModel, status_code: int = 200) -> JSONResponse:
        return JSONResponse(content=result.model_dump(mode="json"), status_code=status_code)


class ReplPresenter(IPresenter):
    """Prints one note per line to the console."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def present(self, result: RootModel) -> None:
        if isinstance(result, ReadAllResult):
            notes = result.notes
            if not notes:
                print("(no notes)", file=self.stream)
        else:
            notes = [result.root]

        for note in notes:
            print(repr(note), file=self.stream)

    def error(self, message: str) -> None:
        print(f"error: {message}", file=self.stream)

    def prompt(self, text: str) -> None:
        print(text, end="", file=self.stream, flush=True)

    def newline(self) -> None:
        print(file=self.stream)

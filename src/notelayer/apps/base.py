"""Application interface shared by the front-ends."""

from abc import ABC, abstractmethod
from enum import Enum


class AppMode(str, Enum):
    """Front-end to start."""

    REPL = "repl"
    HTTP = "http"


class Application(ABC):
    """A runnable front-end wired to parsers, use-cases and a presenter."""

    @abstractmethod
    def run(self) -> None:
        """Serve until the front-end is told to stop."""
        pass

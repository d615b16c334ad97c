"""Line-oriented REPL front-end.

Each line is ``COMMAND;arg;arg`` with tokens trimmed of surrounding
whitespace. ``exit`` or end of input stops the loop; bad input is
reported and the loop reads the next line.
"""

import asyncio
import sys
from typing import Awaitable, Callable, Dict, List, Optional, TextIO

from ..core.exceptions import NoteLayerError, UnknownCommandError
from ..core.logging import get_logger
from ..core.storage.interfaces import IStorage
from ..core.usecases import NoteUsecases
from ..parsers import NoteParsers
from ..presenters import ReplPresenter
from .base import Application

logger = get_logger("repl")

EXIT_COMMAND = "exit"


class ReplApplication(Application):
    """Reads commands from a text stream and prints results."""

    def __init__(
        self,
        usecases: NoteUsecases,
        parsers: Optional[NoteParsers] = None,
        presenter: Optional[ReplPresenter] = None,
        stdin: Optional[TextIO] = None,
        prompt: str = "REPL > ",
        storage: Optional[IStorage] = None,
    ):
        self.usecases = usecases
        self.parsers = parsers or NoteParsers()
        self.presenter = presenter or ReplPresenter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.prompt = prompt
        # only needed for init/close around the loop
        self.storage = storage
        self._handlers: Dict[str, Callable[[List[str]], Awaitable[None]]] = {
            "CREATE": self.handle_create,
            "READ": self.handle_read,
            "READALL": self.handle_read_all,
            "UPDATE": self.handle_update,
            "DELETE": self.handle_delete,
        }

    async def handle_read_all(self, tokens: List[str]) -> None:
        message = self.parsers.read_all.from_repl(tokens)
        result = await self.usecases.read_all.execute(message)
        self.presenter.present(result)

    async def handle_read(self, tokens: List[str]) -> None:
        message = self.parsers.read.from_repl(tokens)
        result = await self.usecases.read.execute(message)
        self.presenter.present(result)

    async def handle_create(self, tokens: List[str]) -> None:
        message = self.parsers.create.from_repl(tokens)
        result = await self.usecases.create.execute(message)
        self.presenter.present(result)

    async def handle_update(self, tokens: List[str]) -> None:
        message = self.parsers.update.from_repl(tokens)
        result = await self.usecases.update.execute(message)
        self.presenter.present(result)

    async def handle_delete(self, tokens: List[str]) -> None:
        message = self.parsers.delete.from_repl(tokens)
        result = await self.usecases.delete.execute(message)
        self.presenter.present(result)

    @staticmethod
    def should_exit(line: str) -> bool:
        return line.strip() == EXIT_COMMAND

    @staticmethod
    def tokenize(line: str) -> List[str]:
        return [token.strip() for token in line.split(";")]

    async def dispatch(self, tokens: List[str]) -> None:
        handler = self._handlers.get(tokens[0])
        if handler is None:
            raise UnknownCommandError(tokens[0])
        await handler(tokens)

    async def handle_line(self, line: str) -> None:
        """Run one command line, reporting application errors instead of raising them."""
        try:
            await self.dispatch(self.tokenize(line))
        except NoteLayerError as e:
            logger.debug(f"Command failed: {e.message}", extra={"line": line.strip()})
            self.presenter.error(e.message)

    async def run_async(self) -> None:
        if self.storage is not None:
            await self.storage.init()

        logger.info("REPL session started")
        try:
            while True:
                self.presenter.prompt(self.prompt)
                try:
                    line = self.stdin.readline()
                except UnicodeDecodeError as e:
                    logger.warning(f"Undecodable input line: {e.reason}")
                    self.presenter.error("Input is not valid UTF-8")
                    continue
                if line == "":
                    # end of input
                    self.presenter.newline()
                    break
                if self.should_exit(line):
                    break
                if not line.strip():
                    continue
                await self.handle_line(line)
        finally:
            logger.info("REPL session ended")
            if self.storage is not None:
                await self.storage.close()

    def run(self) -> None:
        asyncio.run(self.run_async())

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .dispatcher import CommandDispatcher
from .settings import ShellSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


class GameShell:
    """Line-oriented loop around a ``CommandDispatcher``.

    Prints the banner once, then prompts, reads a line, dispatches it and
    prints the resulting lines until the dispatcher says to stop. Streams are
    injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        settings: Optional[ShellSettings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.settings = settings or ShellSettings()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.turns = 0

    def _write_line(self, text: str) -> None:
        self.stdout.write(text + "\n")

    def _read_line(self) -> Optional[str]:
        self.stdout.write(self.settings.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line

    def run(self) -> int:
        self._write_line(self.settings.banner)
        try:
            while True:
                line = self._read_line()
                if line is None:
                    # End of input; nothing left to play
                    self._write_line("")
                    logger.info("Input closed after %d turns; leaving game", self.turns)
                    return EXIT_OK
                result = self.dispatcher.handle(line)
                self.turns += 1
                self._write_line(result.text)
                if result.should_stop:
                    logger.info("Game over after %d turns", self.turns)
                    return EXIT_OK
        except KeyboardInterrupt:
            self._write_line("")
            logger.info("Interrupted by user")
            return EXIT_INTERRUPTED


__all__ = ["GameShell", "EXIT_OK", "EXIT_INTERRUPTED"]

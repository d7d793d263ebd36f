# io_utils.py
"""
Console I/O shared by GameSession and the placement wizard
––––––––––––––––––––––––––––––––––––––––––––––––––––––––––
• ConsoleIO.send()          – write a line and flush
• ConsoleIO.safe_readline() – prompt + readline(), None on EOF / interrupt
• ConsoleIO.pause_clear()   – "Press Enter..." then push old output off screen
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import CLEAR_LINES

logger = logging.getLogger(__name__)


class ConsoleIO:
    """Line-oriented console bound to a reader and a writer (stdin/stdout by default)."""

    def __init__(
        self,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
        *,
        clear_lines: int = CLEAR_LINES,
    ) -> None:
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout
        self.clear_lines = clear_lines

    def send(self, text: str = "") -> None:
        self.writer.write(text + "\n")
        self.writer.flush()

    def prompt(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def safe_readline(self, prompt: str = "") -> str | None:
        """Return the next line without its newline, or None once input is exhausted."""
        if prompt:
            self.prompt(prompt)
        try:
            line = self.reader.readline()
        except KeyboardInterrupt:
            logger.debug("safe_readline() interrupted")
            return None
        if not line:
            logger.debug("safe_readline() EOF")
            return None
        line = line.rstrip("\r\n")
        logger.debug("safe_readline() got line %r", line)
        return line

    def pause_clear(self) -> bool:
        """Wait for Enter and clear the screen; False if input ended while waiting."""
        line = self.safe_readline("Press Enter...")
        self.writer.write("\n" * self.clear_lines)
        self.writer.flush()
        return line is not None

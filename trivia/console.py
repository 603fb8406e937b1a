"""Line-oriented terminal input and output."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_CLEAR_SCREEN = "\033[2J\033[H"


class Console:
    """Reads answers from a text stream and writes prompts to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text as is."""
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and return the next line without its line ending."""
        if prompt:
            self.write(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Show the prompt and read an integer, asking again until one is given."""
        while True:
            match = _INT_PREFIX.match(self.read_line(prompt))
            if match:
                return int(match.group(1))
            self.write("Ingrese un numero valido.\n")

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.write(_CLEAR_SCREEN)
"""Terminal capabilities used by the session loop.

The loop only depends on the ``ConsoleIO`` protocol so it can be driven by a
scripted console in tests.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, Protocol, TextIO


class ConsoleIO(Protocol):
    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return one line without its newline, or None at end of input."""

    def write(self, text: str = "") -> None:
        """Print ``text`` followed by a newline."""

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question and return True for yes."""


def read_keypress(stream: TextIO | None = None) -> str:
    """Read a single character without waiting for Enter.

    Falls back to reading a whole line when the stream is not a terminal.
    Returns an empty string at end of input.
    """
    stream = stream or sys.stdin
    if not stream.isatty():
        line = stream.readline()
        return line.strip()[:1] if line else ""
    try:
        import msvcrt
    except ImportError:
        return _read_posix_key(stream)
    return msvcrt.getwch()


def _read_posix_key(stream: TextIO) -> str:
    import termios
    import tty

    fd = stream.fileno()
    previous = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        return stream.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, previous)


class StdConsole:
    """ConsoleIO backed by stdin/stdout."""

    def __init__(
        self,
        *,
        stdout: TextIO | None = None,
        line_reader: Callable[[str], str] = input,
        key_reader: Callable[[], str] = read_keypress,
    ) -> None:
        self._stdout = stdout or sys.stdout
        self._line_reader = line_reader
        self._key_reader = key_reader

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return self._line_reader(prompt)
        except EOFError:
            return None

    def write(self, text: str = "") -> None:
        print(text, file=self._stdout)

    def confirm(self, prompt: str) -> bool:
        while True:
            self._stdout.write(f"{prompt} (y/n): ")
            self._stdout.flush()
            choice = self._key_reader()
            self.write(choice)
            if not choice:
                return False
            if choice in "yY":
                return True
            if choice in "nN":
                return False
            self.write("Please answer 'y' or 'n'.")

"""
Console port used by the menu loop.
The game never touches stdin/stdout directly; it talks to a ConsoleIO.
"""

from typing import Protocol


class ConsoleIO(Protocol):
    def write(self, text: str = "") -> None: ...

    def read(self, prompt: str = "") -> str:
        """Return one line of input. Raises EOFError when input is exhausted."""
        ...


class StdConsole:
    """ConsoleIO bound to the process terminal."""

    def write(self, text: str = "") -> None:
        print(text)

    def read(self, prompt: str = "") -> str:
        return input(prompt)

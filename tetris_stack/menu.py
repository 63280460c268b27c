from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict

from loguru import logger

from . import render
from .console import ConsoleIO, StdConsole
from .game import TetrisStack
from .types import QueueError, QueueResult


@dataclass(slots=True)
class MenuLoop:
    """Interactive control loop driving a TetrisStack through a ConsoleIO."""

    game: TetrisStack
    io: ConsoleIO = field(default_factory=StdConsole)
    _actions: Dict[str, Callable[[], bool]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._actions = {
            "1": self.show_queue,
            "2": self.play_piece,
            "3": self.insert_piece,
            "4": self.remove_piece,
            "5": self.quit,
        }

    def run(self) -> None:
        self.io.write(render.render_header())
        self.show_queue()
        running = True
        while running:
            self.io.write(render.render_menu())
            try:
                choice = self.io.read("Enter your choice (1-5): ")
            except EOFError:
                logger.info("Input closed, leaving the game")
                break
            running = self.handle(choice)

    def handle(self, choice: str) -> bool:
        """Dispatch one menu choice. Returns False when the loop should stop."""
        action = self._actions.get(choice.strip())
        if action is None:
            self.io.write("INVALID OPTION! Please enter a number between 1 and 5.")
            return True
        return action()

    # --- Actions ---
    def show_queue(self) -> bool:
        self.io.write(render.render_queue(self.game.snapshot()))
        return True

    def _report(self, result: QueueResult, message: str) -> None:
        self.io.write(message)
        if result.ok:
            self.show_queue()

    def play_piece(self) -> bool:
        result = self.game.play_piece()
        self._report(result, render.render_played(result))
        return True

    def insert_piece(self) -> bool:
        result = self.game.insert_piece()
        self._report(result, render.render_inserted(result))
        return True

    def remove_piece(self) -> bool:
        if self.game.queue.is_empty():
            self.io.write(render.render_error(QueueResult.failure(QueueError.QUEUE_EMPTY)))
            return True
        self.io.write("\n".join(render.piece_lines(self.game.pieces())))
        try:
            raw = self.io.read("Enter the id of the piece to remove: ")
        except EOFError:
            return False
        try:
            piece_id = int(raw.strip())
        except ValueError:
            logger.warning(f"Rejected non-numeric piece id {raw!r}")
            self.io.write("ERROR: Please enter a valid number!")
            return True
        result = self.game.remove_piece(piece_id)
        self._report(result, render.render_removed(result, piece_id))
        return True

    def quit(self) -> bool:
        self.io.write(render.render_farewell())
        return False

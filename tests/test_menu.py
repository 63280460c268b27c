from __future__ import annotations

import unittest

from tetris_stack.game import TetrisStack
from tetris_stack.menu import MenuLoop


class ScriptedConsole:
    """ConsoleIO fake: replays canned input lines and records output."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def write(self, text: str = "") -> None:
        self.output.append(text)

    def read(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def ids_of(game: TetrisStack) -> list[int]:
    return [p.piece_id for p in game.pieces()]


class MenuLoopTests(unittest.TestCase):
    def setUp(self) -> None:
        self.game = TetrisStack(capacity=3, seed=1)

    def run_menu(self, *lines: str) -> ScriptedConsole:
        console = ScriptedConsole(*lines)
        MenuLoop(self.game, io=console).run()
        return console

    def test_quit_immediately(self) -> None:
        console = self.run_menu("5")
        self.assertIn("TETRIS STACK", console.text)
        self.assertIn("THANKS FOR PLAYING", console.text)
        self.assertEqual(len(console.prompts), 1)

    def test_show_queue(self) -> None:
        console = self.run_menu("1", "5")
        self.assertIn("Pieces in queue: 3/3", console.text)
        self.assertIn("Next id: 4", console.text)
        self.assertIn(">>  1.", console.text)

    def test_play_piece(self) -> None:
        console = self.run_menu("2", "5")
        self.assertIn("PIECE PLAYED!", console.text)
        self.assertIn("generated automatically", console.text)
        self.assertEqual(ids_of(self.game), [2, 3, 4])

    def test_insert_when_full(self) -> None:
        console = self.run_menu("3", "5")
        self.assertIn("Queue is full", console.text)
        self.assertEqual(ids_of(self.game), [1, 2, 3])

    def test_remove_by_id(self) -> None:
        console = self.run_menu("4", "2", "3", "5")
        self.assertIn("PIECE REMOVED!", console.text)
        self.assertIn("Removed from position: 2", console.text)
        self.assertIn("NEW PIECE ADDED!", console.text)
        self.assertEqual(ids_of(self.game), [1, 3, 4])

    def test_remove_unknown_id(self) -> None:
        console = self.run_menu("4", "77", "5")
        self.assertIn("Piece with id 77 not found", console.text)
        self.assertEqual(ids_of(self.game), [1, 2, 3])

    def test_remove_non_numeric_id(self) -> None:
        console = self.run_menu("4", "abc", "5")
        self.assertIn("valid number", console.text)
        self.assertEqual(ids_of(self.game), [1, 2, 3])

    def test_remove_from_empty_queue(self) -> None:
        for piece_id in (1, 2, 3):
            self.game.remove_piece(piece_id)
        console = self.run_menu("4", "5")
        self.assertIn("No pieces in the queue", console.text)
        self.assertNotIn("Enter the id", "".join(console.prompts))

    def test_play_on_empty_queue(self) -> None:
        for piece_id in (1, 2, 3):
            self.game.remove_piece(piece_id)
        console = self.run_menu("2", "5")
        self.assertIn("No pieces in the queue", console.text)
        self.assertIn("QUEUE EMPTY", console.text)

    def test_invalid_option(self) -> None:
        console = self.run_menu("9", "", "5")
        self.assertEqual(console.text.count("INVALID OPTION"), 2)

    def test_end_of_input_stops_loop(self) -> None:
        console = self.run_menu("1")
        self.assertNotIn("THANKS FOR PLAYING", console.text)

    def test_handle_returns_false_on_quit(self) -> None:
        menu = MenuLoop(self.game, io=ScriptedConsole())
        self.assertTrue(menu.handle("1"))
        self.assertTrue(menu.handle(" 2 "))
        self.assertFalse(menu.handle("5"))


if __name__ == "__main__":
    unittest.main()

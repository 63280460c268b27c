"""
Tetris Stack
A fixed-capacity circular queue of game pieces.
"""

from .circular_queue import BoundedCircularQueue
from .config import config
from .console import ConsoleIO, StdConsole
from .game import TetrisStack
from .menu import MenuLoop
from .piece import Piece, PieceGenerator
from .types import QueueError, QueueResult, QueueState

__all__ = [
    "BoundedCircularQueue",
    "config",
    "ConsoleIO",
    "StdConsole",
    "TetrisStack",
    "MenuLoop",
    "Piece",
    "PieceGenerator",
    "QueueError",
    "QueueResult",
    "QueueState",
]

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from .circular_queue import BoundedCircularQueue
from .config import config
from .piece import Piece, PieceGenerator
from .types import QueueError, QueueResult


@dataclass(slots=True)
class TetrisStack:
    """Game controller: a queue of upcoming pieces plus the piece generator.

    The queue starts filled to capacity. Every action returns a
    :class:`QueueResult`; rejected actions leave the game untouched.
    """

    capacity: int = config.QUEUE_CAPACITY
    seed: Optional[int] = config.SEED
    rng: Optional[random.Random] = None
    queue: BoundedCircularQueue[Piece] = field(init=False)
    generator: PieceGenerator = field(init=False)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.generator = PieceGenerator.seeded(self.seed)
            self.rng = self.generator.rng
        else:
            self.generator = PieceGenerator(rng=self.rng)
        self.queue = BoundedCircularQueue(self.capacity)
        self._fill()

    def _fill(self) -> None:
        while not self.queue.is_full():
            piece = self.generator.generate()
            self.queue.enqueue(piece)
            logger.info(f"Initial piece {piece.kind} (id {piece.piece_id}) queued")
        logger.info(f"Queue initialised with {len(self.queue)} pieces")

    @property
    def next_id(self) -> int:
        return self.generator.next_id

    # --- Actions ---
    def play_piece(self) -> QueueResult:
        """Take the front piece and top the queue back up with a new one."""
        result = self.queue.dequeue()
        if not result.ok:
            logger.warning("No piece to play: queue is empty")
            return result
        logger.info(f"Played {result.piece}")
        if not self.queue.is_full():
            fresh = self.generator.generate()
            self.queue.enqueue(fresh)
            result.replenished = fresh
            logger.info(f"Auto-generated {fresh}")
        return result

    def insert_piece(self) -> QueueResult:
        # Check before generating so a rejected insert does not burn an id
        if self.queue.is_full():
            logger.warning(f"Cannot insert: queue full ({self.queue.capacity})")
            return QueueResult.failure(QueueError.QUEUE_FULL)
        result = self.queue.enqueue(self.generator.generate())
        logger.info(f"Inserted {result.piece} at position {result.position}")
        return result

    def remove_piece(self, piece_id: int) -> QueueResult:
        position = self.queue.find_position_by_id(piece_id)
        if position is None:
            logger.warning(f"Piece id {piece_id} not found in queue")
            return QueueResult.failure(QueueError.INVALID_POSITION)
        result = self.queue.remove_at(position)
        logger.info(f"Removed {result.piece} from position {position}")
        return result

    def pieces(self) -> list[Piece]:
        return self.queue.to_list()

    def snapshot(self) -> dict:
        return {
            "capacity": self.queue.capacity,
            "size": len(self.queue),
            "next_id": self.next_id,
            "state": self.queue.state.value,
            "pieces": self.pieces(),
        }

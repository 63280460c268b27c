from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from .config import config


@dataclass(frozen=True, slots=True)
class Piece:
    """Opaque game piece: a kind token and its creation id."""

    kind: str  # one character of the configured alphabet
    piece_id: int  # strictly increasing, never reused

    def to_dict(self) -> dict:
        return {"kind": self.kind, "piece_id": self.piece_id}

    def __str__(self) -> str:
        return f"Piece({self.kind}#{self.piece_id})"


@dataclass(slots=True)
class PieceGenerator:
    """Creates pieces with a random kind and a monotonically increasing id.

    The random source is injected so callers can seed it; every call to
    :meth:`generate` consumes exactly one id.
    """

    kinds: Sequence[str] = field(default_factory=lambda: tuple(config.PIECE_KINDS))
    rng: random.Random = field(default_factory=random.Random)
    _next_id: int = field(default=config.FIRST_PIECE_ID, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.kinds:
            raise ValueError("PieceGenerator requires at least one piece kind")
        self.kinds = tuple(self.kinds)

    @classmethod
    def seeded(cls, seed: int | None, kinds: Sequence[str] | None = None) -> "PieceGenerator":
        if kinds is None:
            return cls(rng=random.Random(seed))
        return cls(kinds=kinds, rng=random.Random(seed))

    @property
    def next_id(self) -> int:
        return self._next_id

    def generate(self) -> Piece:
        kind = self.rng.choice(self.kinds)
        piece = Piece(kind=kind, piece_id=self._next_id)
        self._next_id += 1
        logger.debug(f"Generated {piece}")
        return piece

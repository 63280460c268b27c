import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(slots=True)
class Config:
    # --- Queue ---
    QUEUE_CAPACITY: int = int(os.getenv("TETRIS_CAPACITY", 5))
    # Token alphabet, one character per piece kind
    PIECE_KINDS: str = os.getenv("TETRIS_PIECE_KINDS", "IOTL")
    FIRST_PIECE_ID: int = 1

    # --- Runtime ---
    SEED: int | None = field(default_factory=lambda: _optional_int("TETRIS_SEED"))
    LOG_LEVEL: str = os.getenv("TETRIS_LOG_LEVEL", "WARNING").upper()

    # QUEUE_CAPACITY is range-checked by the CLI, after command-line overrides
    def __post_init__(self):
        if not self.PIECE_KINDS:
            raise ValueError("PIECE_KINDS must contain at least one kind")


config = Config()

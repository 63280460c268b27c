from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class QueueError(str, Enum):
    """Reasons a queue operation can be rejected."""

    QUEUE_EMPTY = "queue_empty"
    QUEUE_FULL = "queue_full"
    INVALID_POSITION = "invalid_position"


class QueueState(str, Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


@dataclass(slots=True)
class QueueResult:
    """Outcome of a queue or game operation.

    ``piece`` is the item that was added or removed, ``position`` the logical
    position it occupied (0 = front). ``replenished`` is only set by the game
    controller when a piece was generated to refill the queue after a play.
    """

    ok: bool
    error: Optional[QueueError] = None
    piece: Any = None
    position: Optional[int] = None
    replenished: Any = None

    @classmethod
    def success(cls, piece: Any = None, position: Optional[int] = None) -> "QueueResult":
        return cls(ok=True, piece=piece, position=position)

    @classmethod
    def failure(cls, error: QueueError) -> "QueueResult":
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        def _dump(item: Any) -> Any:
            return item.to_dict() if hasattr(item, "to_dict") else item

        return {
            "ok": self.ok,
            "error": self.error.value if self.error else None,
            "piece": _dump(self.piece),
            "position": self.position,
            "replenished": _dump(self.replenished),
        }

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

import numpy as np
from loguru import logger

from .types import QueueError, QueueResult, QueueState

T = TypeVar("T")


class BoundedCircularQueue(Generic[T]):
    """Fixed-capacity FIFO queue backed by a ring buffer.

    The ``size`` slots starting at ``front`` (wrapping modulo ``capacity``)
    hold the queued items in FIFO order; the back slot is derived as
    ``(front + size) % capacity``. Besides enqueue/dequeue the queue supports
    removing an item at any logical position while keeping the order of the
    remaining items.

    Not safe for concurrent use: callers sharing an instance across threads
    must serialise access themselves.
    """

    def __init__(
        self,
        capacity: int,
        id_of: Callable[[T], Any] = attrgetter("piece_id"),
    ) -> None:
        if capacity < 1:
            raise ValueError("BoundedCircularQueue capacity must be at least 1")
        self._capacity = int(capacity)
        self._slots = np.empty(self._capacity, dtype=object)
        self._front = 0
        self._size = 0
        self._id_of = id_of

    # --- Introspection ---
    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def front(self) -> int:
        """Real index of the next item to dequeue."""
        return self._front

    @property
    def back(self) -> int:
        """Real index the next enqueue writes to."""
        return (self._front + self._size) % self._capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for offset in range(self._size):
            yield self._slots[self._real_index(offset)]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    @property
    def state(self) -> QueueState:
        if self.is_empty():
            return QueueState.EMPTY
        if self.is_full():
            return QueueState.FULL
        return QueueState.PARTIAL

    def peek(self) -> Optional[T]:
        return self._slots[self._front] if self._size else None

    def to_list(self) -> List[T]:
        return list(self)

    def to_dict(self) -> dict:
        return {
            "capacity": self._capacity,
            "size": self._size,
            "front": self._front,
            "back": self.back,
            "state": self.state.value,
            "items": [
                item.to_dict() if hasattr(item, "to_dict") else item for item in self
            ],
        }

    def _real_index(self, position: int) -> int:
        return (self._front + position) % self._capacity

    # --- Operations ---
    def enqueue(self, item: T) -> QueueResult:
        if self.is_full():
            logger.debug(f"Enqueue rejected, queue full ({self._capacity})")
            return QueueResult.failure(QueueError.QUEUE_FULL)
        index = self.back
        self._slots[index] = item
        self._size += 1
        logger.debug(f"Enqueued {item} at slot {index} (size={self._size})")
        return QueueResult.success(item, position=self._size - 1)

    def dequeue(self) -> QueueResult:
        if self.is_empty():
            logger.debug("Dequeue rejected, queue empty")
            return QueueResult.failure(QueueError.QUEUE_EMPTY)
        item = self._slots[self._front]
        self._front = (self._front + 1) % self._capacity
        self._size -= 1
        logger.debug(f"Dequeued {item} (front={self._front}, size={self._size})")
        return QueueResult.success(item, position=0)

    def remove_at(self, position: int) -> QueueResult:
        """Remove the item at logical ``position`` (0 = front).

        Items behind the removed one shift one slot toward the front; ``front``
        itself never moves. The slot vacated at the back keeps a stale
        reference until the next enqueue overwrites it.
        """
        if not 0 <= position < self._size:
            logger.debug(f"Remove rejected, position {position} outside [0, {self._size})")
            return QueueResult.failure(QueueError.INVALID_POSITION)

        item = self._slots[self._real_index(position)]
        for offset in range(position, self._size - 1):
            self._slots[self._real_index(offset)] = self._slots[
                self._real_index(offset + 1)
            ]
        self._size -= 1
        logger.debug(f"Removed {item} from position {position} (size={self._size})")
        return QueueResult.success(item, position=position)

    def find_position_by_id(self, item_id: Any) -> Optional[int]:
        for position, item in enumerate(self):
            if self._id_of(item) == item_id:
                return position
        return None

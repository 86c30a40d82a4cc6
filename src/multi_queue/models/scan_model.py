# src/multi_queue/models/scan_model.py

"""
Implements the concrete multi-queue using sequence tags and a front scan.

This module provides the `MultiQueue` class. Each sub-queue is a
`collections.deque`, and every stored element carries the global
insertion sequence number it was given on enqueue. The globally oldest
element is found by comparing the tags at the front of every sub-queue.

**Costs:**
- `enqueue`, `front(i)`, `dequeue(i)`, `size`, `empty`: O(1).
- `front()`, `dequeue()`: O(num_queues), a fixed bound for a given
  structure.

Because `dequeue(i)` only touches sub-queue `i`, no extra bookkeeping is
needed to keep the global view consistent: the next scan sees the new
fronts.
"""

import logging
from collections import deque
from typing import Any, Deque, List, Optional, Tuple

# Local package imports
from ..base_model import BaseMultiQueue
from ..constants import DEFAULT_MAX_SEQUENCE, DequeueSource, EnqueueResult
from ..measure import Measure

# Set up the module-level logger
log = logging.getLogger(__name__)

# (sequence, enqueued_at, value)
Unit = Tuple[int, int, Any]


class MultiQueue(BaseMultiQueue):
    """
    A fixed number of FIFO sub-queues that can also be read and drained
    as one FIFO ordered by insertion time.

    The insertion counter goes back to zero every time the structure
    becomes empty. If it reaches `max_sequence` first, further enqueues
    are rejected until the structure drains.
    """

    def __init__(self, num_queues: int,
                 max_sequence: int = DEFAULT_MAX_SEQUENCE,
                 track: bool = False):
        """
        Initializes the multi-queue.

        Args:
            num_queues (int): The number of sub-queues.
            max_sequence (int, optional): The number of sequence tags
                available between two moments where the structure is
                empty. Defaults to DEFAULT_MAX_SEQUENCE.
            track (bool, optional): If True, attach a `Measure` tracker
                that records every operation. Its logs grow with the
                number of operations, so it is off by default.

        Raises:
            ValueError: If num_queues or max_sequence is not positive.
        """
        # Initialize common attributes from the base class
        super().__init__(num_queues)

        if isinstance(max_sequence, bool) or not isinstance(max_sequence, int):
            raise ValueError("max_sequence must be an integer.")
        if max_sequence <= 0:
            raise ValueError("max_sequence must be > 0.")

        self._max_sequence: int = max_sequence

        # Internal State Tracking
        self._queues: List[Deque[Unit]] = [deque() for _ in range(num_queues)]
        self._next_sequence: int = 0
        self._length: int = 0

        # Components
        self.kpi_tracker: Optional[Measure] = (
            Measure(num_queues) if track else None)

        log.info(f"MultiQueue initialized: NumQueues={self.num_queues}, "
                 f"MaxSequence={self._max_sequence}, Tracked={track}")

    @property
    def max_sequence(self) -> int:
        """The number of sequence tags available between two drains."""
        return self._max_sequence

    def size(self, i: Optional[int] = None) -> int:
        if i is None:
            return self._length
        self._check_index(i)
        return len(self._queues[i])

    def front(self, i: Optional[int] = None) -> Any:
        self._check_not_empty(i)
        if i is None:
            i = self._find_oldest_front()
        return self._queues[i][0][2]

    def enqueue(self, i: int, value: Any) -> EnqueueResult:
        self._check_index(i)

        if self._next_sequence >= self._max_sequence:
            log.warning(f"Insertion counter exhausted "
                        f"({self._next_sequence}/{self._max_sequence}) with "
                        f"{self._length} elements present. "
                        f"Rejecting enqueue into {i}.")
            if self.kpi_tracker is not None:
                self.kpi_tracker.log_rejection(i)
            return EnqueueResult.REJECTED_SEQUENCE_EXHAUSTED

        sequence = self._next_sequence
        self._next_sequence += 1
        self._length += 1

        enqueued_at = 0
        if self.kpi_tracker is not None:
            enqueued_at = self.kpi_tracker.log_enqueue(
                key=i,
                total_length=self._length,
                queue_length=len(self._queues[i]) + 1
            )
        self._queues[i].append((sequence, enqueued_at, value))

        log.debug(f"Enqueued into {i} with Seq={sequence}. "
                  f"Length={self._length}")
        return EnqueueResult.ENQUEUED

    def dequeue(self, i: Optional[int] = None) -> Any:
        self._check_not_empty(i)

        if i is None:
            source = DequeueSource.GLOBAL
            i = self._find_oldest_front()
        else:
            source = DequeueSource.DIRECT

        sequence, enqueued_at, value = self._queues[i].popleft()
        self._length -= 1

        if self.kpi_tracker is not None:
            self.kpi_tracker.log_dequeue(
                key=i,
                source=source,
                enqueued_at=enqueued_at,
                total_length=self._length,
                queue_length=len(self._queues[i])
            )
        log.debug(f"{source.name} dequeue from {i} removed Seq={sequence}. "
                  f"Length={self._length}")

        if self._length == 0:
            self._reset_counter()

        return value

    def _find_oldest_front(self) -> int:
        """
        Returns the index of the sub-queue whose front element has the
        smallest sequence tag. Must only be called when not empty.
        """
        oldest_index = -1
        oldest_sequence = 0
        for index, queue in enumerate(self._queues):
            if not queue:
                continue
            sequence = queue[0][0]
            if oldest_index < 0 or sequence < oldest_sequence:
                oldest_index = index
                oldest_sequence = sequence
        return oldest_index

    def _reset_counter(self):
        """Internal helper run whenever the structure becomes empty."""
        log.debug(f"MultiQueue drained. Resetting insertion counter "
                  f"from {self._next_sequence} to 0.")
        self._next_sequence = 0
        if self.kpi_tracker is not None:
            self.kpi_tracker.log_counter_reset()

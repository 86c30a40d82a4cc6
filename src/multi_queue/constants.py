# src/multi_queue/constants.py

"""
Defines core enumerations and defaults used across the multi-queue package.

These enums are the vocabulary shared by the queue implementations and
the `Measure` tracker: what happened to an enqueue request, and through
which view an element left the structure.
"""

from enum import Enum, auto

# Upper bound of the global insertion counter. Matches the range of an
# unsigned 64-bit counter; the counter never wraps.
DEFAULT_MAX_SEQUENCE = 2 ** 64 - 1


class EnqueueResult(Enum):
    """
    Represents the possible outcomes of `MultiQueue.enqueue()`.

    Exhausting the insertion counter is a usage-volume condition, not a
    programming error, so it is reported as a result instead of raised.
    """

    # The value was appended to its sub-queue and tagged with the
    # next insertion sequence number.
    ENQUEUED = auto()

    # The insertion counter reached its bound without the structure
    # ever draining to empty. Nothing was stored.
    REJECTED_SEQUENCE_EXHAUSTED = auto()

    def __bool__(self) -> bool:
        return self is EnqueueResult.ENQUEUED


class DequeueSource(Enum):
    """
    Represents the view through which an element was removed.
    """

    # Removed as the globally oldest element, via `dequeue()`.
    GLOBAL = auto()

    # Removed from the front of one sub-queue, via `dequeue(i)`.
    DIRECT = auto()

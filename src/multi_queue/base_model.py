# src/multi_queue/base_model.py

"""
Defines the Abstract Base Class (ABC) for all multi-queue implementations.

This module provides 'BaseMultiQueue', which establishes the public
contract shared by every multi-queue: a fixed number of FIFO sub-queues
that can be read and drained one by one, or together as a single queue
ordered by insertion time.

The base class also owns the argument validation that every
implementation needs, so that all of them fail in the same way when a
caller breaks a precondition.
"""

import abc
import logging
from typing import Any, List, Optional

# Local package imports
from .constants import EnqueueResult
from .errors import PreconditionError

# Set up the module-level logger
log = logging.getLogger(__name__)


class BaseMultiQueue(abc.ABC):
    """
    Abstract Base Class for multi-queue implementations.

    This class defines the standard public API:
    - `size(i=None)` / `empty(i=None)`: Element counts.
    - `front(i=None)`: Peek at the oldest element.
    - `enqueue(i, value)`: Append to sub-queue `i`.
    - `dequeue(i=None)`: Remove the oldest element.

    Passing an index selects sub-queue `i`; omitting it selects the
    whole structure, where "oldest" means the earliest enqueued value
    still present in any sub-queue.
    """

    def __init__(self, num_queues: int):
        """
        Initializes the attributes common to all multi-queues.

        Args:
            num_queues (int): The number of sub-queues. Fixed for the
                              lifetime of the structure.

        Raises:
            ValueError: If num_queues is not a positive integer.
        """
        if isinstance(num_queues, bool) or not isinstance(num_queues, int):
            raise ValueError("num_queues must be an integer.")
        if num_queues <= 0:
            raise ValueError("MultiQueue num_queues must be > 0.")

        self._num_queues: int = num_queues

    @property
    def num_queues(self) -> int:
        """The fixed number of sub-queues."""
        return self._num_queues

    @abc.abstractmethod
    def size(self, i: Optional[int] = None) -> int:
        """
        Returns the number of elements held.

        Args:
            i (Optional[int]): A sub-queue index. If None, the total
                               over all sub-queues is returned.
        """
        raise NotImplementedError

    def empty(self, i: Optional[int] = None) -> bool:
        """Returns True if the structure (or sub-queue `i`) holds nothing."""
        return self.size(i) == 0

    @abc.abstractmethod
    def front(self, i: Optional[int] = None) -> Any:
        """
        Returns the oldest element without removing it.

        Args:
            i (Optional[int]): A sub-queue index. If None, the globally
                               oldest element is returned.

        Raises:
            PreconditionError: If the selected queue is empty or the
                               index is invalid.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def enqueue(self, i: int, value: Any) -> EnqueueResult:
        """
        Appends `value` to sub-queue `i`.

        The value becomes the newest element both in sub-queue `i` and
        in the global order.

        Returns:
            EnqueueResult: ENQUEUED, or a rejection reason. A rejected
                           call leaves the structure unchanged.

        Raises:
            PreconditionError: If the index is invalid.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def dequeue(self, i: Optional[int] = None) -> Any:
        """
        Removes the oldest element and returns it.

        Args:
            i (Optional[int]): A sub-queue index. If None, the globally
                               oldest element is removed from whichever
                               sub-queue holds it.

        Raises:
            PreconditionError: If the selected queue is empty or the
                               index is invalid.
        """
        raise NotImplementedError

    def sizes(self) -> List[int]:
        """Returns the element count of every sub-queue, in index order."""
        return [self.size(i) for i in range(self._num_queues)]

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(num_queues={self._num_queues}, "
                f"sizes={self.sizes()})")

    # Validation helpers

    def _check_index(self, i: Any):
        """Raises PreconditionError unless `i` addresses a sub-queue."""
        if (isinstance(i, bool) or not isinstance(i, int)
                or not 0 <= i < self._num_queues):
            log.error(f"Invalid sub-queue index {i!r} "
                      f"(valid range: 0..{self._num_queues - 1}).")
            raise PreconditionError(
                f"Sub-queue index {i!r} out of range for "
                f"{self._num_queues} sub-queues.")

    def _check_not_empty(self, i: Optional[int] = None):
        """Raises PreconditionError if the selected queue is empty."""
        if i is not None:
            self._check_index(i)
        if self.empty(i):
            where = "MultiQueue" if i is None else f"Sub-queue {i}"
            log.error(f"{where} is empty; nothing to read or remove.")
            raise PreconditionError(f"{where} is empty.")

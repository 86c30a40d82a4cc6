# src/multi_queue/errors.py

"""
Exception types raised by the multi-queue package.

Only contract violations are raised. Running out of insertion sequence
numbers is reported through `EnqueueResult` instead.
"""


class MultiQueueError(Exception):
    """Base class for all errors raised by this package."""


class PreconditionError(MultiQueueError, ValueError):
    """
    A caller broke an operation's precondition.

    Raised for an out-of-range sub-queue index, or for `front`/`dequeue`
    on an empty structure or empty sub-queue. This signals a bug in the
    calling code and is not meant to be caught in normal operation.
    The structure is left unmodified.
    """

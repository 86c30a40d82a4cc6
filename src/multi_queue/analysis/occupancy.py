# src/multi_queue/analysis/occupancy.py

"""
Provides functions for analysing how elements spread across sub-queues.

This module turns the per-queue length logs of a `Measure` object into
NumPy arrays indexed by the operation clock, and derives:
1. The share of the total occupancy carried by each sub-queue.
2. The imbalance between the fullest and emptiest sub-queue over time.

This module requires 'numpy', which is an optional dependency for
the [analysis] feature set.
"""

import logging
from typing import Optional

# Optional Dependency Handling
try:
    import numpy as np
except ImportError:
    log = logging.getLogger(__name__)
    log.error("NumPy dependency not found.")
    log.error("Please install it with: pip install multi-queue[analysis]")
    raise

from ..measure import Measure

log = logging.getLogger(__name__)


def occupancy_matrix(measure: Measure) -> Optional[np.ndarray]:
    """
    Builds the per-queue length after every tick of the operation clock.

    Args:
        measure (Measure): The Measure object of a multi-queue.

    Returns:
        Optional[np.ndarray]: An integer array of shape
        (measure.clock + 1, measure.num_queues). Row 0 is the empty
        initial state. Returns None if the tracker has no sub-queues.
    """
    if measure.num_queues == 0:
        log.warning("Measure tracks no sub-queues. No occupancy matrix.")
        return None

    n_ticks = measure.clock + 1
    matrix = np.zeros((n_ticks, measure.num_queues), dtype=np.int64)

    for key, q_log in enumerate(measure.queue_length_logs):
        # Each logged length holds until the next entry
        for idx, (time, value) in enumerate(q_log):
            end = q_log[idx + 1][0] if idx + 1 < len(q_log) else n_ticks
            matrix[time:end, key] = value

    log.debug(f"Built occupancy matrix of shape {matrix.shape}")
    return matrix


def queue_share(measure: Measure) -> Optional[np.ndarray]:
    """
    Calculates each sub-queue's share of the total occupancy.

    The share is the sum of a sub-queue's length over all ticks divided
    by the same sum over every sub-queue.

    Returns:
        Optional[np.ndarray]: A float array of length num_queues summing
        to 1.0, or all zeros if nothing was ever stored. None if the
        tracker has no sub-queues.
    """
    matrix = occupancy_matrix(measure)
    if matrix is None:
        return None

    per_queue = matrix.sum(axis=0).astype(float)
    total = per_queue.sum()
    if total == 0:
        log.warning("No elements were ever stored. Returning zero shares.")
        return np.zeros(measure.num_queues)

    return per_queue / total


def imbalance(measure: Measure) -> Optional[np.ndarray]:
    """
    Calculates the spread between the fullest and the emptiest sub-queue.

    Returns:
        Optional[np.ndarray]: One value per clock tick (max length minus
        min length). None if the tracker has no sub-queues.
    """
    matrix = occupancy_matrix(measure)
    if matrix is None:
        return None

    return matrix.max(axis=1) - matrix.min(axis=1)

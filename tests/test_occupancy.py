# tests/test_occupancy.py

"""
Unit tests for the occupancy analysis helpers.

These tests need the '[analysis]' extra and are skipped without NumPy.
"""

import pytest

np = pytest.importorskip("numpy")

from multi_queue import MultiQueue
from multi_queue.analysis.occupancy import (
    occupancy_matrix,
    queue_share,
    imbalance
)


@pytest.fixture
def traced_queue() -> MultiQueue:
    """
    Returns a MultiQueue after: enqueue a->0, enqueue b->1,
    dequeue(), dequeue(1).
    """
    q = MultiQueue(num_queues=2, track=True)
    q.enqueue(0, "a")
    q.enqueue(1, "b")
    q.dequeue()
    q.dequeue(1)
    return q


def test_occupancy_matrix(traced_queue: MultiQueue):
    """Test the per-tick lengths of each sub-queue."""
    matrix = occupancy_matrix(traced_queue.kpi_tracker)

    assert matrix.shape == (5, 2)
    np.testing.assert_array_equal(matrix[:, 0], [0, 1, 1, 0, 0])
    np.testing.assert_array_equal(matrix[:, 1], [0, 0, 1, 1, 0])


def test_occupancy_rows_sum_to_total_length(traced_queue: MultiQueue):
    """Test that every row adds up to the logged total length."""
    measure = traced_queue.kpi_tracker
    matrix = occupancy_matrix(measure)

    for time, length in measure.length_log:
        assert matrix[time].sum() == length


def test_queue_share(traced_queue: MultiQueue):
    """Test that both sub-queues carried half of the occupancy."""
    share = queue_share(traced_queue.kpi_tracker)

    np.testing.assert_allclose(share, [0.5, 0.5])


def test_queue_share_no_data():
    """Test that an unused queue reports zero shares."""
    share = queue_share(MultiQueue(num_queues=3, track=True).kpi_tracker)

    np.testing.assert_array_equal(share, [0.0, 0.0, 0.0])


def test_imbalance(traced_queue: MultiQueue):
    """Test the spread between the fullest and emptiest sub-queue."""
    spread = imbalance(traced_queue.kpi_tracker)

    np.testing.assert_array_equal(spread, [0, 1, 0, 1, 0])

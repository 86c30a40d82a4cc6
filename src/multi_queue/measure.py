# src/multi_queue/measure.py

"""
Provides the Measure class, a data collection and statistical analysis
tool for the MultiQueue.

This module records every successful mutation of a multi-queue (enqueues,
global and direct dequeues, counter resets) and calculates a set of
Key Performance Indicators (KPIs) from that data.

There is no wall clock involved: time is an "operation clock" that
advances by one on each successful enqueue or dequeue. Residence times
and averages are therefore expressed in operations.

It is designed to be a passive component; it only records data
when its 'log_...' methods are called by the queue.
"""

import logging
import math
from typing import List, Tuple, Dict, Any

from .constants import DequeueSource

# Set up the module-level logger
log = logging.getLogger(__name__)


class Measure:
    """
    Collects, stores, and calculates KPIs for a multi-queue.

    Attributes:
        num_queues (int): The number of sub-queues being tracked.
        clock (int): The operation clock; the number of successful
                     mutations recorded so far.

        # Observation-based data
        residence_times (List[int]): For every removed element, the
            number of operations between its enqueue and its removal.

        # Operation-weighted data logs
        length_log (List[Tuple[int, int]]):
            A log of (clock, new_total_length) tuples.
        queue_length_logs (List[List[Tuple[int, int]]]):
            One (clock, new_length) log per sub-queue.

        # Simple counters
        total_enqueued (int), total_rejected (int),
        total_global_dequeues (int), total_direct_dequeues (int),
        counter_resets (int)
        enqueued_per_queue (List[int]), dequeued_per_queue (List[int])
    """

    def __init__(self, num_queues: int):
        """
        Initializes the KPI tracker.

        Args:
            num_queues (int): The number of sub-queues to track.
        """
        self.num_queues: int = num_queues
        self.clock: int = 0

        # Data Storage
        self.residence_times: List[int] = []

        # Anchor the logs with the empty initial state at clock 0
        self.length_log: List[Tuple[int, int]] = [(0, 0)]
        self.queue_length_logs: List[List[Tuple[int, int]]] = [
            [(0, 0)] for _ in range(num_queues)
        ]

        # Simple counters
        self.total_enqueued: int = 0
        self.total_rejected: int = 0
        self.total_global_dequeues: int = 0
        self.total_direct_dequeues: int = 0
        self.counter_resets: int = 0
        self.enqueued_per_queue: List[int] = [0] * num_queues
        self.dequeued_per_queue: List[int] = [0] * num_queues

        log.debug(f"Measure tracker initialized (NumQueues={num_queues})")

    def log_enqueue(self, key: int, total_length: int,
                    queue_length: int) -> int:
        """
        Logs a successful enqueue into sub-queue `key`.

        Returns:
            int: The clock value at insertion. The queue stores it with
                 the element so the residence time can be computed later.
        """
        self.clock += 1
        self.total_enqueued += 1
        self.enqueued_per_queue[key] += 1
        self._log_lengths(key, total_length, queue_length)
        log.debug(f"Op={self.clock}: Enqueue into {key} logged. "
                  f"Total length: {total_length}")
        return self.clock

    def log_rejection(self, key: int):
        """Logs an enqueue that was rejected. The clock does not advance."""
        self.total_rejected += 1
        log.debug(f"Op={self.clock}: Enqueue into {key} rejected. "
                  f"Total rejections: {self.total_rejected}")

    def log_dequeue(self, key: int, source: DequeueSource, enqueued_at: int,
                    total_length: int, queue_length: int):
        """Logs the removal of an element from sub-queue `key`."""
        self.clock += 1
        if source is DequeueSource.GLOBAL:
            self.total_global_dequeues += 1
        else:
            self.total_direct_dequeues += 1
        self.dequeued_per_queue[key] += 1
        self.residence_times.append(self.clock - enqueued_at)
        self._log_lengths(key, total_length, queue_length)
        log.debug(f"Op={self.clock}: {source.name} dequeue from {key} "
                  f"logged. Residence: {self.clock - enqueued_at}")

    def log_counter_reset(self):
        """Logs that the insertion counter went back to zero."""
        self.counter_resets += 1

    def _log_lengths(self, key: int, total_length: int, queue_length: int):
        """Internal helper to append to the total and per-queue logs."""
        self.length_log.append((self.clock, total_length))
        self.queue_length_logs[key].append((self.clock, queue_length))

    def _calculate_statistical_summary(
        self, data: List[float]
    ) -> Dict[str, Any]:
        """
        Calculates a statistical summary for a list of observations.

        Includes mean, std_dev, count, and a 95% confidence interval
        using the normal approximation (Z = 1.96).
        """
        n = len(data)
        if n == 0:
            return {
                "mean": 0.0, "std_dev": 0.0, "count": 0,
                "confidence_interval_95": (0.0, 0.0)
            }

        mean = sum(data) / n

        if n > 1:
            variance = sum((x - mean) ** 2 for x in data) / (n - 1)
            std_dev = math.sqrt(variance)
        else:
            std_dev = 0.0  # Cannot calculate variance with one sample

        margin_of_error = 1.96 * (std_dev / math.sqrt(n))

        return {
            "mean": mean,
            "std_dev": std_dev,
            "count": n,
            "confidence_interval_95": (mean - margin_of_error,
                                       mean + margin_of_error)
        }

    def _calculate_operation_weighted_average(
        self, log_data: List[Tuple[int, int]]
    ) -> float:
        """
        Calculates the average of a state variable over the clock.

        Each logged value holds until the next entry; the last one
        holds until the current clock.
        """
        if self.clock == 0:
            return 0.0

        integral = 0
        last_time, last_value = 0, 0
        for time, value in log_data:
            integral += last_value * (time - last_time)
            last_time, last_value = time, value
        integral += last_value * (self.clock - last_time)

        return integral / self.clock

    def get_final_kpis(self) -> Dict[str, Any]:
        """
        Calculates and returns the dictionary of all KPIs.

        Can be called at any point; it reports on the operations
        recorded so far.

        Returns:
            Dict[str, Any]: A nested dictionary containing all KPIs.
        """
        log.info(f"Calculating final KPIs over {self.clock} operations")

        if self.clock == 0:
            log.warning("No operations recorded. Averages will be zero.")

        queue_breakdown = {}
        for key in range(self.num_queues):
            q_log = self.queue_length_logs[key]
            queue_breakdown[key] = {
                "total_enqueued": self.enqueued_per_queue[key],
                "total_dequeued": self.dequeued_per_queue[key],
                "average_length":
                    self._calculate_operation_weighted_average(q_log),
                "max_length": max(val for _, val in q_log)
            }

        # Assemble Final Report
        return {
            "summary": {
                "num_queues": self.num_queues,
                "total_operations": self.clock
            },
            "throughput": {
                "total_enqueued": self.total_enqueued,
                "total_rejected": self.total_rejected,
                "total_global_dequeues": self.total_global_dequeues,
                "total_direct_dequeues": self.total_direct_dequeues,
                "counter_resets": self.counter_resets
            },
            "residence_time": self._calculate_statistical_summary(
                self.residence_times),
            "length": {
                "operation_weighted_average":
                    self._calculate_operation_weighted_average(
                        self.length_log),
                "max_observed": max(val for _, val in self.length_log)
            },
            "queue_breakdown": queue_breakdown
        }

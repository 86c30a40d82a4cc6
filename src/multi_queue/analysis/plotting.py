# src/multi_queue/analysis/plotting.py

"""
Provides optional plotting utilities for visualizing multi-queue data.

This module depends on 'matplotlib', 'seaborn', and 'numpy', which
are not part of the core package's dependencies. These are
intended to be installed via the '[analysis]' extra:

    pip install multi-queue[analysis]

All functions are designed to work with a 'Measure' object as
their primary data source.
"""

import logging
from typing import Optional

# Optional Dependency Handling
try:
    import matplotlib.pyplot as plt
    import matplotlib.axes
    import seaborn as sns
except ImportError:
    log = logging.getLogger(__name__)
    log.error("Analysis dependencies (matplotlib, seaborn, numpy) not found.")
    log.error("Please install them with: pip install multi-queue[analysis]")
    raise

from ..measure import Measure
from .occupancy import occupancy_matrix

log = logging.getLogger(__name__)

# Set a nice default style for the plots
sns.set_theme(style="whitegrid")


def plot_length_over_time(
    measure: Measure,
    ax: Optional[matplotlib.axes.Axes] = None
) -> matplotlib.axes.Axes:
    """
    Generates a step plot of the total number of elements over the
    operation clock.

    Args:
        measure (Measure): The Measure object containing data.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 6))

    if len(measure.length_log) < 2:
        log.warning("Not enough length data to plot. Plot will be empty.")
        ax.set_title("Length Over Time (No Data)")
        return ax

    # Extend the last value to the current clock without touching the log
    data = list(measure.length_log)
    if data[-1][0] < measure.clock:
        data.append((measure.clock, data[-1][1]))

    times, lengths = zip(*data)
    ax.step(times, lengths, where='post')

    avg_len = measure.get_final_kpis()['length']['operation_weighted_average']
    ax.axhline(
        avg_len,
        color='red',
        linestyle='--',
        label=f"Avg Length: {avg_len:.2f}"
    )

    ax.set_title("Total Length Over Time")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Elements Present")
    ax.set_ylim(bottom=0)
    ax.set_xlim(left=0)
    ax.legend()

    log.debug("Plotted length over time.")

    return ax


def plot_queue_occupancy(
    measure: Measure,
    ax: Optional[matplotlib.axes.Axes] = None
) -> matplotlib.axes.Axes:
    """
    Generates a stacked area plot with one band per sub-queue.

    The height of the stack at each operation is the total length;
    each band shows how much of it a single sub-queue holds.

    Args:
        measure (Measure): The Measure object containing data.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 6))

    matrix = occupancy_matrix(measure)
    if matrix is None or measure.clock == 0:
        log.warning("No occupancy data to plot. Plot will be empty.")
        ax.set_title("Sub-queue Occupancy (No Data)")
        return ax

    ticks = range(matrix.shape[0])
    ax.stackplot(
        ticks,
        matrix.T,
        step='post',
        labels=[f"Queue {key}" for key in range(measure.num_queues)]
    )

    ax.set_title("Sub-queue Occupancy Over Time")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Elements Present")
    ax.set_xlim(left=0, right=measure.clock)
    ax.set_ylim(bottom=0)
    ax.legend(loc='upper right')

    log.debug(f"Plotted occupancy for {measure.num_queues} sub-queues.")

    return ax


def plot_residence_histogram(
    measure: Measure,
    ax: Optional[matplotlib.axes.Axes] = None,
    bins: int = 30,
    kde: bool = False
) -> matplotlib.axes.Axes:
    """
    Generates a histogram of residence times (in operations).

    Args:
        measure (Measure): The Measure object containing data.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.
        bins (int): The number of bins for the histogram.
        kde (bool): Whether to overlay a Kernel Density Estimate plot.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))

    if not measure.residence_times:
        log.warning("No residence times recorded. Plotting an empty histogram.")
        ax.set_title("Residence Time Distribution (No Data)")
        return ax

    stats = measure.get_final_kpis()['residence_time']
    mean_residence = stats['mean']

    sns.histplot(
        measure.residence_times,
        bins=bins,
        kde=kde,
        ax=ax,
        label="Residence Time Distribution"
    )

    ax.axvline(
        mean_residence,
        color='red',
        linestyle='--',
        label=f"Mean Residence: {mean_residence:.2f}"
    )

    ax.set_title("Distribution of Residence Times")
    ax.set_xlabel("Residence Time (operations)")
    ax.set_ylabel("Frequency")
    ax.legend()

    log.debug(f"Plotted residence histogram (n={stats['count']})")

    return ax

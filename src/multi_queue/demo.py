# src/multi_queue/demo.py

"""
Console demonstration of the MultiQueue.

Routes every character of a string to one of two sub-queues ('c' to
queue 0, anything else to queue 1), then reads the structure back
through both views:
1. One element straight from queue 1.
2. Queue 0 until it is empty.
3. Whatever remains, in global insertion order.

Each removed element is reported as "[<size>] <value>", where size is
the size of the queue being read just before the removal.

Run it with:

    multi-queue-demo
"""

import logging
from typing import List

from .models import MultiQueue

log = logging.getLogger(__name__)

DEFAULT_DATA = "ccccddcdcdccdd"


def run_demo(data: str = DEFAULT_DATA) -> List[str]:
    """Replays the demonstration and returns the report lines."""
    queue = MultiQueue(num_queues=2)
    lines: List[str] = []

    for char in data:
        queue.enqueue(0 if char == 'c' else 1, char)

    if not queue.empty(1):
        lines.append(f"[{queue.size(1)}] {queue.front(1)}")
        queue.dequeue(1)

    while not queue.empty(0):
        lines.append(f"[{queue.size(0)}] {queue.front(0)}")
        queue.dequeue(0)

    while not queue.empty():
        lines.append(f"[{queue.size()}] {queue.front()}")
        queue.dequeue()

    log.debug(f"Demo finished with {len(lines)} lines.")
    return lines


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )
    for line in run_demo():
        print(line)


if __name__ == "__main__":
    main()

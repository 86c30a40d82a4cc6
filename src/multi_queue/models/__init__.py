# src/multi_queue/models/__init__.py

"""
Initializes the 'models' sub-package.

This file "lifts" the concrete multi-queue implementation to this
package level, e.g.:

from multi_queue.models import MultiQueue
"""

from .scan_model import MultiQueue

__all__ = [
    "MultiQueue"
]

# src/multi_queue/__init__.py

"""
Initializes the 'multi_queue' package.

This file sets up the package-level logger and "lifts" the
most important classes and enums to the top-level namespace.
This allows users to import core components directly, e.g.:

from multi_queue import MultiQueue, EnqueueResult, PreconditionError
"""

import logging

# Setup Package-Level Logger
# A NullHandler keeps the library silent unless the application
# configures logging itself.
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# Lift constants and errors
from .constants import DEFAULT_MAX_SEQUENCE, DequeueSource, EnqueueResult
from .errors import MultiQueueError, PreconditionError

# Lift the base class and KPI tracker
from .base_model import BaseMultiQueue
from .measure import Measure

# Lift the concrete implementation from the 'models' sub-package
from .models import MultiQueue


__all__ = [
    # Constants
    "DEFAULT_MAX_SEQUENCE",
    "DequeueSource",
    "EnqueueResult",

    # Errors
    "MultiQueueError",
    "PreconditionError",

    # Core Classes
    "BaseMultiQueue",
    "Measure",
    "MultiQueue"
]

# src/multi_queue/analysis/__init__.py

"""
Optional analysis helpers for `Measure` data.

The modules in this sub-package need the '[analysis]' extra:

    pip install multi-queue[analysis]

They are not imported by the top-level package.
"""

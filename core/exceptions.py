"""
FILE: core/exceptions.py
-------------------------
Errors raised by the profiling engine.
Malformed columns never raise; they degrade to default statistics.
The only fatal condition is a table with nothing in it.
"""


class ProfilingError(ValueError):
    """Base class for errors surfaced by the profiling engine."""


class EmptyDatasetError(ProfilingError):
    """The row table has zero rows, so there is no column set to profile."""

    def __init__(self, file_name: str | None = None):
        self.file_name = file_name
        label = f"'{file_name}'" if file_name else "dataset"
        super().__init__(f"Cannot profile {label}: no rows found.")

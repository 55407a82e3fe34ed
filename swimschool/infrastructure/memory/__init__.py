"""
In-memory store implementations.

Everything lives in dictionaries for the lifetime of the process.
"""

from .stores import (
    InMemoryBookingLedger,
    InMemoryCoachDirectory,
    InMemoryLearnerRoster,
    InMemoryTimetable,
    create_memory_context,
)

__all__ = [
    "InMemoryBookingLedger",
    "InMemoryCoachDirectory",
    "InMemoryLearnerRoster",
    "InMemoryTimetable",
    "create_memory_context",
]

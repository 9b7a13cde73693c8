"""
Habit tracking: models and the in-memory store backing the API.
"""

from lembrancas.habits.store import (
    CompletionExistsError,
    CompletionNotFoundError,
    HabitNotFoundError,
    HabitStore,
    HabitStoreError,
)

__all__ = [
    "CompletionExistsError",
    "CompletionNotFoundError",
    "HabitNotFoundError",
    "HabitStore",
    "HabitStoreError",
]

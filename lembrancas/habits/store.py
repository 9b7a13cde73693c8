"""
In-memory habit store.

Holds habits and their daily completions and computes streak statistics.
All public methods are guarded by a single lock so the store can be shared
by concurrent request handlers.
"""

import logging
import threading
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, Dict, List, Optional
from uuid import uuid4

from lembrancas.habits.models import (
    CreateHabitRequest,
    Habit,
    HabitCompletion,
    HabitStatistics,
    UpdateHabitRequest,
)


logger = logging.getLogger(__name__)


class HabitStoreError(Exception):
    """Base class for store lookup and conflict errors."""


class HabitNotFoundError(HabitStoreError):
    def __init__(self, habit_id: str):
        super().__init__(f"Habit {habit_id} not found")
        self.habit_id = habit_id


class CompletionExistsError(HabitStoreError):
    def __init__(self, habit_id: str, day: date):
        super().__init__(f"Habit {habit_id} already completed on {day.isoformat()}")
        self.habit_id = habit_id
        self.day = day


class CompletionNotFoundError(HabitStoreError):
    def __init__(self, habit_id: str, day: date):
        super().__init__(f"No completion for habit {habit_id} on {day.isoformat()}")
        self.habit_id = habit_id
        self.day = day


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def calculate_streaks(days: List[date], today: date) -> Dict[str, int]:
    """
    Calculate current and longest streaks of consecutive completed days.

    The current streak counts back from today, or from yesterday when today
    has not been completed yet.

    Args:
        days: Completed days (any order, no duplicates)
        today: Reference day for the current streak

    Returns:
        Dictionary with current_streak and longest_streak
    """
    if not days:
        return {"current_streak": 0, "longest_streak": 0}

    ordered = sorted(days)

    longest = run = 1
    for previous, current in zip(ordered, ordered[1:]):
        if current - previous == timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)

    completed = set(ordered)
    cursor = today if today in completed else today - timedelta(days=1)
    current_streak = 0
    while cursor in completed:
        current_streak += 1
        cursor -= timedelta(days=1)

    return {"current_streak": current_streak, "longest_streak": longest}


class HabitStore:
    """
    Thread-safe in-memory storage for habits and completions.

    Attributes:
        clock: Callable returning the current UTC datetime
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Initialize an empty store.

        Args:
            clock: Source of the current time; defaults to datetime.now(UTC)
        """
        self.clock = clock or _utc_now
        self._lock = threading.Lock()
        self._habits: Dict[str, Habit] = {}
        # habit_id -> completed day -> completion
        self._completions: Dict[str, Dict[date, HabitCompletion]] = {}

    # =========================================================================
    # Habits
    # =========================================================================

    def list_habits(self) -> List[Habit]:
        with self._lock:
            return sorted(self._habits.values(), key=lambda h: h.created_at)

    def get_habit(self, habit_id: str) -> Habit:
        with self._lock:
            return self._get_habit(habit_id)

    def create_habit(self, request: CreateHabitRequest) -> Habit:
        now = self.clock()
        habit = Habit(
            id=str(uuid4()),
            created_at=now,
            updated_at=now,
            **request.model_dump(),
        )
        with self._lock:
            self._habits[habit.id] = habit
            self._completions[habit.id] = {}
        logger.info(f"Created habit {habit.id} ({habit.name})")
        return habit

    def update_habit(self, habit_id: str, request: UpdateHabitRequest) -> Habit:
        """
        Apply the fields present in the request to an existing habit.

        Raises:
            HabitNotFoundError: If the habit does not exist
        """
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        with self._lock:
            habit = self._get_habit(habit_id)
            updated = habit.model_copy(update={**changes, "updated_at": self.clock()})
            self._habits[habit_id] = updated
        logger.info(f"Updated habit {habit_id}: {sorted(changes)}")
        return updated

    def delete_habit(self, habit_id: str) -> None:
        """
        Delete a habit together with its completions.

        Raises:
            HabitNotFoundError: If the habit does not exist
        """
        with self._lock:
            self._get_habit(habit_id)
            del self._habits[habit_id]
            self._completions.pop(habit_id, None)
        logger.info(f"Deleted habit {habit_id}")

    # =========================================================================
    # Completions
    # =========================================================================

    def complete_habit(
        self,
        habit_id: str,
        day: Optional[date] = None,
        notes: Optional[str] = None
    ) -> HabitCompletion:
        """
        Record a completion of a habit for one day.

        Args:
            habit_id: Habit to complete
            day: Completed day; defaults to today (UTC)
            notes: Optional free-form notes

        Returns:
            The new completion

        Raises:
            HabitNotFoundError: If the habit does not exist
            CompletionExistsError: If the habit is already completed that day
        """
        now = self.clock()
        day = day or now.date()
        with self._lock:
            self._get_habit(habit_id)
            completions = self._completions[habit_id]
            if day in completions:
                raise CompletionExistsError(habit_id, day)
            completion = HabitCompletion(
                id=str(uuid4()),
                habit_id=habit_id,
                completed_at=datetime.combine(day, time.min, tzinfo=timezone.utc),
                notes=notes,
                created_at=now,
            )
            completions[day] = completion
        logger.info(f"Habit {habit_id} completed on {day.isoformat()}")
        return completion

    def remove_completion(self, habit_id: str, day: date) -> None:
        """
        Remove the completion of a habit for one day.

        Raises:
            HabitNotFoundError: If the habit does not exist
            CompletionNotFoundError: If the habit was not completed that day
        """
        with self._lock:
            self._get_habit(habit_id)
            completions = self._completions[habit_id]
            if day not in completions:
                raise CompletionNotFoundError(habit_id, day)
            del completions[day]
        logger.info(f"Removed completion of habit {habit_id} on {day.isoformat()}")

    def list_completions(self, habit_id: str) -> List[HabitCompletion]:
        """Completions of a habit, newest day first."""
        with self._lock:
            self._get_habit(habit_id)
            completions = self._completions[habit_id]
            return [completions[day] for day in sorted(completions, reverse=True)]

    def get_statistics(self, habit_id: str) -> HabitStatistics:
        today = self.clock().date()
        with self._lock:
            self._get_habit(habit_id)
            days = sorted(self._completions[habit_id])

        streaks = calculate_streaks(days, today)
        return HabitStatistics(
            total_completions=len(days),
            completions=[day.isoformat() for day in days],
            **streaks,
        )

    def _get_habit(self, habit_id: str) -> Habit:
        """Lookup helper; caller must hold the lock."""
        try:
            return self._habits[habit_id]
        except KeyError:
            raise HabitNotFoundError(habit_id) from None

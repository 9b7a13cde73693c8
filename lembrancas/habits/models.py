"""
Data models for habits and their completions.

This module defines Pydantic models shared by the habit store and the
HTTP routes.
"""

import datetime as dt
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


HabitFrequency = Literal["daily", "weekly", "custom"]


# =============================================================================
# Habits
# =============================================================================

class Habit(BaseModel):
    """A habit tracked by the user."""

    id: str
    name: str
    description: Optional[str] = None
    frequency: HabitFrequency
    color: str
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CreateHabitRequest(BaseModel):
    """Payload for creating a habit."""

    name: str = Field(min_length=1)
    description: Optional[str] = None
    frequency: HabitFrequency
    color: str
    category: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class UpdateHabitRequest(BaseModel):
    """Partial update; only fields sent by the client are applied."""

    name: Optional[str] = None
    description: Optional[str] = None
    frequency: Optional[HabitFrequency] = None
    color: Optional[str] = None
    category: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


# =============================================================================
# Completions
# =============================================================================

class CompleteHabitRequest(BaseModel):
    """Mark a habit done; the date defaults to today (UTC)."""

    date: Optional[dt.date] = None
    notes: Optional[str] = None


class HabitCompletion(BaseModel):
    """A single day on which a habit was completed."""

    id: str
    habit_id: str
    completed_at: datetime  # midnight UTC of the completed day
    notes: Optional[str] = None
    created_at: datetime


class HabitStatistics(BaseModel):
    """Completion totals and streaks for one habit."""

    total_completions: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    completions: List[str] = Field(default_factory=list)  # YYYY-MM-DD, ascending

"""Habit API endpoints."""

import datetime as dt
from typing import List, Optional

from fastapi import APIRouter, Body, Response

from lembrancas.habits.models import (
    CompleteHabitRequest,
    CreateHabitRequest,
    Habit,
    HabitCompletion,
    HabitStatistics,
    UpdateHabitRequest,
)
from lembrancas.habits.store import HabitStore


def register_routes(app, store: HabitStore):
    """Register habit routes."""
    router = APIRouter(prefix="/api/habits", tags=["habits"])

    @router.get("", response_model=List[Habit])
    def list_habits():
        """List all habits, oldest first."""
        return store.list_habits()

    @router.post("", response_model=Habit, status_code=201)
    def create_habit(request: CreateHabitRequest):
        """Create a habit."""
        return store.create_habit(request)

    @router.get("/{habit_id}", response_model=Habit)
    def get_habit(habit_id: str):
        """Get a single habit."""
        return store.get_habit(habit_id)

    @router.put("/{habit_id}", response_model=Habit)
    def update_habit(habit_id: str, request: UpdateHabitRequest):
        """Update the fields sent in the body."""
        return store.update_habit(habit_id, request)

    @router.delete("/{habit_id}", status_code=204)
    def delete_habit(habit_id: str):
        """Delete a habit and its completions."""
        store.delete_habit(habit_id)
        return Response(status_code=204)

    @router.post("/{habit_id}/complete", response_model=HabitCompletion, status_code=201)
    def complete_habit(
        habit_id: str,
        request: Optional[CompleteHabitRequest] = Body(None)
    ):
        """Mark a habit as completed for a day (today by default)."""
        request = request or CompleteHabitRequest()
        return store.complete_habit(habit_id, day=request.date, notes=request.notes)

    @router.delete("/{habit_id}/complete/{date}", status_code=204)
    def remove_completion(habit_id: str, date: dt.date):
        """Undo the completion of a habit on the given day."""
        store.remove_completion(habit_id, date)
        return Response(status_code=204)

    @router.get("/{habit_id}/completions", response_model=List[HabitCompletion])
    def get_completions(habit_id: str):
        """List completions, newest first."""
        return store.list_completions(habit_id)

    @router.get("/{habit_id}/statistics", response_model=HabitStatistics)
    def get_statistics(habit_id: str):
        """Get completion totals and streaks."""
        return store.get_statistics(habit_id)

    app.include_router(router)

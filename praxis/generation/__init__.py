"""Workout generation: weekly day skeleton → concrete blocks."""

from praxis.generation.daily import generate_daily_workout

__all__ = ["generate_daily_workout"]

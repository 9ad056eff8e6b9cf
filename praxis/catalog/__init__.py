"""Static exercise catalog queried by the workout generator."""

from praxis.catalog.catalog import find_exercises, get_exercise, list_exercises
from praxis.catalog.exercise import ExerciseProfile

__all__ = ["ExerciseProfile", "find_exercises", "get_exercise", "list_exercises"]

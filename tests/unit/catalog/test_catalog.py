"""Tests for the exercise catalog and profiles."""

import pytest

from praxis.catalog import ExerciseProfile, find_exercises, get_exercise, list_exercises
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.preferences import ExperienceLevel


class TestExerciseProfile:
    def test_bodyweight_always_satisfied(self):
        profile = ExerciseProfile(exercise_id="plank", display_name="Plank", movement_pattern=MovementPattern.CORE)
        assert profile.equipment_satisfied([])
        assert profile.equipment_satisfied(None)

    def test_any_listed_item_is_enough(self):
        profile = get_exercise("goblet_squat")
        assert profile.equipment_satisfied(["kettlebell"])
        assert profile.equipment_satisfied(["dumbbells", "bench"])
        assert not profile.equipment_satisfied(["barbell"])

    def test_has_tag(self):
        profile = get_exercise("romanian_deadlift")
        assert profile.has_tag("strength")
        assert profile.has_tag("accessory")
        assert not profile.has_tag("conditioning")


class TestCatalogLookup:
    def test_get_exercise(self):
        assert get_exercise("back_squat").display_name == "Back Squat"

    def test_unknown_exercise(self):
        assert get_exercise("does_not_exist") is None

    def test_ids_unique(self):
        ids = [e.exercise_id for e in list_exercises()]
        assert len(ids) == len(set(ids))

    def test_every_main_pattern_has_a_strength_lift(self):
        for pattern in (MovementPattern.SQUAT, MovementPattern.HINGE, MovementPattern.HORIZONTAL_PUSH,
                        MovementPattern.VERTICAL_PUSH, MovementPattern.HORIZONTAL_PULL,
                        MovementPattern.VERTICAL_PULL):
            assert find_exercises(pattern=pattern, tag="strength"), pattern


class TestFindExercises:
    def test_by_pattern_and_tag_in_catalog_order(self):
        ids = [e.exercise_id for e in find_exercises(pattern=MovementPattern.SQUAT, tag="strength")]
        assert ids == ["back_squat", "front_squat", "goblet_squat"]

    def test_by_equipment(self):
        ids = [e.exercise_id for e in find_exercises(pattern=MovementPattern.HINGE, equipment_ids=["barbell"],
                                                     tag="strength")]
        assert ids == ["deadlift", "sumo_deadlift", "romanian_deadlift"]

    def test_empty_equipment_keeps_bodyweight_only(self):
        assert all(not e.equipment_ids for e in find_exercises(equipment_ids=[]))

    @pytest.mark.parametrize("difficulty", list(ExperienceLevel))
    def test_by_difficulty(self, difficulty):
        assert all(e.difficulty == difficulty for e in find_exercises(difficulty=difficulty))

    def test_no_filters_returns_everything(self):
        assert len(find_exercises()) == len(list_exercises())

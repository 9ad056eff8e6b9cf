"""Tests for accessory selection and the warm-up / cooldown blocks."""

from praxis.generation.accessory import generate_accessory_block, select_accessories
from praxis.generation.warmup import generate_cooldown_block, generate_warmup_block
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.preferences import ExperienceLevel

BARBELL = ["barbell", "plates", "bench"]


class TestSelectAccessories:
    def test_complements_main_pattern(self):
        chosen = select_accessories(MovementPattern.SQUAT, "back_squat", 0, BARBELL, ExperienceLevel.INTERMEDIATE)
        assert [e.exercise_id for e in chosen] == ["walking_lunge", "romanian_deadlift"]

    def test_rotates_with_day_index(self):
        chosen = select_accessories(MovementPattern.SQUAT, "back_squat", 1, BARBELL, ExperienceLevel.INTERMEDIATE)
        assert chosen[1].exercise_id == "hip_thrust"

    def test_respects_experience(self):
        chosen = select_accessories(MovementPattern.SQUAT, "back_squat", 0, BARBELL, ExperienceLevel.BEGINNER)
        assert [e.exercise_id for e in chosen] == ["walking_lunge", "hip_thrust"]

    def test_excludes_main_lift(self):
        chosen = select_accessories(MovementPattern.LUNGE, "romanian_deadlift", 0, BARBELL,
                                    ExperienceLevel.INTERMEDIATE)
        assert "romanian_deadlift" not in [e.exercise_id for e in chosen]

    def test_at_most_two(self):
        for pattern in MovementPattern:
            assert len(select_accessories(pattern, None, 0, BARBELL + ["dumbbells", "cable"],
                                          ExperienceLevel.ADVANCED)) <= 2

    def test_default_complements(self):
        chosen = select_accessories(None, None, 0, [], ExperienceLevel.INTERMEDIATE)
        assert [e.exercise_id for e in chosen] == ["plank"]


class TestGenerateAccessoryBlock:
    def test_volume_by_experience(self):
        block = generate_accessory_block(MovementPattern.SQUAT, "back_squat", 0, BARBELL, ExperienceLevel.BEGINNER)
        assert len(block.accessory) == 2
        assert all(len(a.sets) == 2 and a.sets[0].target_reps == 12 for a in block.accessory)

    def test_bodyweight_core_always_available(self):
        block = generate_accessory_block(MovementPattern.HORIZONTAL_PUSH, "bench_press", 0, [],
                                         ExperienceLevel.BEGINNER)
        assert [a.exercise_id for a in block.accessory] == ["plank"]
        assert block.title == "Accessory Work"


class TestWarmupCooldown:
    def test_warmup_targets_main_pattern(self):
        block = generate_warmup_block(MovementPattern.HINGE)
        assert block.type == "warmup"
        assert "Hip hinge drills and glute bridges" in block.items

    def test_engine_warmup(self):
        assert "Build-up efforts on today's machine" in generate_warmup_block(MovementPattern.ENGINE).items

    def test_cooldown_stretch(self):
        block = generate_cooldown_block(MovementPattern.HORIZONTAL_PUSH)
        assert block.type == "cooldown"
        assert "Light stretch: chest, shoulders, triceps" in block.items

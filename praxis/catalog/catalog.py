"""
Built-in exercise catalog.

Each entry is an :class:`~praxis.catalog.exercise.ExerciseProfile`.  The
catalog is read-only reference data for the workout generator: it is
queried by movement pattern, equipment, tag and difficulty, never mutated
at request time.

**Order matters.**  Exercise choice among tied candidates is
``candidates[day_index % len(candidates)]`` over catalog order, so moving
entries around changes which lift a given day gets.

To add a new exercise, call :func:`register_exercise` or append to
``_EXERCISES`` at import time.
"""

from __future__ import annotations

from praxis.catalog.exercise import ExerciseProfile
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.preferences import ExperienceLevel

# ======================================================================
# Catalog storage
# ======================================================================

EXERCISE_CATALOG: dict[str, ExerciseProfile] = {}


def register_exercise(profile: ExerciseProfile) -> None:
    """Register an exercise profile in the global catalog."""
    EXERCISE_CATALOG[profile.exercise_id] = profile


def get_exercise(exercise_id: str) -> ExerciseProfile | None:
    """Look up an exercise by its ID.  Returns ``None`` if not found."""
    return EXERCISE_CATALOG.get(exercise_id)


def list_exercises() -> list[ExerciseProfile]:
    """All exercises, in catalog order."""
    return list(EXERCISE_CATALOG.values())


def find_exercises(pattern: MovementPattern | str | None = None, equipment_ids: list[str] | None = None,
                   tag: str | None = None, difficulty: ExperienceLevel | str | None = None, ) -> list[ExerciseProfile]:
    """Query the catalog.  Every filter left as ``None`` is ignored.

    ``equipment_ids`` filters by equipment satisfaction (see
    :meth:`ExerciseProfile.equipment_satisfied`), so passing an empty list
    keeps bodyweight exercises only.
    """
    results = []
    for profile in EXERCISE_CATALOG.values():
        if pattern is not None and profile.movement_pattern != pattern:
            continue
        if tag is not None and not profile.has_tag(tag):
            continue
        if difficulty is not None and profile.difficulty != difficulty:
            continue
        if equipment_ids is not None and not profile.equipment_satisfied(equipment_ids):
            continue
        results.append(profile)
    return results


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
SQ = MovementPattern.SQUAT
HI = MovementPattern.HINGE
LU = MovementPattern.LUNGE
HPU = MovementPattern.HORIZONTAL_PUSH
VPU = MovementPattern.VERTICAL_PUSH
HPL = MovementPattern.HORIZONTAL_PULL
VPL = MovementPattern.VERTICAL_PULL
CA = MovementPattern.CARRY
CO = MovementPattern.CORE
BEG = ExperienceLevel.BEGINNER
INT = ExperienceLevel.INTERMEDIATE
ADV = ExperienceLevel.ADVANCED

BARBELL = ["barbell"]
DUMBBELL = ["dumbbells"]
KETTLEBELL = ["kettlebell"]


def _ex(exercise_id: str, name: str, pattern: MovementPattern, tags: list[str], difficulty: ExperienceLevel,
        equipment: list[str], ) -> ExerciseProfile:
    return ExerciseProfile(exercise_id=exercise_id, display_name=name, movement_pattern=pattern, tags=tags,
                           difficulty=difficulty, equipment_ids=list(equipment), )


# ======================================================================
# Built-in exercises
# ======================================================================

_EXERCISES: list[ExerciseProfile] = [
    # ── Squat ─────────────────────────────────────────────────────
    _ex("back_squat", "Back Squat", SQ, ["strength"], INT, BARBELL),
    _ex("front_squat", "Front Squat", SQ, ["strength"], ADV, BARBELL),
    _ex("goblet_squat", "Goblet Squat", SQ, ["strength", "accessory"], BEG, DUMBBELL + KETTLEBELL),
    _ex("bodyweight_squat", "Bodyweight Squat", SQ, ["accessory"], BEG, []),
    # ── Hinge ─────────────────────────────────────────────────────
    _ex("deadlift", "Deadlift", HI, ["strength"], INT, BARBELL),
    _ex("sumo_deadlift", "Sumo Deadlift", HI, ["strength"], ADV, BARBELL),
    _ex("romanian_deadlift", "Romanian Deadlift", HI, ["strength", "accessory"], INT, BARBELL + DUMBBELL),
    _ex("trap_bar_deadlift", "Trap Bar Deadlift", HI, ["strength"], BEG, ["trap_bar"]),
    _ex("kettlebell_swing", "Kettlebell Swing", HI, ["accessory", "conditioning"], BEG, KETTLEBELL),
    _ex("hip_thrust", "Hip Thrust", HI, ["accessory"], BEG, BARBELL + DUMBBELL),
    # ── Lunge ─────────────────────────────────────────────────────
    _ex("bulgarian_split_squat", "Bulgarian Split Squat", LU, ["strength", "accessory"], INT, DUMBBELL),
    _ex("walking_lunge", "Walking Lunge", LU, ["accessory"], BEG, []),
    _ex("step_up", "Step-Up", LU, ["accessory"], BEG, DUMBBELL + ["box"]),
    # ── Horizontal push ───────────────────────────────────────────
    _ex("bench_press", "Bench Press", HPU, ["strength"], INT, BARBELL),
    _ex("db_bench_press", "Dumbbell Bench Press", HPU, ["strength", "accessory"], BEG, DUMBBELL),
    _ex("close_grip_bench", "Close-Grip Bench Press", HPU, ["strength", "accessory"], ADV, BARBELL),
    _ex("push_up", "Push-Up", HPU, ["accessory"], BEG, []),
    # ── Vertical push ─────────────────────────────────────────────
    _ex("overhead_press", "Overhead Press", VPU, ["strength"], INT, BARBELL),
    _ex("db_shoulder_press", "Dumbbell Shoulder Press", VPU, ["strength", "accessory"], BEG, DUMBBELL),
    _ex("landmine_press", "Landmine Press", VPU, ["accessory"], INT, ["landmine"]),
    _ex("pike_push_up", "Pike Push-Up", VPU, ["accessory"], INT, []),
    # ── Horizontal pull ───────────────────────────────────────────
    _ex("barbell_row", "Barbell Row", HPL, ["strength"], INT, BARBELL),
    _ex("pendlay_row", "Pendlay Row", HPL, ["strength"], ADV, BARBELL),
    _ex("db_row", "One-Arm Dumbbell Row", HPL, ["strength", "accessory"], BEG, DUMBBELL),
    _ex("inverted_row", "Inverted Row", HPL, ["accessory"], BEG, ["rings", "pullup_bar"]),
    _ex("band_pull_apart", "Band Pull-Apart", HPL, ["accessory"], BEG, ["bands"]),
    # ── Vertical pull ─────────────────────────────────────────────
    _ex("weighted_pull_up", "Weighted Pull-Up", VPL, ["strength"], ADV, ["pullup_bar"]),
    _ex("pull_up", "Pull-Up", VPL, ["strength", "accessory"], INT, ["pullup_bar"]),
    _ex("lat_pulldown", "Lat Pulldown", VPL, ["accessory"], BEG, ["cable"]),
    # ── Carry / core ──────────────────────────────────────────────
    _ex("farmers_carry", "Farmer's Carry", CA, ["accessory", "conditioning"], BEG, DUMBBELL + KETTLEBELL),
    _ex("plank", "Plank", CO, ["accessory"], BEG, []),
    _ex("dead_bug", "Dead Bug", CO, ["accessory"], BEG, []),
    _ex("pallof_press", "Pallof Press", CO, ["accessory"], INT, ["cable", "bands"]),
]

for _profile in _EXERCISES:
    register_exercise(_profile)

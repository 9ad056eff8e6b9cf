"""
Canonical movement-pattern classifier.

History blocks are classified into one of the four *fatigue keys*
(squat / hinge / push / pull).  Blocks generated by this engine carry an
explicit ``movement_pattern`` tag, which always wins.  Keyword matching on
the block title (or an exercise id) is only the fallback for legacy or
hand-entered records, and it lives here only: every caller goes through
:func:`classify_block` / :func:`classify_text`.

Keyword order matters, "Romanian deadlift" must not be read as a press, and
"overhead press" must not be read as a pull:

    squat → (deadlift | rdl | hinge) → (bench | press) → (row | pull)
"""

from __future__ import annotations

from typing import Optional

from praxis.schemas.periodization import MovementPattern
from praxis.schemas.workout import CompletedBlock

FATIGUE_KEYS: tuple[str, ...] = ("squat", "hinge", "push", "pull")

_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [("squat", ("squat",)), ("hinge", ("deadlift", "rdl", "hinge")),
                                               ("push", ("bench", "press")), ("pull", ("row", "pull")), ]

_PATTERN_TO_KEY: dict[MovementPattern, Optional[str]] = {
    MovementPattern.SQUAT: "squat",
    MovementPattern.LUNGE: "squat",
    MovementPattern.HINGE: "hinge",
    MovementPattern.HORIZONTAL_PUSH: "push",
    MovementPattern.VERTICAL_PUSH: "push",
    MovementPattern.HORIZONTAL_PULL: "pull",
    MovementPattern.VERTICAL_PULL: "pull",
    MovementPattern.CARRY: None,
    MovementPattern.CORE: None,
    MovementPattern.ENGINE: None,
}


def fatigue_key_for_pattern(pattern: MovementPattern | str | None) -> Optional[str]:
    """Map a movement pattern (or a bare fatigue key) to its fatigue key."""
    if pattern is None:
        return None
    if isinstance(pattern, MovementPattern):
        return _PATTERN_TO_KEY[pattern]
    if pattern in FATIGUE_KEYS:
        return pattern
    try:
        return _PATTERN_TO_KEY[MovementPattern(pattern)]
    except ValueError:
        return None


def classify_text(text: str | None) -> Optional[str]:
    """Keyword inference on free text (block title or exercise id)."""
    if not text:
        return None
    lowered = text.lower()
    for key, words in _KEYWORDS:
        if any(word in lowered for word in words):
            return key
    return None


def classify_block(block: CompletedBlock) -> Optional[str]:
    """Fatigue key of a history block: explicit tag first, title keywords second."""
    if block.movement_pattern:
        key = fatigue_key_for_pattern(block.movement_pattern)
        if key is not None:
            return key
    return classify_text(block.title)

"""Warm-up and cooldown blocks."""

from __future__ import annotations

from typing import Optional

from praxis.periodization.patterns import fatigue_key_for_pattern
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.plan import CooldownBlock, WarmupBlock, new_id

_PATTERN_PREP: dict[Optional[str], str] = {
    "squat": "Bodyweight squats and hip openers",
    "hinge": "Hip hinge drills and glute bridges",
    "push": "Band pull-aparts and push-up ramp",
    "pull": "Scap pulls and band rows",
}

_STRETCH: dict[Optional[str], str] = {
    "squat": "Light stretch: quads, hamstrings, glutes",
    "hinge": "Light stretch: hamstrings, glutes, lower back",
    "push": "Light stretch: chest, shoulders, triceps",
    "pull": "Light stretch: lats, biceps, upper back",
}


def generate_warmup_block(pattern: Optional[MovementPattern]) -> WarmupBlock:
    if pattern == MovementPattern.ENGINE:
        prep = "Build-up efforts on today's machine"
    else:
        prep = _PATTERN_PREP.get(fatigue_key_for_pattern(pattern), "Prep for today's main movement")
    return WarmupBlock(id=new_id("warmup"), title="Warm-Up", items=["3 min easy cardio", "Dynamic mobility", prep],
                       estimated_duration_minutes=5, )


def generate_cooldown_block(pattern: Optional[MovementPattern]) -> CooldownBlock:
    stretch = _STRETCH.get(fatigue_key_for_pattern(pattern), "Light stretch: quads, hamstrings, glutes")
    return CooldownBlock(id=new_id("cooldown"), title="Cooldown", items=["3–5 minutes easy movement", stretch],
                         estimated_duration_minutes=5, )

"""
Pull Engine — how events push an NPC's feelings around.

A pull nudges the vector toward one base emotion. How far it actually
moves depends on three things:

1. Axis resistance: an axis near +/-1 barely moves, in either direction.
   Strong feelings have momentum and calming down from them takes effort.
2. Energy resistance: when the NPC is already feeling a lot overall, every
   pull is dampened. This keeps more than two strong emotions from
   coexisting.
3. Suppression: emotions that are not being pulled fade in proportion to
   how far they sit from the pulled emotion on the wheel. Suppression can
   take an emotion to zero but never past it into its opposite.

Multiple pulls in one call are simultaneous. Energy resistance is measured
once, before any of them land, so a two-pull call forms a dyad more easily
than the same two pulls applied one after the other.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import structlog

from lifesim.emotion.types import AXIS_KEYS, EmotionPull, EmotionVector, clamp_axis
from lifesim.emotion.wheel import (
    BASE_INTENSITY_VALUES,
    base_emotion_values,
    get_axis_for_emotion,
    get_emotion_distance,
)

logger = structlog.get_logger(__name__)

# Below this total energy, pulls are not dampened at all.
ENERGY_RESISTANCE_FLOOR = 0.8

# Scales distance x strength into a suppression percentage.
SUPPRESSION_SCALE = 1.8


def calculate_axis_resistance(current_value: float) -> float:
    """
    Multiplier in [0, 1] that shrinks as the axis approaches an extreme.

    At 0 there is no resistance (1.0), at 0.5 it is 0.75, at 0.8 it is
    0.36 and at 0.9 only 0.19 of the pull gets through.
    """
    return 1.0 - current_value * current_value


def calculate_energy_resistance(total_energy: float) -> float:
    """Multiplier in (0, 1] that dampens pulls when many emotions are active."""
    if total_energy < ENERGY_RESISTANCE_FLOOR:
        return 1.0
    return math.exp(-total_energy / 2.0)


def calculate_suppression_percentage(distance: int, pull_strength: float) -> float:
    """Fraction (0-1) of an emotion's value removed by a pull `distance` steps away."""
    return min(1.0, (distance / 5.0) * pull_strength * SUPPRESSION_SCALE)


def _vector_from_axes(axes: dict[str, float]) -> EmotionVector:
    return EmotionVector(**{attr: axes[attr] for attr in AXIS_KEYS})


def apply_emotion_pulls(
    vector: EmotionVector,
    pulls: Iterable[EmotionPull],
) -> EmotionVector:
    """
    Apply zero or more pulls to a vector and return the new vector.

    The input vector is left untouched. Pulls are treated as equals; none
    of them is primary.
    """
    pulls = list(pulls)
    if not pulls:
        return vector

    axes = {attr: vector.axis(attr) for attr in AXIS_KEYS}
    energy_resistance = calculate_energy_resistance(vector.total_energy())

    # Phase 1: move each pulled axis, against the running result
    for pull in pulls:
        axis, direction = get_axis_for_emotion(pull.emotion)
        current = axes[axis]
        delta = (
            BASE_INTENSITY_VALUES[pull.intensity]
            * direction
            * calculate_axis_resistance(current)
            * energy_resistance
        )
        axes[axis] = clamp_axis(current + delta)

    # Phase 2: suppress everything elevated that nobody pulled
    _suppress_unpulled(axes, pulls)

    result = _vector_from_axes(axes)
    logger.debug(
        "emotion.pulls_applied",
        pulls=[p.to_dict() for p in pulls],
        energy_resistance=round(energy_resistance, 4),
        before=vector.to_dict(),
        after=result.to_dict(),
    )
    return result


def _suppress_unpulled(axes: dict[str, float], pulls: Sequence[EmotionPull]) -> None:
    pulled = {p.emotion for p in pulls}

    # Each pull suppresses independently, so multi-pulls compound.
    for pull in pulls:
        strength = BASE_INTENSITY_VALUES[pull.intensity]
        for emotion, value in base_emotion_values(_vector_from_axes(axes)):
            if value <= 0.0 or emotion in pulled:
                continue

            distance = get_emotion_distance(pull.emotion, emotion)
            amount = value * calculate_suppression_percentage(distance, strength)

            axis, direction = get_axis_for_emotion(emotion)
            new_value = axes[axis] - amount * direction

            # Toward zero only: never create the opposite emotion.
            if direction > 0:
                axes[axis] = max(0.0, min(1.0, new_value))
            else:
                axes[axis] = min(0.0, max(-1.0, new_value))

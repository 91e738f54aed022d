"""
Decay Engine — feelings fade between interactions.

Each axis drifts toward neutral on its own. The rate depends on which
quartile the absolute value sits in, and halves for each quartile up:

    [0.75, 1.00]  0.0078125/h   32h to cross
    [0.50, 0.75]  0.015625/h    16h to cross
    [0.25, 0.50]  0.03125/h      8h to cross
    [0.00, 0.25]  0.0625/h       4h to cross

So a maximal emotion takes 60 hours to disappear entirely while a faint
one is gone in an afternoon. Negative values decay exactly like positive
ones and nothing ever overshoots zero.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

import structlog

from lifesim.emotion.types import EmotionVector

logger = structlog.get_logger(__name__)

# (band floor, rate per hour), strongest band first
DECAY_BANDS: tuple[tuple[float, float], ...] = (
    (0.75, 0.25 / 32),
    (0.50, 0.25 / 16),
    (0.25, 0.25 / 8),
    (0.00, 0.25 / 4),
)

# Anything weaker than this is treated as no feeling at all.
ZERO_EPSILON = 0.001


def decay_component(value: float, hours: float) -> float:
    """Decay a single axis value toward zero over `hours`."""
    if hours <= 0:
        return value
    if value == 0:
        return 0.0

    sign = 1.0 if value > 0 else -1.0
    magnitude = abs(value)
    remaining = hours

    for floor, rate in DECAY_BANDS:
        if remaining <= 0 or magnitude < ZERO_EPSILON:
            break
        if magnitude <= floor:
            continue

        time_to_floor = (magnitude - floor) / rate
        if time_to_floor <= remaining:
            magnitude = floor
            remaining -= time_to_floor
        else:
            magnitude -= rate * remaining
            remaining = 0.0

    if magnitude < ZERO_EPSILON:
        return 0.0
    return sign * magnitude


def apply_emotion_decay(vector: EmotionVector, hours_elapsed: float) -> EmotionVector:
    """Age every axis of `vector` by `hours_elapsed` hours."""
    if hours_elapsed <= 0:
        return vector

    result = EmotionVector(
        joy_sadness=decay_component(vector.joy_sadness, hours_elapsed),
        acceptance_disgust=decay_component(vector.acceptance_disgust, hours_elapsed),
        anger_fear=decay_component(vector.anger_fear, hours_elapsed),
        anticipation_surprise=decay_component(vector.anticipation_surprise, hours_elapsed),
    )
    logger.debug(
        "emotion.decay_applied",
        hours=hours_elapsed,
        energy_before=round(vector.total_energy(), 4),
        energy_after=round(result.total_energy(), 4),
    )
    return result


def hours_since(
    last_updated: Union[str, datetime],
    now: Optional[datetime] = None,
) -> float:
    """
    Fractional hours between `last_updated` and `now`.

    Accepts an ISO-8601 string (a trailing ``Z`` is understood) or a
    datetime. Naive datetimes are taken to be UTC.
    """
    if isinstance(last_updated, str):
        last_updated = datetime.fromisoformat(last_updated.replace("Z", "+00:00"))
    if last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return (now - last_updated).total_seconds() / 3600.0

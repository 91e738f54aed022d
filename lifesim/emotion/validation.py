"""
Input validation for callers that accept untyped emotion payloads.

The engines assume well-formed enums and never raise. Anything that comes
from outside (a sandbox command, a request body, a seed file) goes
through these helpers first.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from lifesim.emotion.types import (
    AXIS_KEYS,
    BaseEmotion,
    EmotionIntensity,
    EmotionPull,
    EmotionVector,
    NEUTRAL_EMOTION_VECTOR,
)

VALID_EMOTIONS = tuple(e.value for e in BaseEmotion)
VALID_INTENSITIES = tuple(i.value for i in EmotionIntensity)


class EmotionInputError(ValueError):
    """Raised when a caller-supplied emotion payload is malformed."""


class InvalidEmotionPullError(EmotionInputError):
    pass


class InvalidEmotionVectorError(EmotionInputError):
    pass


def parse_pull(raw: Any) -> EmotionPull:
    """Validate one ``{"emotion": ..., "intensity": ...}`` payload."""
    if isinstance(raw, EmotionPull):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidEmotionPullError(f"Pull must be an object, got {type(raw).__name__}")

    emotion = raw.get("emotion")
    if emotion not in VALID_EMOTIONS:
        raise InvalidEmotionPullError(
            f"Invalid emotion: {emotion}. Must be one of: {', '.join(VALID_EMOTIONS)}"
        )
    intensity = raw.get("intensity")
    if intensity not in VALID_INTENSITIES:
        raise InvalidEmotionPullError(
            f"Invalid intensity: {intensity}. Must be one of: {', '.join(VALID_INTENSITIES)}"
        )
    return EmotionPull(emotion=BaseEmotion(emotion), intensity=EmotionIntensity(intensity))


def parse_pulls(raw: Any, max_pulls: int = 2) -> list[EmotionPull]:
    """Validate a non-empty list of at most `max_pulls` pulls."""
    if not isinstance(raw, (list, tuple)) or not raw:
        raise InvalidEmotionPullError("pulls must be a list containing at least one pull")
    if len(raw) > max_pulls:
        raise InvalidEmotionPullError(f"Maximum {max_pulls} pulls allowed")
    return [parse_pull(item) for item in raw]


def parse_vector_payload(raw: Any) -> EmotionVector:
    """
    Validate an incoming vector mapping.

    ``None`` means neutral. Unknown keys are ignored; a present axis must
    be a finite number. Values outside [-1, 1] are clamped.
    """
    if raw is None:
        return NEUTRAL_EMOTION_VECTOR
    if isinstance(raw, EmotionVector):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidEmotionVectorError(f"Vector must be an object, got {type(raw).__name__}")

    for attr, key in AXIS_KEYS.items():
        for name in (key, attr):
            if name in raw and not _is_finite_number(raw[name]):
                raise InvalidEmotionVectorError(f"{name} must be a finite number, got {raw[name]!r}")
    return EmotionVector.from_dict(raw)


def _is_finite_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )

"""
Interpretation Engine — turning four numbers into a feeling with a name.

The strongest base emotion sets the intensity tier. Whether it is shown
alone, as a dyad, or as "mixed" depends on proximity: an emotion is in
proximity with the one above it when it reaches at least 75% of it.

    first only in range       -> single emotion (joy, fear, ...)
    first + second in range   -> dyad (love, awe, ...)
    first + second + third    -> mixed
    nothing above 0.20        -> neutral

The classifier returns a slim result. Descriptor text and colors are
looked up separately (see ``lifesim.emotion.descriptors``).
"""

from __future__ import annotations

from itertools import combinations
from types import MappingProxyType
from typing import Mapping, Optional

import structlog

from lifesim.emotion.types import (
    BaseEmotion,
    EmotionDyad,
    EmotionVector,
    InterpretationResult,
    InterpretedIntensity,
    SpecialEmotion,
)
from lifesim.emotion.wheel import base_emotion_values

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

HIGH_INTENSITY_THRESHOLD = 0.80
MEDIUM_INTENSITY_THRESHOLD = 0.50
LOW_INTENSITY_THRESHOLD = 0.20

# A follower must reach this fraction of its leader to count as "close".
# Leader 0.8 needs a second of 0.6 for a dyad; second 0.6 needs a third
# of 0.45 for mixed.
DYAD_PROXIMITY_RATIO = 0.75

# ---------------------------------------------------------------------------
# Dyads
# ---------------------------------------------------------------------------


def dyad_key(a: BaseEmotion, b: BaseEmotion) -> tuple[BaseEmotion, BaseEmotion]:
    """Order-independent key for a pair of emotions."""
    return (a, b) if a.value <= b.value else (b, a)


_J, _S = BaseEmotion.JOY, BaseEmotion.SADNESS
_AC, _DI = BaseEmotion.ACCEPTANCE, BaseEmotion.DISGUST
_AN, _FE = BaseEmotion.ANGER, BaseEmotion.FEAR
_AT, _SU = BaseEmotion.ANTICIPATION, BaseEmotion.SURPRISE

# The four opposite pairs share an axis and can never be elevated
# together, so they have no entry.
EMOTION_DYAD_MAP: Mapping[tuple[BaseEmotion, BaseEmotion], EmotionDyad] = MappingProxyType({
    dyad_key(a, b): dyad for a, b, dyad in (
        # Primary dyads (adjacent)
        (_J, _AC, EmotionDyad.LOVE),
        (_AC, _FE, EmotionDyad.SUBMISSION),
        (_FE, _SU, EmotionDyad.AWE),
        (_SU, _S, EmotionDyad.DISAPPOINTMENT),
        (_S, _DI, EmotionDyad.REMORSE),
        (_DI, _AN, EmotionDyad.CONTEMPT),
        (_AN, _AT, EmotionDyad.AGGRESSION),
        (_AT, _J, EmotionDyad.OPTIMISM),
        # Secondary dyads (2 steps)
        (_J, _FE, EmotionDyad.GUILT),
        (_AC, _SU, EmotionDyad.CURIOSITY),
        (_FE, _S, EmotionDyad.DESPAIR),
        (_SU, _DI, EmotionDyad.UNBELIEF),
        (_S, _AN, EmotionDyad.ENVY),
        (_DI, _AT, EmotionDyad.CYNICISM),
        (_AN, _J, EmotionDyad.PRIDE),
        (_AT, _AC, EmotionDyad.FATALISM),
        # Tertiary dyads (3 steps)
        (_J, _SU, EmotionDyad.DELIGHT),
        (_AC, _S, EmotionDyad.SENTIMENTALITY),
        (_FE, _DI, EmotionDyad.SHAME),
        (_SU, _AN, EmotionDyad.OUTRAGE),
        (_S, _AT, EmotionDyad.PESSIMISM),
        (_DI, _J, EmotionDyad.MORBIDNESS),
        (_AN, _AC, EmotionDyad.DOMINANCE),
        (_AT, _FE, EmotionDyad.ANXIETY),
    )
})

DYAD_EMOTIONS: Mapping[EmotionDyad, tuple[BaseEmotion, BaseEmotion]] = MappingProxyType(
    {dyad: pair for pair, dyad in EMOTION_DYAD_MAP.items()}
)


def get_dyad_name(a: BaseEmotion, b: BaseEmotion) -> Optional[EmotionDyad]:
    return EMOTION_DYAD_MAP.get(dyad_key(a, b))


def get_dyad_emotions(dyad: EmotionDyad) -> tuple[BaseEmotion, BaseEmotion]:
    return DYAD_EMOTIONS[dyad]


def unnamed_pairs() -> list[tuple[BaseEmotion, BaseEmotion]]:
    """Base-emotion pairs without a dyad name (the opposites)."""
    return [
        dyad_key(a, b)
        for a, b in combinations(BaseEmotion, 2)
        if get_dyad_name(a, b) is None
    ]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def intensity_tier(value: float) -> Optional[InterpretedIntensity]:
    """Map a magnitude to high/medium/low, or None below the low threshold."""
    if value >= HIGH_INTENSITY_THRESHOLD:
        return InterpretedIntensity.HIGH
    if value >= MEDIUM_INTENSITY_THRESHOLD:
        return InterpretedIntensity.MEDIUM
    if value >= LOW_INTENSITY_THRESHOLD:
        return InterpretedIntensity.LOW
    return None


def in_proximity(leader: float, follower: float) -> bool:
    return follower >= leader * DYAD_PROXIMITY_RATIO and follower >= LOW_INTENSITY_THRESHOLD


def interpret_emotion_vector(vector: EmotionVector) -> InterpretationResult:
    """Classify a vector as a single emotion, a dyad, mixed, or neutral."""
    ranked = sorted(base_emotion_values(vector), key=lambda item: item[1], reverse=True)
    (first, first_value), (second, second_value), (_, third_value) = ranked[:3]

    intensity = intensity_tier(first_value)
    if intensity is None:
        return InterpretationResult(emotion=SpecialEmotion.NEUTRAL)

    if in_proximity(first_value, second_value):
        if in_proximity(second_value, third_value):
            return InterpretationResult(emotion=SpecialEmotion.MIXED)

        dyad = get_dyad_name(first, second)
        if dyad is not None:
            return InterpretationResult(
                emotion=dyad,
                intensity=intensity_tier((first_value + second_value) / 2.0),
                contributing_emotions=[first, second],
            )
        logger.debug("emotion.dyad_lookup_miss", first=first.value, second=second.value)

    return InterpretationResult(
        emotion=first,
        intensity=intensity,
        contributing_emotions=[first],
    )

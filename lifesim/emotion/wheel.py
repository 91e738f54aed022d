"""
The Emotion Wheel — static tables shared by every engine.

Plutchik arranges the eight base emotions in a circle. Adjacent emotions
are one step apart and opposites sit four steps apart, sharing an axis of
the emotion vector. Nothing in this module changes after import.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from lifesim.emotion.types import BaseEmotion, EmotionIntensity, EmotionVector

# Clockwise order around the wheel (then back to joy).
EMOTION_WHEEL_ORDER: tuple[BaseEmotion, ...] = (
    BaseEmotion.JOY,
    BaseEmotion.ACCEPTANCE,
    BaseEmotion.FEAR,
    BaseEmotion.SURPRISE,
    BaseEmotion.SADNESS,
    BaseEmotion.DISGUST,
    BaseEmotion.ANGER,
    BaseEmotion.ANTICIPATION,
)

_WHEEL_INDEX = {emotion: i for i, emotion in enumerate(EMOTION_WHEEL_ORDER)}

# Pull strength before any resistance is applied.
BASE_INTENSITY_VALUES: Mapping[EmotionIntensity, float] = MappingProxyType({
    EmotionIntensity.TINY: 0.05,
    EmotionIntensity.SMALL: 0.15,
    EmotionIntensity.MEDIUM: 0.25,
    EmotionIntensity.LARGE: 0.40,
    EmotionIntensity.HUGE: 0.60,
})


class AxisDirection(NamedTuple):
    axis: str
    direction: int


EMOTION_AXES: Mapping[BaseEmotion, AxisDirection] = MappingProxyType({
    BaseEmotion.JOY: AxisDirection("joy_sadness", 1),
    BaseEmotion.SADNESS: AxisDirection("joy_sadness", -1),
    BaseEmotion.ACCEPTANCE: AxisDirection("acceptance_disgust", 1),
    BaseEmotion.DISGUST: AxisDirection("acceptance_disgust", -1),
    BaseEmotion.ANGER: AxisDirection("anger_fear", 1),
    BaseEmotion.FEAR: AxisDirection("anger_fear", -1),
    BaseEmotion.ANTICIPATION: AxisDirection("anticipation_surprise", 1),
    BaseEmotion.SURPRISE: AxisDirection("anticipation_surprise", -1),
})


def get_axis_for_emotion(emotion: BaseEmotion) -> AxisDirection:
    return EMOTION_AXES[emotion]


def get_emotion_distance(a: BaseEmotion, b: BaseEmotion) -> int:
    """Shortest number of steps around the wheel, from 0 (same) to 4 (opposite)."""
    size = len(EMOTION_WHEEL_ORDER)
    clockwise = (_WHEEL_INDEX[b] - _WHEEL_INDEX[a]) % size
    return min(clockwise, size - clockwise)


def get_opposite_emotion(emotion: BaseEmotion) -> BaseEmotion:
    index = (_WHEEL_INDEX[emotion] + 4) % len(EMOTION_WHEEL_ORDER)
    return EMOTION_WHEEL_ORDER[index]


def base_emotion_values(vector: EmotionVector) -> list[tuple[BaseEmotion, float]]:
    """
    Split the four signed axes into eight nonnegative magnitudes.

    The positive pole takes the axis value when it is above zero, the
    negative pole takes its absolute value when below. At most one
    emotion of each opposite pair is ever nonzero.
    """
    values: list[tuple[BaseEmotion, float]] = []
    for emotion, (axis, direction) in EMOTION_AXES.items():
        values.append((emotion, max(0.0, vector.axis(axis) * direction)))
    return values

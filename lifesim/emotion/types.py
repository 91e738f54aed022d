"""
Emotion Types — the vocabulary of NPC feelings.

Emotions are stored as four bipolar axes, one per pair of opposite base
emotions on Plutchik's wheel. A value of +1.0 on ``joy_sadness`` is pure
joy, -1.0 is pure sadness, and 0.0 means neither is felt.

The vector is the emotional state. Labels, dyads and descriptors are all
derived from these four numbers and never stored alongside them.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseEmotion(str, Enum):
    """The eight atomic emotions of Plutchik's wheel."""
    JOY = "joy"
    SADNESS = "sadness"
    ACCEPTANCE = "acceptance"
    DISGUST = "disgust"
    ANGER = "anger"
    FEAR = "fear"
    ANTICIPATION = "anticipation"
    SURPRISE = "surprise"


class EmotionIntensity(str, Enum):
    """T-shirt sizing for pull strength, smallest first."""
    TINY = "tiny"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


class InterpretedIntensity(str, Enum):
    """Plutchik's three intensity levels for a displayed emotion."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SpecialEmotion(str, Enum):
    """States that are not a single emotion or a dyad."""
    NEUTRAL = "neutral"
    MIXED = "mixed"


class EmotionDyad(str, Enum):
    """
    Named blends of two non-opposite base emotions.

    Grouped by how far apart the two components sit on the wheel.
    """
    # 1 step apart
    LOVE = "love"
    SUBMISSION = "submission"
    AWE = "awe"
    DISAPPOINTMENT = "disappointment"
    REMORSE = "remorse"
    CONTEMPT = "contempt"
    AGGRESSION = "aggression"
    OPTIMISM = "optimism"

    # 2 steps apart
    GUILT = "guilt"
    CURIOSITY = "curiosity"
    DESPAIR = "despair"
    UNBELIEF = "unbelief"
    ENVY = "envy"
    CYNICISM = "cynicism"
    PRIDE = "pride"
    FATALISM = "fatalism"

    # 3 steps apart
    DELIGHT = "delight"
    SENTIMENTALITY = "sentimentality"
    SHAME = "shame"
    OUTRAGE = "outrage"
    PESSIMISM = "pessimism"
    MORBIDNESS = "morbidness"
    DOMINANCE = "dominance"
    ANXIETY = "anxiety"


class OutcomeTier(str, Enum):
    """How an activity turned out, worst first."""
    CATASTROPHIC = "catastrophic"
    MIXED = "mixed"
    OKAY = "okay"
    BEST = "best"


InterpretedEmotion = Union[BaseEmotion, EmotionDyad, SpecialEmotion]

# Persisted (camelCase) key for each vector attribute.
AXIS_KEYS: dict[str, str] = {
    "joy_sadness": "joySadness",
    "acceptance_disgust": "acceptanceDisgust",
    "anger_fear": "angerFear",
    "anticipation_surprise": "anticipationSurprise",
}


def clamp_axis(value: float) -> float:
    """Clamp a value to the [-1, 1] axis range. NaN reads as no feeling."""
    if math.isnan(value):
        return 0.0
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class EmotionVector:
    """
    Four-dimensional emotional state. Each axis ranges from -1.0 to 1.0.

    Vectors are never modified in place. Every engine operation returns a
    new vector and the owner replaces its stored one wholesale.

    Axes are clamped on construction, so no vector can hold a value
    outside the range.
    """
    # -1 (sadness) to +1 (joy)
    joy_sadness: float = 0.0

    # -1 (disgust) to +1 (acceptance)
    acceptance_disgust: float = 0.0

    # -1 (fear) to +1 (anger)
    anger_fear: float = 0.0

    # -1 (surprise) to +1 (anticipation)
    anticipation_surprise: float = 0.0

    def __post_init__(self) -> None:
        for attr in AXIS_KEYS:
            object.__setattr__(self, attr, clamp_axis(float(getattr(self, attr))))

    def clamp(self) -> EmotionVector:
        """Ensure all axes stay within [-1, 1]."""
        return EmotionVector(
            joy_sadness=clamp_axis(self.joy_sadness),
            acceptance_disgust=clamp_axis(self.acceptance_disgust),
            anger_fear=clamp_axis(self.anger_fear),
            anticipation_surprise=clamp_axis(self.anticipation_surprise),
        )

    def axis(self, name: str) -> float:
        return getattr(self, name)

    def total_energy(self) -> float:
        """Sum of absolute axis values, a proxy for overall emotional load."""
        return (
            abs(self.joy_sadness)
            + abs(self.acceptance_disgust)
            + abs(self.anger_fear)
            + abs(self.anticipation_surprise)
        )

    def is_neutral(self) -> bool:
        return self.total_energy() == 0.0

    def to_dict(self) -> dict[str, float]:
        """Serialize with the persisted camelCase keys."""
        return {key: getattr(self, attr) for attr, key in AXIS_KEYS.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EmotionVector:
        """
        Build a vector from a persisted mapping.

        Accepts camelCase or snake_case keys. Missing, null and non-finite
        axes are neutral; out-of-range values are clamped.
        """
        values: dict[str, float] = {}
        for attr, key in AXIS_KEYS.items():
            raw = data.get(key, data.get(attr, 0.0))
            value = float(raw) if raw is not None else 0.0
            values[attr] = value if math.isfinite(value) else 0.0
        return cls(**values)


NEUTRAL_EMOTION_VECTOR = EmotionVector()


def parse_emotion_vector(
    raw: Union[str, Mapping[str, Any], EmotionVector, None],
) -> EmotionVector:
    """
    Read a vector back from storage.

    Rows may hold the vector as a JSON string, an already-decoded mapping,
    or nothing at all (NPCs created before emotions existed).
    """
    if raw is None:
        return NEUTRAL_EMOTION_VECTOR
    if isinstance(raw, EmotionVector):
        return raw
    if isinstance(raw, str):
        raw = json.loads(raw) if raw.strip() else {}
    return EmotionVector.from_dict(raw)


@dataclass(frozen=True)
class EmotionPull:
    """A request to nudge the vector toward one base emotion."""
    emotion: BaseEmotion
    intensity: EmotionIntensity

    def to_dict(self) -> dict[str, str]:
        return {"emotion": self.emotion.value, "intensity": self.intensity.value}


class EmotionProfile(BaseModel):
    """The emotions an activity evokes when it goes well or badly."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    success_emotion: BaseEmotion = Field(alias="successEmotion")
    failure_emotion: BaseEmotion = Field(alias="failureEmotion")


class InterpretationResult(BaseModel):
    """
    Slim interpretation of a vector.

    ``emotion`` doubles as the lookup key for descriptors. ``intensity`` is
    only set for single emotions and dyads.
    """

    model_config = ConfigDict(frozen=True)

    emotion: InterpretedEmotion
    intensity: Optional[InterpretedIntensity] = None
    contributing_emotions: Optional[list[BaseEmotion]] = None

    @property
    def is_special(self) -> bool:
        return isinstance(self.emotion, SpecialEmotion)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"emotion": self.emotion.value}
        if self.intensity is not None:
            data["intensity"] = self.intensity.value
        if self.contributing_emotions is not None:
            data["contributingEmotions"] = [e.value for e in self.contributing_emotions]
        return data


class DescribedInterpretation(InterpretationResult):
    """Interpretation enriched with display descriptors."""

    noun: Optional[str] = None
    adjective: Optional[str] = None
    color: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        for name in ("noun", "adjective", "color"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


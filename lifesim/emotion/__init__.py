"""Emotion system — Plutchik vectors, pulls, decay and interpretation."""
from lifesim.emotion.activity import generate_activity_emotion_pulls, has_emotion_profile
from lifesim.emotion.decay import apply_emotion_decay, decay_component, hours_since
from lifesim.emotion.descriptors import describe, descriptor_table, interpret_and_describe
from lifesim.emotion.interpretation import interpret_emotion_vector
from lifesim.emotion.pulls import apply_emotion_pulls
from lifesim.emotion.types import (
    NEUTRAL_EMOTION_VECTOR,
    BaseEmotion,
    DescribedInterpretation,
    EmotionDyad,
    EmotionIntensity,
    EmotionProfile,
    EmotionPull,
    EmotionVector,
    InterpretationResult,
    InterpretedIntensity,
    OutcomeTier,
    SpecialEmotion,
    parse_emotion_vector,
)

__all__ = [
    "apply_emotion_pulls",
    "apply_emotion_decay",
    "decay_component",
    "hours_since",
    "interpret_emotion_vector",
    "interpret_and_describe",
    "describe",
    "descriptor_table",
    "generate_activity_emotion_pulls",
    "has_emotion_profile",
    "NEUTRAL_EMOTION_VECTOR",
    "BaseEmotion",
    "DescribedInterpretation",
    "EmotionDyad",
    "EmotionIntensity",
    "EmotionProfile",
    "EmotionPull",
    "EmotionVector",
    "InterpretationResult",
    "InterpretedIntensity",
    "OutcomeTier",
    "SpecialEmotion",
    "parse_emotion_vector",
]

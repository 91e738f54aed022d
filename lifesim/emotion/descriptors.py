"""
Emotion descriptors — the words and colors used to show a feeling.

Every base emotion and dyad has a noun, an adjective and a color at each
interpreted intensity. Special states have words but no color.

The classifier never touches this module. ``describe`` enriches a slim
result after the fact, and ``descriptor_table`` exposes the whole lookup
for consumers that render slim results themselves.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional, Union

from lifesim.emotion.interpretation import interpret_emotion_vector
from lifesim.emotion.types import (
    BaseEmotion,
    DescribedInterpretation,
    EmotionDyad,
    EmotionVector,
    InterpretationResult,
    InterpretedIntensity,
    SpecialEmotion,
)


class Descriptor(NamedTuple):
    noun: str
    adjective: str
    color: Optional[str] = None


_LOW, _MEDIUM, _HIGH = InterpretedIntensity.LOW, InterpretedIntensity.MEDIUM, InterpretedIntensity.HIGH


def _tiers(low: Descriptor, medium: Descriptor, high: Descriptor) -> Mapping[InterpretedIntensity, Descriptor]:
    return MappingProxyType({_LOW: low, _MEDIUM: medium, _HIGH: high})


D = Descriptor

BASE_EMOTION_DESCRIPTORS: Mapping[BaseEmotion, Mapping[InterpretedIntensity, Descriptor]] = MappingProxyType({
    BaseEmotion.JOY: _tiers(
        D("cheeriness", "cheery", "#FFF4CC"),
        D("joy", "joyful", "#FFE66D"),
        D("ecstasy", "ecstatic", "#FFD700"),
    ),
    BaseEmotion.SADNESS: _tiers(
        D("gloom", "down", "#B8D8F5"),
        D("sorrow", "sad", "#6BB6FF"),
        D("grief", "heartbroken", "#4A9EE0"),
    ),
    BaseEmotion.ACCEPTANCE: _tiers(
        D("openness", "open", "#B8E8C5"),
        D("acceptance", "accepting", "#7FD68A"),
        D("admiration", "admiring", "#5CB86A"),
    ),
    BaseEmotion.DISGUST: _tiers(
        D("boredom", "bored", "#EDD6F5"),
        D("disgust", "disgusted", "#D9A5E8"),
        D("loathing", "loathing", "#C47FDB"),
    ),
    BaseEmotion.ANGER: _tiers(
        D("annoyance", "annoyed", "#FFCCCC"),
        D("anger", "angry", "#FF9999"),
        D("fury", "furious", "#FF6B6B"),
    ),
    BaseEmotion.FEAR: _tiers(
        D("nervosity", "nervous", "#C8EDD4"),
        D("fear", "afraid", "#8FD9A8"),
        D("terror", "terrified", "#66C287"),
    ),
    BaseEmotion.ANTICIPATION: _tiers(
        D("interest", "interested", "#FFD9B3"),
        D("focus", "focused", "#FFB86F"),
        D("vigilance", "vigilant", "#FF9F3D"),
    ),
    BaseEmotion.SURPRISE: _tiers(
        D("distraction", "distracted", "#D4EFFA"),
        D("surprise", "surprised", "#A0D8F1"),
        D("amazement", "amazed", "#6FC3E8"),
    ),
})

DYAD_DESCRIPTORS: Mapping[EmotionDyad, Mapping[InterpretedIntensity, Descriptor]] = MappingProxyType({
    # Primary dyads
    EmotionDyad.LOVE: _tiers(
        D("care", "caring", "#D4F4C4"),
        D("affection", "affectionate", "#B8E994"),
        D("adoration", "adoring", "#8FD964"),
    ),
    EmotionDyad.OPTIMISM: _tiers(
        D("hopefulness", "hopeful", "#FFE4A8"),
        D("optimism", "optimistic", "#FFD078"),
        D("exuberance", "exuberant", "#FFBC48"),
    ),
    EmotionDyad.SUBMISSION: _tiers(
        D("compliance", "compliant", "#B3DCC0"),
        D("submission", "submissive", "#87C9A0"),
        D("servility", "servile", "#5BB680"),
    ),
    EmotionDyad.AWE: _tiers(
        D("wonder", "wondering", "#C4E4DD"),
        D("awe", "awestruck", "#98D3C7"),
        D("reverence", "reverent", "#6CC2B1"),
    ),
    EmotionDyad.DISAPPOINTMENT: _tiers(
        D("letdown", "let down", "#B7D8E8"),
        D("disappointment", "disappointed", "#8BC4D8"),
        D("dismay", "dismayed", "#5FB0C8"),
    ),
    EmotionDyad.REMORSE: _tiers(
        D("regret", "regretful", "#C8BFD8"),
        D("remorse", "remorseful", "#A098C8"),
        D("penitence", "penitent", "#7871B8"),
    ),
    EmotionDyad.CONTEMPT: _tiers(
        D("disdain", "disdainful", "#F4C7DB"),
        D("contempt", "contemptuous", "#E89FC3"),
        D("scorn", "scornful", "#DC77AB"),
    ),
    EmotionDyad.AGGRESSION: _tiers(
        D("assertiveness", "assertive", "#FFD0B0"),
        D("aggression", "aggressive", "#FFB080"),
        D("hostility", "hostile", "#FF9050"),
    ),
    # Secondary dyads
    EmotionDyad.GUILT: _tiers(
        D("unease", "uneasy", "#D8E8B0"),
        D("guilt", "guilty", "#C1D888"),
        D("torment", "tormented", "#AAC860"),
    ),
    EmotionDyad.CURIOSITY: _tiers(
        D("intrigue", "intrigued", "#B9DED1"),
        D("curiosity", "curious", "#8DCDB9"),
        D("fascination", "fascinated", "#61BCA1"),
    ),
    EmotionDyad.DESPAIR: _tiers(
        D("discouragement", "discouraged", "#A8C4D9"),
        D("despair", "despairing", "#7AA8C9"),
        D("anguish", "anguished", "#4C8CB9"),
    ),
    EmotionDyad.UNBELIEF: _tiers(
        D("doubt", "doubtful", "#CCC9E1"),
        D("disbelief", "skeptical", "#B0AED1"),
        D("incredulity", "incredulous", "#9493C1"),
    ),
    EmotionDyad.ENVY: _tiers(
        D("bitterness", "bitter", "#D4BBD3"),
        D("envy", "envious", "#B89AC3"),
        D("spite", "spiteful", "#9C79B3"),
    ),
    EmotionDyad.CYNICISM: _tiers(
        D("wariness", "wary", "#E0C2D0"),
        D("cynicism", "cynical", "#D0A2B8"),
        D("misanthropy", "misanthropic", "#C082A0"),
    ),
    EmotionDyad.PRIDE: _tiers(
        D("smugness", "smug", "#FFD8AD"),
        D("pride", "proud", "#FFC285"),
        D("triumph", "triumphant", "#FFAC5D"),
    ),
    EmotionDyad.FATALISM: _tiers(
        D("resignation", "resigned", "#BED8AE"),
        D("fatalism", "fatalistic", "#9AC48C"),
        D("doom", "doomed", "#76B06A"),
    ),
    # Tertiary dyads
    EmotionDyad.DELIGHT: _tiers(
        D("pleasure", "pleased", "#FAE6AD"),
        D("delight", "delighted", "#F5D685"),
        D("elation", "elated", "#F0C65D"),
    ),
    EmotionDyad.SENTIMENTALITY: _tiers(
        D("wistfulness", "wistful", "#B9D0C6"),
        D("nostalgia", "nostalgic", "#93BBAE"),
        D("longing", "longing", "#6DA696"),
    ),
    EmotionDyad.SHAME: _tiers(
        D("embarrassment", "embarrassed", "#CBBFD2"),
        D("shame", "ashamed", "#AF9FBA"),
        D("humiliation", "humiliated", "#937FA2"),
    ),
    EmotionDyad.OUTRAGE: _tiers(
        D("indignation", "indignant", "#E4C3CB"),
        D("outrage", "outraged", "#D4A7B3"),
        D("fury", "furious", "#C48B9B"),
    ),
    EmotionDyad.PESSIMISM: _tiers(
        D("uncertainty", "uncertain", "#BBC8D0"),
        D("pessimism", "pessimistic", "#9BACB8"),
        D("hopelessness", "hopeless", "#7B90A0"),
    ),
    EmotionDyad.MORBIDNESS: _tiers(
        D("wryness", "wry", "#EED0D2"),
        D("morbidness", "morbid", "#E3B5B8"),
        D("macabreness", "macabre", "#D89A9E"),
    ),
    EmotionDyad.DOMINANCE: _tiers(
        D("authority", "authoritative", "#D0BBBF"),
        D("dominance", "dominant", "#BA9EA5"),
        D("tyranny", "tyrannical", "#A4818B"),
    ),
    EmotionDyad.ANXIETY: _tiers(
        D("uneasiness", "uneasy", "#C3D8C6"),
        D("anxiety", "anxious", "#A3C6A8"),
        D("dread", "dreadful", "#83B48A"),
    ),
})

SPECIAL_EMOTION_DESCRIPTORS: Mapping[SpecialEmotion, Descriptor] = MappingProxyType({
    SpecialEmotion.NEUTRAL: D("neutrality", "calm"),
    SpecialEmotion.MIXED: D("confusion", "overwhelmed"),
})

del D


def get_descriptor(
    emotion: Union[BaseEmotion, EmotionDyad, SpecialEmotion],
    intensity: Optional[InterpretedIntensity] = None,
) -> Descriptor:
    """
    Look up display words for an interpreted emotion.

    Intensity is ignored for special states and defaults to medium
    otherwise.
    """
    if isinstance(emotion, SpecialEmotion):
        return SPECIAL_EMOTION_DESCRIPTORS[emotion]
    tier = intensity or InterpretedIntensity.MEDIUM
    if isinstance(emotion, BaseEmotion):
        return BASE_EMOTION_DESCRIPTORS[emotion][tier]
    return DYAD_DESCRIPTORS[emotion][tier]


def describe(result: InterpretationResult) -> DescribedInterpretation:
    """Enrich a slim interpretation with noun, adjective and color."""
    descriptor = get_descriptor(result.emotion, result.intensity)
    return DescribedInterpretation(
        emotion=result.emotion,
        intensity=result.intensity,
        contributing_emotions=result.contributing_emotions,
        noun=descriptor.noun,
        adjective=descriptor.adjective,
        color=descriptor.color,
    )


def interpret_and_describe(vector: EmotionVector) -> DescribedInterpretation:
    """Full interpretation: classify, then attach descriptors."""
    return describe(interpret_emotion_vector(vector))


def descriptor_table() -> dict[str, Any]:
    """The whole descriptor lookup as plain, JSON-ready dicts."""

    def _tiered(table: Mapping[Any, Mapping[InterpretedIntensity, Descriptor]]) -> dict[str, Any]:
        return {
            emotion.value: {tier.value: d._asdict() for tier, d in tiers.items()}
            for emotion, tiers in table.items()
        }

    return {
        "emotions": _tiered(BASE_EMOTION_DESCRIPTORS),
        "dyads": _tiered(DYAD_DESCRIPTORS),
        "special": {
            emotion.value: {"noun": d.noun, "adjective": d.adjective}
            for emotion, d in SPECIAL_EMOTION_DESCRIPTORS.items()
        },
    }

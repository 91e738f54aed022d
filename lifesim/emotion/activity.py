"""
Activity Emotion Generator — what an outcome makes an NPC feel.

Each activity carries a profile naming the emotion it evokes on success
and on failure. The outcome tier picks the primary pull; a random
secondary pull adds texture.

    tier           primary                  secondary
    best           success @ medium         70%: random @ small
    okay           success @ small          50%: random @ small/medium
    mixed          any emotion @ small      50%: random @ small
    catastrophic   failure @ medium         70%: random @ small

The secondary never picks the wheel-opposite of the primary, which would
just cancel it out. It may pick the primary itself, giving a reinforced
pull roughly one size larger.

Randomness comes from an injected source so callers and tests control it.
"""

from __future__ import annotations

import random
from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, Sequence, TypeVar, Union

import structlog

from lifesim.emotion.types import (
    BaseEmotion,
    EmotionIntensity,
    EmotionProfile,
    EmotionPull,
    OutcomeTier,
)
from lifesim.emotion.wheel import EMOTION_WHEEL_ORDER, get_opposite_emotion

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1). ``random.Random`` qualifies."""

    def random(self) -> float: ...


SECONDARY_EMOTION_CHANCE: Mapping[OutcomeTier, float] = MappingProxyType({
    OutcomeTier.BEST: 0.7,
    OutcomeTier.OKAY: 0.5,
    OutcomeTier.MIXED: 0.5,
    OutcomeTier.CATASTROPHIC: 0.7,
})

PRIMARY_INTENSITY: Mapping[OutcomeTier, EmotionIntensity] = MappingProxyType({
    OutcomeTier.BEST: EmotionIntensity.MEDIUM,
    OutcomeTier.OKAY: EmotionIntensity.SMALL,
    OutcomeTier.MIXED: EmotionIntensity.SMALL,
    OutcomeTier.CATASTROPHIC: EmotionIntensity.MEDIUM,
})

# "okay" can overshadow its own primary ("yes, but...")
SECONDARY_INTENSITY_OPTIONS: Mapping[OutcomeTier, tuple[EmotionIntensity, ...]] = MappingProxyType({
    OutcomeTier.BEST: (EmotionIntensity.SMALL,),
    OutcomeTier.OKAY: (EmotionIntensity.SMALL, EmotionIntensity.MEDIUM),
    OutcomeTier.MIXED: (EmotionIntensity.SMALL,),
    OutcomeTier.CATASTROPHIC: (EmotionIntensity.SMALL,),
})

_default_rng = random.Random()
_BASE_EMOTION_IDS = frozenset(e.value for e in BaseEmotion)


def random_pick(rng: RandomSource, options: Sequence[T]) -> T:
    # Guard against sources that return exactly 1.0
    index = min(int(rng.random() * len(options)), len(options) - 1)
    return options[index]


def chance(rng: RandomSource, probability: float) -> bool:
    return rng.random() < probability


def valid_secondary_emotions(primary: BaseEmotion) -> list[BaseEmotion]:
    """Every base emotion except the primary's opposite."""
    opposite = get_opposite_emotion(primary)
    return [e for e in EMOTION_WHEEL_ORDER if e != opposite]


def generate_activity_emotion_pulls(
    profile: EmotionProfile,
    tier: Union[OutcomeTier, str],
    rng: Optional[RandomSource] = None,
) -> list[EmotionPull]:
    """Produce one or two pulls for an activity outcome."""
    if rng is None:
        rng = _default_rng
    tier = OutcomeTier(tier)

    if tier in (OutcomeTier.BEST, OutcomeTier.OKAY):
        primary = profile.success_emotion
    elif tier is OutcomeTier.CATASTROPHIC:
        primary = profile.failure_emotion
    else:
        # Mixed outcomes are wild and ignore the profile entirely.
        primary = random_pick(rng, EMOTION_WHEEL_ORDER)

    pulls = [EmotionPull(emotion=primary, intensity=PRIMARY_INTENSITY[tier])]

    if chance(rng, SECONDARY_EMOTION_CHANCE[tier]):
        secondary = random_pick(rng, valid_secondary_emotions(primary))
        intensity = random_pick(rng, SECONDARY_INTENSITY_OPTIONS[tier])
        pulls.append(EmotionPull(emotion=secondary, intensity=intensity))

    logger.debug(
        "emotion.activity_pulls_generated",
        tier=tier.value,
        pulls=[p.to_dict() for p in pulls],
    )
    return pulls


def has_emotion_profile(profile: Any) -> bool:
    """
    True when `profile` names valid success and failure emotions.

    Activities predating the emotion system have no profile, or a partial
    one from older seed data. Accepts mappings (camelCase or snake_case
    keys) as well as objects.
    """
    if profile is None:
        return False
    if isinstance(profile, EmotionProfile):
        return True

    if isinstance(profile, Mapping):
        success = profile.get("successEmotion", profile.get("success_emotion"))
        failure = profile.get("failureEmotion", profile.get("failure_emotion"))
    else:
        success = getattr(profile, "success_emotion", getattr(profile, "successEmotion", None))
        failure = getattr(profile, "failure_emotion", getattr(profile, "failureEmotion", None))

    return _is_base_emotion(success) and _is_base_emotion(failure)


def _is_base_emotion(value: Any) -> bool:
    if isinstance(value, BaseEmotion):
        return True
    return isinstance(value, str) and value in _BASE_EMOTION_IDS

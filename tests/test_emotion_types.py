"""Tests for the emotion data model, the wheel tables and input validation."""

from __future__ import annotations

import dataclasses
import json
import math

import pytest

from lifesim.emotion.types import (
    NEUTRAL_EMOTION_VECTOR,
    BaseEmotion,
    EmotionIntensity,
    EmotionPull,
    EmotionVector,
    clamp_axis,
    parse_emotion_vector,
)
from lifesim.emotion.validation import (
    EmotionInputError,
    InvalidEmotionPullError,
    InvalidEmotionVectorError,
    parse_pull,
    parse_pulls,
    parse_vector_payload,
)
from lifesim.emotion.wheel import (
    BASE_INTENSITY_VALUES,
    EMOTION_WHEEL_ORDER,
    base_emotion_values,
    get_axis_for_emotion,
    get_emotion_distance,
    get_opposite_emotion,
)

B = BaseEmotion


# ---------------------------------------------------------------------------
# EmotionVector
# ---------------------------------------------------------------------------

class TestEmotionVector:
    def test_defaults_to_neutral(self) -> None:
        v = EmotionVector()
        assert v.is_neutral()
        assert v == NEUTRAL_EMOTION_VECTOR

    def test_is_immutable(self) -> None:
        v = EmotionVector(joy_sadness=0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.joy_sadness = 0.9  # type: ignore[misc]

    def test_clamp(self) -> None:
        v = EmotionVector(1.5, -2.0, 0.3, -1.0).clamp()
        assert v == EmotionVector(1.0, -1.0, 0.3, -1.0)

    def test_clamp_axis(self) -> None:
        assert clamp_axis(3.0) == 1.0
        assert clamp_axis(-3.0) == -1.0
        assert clamp_axis(0.25) == 0.25
        assert clamp_axis(math.nan) == 0.0

    def test_construction_clamps_axes(self) -> None:
        v = EmotionVector(joy_sadness=1.5, anger_fear=-4.0, acceptance_disgust=math.nan)
        assert v == EmotionVector(joy_sadness=1.0, anger_fear=-1.0)
        assert v.acceptance_disgust == 0.0

    def test_total_energy_sums_magnitudes(self) -> None:
        assert EmotionVector(0.5, -0.25, 0.0, -0.25).total_energy() == pytest.approx(1.0)

    def test_to_dict_uses_camel_case(self) -> None:
        assert EmotionVector(0.1, -0.2, 0.3, -0.4).to_dict() == {
            "joySadness": 0.1,
            "acceptanceDisgust": -0.2,
            "angerFear": 0.3,
            "anticipationSurprise": -0.4,
        }

    def test_json_round_trip(self) -> None:
        v = EmotionVector(0.1, -0.2, 0.3, -0.4)
        assert parse_emotion_vector(v.to_json()) == v


class TestFromDict:
    def test_camel_case_keys(self) -> None:
        v = EmotionVector.from_dict({"joySadness": 0.5, "angerFear": -0.3})
        assert v == EmotionVector(joy_sadness=0.5, anger_fear=-0.3)

    def test_snake_case_keys(self) -> None:
        v = EmotionVector.from_dict({"acceptance_disgust": 0.4})
        assert v.acceptance_disgust == 0.4

    def test_missing_and_null_axes_are_zero(self) -> None:
        v = EmotionVector.from_dict({"joySadness": None})
        assert v.is_neutral()

    def test_out_of_range_clamped(self) -> None:
        v = EmotionVector.from_dict({"joySadness": 4, "anticipationSurprise": -9})
        assert v == EmotionVector(joy_sadness=1.0, anticipation_surprise=-1.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_axes_are_neutral(self, bad) -> None:
        v = EmotionVector.from_dict({"joySadness": bad, "angerFear": 0.4})
        assert v == EmotionVector(anger_fear=0.4)


class TestParseEmotionVector:
    def test_none_is_neutral(self) -> None:
        assert parse_emotion_vector(None) is NEUTRAL_EMOTION_VECTOR

    def test_empty_string_is_neutral(self) -> None:
        assert parse_emotion_vector("").is_neutral()

    def test_json_string(self) -> None:
        v = parse_emotion_vector(json.dumps({"joySadness": 0.6}))
        assert v.joy_sadness == 0.6

    def test_mapping(self) -> None:
        assert parse_emotion_vector({"angerFear": -0.2}).anger_fear == -0.2

    def test_vector_passes_through(self) -> None:
        v = EmotionVector(joy_sadness=0.2)
        assert parse_emotion_vector(v) is v

    def test_stored_nan_reads_as_neutral(self) -> None:
        v = parse_emotion_vector('{"joySadness": NaN, "anticipationSurprise": Infinity}')
        assert v.is_neutral()

    def test_malformed_json_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            parse_emotion_vector("{not json")


class TestEmotionPull:
    def test_to_dict(self) -> None:
        pull = EmotionPull(B.FEAR, EmotionIntensity.LARGE)
        assert pull.to_dict() == {"emotion": "fear", "intensity": "large"}


# ---------------------------------------------------------------------------
# Wheel
# ---------------------------------------------------------------------------

class TestWheel:
    def test_order(self) -> None:
        assert [e.value for e in EMOTION_WHEEL_ORDER] == [
            "joy", "acceptance", "fear", "surprise",
            "sadness", "disgust", "anger", "anticipation",
        ]

    @pytest.mark.parametrize("a,b,expected", [
        (B.JOY, B.JOY, 0),
        (B.JOY, B.ACCEPTANCE, 1),
        (B.JOY, B.ANTICIPATION, 1),
        (B.JOY, B.FEAR, 2),
        (B.JOY, B.SURPRISE, 3),
        (B.JOY, B.SADNESS, 4),
        (B.ANGER, B.ACCEPTANCE, 3),
    ])
    def test_distance(self, a, b, expected) -> None:
        assert get_emotion_distance(a, b) == expected
        assert get_emotion_distance(b, a) == expected

    @pytest.mark.parametrize("emotion", list(BaseEmotion))
    def test_opposite_shares_axis(self, emotion) -> None:
        opposite = get_opposite_emotion(emotion)
        assert get_emotion_distance(emotion, opposite) == 4
        assert get_opposite_emotion(opposite) == emotion
        assert get_axis_for_emotion(emotion).axis == get_axis_for_emotion(opposite).axis
        assert get_axis_for_emotion(emotion).direction == -get_axis_for_emotion(opposite).direction

    def test_intensity_values_increase(self) -> None:
        values = [BASE_INTENSITY_VALUES[i] for i in EmotionIntensity]
        assert values == [0.05, 0.15, 0.25, 0.40, 0.60]

    def test_base_emotion_values_split_axes(self) -> None:
        values = dict(base_emotion_values(EmotionVector(0.5, -0.3, 0.0, 0.2)))
        assert len(values) == 8
        assert values[B.JOY] == 0.5
        assert values[B.SADNESS] == 0.0
        assert values[B.DISGUST] == pytest.approx(0.3)
        assert values[B.ANTICIPATION] == 0.2
        assert values[B.ANGER] == 0.0 and values[B.FEAR] == 0.0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestParsePull:
    def test_valid(self) -> None:
        assert parse_pull({"emotion": "joy", "intensity": "huge"}) == EmotionPull(B.JOY, EmotionIntensity.HUGE)

    def test_unknown_emotion(self) -> None:
        with pytest.raises(InvalidEmotionPullError, match="Invalid emotion: trust"):
            parse_pull({"emotion": "trust", "intensity": "small"})

    def test_unknown_intensity_lists_options(self) -> None:
        with pytest.raises(InvalidEmotionPullError) as exc_info:
            parse_pull({"emotion": "joy", "intensity": "massive"})
        assert "tiny, small, medium, large, huge" in str(exc_info.value)

    def test_not_a_mapping(self) -> None:
        with pytest.raises(InvalidEmotionPullError):
            parse_pull("joy:medium")

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_pull({"emotion": None})


class TestParsePulls:
    def test_valid_list(self) -> None:
        pulls = parse_pulls([
            {"emotion": "joy", "intensity": "small"},
            {"emotion": "fear", "intensity": "tiny"},
        ])
        assert [p.emotion for p in pulls] == [B.JOY, B.FEAR]

    @pytest.mark.parametrize("raw", [[], None, "joy", {"emotion": "joy"}])
    def test_requires_non_empty_list(self, raw) -> None:
        with pytest.raises(InvalidEmotionPullError, match="at least one pull"):
            parse_pulls(raw)

    def test_limit(self) -> None:
        raw = [{"emotion": "joy", "intensity": "small"}] * 3
        with pytest.raises(InvalidEmotionPullError, match="Maximum 2 pulls allowed"):
            parse_pulls(raw)
        assert len(parse_pulls(raw, max_pulls=3)) == 3


class TestParseVectorPayload:
    def test_none_is_neutral(self) -> None:
        assert parse_vector_payload(None).is_neutral()

    def test_valid_mapping_clamped(self) -> None:
        v = parse_vector_payload({"joySadness": 2, "angerFear": -0.5})
        assert v == EmotionVector(joy_sadness=1.0, anger_fear=-0.5)

    def test_unknown_keys_ignored(self) -> None:
        assert parse_vector_payload({"mood": "sunny"}).is_neutral()

    @pytest.mark.parametrize("bad", ["0.5", True, math.nan, math.inf, [0.1]])
    def test_rejects_non_finite_or_non_numeric(self, bad) -> None:
        with pytest.raises(InvalidEmotionVectorError, match="joySadness"):
            parse_vector_payload({"joySadness": bad})

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(EmotionInputError):
            parse_vector_payload([0.1, 0.2, 0.3, 0.4])

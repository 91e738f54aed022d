"""Emotion sandbox commands — apply-pulls, decay, interpret, activity, reset, config."""

from __future__ import annotations

import json
import random
from typing import Any, Optional

import click

from lifesim.cli.formatters import (
    build_table,
    echo_json,
    get_console,
    interpretation_text,
    pulls_table,
    vector_table,
)
from lifesim.emotion.activity import generate_activity_emotion_pulls
from lifesim.emotion.decay import apply_emotion_decay
from lifesim.emotion.descriptors import descriptor_table, interpret_and_describe
from lifesim.emotion.interpretation import (
    DYAD_PROXIMITY_RATIO,
    HIGH_INTENSITY_THRESHOLD,
    LOW_INTENSITY_THRESHOLD,
    MEDIUM_INTENSITY_THRESHOLD,
)
from lifesim.emotion.pulls import apply_emotion_pulls
from lifesim.emotion.types import (
    NEUTRAL_EMOTION_VECTOR,
    BaseEmotion,
    EmotionProfile,
    EmotionVector,
    OutcomeTier,
)
from lifesim.emotion.validation import EmotionInputError, parse_pulls, parse_vector_payload
from lifesim.emotion.wheel import BASE_INTENSITY_VALUES, EMOTION_WHEEL_ORDER

_EMOTION_CHOICE = click.Choice([e.value for e in BaseEmotion])


def _load_vector(raw: Optional[str]) -> EmotionVector:
    if raw is None:
        return NEUTRAL_EMOTION_VECTOR
    try:
        return parse_vector_payload(json.loads(raw))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"--vector is not valid JSON: {e}")
    except EmotionInputError as e:
        raise click.ClickException(str(e))


def _split_pull(text: str) -> dict[str, str]:
    emotion, _, intensity = text.partition(":")
    return {"emotion": emotion.strip(), "intensity": intensity.strip() or "medium"}


def _report(
    ctx: click.Context,
    title: str,
    vectors: dict[str, EmotionVector],
    payload: dict[str, Any],
    pulls: Optional[list] = None,
) -> None:
    """Print either the JSON payload or Rich tables for a sandbox run."""
    described = interpret_and_describe(list(vectors.values())[-1])
    if ctx.obj.get("json"):
        payload["interpretation"] = described.to_dict()
        echo_json(payload)
        return

    console = get_console(ctx.obj.get("no_color", False))
    if pulls:
        console.print(pulls_table(pulls))
    console.print(vector_table(title, vectors))
    console.print(interpretation_text(described))


@click.group("emotion")
def emotion_group() -> None:
    """Experiment with the Plutchik emotion engine."""


@emotion_group.command("apply-pulls")
@click.option("--pull", "pull_specs", multiple=True, required=True,
              help="EMOTION:INTENSITY, e.g. joy:medium. Repeatable.")
@click.option("--vector", "vector_json", default=None, help="Starting vector as JSON.")
@click.pass_context
def apply_pulls_cmd(ctx: click.Context, pull_specs: tuple[str, ...], vector_json: Optional[str]) -> None:
    """Apply pulls to a vector and interpret the result."""
    config = ctx.obj["config"]
    vector = _load_vector(vector_json)
    try:
        pulls = parse_pulls([_split_pull(s) for s in pull_specs], max_pulls=config.sandbox.max_pulls)
    except EmotionInputError as e:
        raise click.ClickException(str(e))

    output = apply_emotion_pulls(vector, pulls)
    _report(
        ctx,
        "Apply pulls",
        {"input": vector, "output": output},
        {
            "input": vector.to_dict(),
            "output": output.to_dict(),
            "pulls": [p.to_dict() for p in pulls],
        },
        pulls=pulls,
    )


@emotion_group.command("decay")
@click.option("--vector", "vector_json", required=True, help="Vector as JSON.")
@click.option("--hours", type=float, required=True, help="Elapsed hours.")
@click.pass_context
def decay_cmd(ctx: click.Context, vector_json: str, hours: float) -> None:
    """Age a vector toward neutral."""
    vector = _load_vector(vector_json)
    output = apply_emotion_decay(vector, hours)
    _report(
        ctx,
        f"Decay over {hours:g}h",
        {"input": vector, "output": output},
        {"input": vector.to_dict(), "output": output.to_dict(), "hours": hours},
    )


@emotion_group.command("interpret")
@click.option("--vector", "vector_json", required=True, help="Vector as JSON.")
@click.pass_context
def interpret_cmd(ctx: click.Context, vector_json: str) -> None:
    """Classify a vector."""
    vector = _load_vector(vector_json)
    _report(ctx, "Vector", {"vector": vector}, {"vector": vector.to_dict()})


@emotion_group.command("activity")
@click.option("--success", "success_emotion", type=_EMOTION_CHOICE, required=True)
@click.option("--failure", "failure_emotion", type=_EMOTION_CHOICE, required=True)
@click.option("--tier", type=click.Choice([t.value for t in OutcomeTier]), required=True)
@click.option("--seed", type=int, default=None, help="Seed for reproducible rolls.")
@click.option("--vector", "vector_json", default=None, help="Starting vector as JSON.")
@click.pass_context
def activity_cmd(
    ctx: click.Context,
    success_emotion: str,
    failure_emotion: str,
    tier: str,
    seed: Optional[int],
    vector_json: Optional[str],
) -> None:
    """Roll the pulls an activity outcome produces and apply them."""
    config = ctx.obj["config"]
    if seed is None:
        seed = config.sandbox.random_seed
    rng = random.Random(seed)

    profile = EmotionProfile(success_emotion=success_emotion, failure_emotion=failure_emotion)
    vector = _load_vector(vector_json)
    pulls = generate_activity_emotion_pulls(profile, tier, rng=rng)
    output = apply_emotion_pulls(vector, pulls)
    _report(
        ctx,
        f"Activity ({tier})",
        {"input": vector, "output": output},
        {
            "tier": tier,
            "input": vector.to_dict(),
            "output": output.to_dict(),
            "pulls": [p.to_dict() for p in pulls],
        },
        pulls=pulls,
    )


@emotion_group.command("reset")
@click.pass_context
def reset_cmd(ctx: click.Context) -> None:
    """Print the neutral vector."""
    if ctx.obj.get("json"):
        echo_json({"vector": NEUTRAL_EMOTION_VECTOR.to_dict()})
        return
    get_console(ctx.obj.get("no_color", False)).print(
        vector_table("Neutral", {"vector": NEUTRAL_EMOTION_VECTOR})
    )


@emotion_group.command("config")
@click.option("--descriptors", is_flag=True, help="Include the descriptor table.")
@click.pass_context
def config_cmd(ctx: click.Context, descriptors: bool) -> None:
    """Show interpretation thresholds and pull magnitudes."""
    thresholds = {
        "high": HIGH_INTENSITY_THRESHOLD,
        "medium": MEDIUM_INTENSITY_THRESHOLD,
        "low": LOW_INTENSITY_THRESHOLD,
        "proximityRatio": DYAD_PROXIMITY_RATIO,
    }
    intensities = {i.value: v for i, v in BASE_INTENSITY_VALUES.items()}
    wheel = [e.value for e in EMOTION_WHEEL_ORDER]

    if ctx.obj.get("json"):
        payload: dict[str, Any] = {
            "thresholds": thresholds,
            "intensities": intensities,
            "wheel": wheel,
        }
        if descriptors:
            payload["descriptors"] = descriptor_table()
        echo_json(payload)
        return

    console = get_console(ctx.obj.get("no_color", False))
    console.print(build_table("Thresholds", ["name", "value"], [[k, v] for k, v in thresholds.items()]))
    console.print(build_table("Pull magnitudes", ["intensity", "value"], [[k, v] for k, v in intensities.items()]))
    console.print("Wheel: " + " > ".join(wheel))
    if descriptors:
        table = descriptor_table()
        rows = [
            [name, tier, d["noun"], d["adjective"], d["color"]]
            for section in ("emotions", "dyads")
            for name, tiers in table[section].items()
            for tier, d in tiers.items()
        ]
        console.print(build_table("Descriptors", ["emotion", "intensity", "noun", "adjective", "color"], rows))

"""CLI formatters — Rich tables for vectors, pulls and interpretations."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lifesim.emotion.types import AXIS_KEYS, DescribedInterpretation, EmotionPull, EmotionVector


def get_console(no_color: bool = False) -> Console:
    """Get a Rich Console, optionally with color disabled."""
    return Console(no_color=no_color, highlight=False)


def build_table(title: str, columns: list[str], rows: list[list[Any]]) -> Table:
    """Build a Rich table with standard styling."""
    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    return table


def vector_table(title: str, vectors: dict[str, EmotionVector]) -> Table:
    """One row per axis, one column per labelled vector."""
    rows = [
        [key] + [f"{vector.axis(attr):+.3f}" for vector in vectors.values()]
        for attr, key in AXIS_KEYS.items()
    ]
    rows.append(["energy"] + [f"{v.total_energy():.3f}" for v in vectors.values()])
    return build_table(title, ["axis", *vectors.keys()], rows)


def pulls_table(pulls: list[EmotionPull]) -> Table:
    return build_table("Pulls", ["emotion", "intensity"], [[p.emotion.value, p.intensity.value] for p in pulls])


def interpretation_text(result: DescribedInterpretation) -> Text:
    """A one-line summary such as ``love (medium) - affectionate``."""
    label = result.emotion.value
    if result.intensity is not None:
        label += f" ({result.intensity.value})"
    if result.adjective:
        label += f" - {result.adjective}"
    return Text(label, style=result.color or "bold")


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))

"""CLI application — Click-based command hierarchy for lifesim.

The main CLI group and global flags. Subcommand modules register
themselves by importing and adding to the group.
"""

from __future__ import annotations

import click

from lifesim.config import LifesimConfig
from lifesim.main import configure_logging


@click.group()
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, no_color: bool) -> None:
    """Lifesim - life-simulation backend tools."""
    config = LifesimConfig()
    configure_logging(config.logging.level, colors=config.logging.colors and not no_color)

    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    ctx.obj["no_color"] = no_color
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# Register subcommand modules
# ---------------------------------------------------------------------------

def _register_subcommands() -> None:
    """Import and register all subcommand groups/commands."""
    from lifesim.cli.emotion_cmd import emotion_group

    cli.add_command(emotion_group)


_register_subcommands()

"""CLI application — Click-based command hierarchy for Anima.

The core has no I/O of its own. These commands run the fixed demonstration
scenarios and one-off classifications so the dynamics can be inspected from a
terminal.
"""

from __future__ import annotations

import json

import click

from anima.affect.classifier import rank_emotions
from anima.affect.state import EmotionVector
from anima.cli.formatters import (
    build_table,
    format_bar,
    format_vector,
    get_console,
    valence_indicator,
)
from anima.main import configure_logging


@click.group()
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool, no_color: bool) -> None:
    """Anima - affective-cognitive core for simulated agents."""
    configure_logging(verbose=verbose)
    ctx.ensure_object(dict)
    ctx.obj["json"] = json_output
    ctx.obj["no_color"] = no_color


@cli.group("demo")
def demo_group() -> None:
    """Run a fixed demonstration scenario."""


@demo_group.command("emotions")
@click.pass_context
def demo_emotions_cmd(ctx: click.Context) -> None:
    """Praise, a threat, then regulated recovery."""
    from anima.demo import run_emotion_demo

    steps = run_emotion_demo()
    if ctx.obj["json"]:
        click.echo(json.dumps([
            {
                "label": step.label,
                "emotion": step.emotion.to_dict(),
                "dominant": step.dominant.to_dict(),
            }
            for step in steps
        ], indent=2))
        return

    rows = [
        [
            step.label,
            valence_indicator(step.emotion.valence),
            format_vector(step.emotion),
            step.dominant.emotion.value,
            f"{step.dominant.similarity:.2f}",
        ]
        for step in steps
    ]
    console = get_console(no_color=ctx.obj["no_color"])
    console.print(build_table(
        "Emotion trajectory",
        ["Step", "", "VAD", "Dominant", "Similarity"],
        rows,
    ))


@demo_group.command("decision")
@click.option("--pressure", type=click.FloatRange(0.0, 1.0), default=0.2, show_default=True,
              help="External pressure on the agent")
@click.option("--time", "time_available", type=click.FloatRange(min=0.0), default=10.0,
              show_default=True, help="Simulated seconds available to decide")
@click.pass_context
def demo_decision_cmd(ctx: click.Context, pressure: float, time_available: float) -> None:
    """Duty, rest or cheating, decided by a tense agent."""
    from anima.demo import run_decision_demo

    result, freedom = run_decision_demo(external_pressure=pressure, time_available=time_available)
    if ctx.obj["json"]:
        payload = result.to_dict()
        payload["freedom"] = freedom
        click.echo(json.dumps(payload, indent=2))
        return

    autonomy = result.autonomy
    rows = [
        ["Choice", result.choice.description if result.choice else "-"],
        ["Process", result.process.value],
        ["Preference", result.preference.value],
        ["Willpower used", f"{result.willpower_used:.2f}"],
        ["Authenticity", format_bar(autonomy.authenticity) if autonomy else "-"],
        ["Freedom", format_bar(freedom)],
    ]
    if result.deliberation is not None:
        rows.append(["Reasoning", result.deliberation.reasoning])
    console = get_console(no_color=ctx.obj["no_color"])
    console.print(build_table("Decision", ["Field", "Value"], rows))


@cli.command("classify")
@click.option("--valence", type=click.FloatRange(-1.0, 1.0), required=True)
@click.option("--arousal", type=click.FloatRange(0.0, 1.0), required=True)
@click.option("--dominance", type=click.FloatRange(-1.0, 1.0), required=True)
@click.option("--top", type=click.IntRange(min=1), default=3, show_default=True,
              help="How many archetypes to list")
@click.pass_context
def classify_cmd(ctx: click.Context, valence: float, arousal: float, dominance: float, top: int) -> None:
    """Name the archetypes nearest a VAD point."""
    ranked = rank_emotions(EmotionVector(valence, arousal, dominance), top_n=top)
    if ctx.obj["json"]:
        click.echo(json.dumps([r.to_dict() for r in ranked], indent=2))
        return

    rows = [[r.emotion.value, f"{r.similarity:.3f}", format_bar(r.similarity)] for r in ranked]
    console = get_console(no_color=ctx.obj["no_color"])
    console.print(build_table("Nearest emotions", ["Emotion", "Similarity", ""], rows))

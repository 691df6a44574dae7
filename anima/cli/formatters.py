"""CLI formatters — console, emotion bars, table formatting."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from anima.affect.state import EmotionVector


def get_console(no_color: bool = False) -> Console:
    """Get a Rich Console, optionally with color disabled."""
    return Console(no_color=no_color)


def valence_indicator(valence: float) -> Text:
    """Map valence to a colored marker."""
    if valence > 0.3:
        return Text("+ ", style="green")
    if valence < -0.3:
        return Text("- ", style="red")
    return Text("~ ", style="dim")


def format_vector(vector: EmotionVector) -> str:
    return f"v={vector.valence:+.2f} a={vector.arousal:.2f} d={vector.dominance:+.2f}"


def format_bar(value: float, width: int = 10) -> str:
    """Render a 0..1 value as a fixed-width bar."""
    filled = round(max(0.0, min(1.0, value)) * width)
    return "#" * filled + "." * (width - filled)


def build_table(title: str, columns: list[str], rows: list[list[Any]]) -> Table:
    """Build a Rich table with standard styling."""
    table = Table(title=title, show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*(v if isinstance(v, Text) else str(v) for v in row))
    return table

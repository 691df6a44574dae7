"""
Core data types shared across Anima subsystems.

This module defines the lightweight containers that cross the core's boundary:
candidate actions handed in by an external planner and soul aspects handed in
by an external composition subsystem. They live here rather than in a specific
subsystem to avoid circular imports between the aspect modulator and the
decision engine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DecisionOption:
    """A candidate action offered to the decision engine.

    Options are immutable; biasing produces copies with an adjusted
    ``expected_utility``.
    """

    id: str
    description: str = ""
    expected_utility: float = 0.0
    risk: float = 0.0              # 0.0-1.0, uncertainty/variance
    effort_required: float = 0.0   # 0.0-1.0
    moral_alignment: float = 0.0   # -1.0 (immoral) to 1.0 (moral)
    tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("expected_utility", "risk", "effort_required", "moral_alignment"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"DecisionOption.{name} must be a finite number, got {value!r}")
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "expected_utility": self.expected_utility,
            "risk": self.risk,
            "effort_required": self.effort_required,
            "moral_alignment": self.moral_alignment,
            "tags": sorted(self.tags),
        }


@dataclass(frozen=True)
class SoulAspect:
    """A named personality-weighting input with a strength in 0..1.

    Names come from the soul-composition subsystem verbatim, e.g.
    ``"Zheng Zhong (正中)"``; the aspect modulator resolves them.
    """

    name: str
    strength: float = 0.5

    def __post_init__(self) -> None:
        if not math.isfinite(self.strength):
            raise ValueError(f"SoulAspect.strength must be a finite number, got {self.strength!r}")

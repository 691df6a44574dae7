"""
Affective State — the agent's emotional representation.

This module defines the data structures that represent an agent's emotional
state at any given moment. Emotions here are not decorative. They are numeric
signals that feed straight into the decision engine: a good mood inflates how
attractive an option looks, high arousal makes the intuitive system
overconfident.

The representation is the Valence-Arousal-Dominance (VAD) model. Every named
emotion is a region of this three-dimensional space; the state itself is
always the continuous coordinates plus the dynamics that move them.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


def _require_finite(owner: str, **values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{owner}.{name} must be a finite number, got {value!r}")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class EmotionVector:
    """
    A point (or a displacement) in VAD space.

    As a state the ranges are valence -1..1, arousal 0..1, dominance -1..1.
    Momentum uses the same type as an unbounded displacement and is never
    clamped.
    """
    # How pleasant or unpleasant the experience feels (-1.0 to 1.0)
    valence: float = 0.0

    # How activated or calm (0.0 to 1.0)
    # Note: arousal is 0-1, not -1 to 1, because "negative arousal" is just low arousal
    arousal: float = 0.0

    # How much in control the agent feels (-1.0 to 1.0)
    dominance: float = 0.0

    def __post_init__(self) -> None:
        _require_finite(
            "EmotionVector",
            valence=self.valence,
            arousal=self.arousal,
            dominance=self.dominance,
        )

    def clamp(self) -> EmotionVector:
        """Ensure all dimensions stay within valid ranges."""
        return EmotionVector(
            valence=_clamp(self.valence, -1.0, 1.0),
            arousal=_clamp(self.arousal, 0.0, 1.0),
            dominance=_clamp(self.dominance, -1.0, 1.0),
        )

    def scaled(self, factor: float) -> EmotionVector:
        return EmotionVector(
            valence=self.valence * factor,
            arousal=self.arousal * factor,
            dominance=self.dominance * factor,
        )

    def distance_squared(self, other: EmotionVector) -> float:
        """Squared Euclidean distance; the classifier ranks on this directly."""
        return (
            (self.valence - other.valence) ** 2
            + (self.arousal - other.arousal) ** 2
            + (self.dominance - other.dominance) ** 2
        )

    def copy(self) -> EmotionVector:
        return EmotionVector(self.valence, self.arousal, self.dominance)

    def to_dict(self) -> dict[str, float]:
        return {
            "valence": self.valence,
            "arousal": self.arousal,
            "dominance": self.dominance,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmotionVector:
        return cls(
            valence=float(data.get("valence", 0.0)),
            arousal=float(data.get("arousal", 0.0)),
            dominance=float(data.get("dominance", 0.0)),
        )


class AgentResponsibility(str, Enum):
    """Who the agent holds responsible for the event."""
    SELF = "self"
    OTHER = "other"
    CIRCUMSTANCES = "circumstances"


@dataclass(frozen=True)
class EmotionAppraisal:
    """
    How an event was interpreted.

    Appraisal theory: the same event produces different emotions depending on
    whether it helps or hinders goals, how surprising it is, and whether the
    agent can do anything about it.
    """
    goal_relevance: float          # -1 (hinders goal) to +1 (helps goal)
    novelty: float = 0.0           # 0 (familiar) to 1 (novel)
    controllability: float = 0.5   # 0 (uncontrollable) to 1 (controllable)
    agent_responsibility: AgentResponsibility = AgentResponsibility.CIRCUMSTANCES

    def __post_init__(self) -> None:
        _require_finite(
            "EmotionAppraisal",
            goal_relevance=self.goal_relevance,
            novelty=self.novelty,
            controllability=self.controllability,
        )
        # Accept plain strings from external event sources
        if not isinstance(self.agent_responsibility, AgentResponsibility):
            object.__setattr__(
                self, "agent_responsibility", AgentResponsibility(self.agent_responsibility)
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "goal_relevance": self.goal_relevance,
            "novelty": self.novelty,
            "controllability": self.controllability,
            "agent_responsibility": self.agent_responsibility.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmotionAppraisal:
        return cls(
            goal_relevance=float(data["goal_relevance"]),
            novelty=float(data.get("novelty", 0.0)),
            controllability=float(data.get("controllability", 0.5)),
            agent_responsibility=data.get(
                "agent_responsibility", AgentResponsibility.CIRCUMSTANCES.value
            ),
        )


@dataclass(frozen=True)
class EmotionTrigger:
    """Something that happened, how it was read, and how hard it hit."""
    event: str
    appraisal: EmotionAppraisal
    intensity: float = 1.0  # 0.0-1.0

    def __post_init__(self) -> None:
        _require_finite("EmotionTrigger", intensity=self.intensity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "event": self.event,
            "appraisal": self.appraisal.to_dict(),
            "intensity": self.intensity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmotionTrigger:
        return cls(
            event=str(data.get("event", "")),
            appraisal=EmotionAppraisal.from_dict(data["appraisal"]),
            intensity=float(data.get("intensity", 1.0)),
        )


class RegulationStrategy(str, Enum):
    """Emotion regulation strategies the agent can engage."""
    SUPPRESSION = "suppression"    # dampen arousal, the feeling stays
    REAPPRAISAL = "reappraisal"    # reinterpret, valence drifts toward neutral
    DISTRACTION = "distraction"    # look away, faster return to baseline


@dataclass
class RegulationState:
    """Which regulation strategies are engaged and how well they work."""
    suppression_active: bool = False
    reappraisal_active: bool = False
    distraction_active: bool = False
    effectiveness_modifier: float = 1.0

    def is_active(self, strategy: RegulationStrategy) -> bool:
        return getattr(self, f"{strategy.value}_active")

    def set_active(self, strategy: RegulationStrategy, active: bool) -> None:
        setattr(self, f"{strategy.value}_active", active)

    @property
    def any_active(self) -> bool:
        return self.suppression_active or self.reappraisal_active or self.distraction_active

    def to_dict(self) -> dict[str, Any]:
        return {
            "suppression_active": self.suppression_active,
            "reappraisal_active": self.reappraisal_active,
            "distraction_active": self.distraction_active,
            "effectiveness_modifier": self.effectiveness_modifier,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RegulationState:
        return cls(
            suppression_active=bool(data.get("suppression_active", False)),
            reappraisal_active=bool(data.get("reappraisal_active", False)),
            distraction_active=bool(data.get("distraction_active", False)),
            effectiveness_modifier=_clamp(float(data.get("effectiveness_modifier", 1.0)), 0.0, 1.0),
        )


DEFAULT_TRIGGER_HISTORY = 10


def _baseline_attractor() -> EmotionVector:
    return EmotionVector(
        valence=0.2,     # Slightly positive default disposition
        arousal=0.3,     # Calm but not torpid
        dominance=0.1,   # Slight sense of capability
    )


@dataclass
class EmotionDynamicsState:
    """
    Complete emotional state of one agent.

    Created once at birth around a baseline attractor and owned by that agent
    for its lifetime. It is mutated only by the appraisal and dynamics
    functions; everything else reads it.
    """
    # Where the agent is right now
    current: EmotionVector = field(default_factory=_baseline_attractor)

    # Emotional inertia: an unbounded displacement that decays geometrically
    momentum: EmotionVector = field(default_factory=EmotionVector)

    # The set point the current state keeps relaxing toward
    attractor: EmotionVector = field(default_factory=_baseline_attractor)

    recent_triggers: deque[EmotionTrigger] = field(
        default_factory=lambda: deque(maxlen=DEFAULT_TRIGGER_HISTORY)
    )

    regulation: RegulationState = field(default_factory=RegulationState)

    @classmethod
    def create(
        cls,
        baseline: Optional[EmotionVector] = None,
        history_size: int = DEFAULT_TRIGGER_HISTORY,
    ) -> EmotionDynamicsState:
        """Birth an emotional state resting at its baseline."""
        attractor = (baseline or _baseline_attractor()).clamp()
        return cls(
            current=attractor.copy(),
            momentum=EmotionVector(),
            attractor=attractor,
            recent_triggers=deque(maxlen=max(1, int(history_size))),
            regulation=RegulationState(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for storage."""
        return {
            "current": self.current.to_dict(),
            "momentum": self.momentum.to_dict(),
            "attractor": self.attractor.to_dict(),
            "recent_triggers": [t.to_dict() for t in self.recent_triggers],
            "trigger_history_size": self.recent_triggers.maxlen,
            "regulation": self.regulation.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EmotionDynamicsState:
        maxlen = data.get("trigger_history_size") or DEFAULT_TRIGGER_HISTORY
        return cls(
            current=EmotionVector.from_dict(data.get("current", {})).clamp(),
            momentum=EmotionVector.from_dict(data.get("momentum", {})),
            attractor=EmotionVector.from_dict(data.get("attractor", {})).clamp(),
            recent_triggers=deque(
                (EmotionTrigger.from_dict(t) for t in data.get("recent_triggers", [])),
                maxlen=int(maxlen),
            ),
            regulation=RegulationState.from_dict(data.get("regulation", {})),
        )

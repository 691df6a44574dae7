# anima/config.py
"""
Configuration for the Anima core.

Every tunable constant of the emotional dynamics and the decision engine flows
through this module. Values may be overridden from environment variables (or a
.env file at the project root) and are validated with Pydantic. The defaults
are the calibrated constants of the model; changing them changes the numeric
behaviour of every agent that shares the config.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

import structlog
from pydantic import BeforeValidator, Field, model_validator
from pydantic_settings import BaseSettings

logger = structlog.get_logger(__name__)

# Resolve .env relative to the project root (one level above anima/ package),
# so the config works regardless of the caller's current working directory.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


def _clamp_unit(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _coerce_weight_map(value: object) -> dict[str, float]:
    """Coerce value weights into a ``{name: weight}`` mapping.

    Accepts:
      - An existing dict             → passthrough with float coercion
      - JSON object str              → (env vars; parsed by pydantic-settings before this runs)
      - Comma-separated pairs str    → "morality=0.8, safety=0.7" (keyword arguments only)
    """
    if isinstance(value, dict):
        return {str(k).strip(): float(v) for k, v in value.items() if str(k).strip()}
    if isinstance(value, str):
        weights: dict[str, float] = {}
        for part in value.split(","):
            if "=" not in part:
                continue
            name, _, raw = part.partition("=")
            name = name.strip()
            if not name:
                continue
            try:
                weights[name] = float(raw)
            except ValueError:
                logger.debug("config.weight_unparseable", name=name, raw=raw)
        return weights
    return {}


# Annotated type for value-weight maps that accept JSON objects or "k=v" lists.
WeightMap = Annotated[dict[str, float], BeforeValidator(_coerce_weight_map)]


class AffectConfig(BaseSettings):
    """Configuration for the emotional dynamics — how feelings build, drift and settle."""

    # Spring toward the set point, per simulated second
    attractor_strength: float = Field(0.3, alias="ANIMA_ATTRACTOR_STRENGTH")

    # Share of an appraised trigger that lands in momentum
    momentum_gain: float = Field(0.5, alias="ANIMA_MOMENTUM_GAIN")

    # Momentum keeps this fraction of itself per simulated second
    momentum_decay: float = Field(0.8, alias="ANIMA_MOMENTUM_DECAY")

    trigger_history_size: int = Field(10, alias="ANIMA_TRIGGER_HISTORY_SIZE")

    # Regulation rates, scaled by the shared effectiveness modifier
    suppression_rate: float = Field(0.3, alias="ANIMA_SUPPRESSION_RATE")
    reappraisal_rate: float = Field(0.5, alias="ANIMA_REAPPRAISAL_RATE")
    distraction_rate: float = Field(0.5, alias="ANIMA_DISTRACTION_RATE")
    default_regulation_effectiveness: float = Field(
        0.7, alias="ANIMA_DEFAULT_REGULATION_EFFECTIVENESS"
    )

    # Baseline set point for newly created agents
    baseline_valence: float = Field(0.2, alias="ANIMA_BASELINE_VALENCE")
    baseline_arousal: float = Field(0.3, alias="ANIMA_BASELINE_AROUSAL")
    baseline_dominance: float = Field(0.1, alias="ANIMA_BASELINE_DOMINANCE")

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def normalize_ranges(self) -> "AffectConfig":
        self.trigger_history_size = max(1, int(self.trigger_history_size))
        self.momentum_decay = _clamp_unit(self.momentum_decay)
        self.default_regulation_effectiveness = _clamp_unit(
            self.default_regulation_effectiveness
        )
        self.baseline_valence = max(-1.0, min(1.0, self.baseline_valence))
        self.baseline_arousal = _clamp_unit(self.baseline_arousal)
        self.baseline_dominance = max(-1.0, min(1.0, self.baseline_dominance))
        return self


class DecisionConfig(BaseSettings):
    """Configuration for the dual-process decision engine."""

    # Simulated seconds System 2 needs; less time available forces intuition
    system2_latency: float = Field(5.0, alias="ANIMA_SYSTEM2_LATENCY")

    # Willpower needed to override intuition with deliberation
    conflict_effort: float = Field(0.5, alias="ANIMA_CONFLICT_EFFORT")

    # Hun/Po mean-strength gap that tips the system preference
    preference_margin: float = Field(0.3, alias="ANIMA_PREFERENCE_MARGIN")

    # System 1 (affect heuristic)
    affect_bias: float = Field(0.3, alias="ANIMA_AFFECT_BIAS")
    confidence_base: float = Field(0.5, alias="ANIMA_CONFIDENCE_BASE")
    confidence_arousal_weight: float = Field(0.4, alias="ANIMA_CONFIDENCE_AROUSAL_WEIGHT")

    # System 2 (expected value)
    effort_weight: float = Field(0.3, alias="ANIMA_EFFORT_WEIGHT")
    risk_weight: float = Field(0.2, alias="ANIMA_RISK_WEIGHT")

    # Autonomy
    baseline_resistance: float = Field(0.7, alias="ANIMA_BASELINE_RESISTANCE")
    pressure_threshold: float = Field(0.5, alias="ANIMA_PRESSURE_THRESHOLD")
    value_weights: WeightMap = Field(
        default_factory=lambda: {"morality": 0.8, "pleasure": 0.5, "safety": 0.7},
        alias="ANIMA_VALUE_WEIGHTS",
    )

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def normalize_ranges(self) -> "DecisionConfig":
        self.system2_latency = max(0.0, float(self.system2_latency))
        self.conflict_effort = max(0.0, float(self.conflict_effort))
        self.preference_margin = max(0.0, float(self.preference_margin))
        self.baseline_resistance = _clamp_unit(self.baseline_resistance)
        return self


class WillpowerConfig(BaseSettings):
    """Configuration for the willpower budget — the cost of overriding a gut feeling."""

    initial: float = Field(1.0, alias="ANIMA_WILLPOWER_INITIAL")
    baseline_max: float = Field(1.0, alias="ANIMA_WILLPOWER_MAX")
    depletion_rate: float = Field(0.05, alias="ANIMA_WILLPOWER_DEPLETION_RATE")
    recovery_rate: float = Field(0.01, alias="ANIMA_WILLPOWER_RECOVERY_RATE")
    depletion_threshold: float = Field(0.2, alias="ANIMA_WILLPOWER_DEPLETION_THRESHOLD")

    # Training can grow capacity up to this multiple of the baseline
    capacity_cap_multiplier: float = Field(2.0, alias="ANIMA_WILLPOWER_CAPACITY_CAP")

    model_config = {"env_file": _ENV_FILE, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="after")
    def normalize_ranges(self) -> "WillpowerConfig":
        self.baseline_max = max(1.0, float(self.baseline_max))
        self.initial = max(0.0, min(self.baseline_max, float(self.initial)))
        self.depletion_rate = max(0.0, float(self.depletion_rate))
        self.recovery_rate = max(0.0, float(self.recovery_rate))
        self.capacity_cap_multiplier = max(1.0, float(self.capacity_cap_multiplier))
        return self


class AnimaConfig:
    """
    Master configuration that composes all subsystem configs.

    An agent's core receives its config from here. Agents that share one
    instance share calibration, never state.
    """

    def __init__(
        self,
        affect: AffectConfig | None = None,
        decision: DecisionConfig | None = None,
        willpower: WillpowerConfig | None = None,
    ):
        self.affect = affect or AffectConfig()
        self.decision = decision or DecisionConfig()
        self.willpower = willpower or WillpowerConfig()

    def to_dict(self) -> dict[str, Any]:
        return {
            "affect": self.affect.model_dump(),
            "decision": self.decision.model_dump(),
            "willpower": self.willpower.model_dump(),
        }

    def __repr__(self) -> str:
        return (
            f"AnimaConfig(attractor_strength={self.affect.attractor_strength}, "
            f"system2_latency={self.decision.system2_latency}s, "
            f"willpower_max={self.willpower.baseline_max})"
        )


@lru_cache(maxsize=1)
def default_affect_config() -> AffectConfig:
    """Shared default used by the pure dynamics functions when no config is passed."""
    return AffectConfig()


@lru_cache(maxsize=1)
def default_decision_config() -> DecisionConfig:
    return DecisionConfig()


@lru_cache(maxsize=1)
def default_willpower_config() -> WillpowerConfig:
    return WillpowerConfig()

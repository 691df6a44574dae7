"""
Autonomy — was this choice really the agent's own?

A decision is autonomous when it comes from the self rather than from outside
pressure, and when the agent endorses it against its own values. This module
scores both and keeps the latest verdict so the agent can report how free it
feels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import structlog

from anima.config import DecisionConfig, default_decision_config
from anima.types import DecisionOption

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class AutonomyState:
    self_as_source: bool    # decision came from self, not external pressure
    endorsement: bool       # the agent's values back this decision
    resistance: float       # 0.0-1.0, ability to resist coercion
    authenticity: float     # 0.0-1.0, alignment with the true self

    def to_dict(self) -> dict:
        return {
            "self_as_source": self.self_as_source,
            "endorsement": self.endorsement,
            "resistance": self.resistance,
            "authenticity": self.authenticity,
        }


# Disposition before any decision has been evaluated
INITIAL_AUTONOMY = AutonomyState(
    self_as_source=True,
    endorsement=True,
    resistance=0.7,
    authenticity=0.8,
)


class AutonomyEvaluator:
    """Scores the autonomy of decisions and remembers the latest one."""

    def __init__(self, config: Optional[DecisionConfig] = None):
        self._config = config or default_decision_config()
        self._last: AutonomyState = INITIAL_AUTONOMY

    @property
    def last(self) -> AutonomyState:
        return self._last

    def evaluate(
        self,
        option: DecisionOption,
        external_pressure: float,
        value_weights: Optional[Mapping[str, float]] = None,
    ) -> AutonomyState:
        """
        Judge one chosen option under a given external pressure.

        Every value weight counts the option's moral alignment, so endorsement
        comes down to the sign of moral alignment times the total importance.
        """
        cfg = self._config
        weights = cfg.value_weights if value_weights is None else value_weights

        self_as_source = external_pressure < cfg.pressure_threshold
        alignment = sum(option.moral_alignment * importance for importance in weights.values())
        endorsement = alignment > 0
        resistance = max(0.0, min(1.0, cfg.baseline_resistance - external_pressure))
        authenticity = 0.9 if (self_as_source and endorsement) else 0.3

        self._last = AutonomyState(
            self_as_source=self_as_source,
            endorsement=endorsement,
            resistance=resistance,
            authenticity=authenticity,
        )
        logger.debug("will.autonomy_evaluated", option_id=option.id, **self._last.to_dict())
        return self._last

    def experience_freedom(self) -> float:
        """How free the agent feels: mean of authenticity and resistance."""
        return (self._last.authenticity + self._last.resistance) / 2

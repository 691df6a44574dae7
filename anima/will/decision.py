"""
Decision Engine — arbitration between intuition and deliberation.

A decision runs in four stages:

  1. Bias: soul aspects shift every option's utility (Hun first, then Po).
  2. Preference: the balance of Hun and Po strength decides whether the agent
     leans intuitive, deliberative, or runs both.
  3. Arbitration: if there is no time to deliberate, intuition wins. If both
     systems run and disagree, overriding intuition costs willpower; without
     enough of it the agent falls back on its gut.
  4. Autonomy: the chosen option is scored for self-determination.

The engine has no hidden state besides the last autonomy verdict. The only
side effect of a decision is the willpower spent in a conflict override.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping, Optional, Sequence, Union

import structlog

from anima.affect.state import EmotionVector
from anima.aspects import (
    ResolvedAspect,
    apply_hun_bias,
    apply_po_bias,
    mean_strength,
    resolve_hun,
    resolve_po,
)
from anima.config import DecisionConfig, default_decision_config
from anima.types import DecisionOption, SoulAspect
from anima.will.autonomy import AutonomyEvaluator, AutonomyState
from anima.will.systems import DeliberativeReasoning, IntuitiveJudgment, System1, System2
from anima.will.willpower import WillpowerState

logger = structlog.get_logger(__name__)

AspectInput = Iterable[Union[SoulAspect, ResolvedAspect]]


class SystemPreference(str, Enum):
    SYSTEM1 = "system1"
    SYSTEM2 = "system2"
    BALANCED = "balanced"


class DecisionProcess(str, Enum):
    """Which path produced the enacted choice."""
    SYSTEM1 = "system1"
    SYSTEM2 = "system2"
    CONFLICT = "conflict"   # System 2 overrode System 1 at a willpower cost
    NONE = "none"           # nothing to choose from


@dataclass(frozen=True)
class DecisionResult:
    """
    Outcome of one decision.

    ``choice`` is the caller's original option (unbiased); the biased copies
    the systems actually compared are in ``biased_options``.
    """
    choice: Optional[DecisionOption]
    process: DecisionProcess
    autonomy: Optional[AutonomyState]
    willpower_used: float = 0.0
    preference: SystemPreference = SystemPreference.BALANCED
    intuition: Optional[IntuitiveJudgment] = None
    deliberation: Optional[DeliberativeReasoning] = None
    biased_options: list[DecisionOption] = field(default_factory=list)

    @property
    def decided(self) -> bool:
        return self.choice is not None

    def to_dict(self) -> dict:
        return {
            "choice": self.choice.to_dict() if self.choice else None,
            "process": self.process.value,
            "autonomy": self.autonomy.to_dict() if self.autonomy else None,
            "willpower_used": self.willpower_used,
            "preference": self.preference.value,
            "reasoning": self.deliberation.reasoning if self.deliberation else None,
        }


def system_preference(
    hun: Sequence[ResolvedAspect],
    po: Sequence[ResolvedAspect],
    margin: float = 0.3,
) -> SystemPreference:
    """
    Strong Hun favours deliberation, strong Po favours intuition.

    With either family empty there is nothing to weigh, so the agent stays
    balanced.
    """
    if not hun or not po:
        return SystemPreference.BALANCED
    hun_avg = mean_strength(hun)
    po_avg = mean_strength(po)
    if hun_avg > po_avg + margin:
        return SystemPreference.SYSTEM2
    if po_avg > hun_avg + margin:
        return SystemPreference.SYSTEM1
    return SystemPreference.BALANCED


class DecisionEngine:
    """
    Dual-process decision maker for one agent.

    The engine does not own willpower; the agent's ``WillpowerState`` is
    passed into every call and is the only thing a decision may mutate.
    """

    def __init__(self, config: Optional[DecisionConfig] = None):
        self._config = config or default_decision_config()
        self.system1 = System1(self._config)
        self.system2 = System2(self._config)
        self.autonomy = AutonomyEvaluator(self._config)

    def decide(
        self,
        options: Sequence[DecisionOption],
        emotion: EmotionVector,
        hun: AspectInput,
        po: AspectInput,
        willpower: WillpowerState,
        external_pressure: float = 0.0,
        time_available: float = 10.0,
        value_weights: Optional[Mapping[str, float]] = None,
    ) -> DecisionResult:
        cfg = self._config
        hun_aspects = resolve_hun(hun)
        po_aspects = resolve_po(po)
        preference = system_preference(hun_aspects, po_aspects, cfg.preference_margin)

        if not options:
            logger.warning("will.no_options", preference=preference.value)
            return DecisionResult(
                choice=None,
                process=DecisionProcess.NONE,
                autonomy=None,
                preference=preference,
            )

        # Biasing preserves order, so indices into biased are indices into options
        biased = apply_po_bias(po_aspects, apply_hun_bias(hun_aspects, options))

        intuition: Optional[IntuitiveJudgment] = None
        deliberation: Optional[DeliberativeReasoning] = None
        willpower_used = 0.0

        if time_available < self.system2.latency or preference is SystemPreference.SYSTEM1:
            intuition = self.system1.judge(biased, emotion)
            chosen = intuition.index
            process = DecisionProcess.SYSTEM1
        elif preference is SystemPreference.SYSTEM2:
            deliberation = self.system2.deliberate(biased)
            chosen = deliberation.index
            process = DecisionProcess.SYSTEM2
        else:
            intuition = self.system1.judge(biased, emotion)
            deliberation = self.system2.deliberate(biased)

            if intuition.index == deliberation.index:
                # Agreement needs no override
                chosen = intuition.index
                process = DecisionProcess.SYSTEM1
            elif willpower.exert(cfg.conflict_effort):
                chosen = deliberation.index
                process = DecisionProcess.CONFLICT
                willpower_used = cfg.conflict_effort
                logger.info(
                    "will.conflict_override",
                    intuitive=intuition.option.id,
                    deliberate=deliberation.option.id,
                    willpower_remaining=round(willpower.current, 4),
                )
            else:
                chosen = intuition.index
                process = DecisionProcess.SYSTEM1
                logger.info(
                    "will.conflict_yielded",
                    intuitive=intuition.option.id,
                    deliberate=deliberation.option.id,
                    willpower_remaining=round(willpower.current, 4),
                )

        choice = options[chosen]
        autonomy = self.autonomy.evaluate(choice, external_pressure, value_weights)

        logger.debug(
            "will.decided",
            choice=choice.id,
            process=process.value,
            preference=preference.value,
            willpower_used=willpower_used,
        )
        return DecisionResult(
            choice=choice,
            process=process,
            autonomy=autonomy,
            willpower_used=willpower_used,
            preference=preference,
            intuition=intuition,
            deliberation=deliberation,
            biased_options=biased,
        )

    def experience_freedom(self) -> float:
        return self.autonomy.experience_freedom()


def decide(
    options: Sequence[DecisionOption],
    emotion: EmotionVector,
    hun: AspectInput,
    po: AspectInput,
    willpower: WillpowerState,
    external_pressure: float = 0.0,
    time_available: float = 10.0,
    value_weights: Optional[Mapping[str, float]] = None,
    config: Optional[DecisionConfig] = None,
) -> DecisionResult:
    """One-shot decision with a throwaway engine; only ``willpower`` may change."""
    return DecisionEngine(config).decide(
        options,
        emotion,
        hun,
        po,
        willpower,
        external_pressure=external_pressure,
        time_available=time_available,
        value_weights=value_weights,
    )

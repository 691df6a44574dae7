"""
Dual-Process Judgment — System 1 and System 2.

System 1 is fast and intuitive. It runs on the affect heuristic: whatever the
agent currently feels colours how good every option looks, and high arousal
makes it sure of itself whether or not that is warranted.

System 2 is slow and deliberative. It prices in effort and risk, lists pros
and cons, and picks the best expected value. Its output carries enough
reasoning to explain a choice after the fact.

Both systems are pure: they read options and affect, and return a judgment.
Which judgment gets enacted is the decision engine's business.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from anima.affect.state import EmotionVector
from anima.config import DecisionConfig, default_decision_config
from anima.types import DecisionOption


class Heuristic(str, Enum):
    """Shortcuts System 1 can lean on."""
    AVAILABILITY = "availability"              # judge by ease of recall
    REPRESENTATIVENESS = "representativeness"  # judge by similarity to prototype
    ANCHORING = "anchoring"                    # over-rely on first information
    AFFECT = "affect"                          # "if it feels good, do it"


@dataclass(frozen=True)
class IntuitiveJudgment:
    option: DecisionOption
    biased_utility: float
    intuition: float        # -1.0 (bad feeling) to 1.0 (good feeling)
    confidence: float       # 0.0-1.0, uncalibrated
    heuristic_used: Heuristic = Heuristic.AFFECT
    index: int = 0          # position of option in the judged sequence


@dataclass(frozen=True)
class OptionEvaluation:
    """System 2's assessment of one option."""
    option: DecisionOption
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    expected_value: float = 0.0

    @property
    def reasoning(self) -> str:
        return (
            f"EV = {self.expected_value:.2f}: "
            f"{len(self.pros)} pros, {len(self.cons)} cons"
        )


@dataclass(frozen=True)
class DeliberativeReasoning:
    """System 2's verdict plus every evaluation that led to it."""
    choice: OptionEvaluation
    evaluations: list[OptionEvaluation] = field(default_factory=list)
    index: int = 0   # position of the chosen option

    @property
    def option(self) -> DecisionOption:
        return self.choice.option

    @property
    def reasoning(self) -> str:
        return self.choice.reasoning


@dataclass(frozen=True)
class UtilityCalculation:
    option: DecisionOption
    utility: float       # expected utility net of effort
    probability: float   # P(success)
    value: float         # value if successful


def _argmax(scores: Sequence[float]) -> int:
    """Index of the highest score; the earliest wins ties."""
    best = 0
    for i in range(1, len(scores)):
        if scores[i] > scores[best]:
            best = i
    return best


class System1:
    """Fast, intuitive, automatic."""

    #: Simulated time a System 1 judgment takes, in seconds
    latency = 0.001

    def __init__(self, config: Optional[DecisionConfig] = None):
        self._config = config or default_decision_config()

    def judge(self, options: Sequence[DecisionOption], emotion: EmotionVector) -> IntuitiveJudgment:
        """
        Pick by feel.

        Good mood inflates every option, bad mood deflates it; ``options``
        must be non-empty.
        """
        cfg = self._config
        biased = [opt.expected_utility + emotion.valence * cfg.affect_bias for opt in options]
        best = _argmax(biased)
        return IntuitiveJudgment(
            option=options[best],
            biased_utility=biased[best],
            intuition=math.tanh(biased[best]),
            confidence=cfg.confidence_base + emotion.arousal * cfg.confidence_arousal_weight,
            heuristic_used=Heuristic.AFFECT,
            index=best,
        )


class System2:
    """Slow, deliberative, effortful."""

    def __init__(self, config: Optional[DecisionConfig] = None):
        self._config = config or default_decision_config()

    @property
    def latency(self) -> float:
        """Simulated time a deliberation takes, in seconds."""
        return self._config.system2_latency

    def evaluate(self, option: DecisionOption) -> OptionEvaluation:
        pros: list[str] = []
        if option.expected_utility > 0.5:
            pros.append("High expected value")
        if option.risk < 0.3:
            pros.append("Low risk")
        if option.moral_alignment > 0.5:
            pros.append("Morally good")

        cons: list[str] = []
        if option.expected_utility < 0:
            cons.append("Negative expected value")
        if option.risk > 0.7:
            cons.append("High risk")
        if option.effort_required > 0.7:
            cons.append("Requires significant effort")
        if option.moral_alignment < -0.5:
            cons.append("Morally questionable")

        expected_value = (
            option.expected_utility
            - option.effort_required * self._config.effort_weight
            - option.risk * self._config.risk_weight
        )
        return OptionEvaluation(option=option, pros=pros, cons=cons, expected_value=expected_value)

    def deliberate(self, options: Sequence[DecisionOption]) -> DeliberativeReasoning:
        """Evaluate every option and pick the best expected value."""
        evaluations = [self.evaluate(opt) for opt in options]
        best = _argmax([e.expected_value for e in evaluations])
        return DeliberativeReasoning(choice=evaluations[best], evaluations=evaluations, index=best)

    @staticmethod
    def analyze_cost_benefit(option: DecisionOption) -> UtilityCalculation:
        """
        Cost-benefit view of a single option.

        Success probability is read off risk. A certain failure (risk 1) has
        no value to speak of, only its cost.
        """
        probability = max(0.0, min(1.0, 1.0 - option.risk))
        value = option.expected_utility / probability if probability > 0 else 0.0
        utility = probability * value - option.effort_required
        return UtilityCalculation(option=option, utility=utility, probability=probability, value=value)

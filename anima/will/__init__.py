"""Will — willpower, dual-process judgment, autonomy and arbitration."""
from anima.will.autonomy import AutonomyEvaluator, AutonomyState
from anima.will.decision import (
    DecisionEngine,
    DecisionProcess,
    DecisionResult,
    SystemPreference,
    decide,
    system_preference,
)
from anima.will.systems import (
    DeliberativeReasoning,
    Heuristic,
    IntuitiveJudgment,
    OptionEvaluation,
    System1,
    System2,
    UtilityCalculation,
)
from anima.will.willpower import WillpowerState

__all__ = [
    "AutonomyEvaluator",
    "AutonomyState",
    "DecisionEngine",
    "DecisionProcess",
    "DecisionResult",
    "SystemPreference",
    "decide",
    "system_preference",
    "DeliberativeReasoning",
    "Heuristic",
    "IntuitiveJudgment",
    "OptionEvaluation",
    "System1",
    "System2",
    "UtilityCalculation",
    "WillpowerState",
]

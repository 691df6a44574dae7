"""
Demonstration scenarios.

Two short, fixed scripts that exercise the core end to end: an emotional
trajectory (praise, then a threat, then regulated recovery) and a single
temptation-versus-duty decision. They are deterministic and return data; the
CLI renders them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from anima.affect.classifier import DominantEmotion
from anima.affect.state import AgentResponsibility, EmotionAppraisal, EmotionTrigger, EmotionVector
from anima.config import AnimaConfig
from anima.core import AffectiveCore
from anima.types import DecisionOption, SoulAspect
from anima.will.decision import DecisionResult


@dataclass(frozen=True)
class TrajectoryStep:
    label: str
    emotion: EmotionVector
    dominant: DominantEmotion


PRAISE = EmotionTrigger(
    event="Received praise for work",
    appraisal=EmotionAppraisal(
        goal_relevance=0.8,
        novelty=0.3,
        controllability=0.7,
        agent_responsibility=AgentResponsibility.SELF,
    ),
    intensity=0.8,
)

THREAT = EmotionTrigger(
    event="Unexpected threat detected",
    appraisal=EmotionAppraisal(
        goal_relevance=-0.9,
        novelty=0.9,
        controllability=0.2,
        agent_responsibility=AgentResponsibility.OTHER,
    ),
    intensity=1.0,
)

DILEMMA_OPTIONS = [
    DecisionOption(
        id="work-hard",
        description="Work hard on difficult project",
        expected_utility=0.8,
        risk=0.3,
        effort_required=0.9,
        moral_alignment=0.7,
    ),
    DecisionOption(
        id="take-break",
        description="Take a relaxing break",
        expected_utility=0.3,
        risk=0.1,
        effort_required=0.1,
        moral_alignment=0.0,
    ),
    DecisionOption(
        id="cheat",
        description="Cheat to get easy win",
        expected_utility=0.7,
        risk=0.6,
        effort_required=0.3,
        moral_alignment=-0.8,
    ),
]


def _step(core: AffectiveCore, label: str) -> TrajectoryStep:
    return TrajectoryStep(
        label=label,
        emotion=core.get_current_emotion(),
        dominant=core.get_dominant_emotion(),
    )


def run_emotion_demo(config: Optional[AnimaConfig] = None) -> list[TrajectoryStep]:
    """Praise, a threat, then ten simulated seconds of distraction."""
    core = AffectiveCore(config)
    steps = [_step(core, "initial")]

    core.process_trigger(PRAISE)
    core.evolve(1.0)
    steps.append(_step(core, "after praise"))

    core.process_trigger(THREAT)
    core.evolve(1.0)
    steps.append(_step(core, "after threat"))

    core.activate_regulation("distraction", 0.6)
    for _ in range(100):
        core.evolve(0.1)
    steps.append(_step(core, "after regulation (10s)"))
    return steps


def run_decision_demo(
    config: Optional[AnimaConfig] = None,
    external_pressure: float = 0.2,
    time_available: float = 10.0,
) -> tuple[DecisionResult, float]:
    """A tense agent torn between duty, rest and cheating. Returns (result, freedom)."""
    core = AffectiveCore(config)
    core.set_attractor(EmotionVector(valence=-0.3, arousal=0.7, dominance=0.4))
    core.emotion_state.current = EmotionVector(valence=-0.3, arousal=0.7, dominance=0.4)

    result = core.decide(
        DILEMMA_OPTIONS,
        hun=[SoulAspect("Zheng Zhong (正中)", 0.8)],
        po=[SoulAspect("Que Yin (雀陰)", 0.6)],
        external_pressure=external_pressure,
        time_available=time_available,
    )
    return result, core.feel_free()

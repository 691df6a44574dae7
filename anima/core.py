"""
Affective Core — one agent's feeling-and-choosing unit.

The pure functions in ``anima.affect`` and ``anima.will`` operate on explicit
state values. ``AffectiveCore`` bundles one agent's emotional state, willpower
budget and decision engine behind the small surface the rest of a simulation
talks to. Each agent owns exactly one core; cores never share mutable state,
so many agents can run side by side without coordination. Calls on a single
core must be serialized by the caller.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence, Union

import structlog

from anima.affect.appraisal import process_trigger
from anima.affect.classifier import DominantEmotion, get_dominant_emotion
from anima.affect.dynamics import activate_regulation, evolve, release_regulation, set_attractor
from anima.affect.state import (
    EmotionDynamicsState,
    EmotionTrigger,
    EmotionVector,
    RegulationStrategy,
)
from anima.aspects import ResolvedAspect, apply_aspect_influence
from anima.config import AnimaConfig
from anima.types import DecisionOption, SoulAspect
from anima.will.decision import DecisionEngine, DecisionResult
from anima.will.willpower import WillpowerState

logger = structlog.get_logger(__name__)

AspectInput = Iterable[Union[SoulAspect, ResolvedAspect]]


class AffectiveCore:
    """
    Emotional state + willpower + decision engine for a single agent.

    Created once at the agent's birth around a baseline attractor.
    """

    def __init__(
        self,
        config: Optional[AnimaConfig] = None,
        baseline: Optional[EmotionVector] = None,
        emotion_state: Optional[EmotionDynamicsState] = None,
        willpower: Optional[WillpowerState] = None,
    ):
        self._config = config or AnimaConfig()
        affect_cfg = self._config.affect

        if emotion_state is None:
            if baseline is None:
                baseline = EmotionVector(
                    valence=affect_cfg.baseline_valence,
                    arousal=affect_cfg.baseline_arousal,
                    dominance=affect_cfg.baseline_dominance,
                )
            emotion_state = EmotionDynamicsState.create(
                baseline=baseline,
                history_size=affect_cfg.trigger_history_size,
            )
        self.emotion_state = emotion_state
        self.willpower = willpower or WillpowerState.from_config(self._config.willpower)
        self._engine = DecisionEngine(self._config.decision)

    @property
    def config(self) -> AnimaConfig:
        return self._config

    # -- Emotion -----------------------------------------------------------

    def process_trigger(self, trigger: EmotionTrigger) -> None:
        process_trigger(self.emotion_state, trigger, self._config.affect)

    def evolve(self, dt: float = 0.1) -> None:
        evolve(self.emotion_state, dt, self._config.affect)

    def get_current_emotion(self) -> EmotionVector:
        """A copy of the current VAD point; mutating it does not touch the agent."""
        return self.emotion_state.current.copy()

    def get_dominant_emotion(self) -> DominantEmotion:
        return get_dominant_emotion(self.emotion_state)

    def apply_aspect_influence(self, hun: AspectInput, po: AspectInput) -> None:
        apply_aspect_influence(self.emotion_state, hun, po)

    def activate_regulation(
        self,
        strategy: Union[RegulationStrategy, str],
        effectiveness: Optional[float] = None,
    ) -> None:
        activate_regulation(self.emotion_state, strategy, effectiveness, self._config.affect)

    def release_regulation(self, strategy: Union[RegulationStrategy, str]) -> None:
        release_regulation(self.emotion_state, strategy)

    def set_attractor(self, attractor: EmotionVector) -> None:
        set_attractor(self.emotion_state, attractor)

    # -- Will --------------------------------------------------------------

    def decide(
        self,
        options: Sequence[DecisionOption],
        hun: AspectInput = (),
        po: AspectInput = (),
        external_pressure: float = 0.0,
        time_available: float = 10.0,
        value_weights: Optional[Mapping[str, float]] = None,
    ) -> DecisionResult:
        """Decide among ``options`` in the agent's current mood."""
        return self._engine.decide(
            options,
            self.emotion_state.current.copy(),
            hun,
            po,
            self.willpower,
            external_pressure=external_pressure,
            time_available=time_available,
            value_weights=value_weights,
        )

    def feel_free(self) -> float:
        return self._engine.experience_freedom()

    def rest(self, duration: float) -> None:
        recovered = self.willpower.rest(duration)
        logger.debug("will.rested", duration=duration, recovered=round(recovered, 4))

    def train_willpower(self, amount: float = 0.01) -> None:
        self.willpower.train(amount)

    def get_willpower(self) -> float:
        return self.willpower.current

    def is_depleted(self) -> bool:
        return self.willpower.is_depleted()

    # -- Persistence boundary ----------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Plain snapshot for an external store."""
        return {
            "emotion": self.emotion_state.to_dict(),
            "willpower": self.willpower.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], config: Optional[AnimaConfig] = None) -> AffectiveCore:
        return cls(
            config=config,
            emotion_state=EmotionDynamicsState.from_dict(data.get("emotion", {})),
            willpower=WillpowerState.from_dict(data.get("willpower", {})),
        )

    def __repr__(self) -> str:
        current = self.emotion_state.current
        return (
            f"AffectiveCore(valence={current.valence:.2f}, arousal={current.arousal:.2f}, "
            f"dominance={current.dominance:.2f}, willpower={self.willpower.current:.2f})"
        )

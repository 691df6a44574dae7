"""
Emotion Dynamics — how feelings move between triggers.

The emotional state is a damped spring in VAD space. Momentum pushes the
current point, the attractor pulls it back toward the agent's set point,
active regulation strategies bend the trajectory, and momentum fades
geometrically. Every step ends clamped to the valid ranges.

The step order in ``evolve`` is part of the model: reordering it changes the
numeric trajectory.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog

from anima.affect.state import EmotionDynamicsState, EmotionVector, RegulationStrategy
from anima.config import AffectConfig, default_affect_config

logger = structlog.get_logger(__name__)


def evolve(
    state: EmotionDynamicsState,
    dt: float = 0.1,
    config: Optional[AffectConfig] = None,
) -> EmotionDynamicsState:
    """
    Advance the emotional state by ``dt`` simulated seconds.

    ``evolve(state, 0)`` leaves current, attractor and momentum untouched.
    Callers must serialize calls on one state; there is no reentrancy guard.
    """
    config = config or default_affect_config()
    current = state.current
    momentum = state.momentum
    attractor = state.attractor
    regulation = state.regulation

    # 1. Momentum carries the state along
    current.valence += momentum.valence * dt
    current.arousal += momentum.arousal * dt
    current.dominance += momentum.dominance * dt

    # 2. Pull toward the attractor
    pull = config.attractor_strength * dt
    current.valence += (attractor.valence - current.valence) * pull
    current.arousal += (attractor.arousal - current.arousal) * pull
    current.dominance += (attractor.dominance - current.dominance) * pull

    # 3. Regulation
    effectiveness = regulation.effectiveness_modifier
    if regulation.suppression_active:
        # Arousal drops, valence does not: you still feel bad
        current.arousal *= 1 - config.suppression_rate * effectiveness * dt
    if regulation.reappraisal_active:
        current.valence *= 1 - config.reappraisal_rate * effectiveness * dt
    if regulation.distraction_active:
        # Stacks with the attractor pull from step 2
        distraction = config.distraction_rate * effectiveness * dt
        current.valence += (attractor.valence - current.valence) * distraction
        current.arousal += (attractor.arousal - current.arousal) * distraction

    # 4. Momentum fades
    decay = config.momentum_decay ** dt
    momentum.valence *= decay
    momentum.arousal *= decay
    momentum.dominance *= decay

    # 5. Clamp
    state.current = current.clamp()
    return state


def _coerce_strategy(strategy: Union[RegulationStrategy, str]) -> RegulationStrategy:
    if isinstance(strategy, RegulationStrategy):
        return strategy
    return RegulationStrategy(str(strategy).strip().lower())


def activate_regulation(
    state: EmotionDynamicsState,
    strategy: Union[RegulationStrategy, str],
    effectiveness: Optional[float] = None,
    config: Optional[AffectConfig] = None,
) -> EmotionDynamicsState:
    """
    Engage a regulation strategy.

    The effectiveness modifier is shared by all strategies, so activating a
    second strategy re-tunes the first as well.
    """
    config = config or default_affect_config()
    strategy = _coerce_strategy(strategy)
    if effectiveness is None:
        effectiveness = config.default_regulation_effectiveness

    state.regulation.effectiveness_modifier = max(0.0, min(1.0, float(effectiveness)))
    state.regulation.set_active(strategy, True)

    logger.info(
        "affect.regulation_activated",
        strategy=strategy.value,
        effectiveness=state.regulation.effectiveness_modifier,
    )
    return state


def release_regulation(
    state: EmotionDynamicsState,
    strategy: Union[RegulationStrategy, str],
) -> EmotionDynamicsState:
    """Disengage one regulation strategy; the others stay as they are."""
    strategy = _coerce_strategy(strategy)
    if state.regulation.is_active(strategy):
        state.regulation.set_active(strategy, False)
        logger.info("affect.regulation_released", strategy=strategy.value)
    return state


def set_attractor(state: EmotionDynamicsState, attractor: EmotionVector) -> EmotionDynamicsState:
    """Move the emotional set point. The current state is left to drift there."""
    state.attractor = attractor.clamp()
    logger.debug("affect.attractor_set", **state.attractor.to_dict())
    return state

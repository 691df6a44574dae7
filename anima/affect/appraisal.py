"""
Appraisal — turning interpreted events into emotional momentum.

An event does not set the emotional state directly. It is first appraised
(does it help my goals, is it new, can I do anything about it) and the
appraisal is mapped to a VAD displacement. That displacement is added to
momentum, so the feeling builds over the following ticks instead of jumping
into place.
"""

from __future__ import annotations

from typing import Optional

import structlog

from anima.affect.state import (
    EmotionAppraisal,
    EmotionDynamicsState,
    EmotionTrigger,
    EmotionVector,
)
from anima.config import AffectConfig, default_affect_config

logger = structlog.get_logger(__name__)


def appraisal_to_emotion(appraisal: EmotionAppraisal) -> EmotionVector:
    """
    Map an appraisal onto VAD coordinates.

    Valence follows goal relevance. Arousal rises with novelty and with how
    much the event matters either way. Dominance follows controllability, and
    an uncontrollable setback feels half again more disempowering.
    """
    valence = appraisal.goal_relevance
    arousal = min(1.0, appraisal.novelty * 0.5 + abs(appraisal.goal_relevance) * 0.5)

    dominance = appraisal.controllability * 2 - 1
    if appraisal.goal_relevance < 0 and appraisal.controllability < 0.5:
        dominance *= 1.5

    return EmotionVector(
        valence=valence,
        arousal=arousal,
        dominance=max(-1.0, min(1.0, dominance)),
    )


def process_trigger(
    state: EmotionDynamicsState,
    trigger: EmotionTrigger,
    config: Optional[AffectConfig] = None,
) -> EmotionDynamicsState:
    """
    Record a trigger and fold its appraisal into momentum.

    The history deque drops its oldest entry once full. Returns the same
    state object, mutated, so calls can be chained.
    """
    config = config or default_affect_config()

    state.recent_triggers.append(trigger)

    impulse = appraisal_to_emotion(trigger.appraisal).scaled(trigger.intensity)
    gain = config.momentum_gain
    state.momentum.valence += impulse.valence * gain
    state.momentum.arousal += impulse.arousal * gain
    state.momentum.dominance += impulse.dominance * gain

    logger.debug(
        "affect.trigger_processed",
        trigger_event=trigger.event,
        intensity=trigger.intensity,
        responsibility=trigger.appraisal.agent_responsibility.value,
        momentum_valence=round(state.momentum.valence, 4),
        momentum_arousal=round(state.momentum.arousal, 4),
        momentum_dominance=round(state.momentum.dominance, 4),
    )
    return state

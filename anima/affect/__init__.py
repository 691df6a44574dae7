"""Affective system — the agent's emotional architecture."""
from anima.affect.appraisal import appraisal_to_emotion, process_trigger
from anima.affect.classifier import (
    EMOTION_TEMPLATES,
    ComplexEmotion,
    DominantEmotion,
    get_dominant_emotion,
    rank_emotions,
)
from anima.affect.dynamics import activate_regulation, evolve, release_regulation, set_attractor
from anima.affect.state import (
    AgentResponsibility,
    EmotionAppraisal,
    EmotionDynamicsState,
    EmotionTrigger,
    EmotionVector,
    RegulationState,
    RegulationStrategy,
)

__all__ = [
    "appraisal_to_emotion",
    "process_trigger",
    "EMOTION_TEMPLATES",
    "ComplexEmotion",
    "DominantEmotion",
    "get_dominant_emotion",
    "rank_emotions",
    "activate_regulation",
    "evolve",
    "release_regulation",
    "set_attractor",
    "AgentResponsibility",
    "EmotionAppraisal",
    "EmotionDynamicsState",
    "EmotionTrigger",
    "EmotionVector",
    "RegulationState",
    "RegulationStrategy",
]

"""
Complex Emotion Classifier — naming a point in VAD space.

The named emotions below are not the emotions themselves. They are labelled
regions of the continuous space, each represented by a template point. The
classifier reports the template nearest the current state and how close it
is.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from anima.affect.state import EmotionDynamicsState, EmotionVector


class ComplexEmotion(str, Enum):
    """Named emotion archetypes, in catalog (tie-break) order."""
    # High valence
    JOY = "joy"
    CONTENTMENT = "contentment"
    PRIDE = "pride"
    LOVE = "love"
    GRATITUDE = "gratitude"

    # Low valence
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    SHAME = "shame"
    GUILT = "guilt"
    DISGUST = "disgust"

    # Mixed / complex
    NOSTALGIA = "nostalgia"
    AWE = "awe"
    COMPASSION = "compassion"
    ENVY = "envy"
    JEALOUSY = "jealousy"


# Template coordinates (valence, arousal, dominance)
EMOTION_TEMPLATES: dict[ComplexEmotion, EmotionVector] = {
    ComplexEmotion.JOY: EmotionVector(0.8, 0.7, 0.6),
    ComplexEmotion.CONTENTMENT: EmotionVector(0.7, 0.2, 0.3),
    ComplexEmotion.PRIDE: EmotionVector(0.8, 0.5, 0.8),
    ComplexEmotion.LOVE: EmotionVector(0.9, 0.6, 0.4),
    ComplexEmotion.GRATITUDE: EmotionVector(0.7, 0.3, -0.2),
    ComplexEmotion.SADNESS: EmotionVector(-0.7, 0.2, -0.6),
    ComplexEmotion.ANGER: EmotionVector(-0.6, 0.9, 0.7),
    ComplexEmotion.FEAR: EmotionVector(-0.8, 0.8, -0.8),
    ComplexEmotion.SHAME: EmotionVector(-0.8, 0.7, -0.9),      # self-directed
    ComplexEmotion.GUILT: EmotionVector(-0.7, 0.5, -0.5),      # action-directed
    ComplexEmotion.DISGUST: EmotionVector(-0.7, 0.4, 0.3),
    ComplexEmotion.NOSTALGIA: EmotionVector(0.3, 0.2, -0.1),
    ComplexEmotion.AWE: EmotionVector(0.6, 0.8, -0.7),
    ComplexEmotion.COMPASSION: EmotionVector(0.4, 0.5, -0.3),  # other-directed
    ComplexEmotion.ENVY: EmotionVector(-0.5, 0.6, -0.4),
    ComplexEmotion.JEALOUSY: EmotionVector(-0.6, 0.8, 0.2),
}


@dataclass(frozen=True)
class DominantEmotion:
    """The nearest archetype and a similarity score in (0, 1]."""
    emotion: ComplexEmotion
    similarity: float
    distance_squared: float

    def to_dict(self) -> dict:
        return {
            "emotion": self.emotion.value,
            "similarity": self.similarity,
            "distance_squared": self.distance_squared,
        }


def _vector_of(target: Union[EmotionDynamicsState, EmotionVector]) -> EmotionVector:
    if isinstance(target, EmotionDynamicsState):
        return target.current
    return target


def rank_emotions(
    target: Union[EmotionDynamicsState, EmotionVector],
    top_n: int | None = None,
) -> list[DominantEmotion]:
    """
    All archetypes ordered from nearest to farthest.

    ``sorted`` is stable, so equally distant archetypes keep catalog order.
    """
    vector = _vector_of(target)
    scored = []
    for emotion, template in EMOTION_TEMPLATES.items():
        distance = vector.distance_squared(template)
        scored.append(
            DominantEmotion(
                emotion=emotion,
                similarity=1.0 / (1.0 + distance),
                distance_squared=distance,
            )
        )
    ranked = sorted(scored, key=lambda d: d.distance_squared)
    if top_n is not None:
        ranked = ranked[: max(0, top_n)]
    return ranked


def get_dominant_emotion(
    target: Union[EmotionDynamicsState, EmotionVector],
) -> DominantEmotion:
    """
    Classify to the nearest archetype by squared Euclidean distance.

    Ties resolve to the archetype declared first in ``ComplexEmotion``.
    """
    vector = _vector_of(target)
    best = ComplexEmotion.CONTENTMENT
    best_distance = float("inf")
    for emotion, template in EMOTION_TEMPLATES.items():
        distance = vector.distance_squared(template)
        if distance < best_distance:
            best = emotion
            best_distance = distance

    return DominantEmotion(
        emotion=best,
        similarity=1.0 / (1.0 + best_distance),
        distance_squared=best_distance,
    )

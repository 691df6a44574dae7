"""
Shared fixtures for the Anima test suite.

Provides default configs, explicit emotional states and a crafted pair of
options on which the intuitive and deliberative systems disagree, so
individual test modules can focus on behavior rather than setup.
"""

from __future__ import annotations

import pytest

from anima.affect.state import EmotionDynamicsState, EmotionVector
from anima.config import AffectConfig, AnimaConfig, DecisionConfig, WillpowerConfig
from anima.types import DecisionOption
from anima.will.willpower import WillpowerState


# ---------------------------------------------------------------------------
# State helpers
# ---------------------------------------------------------------------------

def _make_state(
    current: tuple[float, float, float] = (0.2, 0.3, 0.1),
    attractor: tuple[float, float, float] = (0.2, 0.3, 0.1),
    momentum: tuple[float, float, float] = (0.0, 0.0, 0.0),
) -> EmotionDynamicsState:
    """An emotional state with explicit current, attractor and momentum."""
    state = EmotionDynamicsState.create(baseline=EmotionVector(*attractor))
    state.current = EmotionVector(*current)
    state.momentum = EmotionVector(*momentum)
    return state


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def affect_config() -> AffectConfig:
    """AffectConfig with the calibrated defaults."""
    return AffectConfig()


@pytest.fixture()
def decision_config() -> DecisionConfig:
    return DecisionConfig()


@pytest.fixture()
def willpower_config() -> WillpowerConfig:
    return WillpowerConfig()


@pytest.fixture()
def anima_config(affect_config, decision_config, willpower_config) -> AnimaConfig:
    return AnimaConfig(affect=affect_config, decision=decision_config, willpower=willpower_config)


# ---------------------------------------------------------------------------
# Decision fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def conflict_options() -> list[DecisionOption]:
    """Two options on which System 1 and System 2 disagree.

    System 1 ranks by raw utility (plus a mood shift shared by both) and
    picks "sprint". System 2 charges effort and risk and picks "steady":
    sprint EV = 0.6 - 0.27 - 0.10 = 0.23, steady EV = 0.5.
    """
    return [
        DecisionOption(
            id="sprint",
            description="Sprint for the deadline",
            expected_utility=0.6,
            risk=0.5,
            effort_required=0.9,
            moral_alignment=0.2,
        ),
        DecisionOption(
            id="steady",
            description="Keep a steady pace",
            expected_utility=0.5,
            risk=0.0,
            effort_required=0.0,
            moral_alignment=0.4,
        ),
    ]


@pytest.fixture()
def fresh_willpower() -> WillpowerState:
    """A full willpower budget with default rates."""
    return WillpowerState(current=1.0, max=1.0, depletion_rate=0.05, recovery_rate=0.01)


@pytest.fixture()
def neutral_emotion() -> EmotionVector:
    return EmotionVector(valence=0.0, arousal=0.5, dominance=0.0)


@pytest.fixture()
def make_state():
    """Factory for emotional states with explicit coordinates."""
    return _make_state

"""
Tests for anima.aspects — Hun/Po resolution, emotion nudges and utility biases.

Covers:
- Name resolution (pinyin, hanzi, enum values) and silent drop of unknowns
- Each emotion nudge, including conditional Po amplifiers
- Hun-before-Po ordering and final reclamping
- Utility biases and confrontation detection
"""

from __future__ import annotations

import pytest

from anima.aspects import (
    HunAspect,
    PoAspect,
    ResolvedAspect,
    apply_aspect_influence,
    apply_hun_bias,
    apply_po_bias,
    is_confrontational,
    mean_strength,
    resolve_aspect_name,
    resolve_hun,
    resolve_po,
)
from anima.affect.state import EmotionVector
from anima.types import DecisionOption, SoulAspect


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class TestResolution:

    @pytest.mark.parametrize("name", [
        "Zheng Zhong (正中)",
        "zheng_zhong",
        "ZhengZhong",
        "正中",
    ])
    def test_name_forms_resolve(self, name):
        assert resolve_aspect_name(name, HunAspect) is HunAspect.ZHENG_ZHONG

    def test_simplified_hanzi(self):
        assert resolve_aspect_name("灵慧", HunAspect) is HunAspect.LING_HUI

    def test_po_names(self):
        assert resolve_aspect_name("Que Yin (雀陰)", PoAspect) is PoAspect.QUE_YIN
        assert resolve_aspect_name("Shi Gou", PoAspect) is PoAspect.SHI_GOU

    def test_wrong_family_is_unrecognized(self):
        assert resolve_aspect_name("Zheng Zhong", PoAspect) is None

    def test_unknown_names_are_dropped(self):
        resolved = resolve_hun([
            SoulAspect("Wandering Star", 0.9),
            SoulAspect("Tai Guang (太光)", 0.4),
        ])
        assert resolved == [ResolvedAspect(HunAspect.TAI_GUANG, 0.4)]

    def test_strength_is_clamped(self):
        resolved = resolve_po([SoulAspect("Fu Shi", 1.7)])
        assert resolved[0].strength == 1.0

    def test_resolved_aspects_pass_through(self):
        already = ResolvedAspect(PoAspect.FEI_DU, 0.3)
        assert resolve_po([already]) == [already]
        assert resolve_hun([already]) == []

    def test_mean_strength(self):
        assert mean_strength([]) == 0.0
        aspects = [ResolvedAspect(HunAspect.TAI_GUANG, 0.2), ResolvedAspect(HunAspect.LING_HUI, 0.6)]
        assert mean_strength(aspects) == pytest.approx(0.4)


# ---------------------------------------------------------------------------
# Emotion nudges
# ---------------------------------------------------------------------------

class TestEmotionInfluence:

    def test_tai_guang_lifts_attractor(self, make_state):
        state = make_state()
        apply_aspect_influence(state, [SoulAspect("Tai Guang", 1.0)], [])
        assert state.attractor.valence == pytest.approx(0.3)
        assert state.attractor.arousal == pytest.approx(0.25)
        assert state.current == EmotionVector(0.2, 0.3, 0.1)

    def test_shuang_ling_raises_attractor_arousal(self, make_state):
        state = make_state()
        apply_aspect_influence(state, [SoulAspect("Shuang Ling", 0.5)], [])
        assert state.attractor.arousal == pytest.approx(0.325)

    def test_you_jing_nudges_current(self, make_state):
        state = make_state(current=(0.0, 0.5, 0.0))
        apply_aspect_influence(state, [SoulAspect("You Jing", 1.0)], [])
        assert state.current.arousal == pytest.approx(0.53)
        assert state.current.dominance == pytest.approx(-0.02)

    def test_zheng_zhong_intensifies_either_sign(self, make_state):
        state = make_state(current=(-0.5, 0.5, 0.0))
        apply_aspect_influence(state, [SoulAspect("Zheng Zhong", 1.0)], [])
        assert state.current.valence == pytest.approx(-0.55)

    def test_tian_chong_is_clamped(self, make_state):
        state = make_state(current=(0.95, 0.95, 0.0))
        apply_aspect_influence(state, [SoulAspect("Tian Chong", 1.0)], [])
        assert state.current.valence == 1.0
        assert state.current.arousal == 1.0

    def test_shi_gou_amplifies_fear_only(self, make_state):
        afraid = make_state(current=(-0.5, 0.5, -0.5))
        apply_aspect_influence(afraid, [], [SoulAspect("Shi Gou", 1.0)])
        assert afraid.current.arousal == pytest.approx(0.6)

        calm = make_state(current=(0.5, 0.5, -0.5))
        apply_aspect_influence(calm, [], [SoulAspect("Shi Gou", 1.0)])
        assert calm.current.arousal == pytest.approx(0.5)

    def test_fu_shi_amplifies_anger_only(self, make_state):
        angry = make_state(current=(-0.5, 0.5, 0.5))
        apply_aspect_influence(angry, [], [SoulAspect("Fu Shi", 1.0)])
        assert angry.current.arousal == pytest.approx(0.65)
        assert angry.current.dominance == pytest.approx(0.6)

        pleased = make_state(current=(0.5, 0.5, 0.5))
        apply_aspect_influence(pleased, [], [SoulAspect("Fu Shi", 1.0)])
        assert pleased.current.dominance == pytest.approx(0.5)

    def test_que_yin_amplifies_pleasure_only(self, make_state):
        state = make_state(current=(0.4, 0.5, 0.0))
        apply_aspect_influence(state, [], [SoulAspect("Que Yin", 0.5)])
        assert state.current.valence == pytest.approx(0.45)

        sad = make_state(current=(-0.4, 0.5, 0.0))
        apply_aspect_influence(sad, [], [SoulAspect("Que Yin", 0.5)])
        assert sad.current.valence == pytest.approx(-0.4)

    def test_fei_du_raises_dominance(self, make_state):
        state = make_state(current=(0.0, 0.5, 0.0))
        apply_aspect_influence(state, [], [SoulAspect("Fei Du", 1.0)])
        assert state.current.dominance == pytest.approx(0.05)

    def test_aspects_without_emotion_effect_are_inert(self, make_state):
        state = make_state(current=(0.1, 0.4, -0.2))
        apply_aspect_influence(
            state,
            [SoulAspect("Tong Ming", 1.0), SoulAspect("Ling Hui", 1.0)],
            [SoulAspect("Tun Zei", 1.0), SoulAspect("Chu Hui", 1.0), SoulAspect("Mystery", 1.0)],
        )
        assert state.current == EmotionVector(0.1, 0.4, -0.2)
        assert state.attractor == EmotionVector(0.2, 0.3, 0.1)

    def test_hun_applies_before_po(self, make_state):
        # Tian Chong lifts valence above zero, so Fu Shi no longer sees anger
        state = make_state(current=(-0.05, 0.5, 0.5))
        apply_aspect_influence(state, [SoulAspect("Tian Chong", 1.0)], [SoulAspect("Fu Shi", 1.0)])
        assert state.current.valence == pytest.approx(0.1)
        assert state.current.dominance == pytest.approx(0.5)

    def test_attractor_reclamped(self, make_state):
        state = make_state(attractor=(0.95, 0.02, 0.1))
        apply_aspect_influence(state, [SoulAspect("Tai Guang", 1.0)], [])
        assert state.attractor.valence == 1.0
        assert state.attractor.arousal == 0.0


# ---------------------------------------------------------------------------
# Utility biases
# ---------------------------------------------------------------------------

def _option(**overrides) -> DecisionOption:
    defaults = dict(
        id="opt",
        description="Do the thing",
        expected_utility=0.4,
        risk=0.5,
        effort_required=0.2,
        moral_alignment=0.5,
    )
    defaults.update(overrides)
    return DecisionOption(**defaults)


class TestUtilityBias:

    def test_zheng_zhong_rewards_morality(self):
        [biased] = apply_hun_bias([SoulAspect("Zheng Zhong", 1.0)], [_option()])
        assert biased.expected_utility == pytest.approx(0.55)

    def test_zheng_zhong_penalizes_immorality(self):
        [biased] = apply_hun_bias([SoulAspect("Zheng Zhong", 1.0)], [_option(moral_alignment=-1.0)])
        assert biased.expected_utility == pytest.approx(0.1)

    def test_tian_chong_and_ling_hui_add_flat_bonus(self):
        [biased] = apply_hun_bias(
            [SoulAspect("Tian Chong", 1.0), SoulAspect("Ling Hui", 1.0)],
            [_option()],
        )
        assert biased.expected_utility == pytest.approx(0.75)

    def test_shi_gou_is_risk_averse(self):
        [biased] = apply_po_bias([SoulAspect("Shi Gou", 1.0)], [_option()])
        assert biased.expected_utility == pytest.approx(0.2)

    def test_que_yin_only_rewards_attractive_options(self):
        low, high = apply_po_bias(
            [SoulAspect("Que Yin", 1.0)],
            [_option(id="low"), _option(id="high", expected_utility=0.6)],
        )
        assert low.expected_utility == pytest.approx(0.4)
        assert high.expected_utility == pytest.approx(0.9)

    def test_fu_shi_rewards_confrontation(self):
        plain, worded, tagged = apply_po_bias(
            [SoulAspect("Fu Shi", 1.0)],
            [
                _option(id="plain"),
                _option(id="worded", description="Confront the rival"),
                _option(id="tagged", tags={"aggressive"}),
            ],
        )
        assert plain.expected_utility == pytest.approx(0.4)
        assert worded.expected_utility == pytest.approx(0.65)
        assert tagged.expected_utility == pytest.approx(0.65)

    def test_bias_returns_copies(self):
        original = _option()
        [biased] = apply_hun_bias([SoulAspect("Tian Chong", 1.0)], [original])
        assert biased is not original
        assert original.expected_utility == pytest.approx(0.4)
        assert biased.id == original.id

    def test_is_confrontational(self):
        assert is_confrontational(_option(description="An aggressive bid"))
        assert is_confrontational(_option(tags=frozenset({"confrontational"})))
        assert not is_confrontational(_option(description="Walk away"))

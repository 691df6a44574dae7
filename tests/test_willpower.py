"""
Tests for anima.will.willpower — the ego-depletion resource.

Covers:
- exert: success cost, failure without mutation, exact-threshold success
- rest: recovery rate, capacity ceiling, timestamp
- is_depleted threshold
- train: growth, cap, one-directional
- from_config / to_dict / from_dict
"""

from __future__ import annotations

import pytest

from anima.config import WillpowerConfig
from anima.will.willpower import WillpowerState


class TestExert:

    def test_success_costs_effort_times_depletion_rate(self, fresh_willpower):
        assert fresh_willpower.exert(0.5) is True
        assert fresh_willpower.current == pytest.approx(1.0 - 0.5 * 0.05)

    def test_insufficient_willpower_fails_without_change(self):
        wp = WillpowerState(current=0.4)
        assert wp.exert(0.5) is False
        assert wp.current == 0.4

    def test_exactly_enough_succeeds(self):
        wp = WillpowerState(current=0.5)
        assert wp.exert(0.5) is True

    def test_never_negative(self):
        wp = WillpowerState(current=0.3, depletion_rate=5.0)
        assert wp.exert(0.3) is True
        assert wp.current == 0.0

    def test_repeated_exertion_eventually_fails(self):
        wp = WillpowerState(current=1.0, depletion_rate=0.5)
        results = [wp.exert(0.5) for _ in range(4)]
        assert results == [True, True, True, False]
        assert wp.current == pytest.approx(0.25)


class TestRest:

    def test_recovers_at_rate(self):
        wp = WillpowerState(current=0.5, recovery_rate=0.01)
        recovered = wp.rest(10.0, now=1234.0)
        assert wp.current == pytest.approx(0.6)
        assert recovered == pytest.approx(0.1)
        assert wp.last_rest_timestamp == 1234.0

    def test_recovery_capped_at_max(self):
        wp = WillpowerState(current=0.95, max=1.0, recovery_rate=0.01)
        wp.rest(100.0)
        assert wp.current == 1.0

    def test_negative_duration_recovers_nothing(self):
        wp = WillpowerState(current=0.5)
        wp.rest(-10.0)
        assert wp.current == 0.5


class TestDepletion:

    def test_below_threshold_is_depleted(self):
        assert WillpowerState(current=0.19).is_depleted()

    def test_threshold_itself_is_not_depleted(self):
        assert not WillpowerState(current=0.2).is_depleted()


class TestTrain:

    def test_grows_capacity_not_current(self):
        wp = WillpowerState(current=0.5, max=1.0)
        wp.train(0.25)
        assert wp.max == pytest.approx(1.25)
        assert wp.current == 0.5

    def test_capped_at_twice_baseline(self):
        wp = WillpowerState()
        wp.train(5.0)
        assert wp.max == 2.0

    def test_negative_training_ignored(self):
        wp = WillpowerState(max=1.5)
        wp.train(-1.0)
        assert wp.max == 1.5

    def test_rest_fills_new_headroom(self):
        wp = WillpowerState(current=1.0, max=1.0, recovery_rate=0.1)
        wp.train(0.5)
        wp.rest(10.0)
        assert wp.current == pytest.approx(1.5)


class TestConstruction:

    def test_from_config(self):
        config = WillpowerConfig(initial=0.8, depletion_rate=0.1, capacity_cap_multiplier=3.0)
        wp = WillpowerState.from_config(config)
        assert wp.current == pytest.approx(0.8)
        assert wp.max == pytest.approx(1.0)
        assert wp.depletion_rate == pytest.approx(0.1)
        assert wp.cap == pytest.approx(3.0)

    def test_dict_round_trip(self):
        wp = WillpowerState(current=0.3, max=1.4, last_rest_timestamp=99.0)
        restored = WillpowerState.from_dict(wp.to_dict())
        assert restored == wp

    def test_from_dict_clamps_current(self):
        restored = WillpowerState.from_dict({"current": 5.0, "max": 1.2})
        assert restored.current == pytest.approx(1.2)

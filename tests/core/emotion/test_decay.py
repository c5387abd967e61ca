"""시간 감쇠 테스트"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.emotion.baseline import initialize_emotions, resolve_baseline
from src.core.emotion.decay import (
    decay_emotions,
    hours_since_update,
    intensity_decay_multiplier,
    trust_decay_factor,
)
from src.core.emotion.delta import apply_delta
from src.core.emotion.models import EmotionState, EmotionType, Trait


def _state(t0, **values) -> EmotionState:
    """기본 상태에서 지정 값만 덮어쓴 상태"""
    base = initialize_emotions([], now=t0).values()
    base.update({EmotionType(k): v for k, v in values.items()})
    return EmotionState.from_values(base, t0)


# ── 보조 계산 ──


class TestTrustDecayFactor:
    @pytest.mark.parametrize(
        "trust,expected",
        [(-100, 1.5), (-50, 1.25), (0, 1.0), (50, 0.75), (100, 0.5)],
    )
    def test_factor(self, trust, expected):
        assert trust_decay_factor(trust) == pytest.approx(expected)

    def test_out_of_range_trust_clamped(self):
        assert trust_decay_factor(250) == 0.5
        assert trust_decay_factor(-250) == 1.5


class TestIntensityMultiplier:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, 1.0), (25, 1.0), (50, 1.0), (51, 0.75), (75, 0.75), (76, 0.5), (100, 0.5)],
    )
    def test_graduated(self, value, expected):
        assert intensity_decay_multiplier(value) == expected


# ── decay_emotions ──


class TestDecayEmotions:
    def test_zero_hours_is_identity(self, t0):
        state = _state(t0, joy=65, anger=40)
        assert decay_emotions(state, 0, 0, []) is state

    def test_negative_hours_is_identity(self, t0):
        state = _state(t0, joy=65)
        assert decay_emotions(state, -1.5, 50, [Trait.STOIC]) is state

    def test_strong_joy_one_hour(self, t0):
        """joy 65 (strong), 2.0/h × 0.75 → 1.5 감쇠 → 63.5"""
        result = decay_emotions(_state(t0, joy=65), 1, 0, [])
        assert result.joy == pytest.approx(63.5)

    def test_decay_downward(self, t0):
        result = decay_emotions(_state(t0, joy=40), 2, 0, [])
        assert result.joy == pytest.approx(36.0)  # 40 - 2.0 × 2

    def test_decay_upward(self, t0):
        result = decay_emotions(_state(t0, joy=5), 1, 0, [])
        assert result.joy == pytest.approx(7.0)

    def test_no_overshoot_upward(self, t0):
        result = decay_emotions(_state(t0, calm=19.5), 3, 0, [])
        assert result.calm == 20

    def test_no_overshoot_downward(self, t0):
        result = decay_emotions(_state(t0, joy=33), 100, 0, [])
        assert result.joy == 15

    def test_at_baseline_unchanged(self, t0):
        state = _state(t0)
        result = decay_emotions(state, 5, 0, [])
        assert result.values() == state.values()

    def test_timestamp_restamped(self, t0):
        later = t0 + timedelta(hours=1)
        result = decay_emotions(_state(t0, joy=50), 1, 0, [], now=later)
        assert result.last_updated == later

    def test_input_not_mutated(self, t0):
        state = _state(t0, joy=80)
        decay_emotions(state, 1, 0, [])
        assert state.joy == 80

    def test_fast_emotion_decays_more(self, t0):
        state = _state(t0, anger=50, affection=60)
        result = decay_emotions(state, 1, 0, [])
        anger_drop = state.anger - result.anger
        affection_drop = state.affection - result.affection
        assert anger_drop > affection_drop

    def test_strong_slower_than_moderate(self, t0):
        moderate = _state(t0, joy=50)
        strong = _state(t0, joy=65)
        moderate_drop = 50 - decay_emotions(moderate, 1, 0, []).joy
        strong_drop = 65 - decay_emotions(strong, 1, 0, []).joy
        assert moderate_drop == pytest.approx(2.0)
        assert strong_drop == pytest.approx(1.5)

    def test_intense_slower_than_strong(self, t0):
        strong_drop = 75 - decay_emotions(_state(t0, joy=75), 1, 0, []).joy
        intense_drop = 85 - decay_emotions(_state(t0, joy=85), 1, 0, []).joy
        assert intense_drop == pytest.approx(1.0)
        assert intense_drop < strong_drop

    def test_multiplier_uses_pre_decay_value(self, t0):
        """76에서 시작하면 구간을 내려가도 전체 구간에 0.5 적용"""
        result = decay_emotions(_state(t0, joy=76), 10, 0, [])
        assert result.joy == pytest.approx(66.0)  # 76 - 2.0 × 0.5 × 10

    def test_trait_adjusted_baseline(self, t0):
        traits = [Trait.OPTIMISTIC]
        state = apply_delta(initialize_emotions(traits, now=t0), {"joy": 20}, now=t0)
        assert state.joy == 45
        result = decay_emotions(state, 100, 0, traits)
        assert result.joy == 25


class TestRomanticTrust:
    def test_high_trust_slows(self, t0):
        state = _state(t0, romantic=60)
        low = 60 - decay_emotions(state, 1, 0, []).romantic
        high = 60 - decay_emotions(state, 1, 100, []).romantic
        assert high < low

    def test_max_trust_exactly_half(self, t0):
        state = _state(t0, romantic=60)
        neutral = 60 - decay_emotions(state, 2, 0, []).romantic
        trusted = 60 - decay_emotions(state, 2, 100, []).romantic
        assert trusted == neutral * 0.5

    def test_distrust_accelerates(self, t0):
        state = _state(t0, romantic=40)
        neutral = 40 - decay_emotions(state, 1, 0, []).romantic
        distrust = 40 - decay_emotions(state, 1, -100, []).romantic
        assert distrust == pytest.approx(neutral * 1.5)

    def test_trust_only_affects_romantic(self, t0):
        state = _state(t0, joy=60, romantic=60, anger=30)
        a = decay_emotions(state, 1, -100, [])
        b = decay_emotions(state, 1, 100, [])
        assert a.joy == b.joy
        assert a.anger == b.anger
        assert a.romantic != b.romantic


class TestConvergence:
    @pytest.mark.parametrize("trust", [-100, 0, 100])
    @pytest.mark.parametrize(
        "traits",
        [[], [Trait.STOIC], [Trait.ROMANTIC, Trait.FLIRTATIOUS], [Trait.MELANCHOLIC]],
    )
    def test_long_decay_reaches_baseline(self, t0, trust, traits):
        extremes = {e.value: (100 if i % 2 else 0) for i, e in enumerate(EmotionType)}
        state = _state(t0, **extremes)
        result = decay_emotions(state, 500, trust, traits)
        assert result.values() == resolve_baseline(traits)

    def test_repeated_small_steps_never_cross_baseline(self, t0):
        state = _state(t0, joy=90, anger=0.5, sadness=0)
        baselines = resolve_baseline([])
        for _ in range(200):
            state = decay_emotions(state, 0.25, 0, [])
            assert state.joy >= baselines[EmotionType.JOY]
            assert state.sadness <= baselines[EmotionType.SADNESS]
            assert state.anger >= baselines[EmotionType.ANGER]
            assert all(0 <= v <= 100 for v in state.values().values())


# ── hours_since_update ──


class TestHoursSinceUpdate:
    def test_datetimes(self, t0):
        assert hours_since_update(t0, t0 + timedelta(minutes=90)) == pytest.approx(1.5)

    def test_iso_strings(self):
        assert hours_since_update(
            "2026-01-01T00:00:00Z", "2026-01-01T06:30:00+00:00"
        ) == pytest.approx(6.5)

    def test_naive_treated_as_utc(self, t0):
        naive = datetime(2026, 1, 1, 10, 0)
        assert hours_since_update(naive, t0) == pytest.approx(2.0)

    def test_clock_skew_negative(self, t0):
        assert hours_since_update(t0 + timedelta(hours=1), t0) == pytest.approx(-1.0)

    def test_default_now(self):
        earlier = datetime.now(timezone.utc) - timedelta(hours=3)
        assert hours_since_update(earlier) == pytest.approx(3.0, abs=0.01)

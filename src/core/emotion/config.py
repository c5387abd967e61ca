"""감정 시스템 상수 테이블

기준치, 감쇠 속도, 특성 보정, 표시 라벨.
모두 MappingProxyType으로 감싼 읽기 전용. 런타임 수정 불가.
"""

from types import MappingProxyType
from typing import Mapping

from src.core.emotion.models import EmotionType, IntensityTier, Trait

_E = EmotionType

# ── 기준치 (감쇠 목표값) ─────────────────────────────────────

EMOTION_BASELINES: Mapping[EmotionType, float] = MappingProxyType(
    {
        _E.JOY: 15.0,
        _E.AFFECTION: 10.0,
        _E.EXCITEMENT: 5.0,
        _E.CALM: 20.0,
        _E.SADNESS: 5.0,
        _E.ANGER: 0.0,
        _E.ANXIETY: 5.0,
        _E.ROMANTIC: 10.0,
    }
)

# ── 감쇠 속도 (시간당 포인트) ────────────────────────────────

DECAY_RATES: Mapping[EmotionType, float] = MappingProxyType(
    {
        _E.JOY: 2.0,
        _E.AFFECTION: 0.8,  # 느림 (안정적)
        _E.EXCITEMENT: 2.5,  # 빠름
        _E.CALM: 1.2,
        _E.SADNESS: 1.5,
        _E.ANGER: 3.0,  # 가장 빠름
        _E.ANXIETY: 1.8,
        _E.ROMANTIC: 1.5,  # trust로 추가 보정
    }
)

# 강한 감정일수록 오래 남는다
INTENSITY_DECAY_MULTIPLIERS: Mapping[IntensityTier, float] = MappingProxyType(
    {
        IntensityTier.MILD: 1.0,
        IntensityTier.MODERATE: 1.0,
        IntensityTier.STRONG: 0.75,
        IntensityTier.INTENSE: 0.5,
    }
)

# ── 강도 구간 상한 (이하 포함) ───────────────────────────────
# (upper_bound, tier): 위에서 아래로 평가, 첫 매치 반환
INTENSITY_THRESHOLDS = (
    (25.0, IntensityTier.MILD),
    (50.0, IntensityTier.MODERATE),
    (75.0, IntensityTier.STRONG),
)
INTENSITY_TIER_DEFAULT = IntensityTier.INTENSE

# ── 특성별 기준치 보정 (가산) ────────────────────────────────

TRAIT_EMOTION_MODIFIERS: Mapping[str, Mapping[EmotionType, float]] = MappingProxyType(
    {
        trait.value: MappingProxyType(mods)
        for trait, mods in {
            Trait.OPTIMISTIC: {_E.JOY: 10, _E.SADNESS: -3},
            Trait.MELANCHOLIC: {_E.SADNESS: 10, _E.JOY: -5},
            Trait.PASSIONATE: {_E.EXCITEMENT: 10, _E.ROMANTIC: 10},
            Trait.STOIC: {_E.CALM: 15, _E.EXCITEMENT: -3, _E.ANGER: -5},
            Trait.OUTGOING: {_E.JOY: 5, _E.EXCITEMENT: 5, _E.ANXIETY: -3},
            Trait.RESERVED: {_E.CALM: 5, _E.ANXIETY: 3},
            Trait.ADVENTUROUS: {_E.EXCITEMENT: 5, _E.ANXIETY: -2},
            Trait.CAUTIOUS: {_E.ANXIETY: 5, _E.EXCITEMENT: -3},
            Trait.SPONTANEOUS: {_E.EXCITEMENT: 7, _E.CALM: -5},
            Trait.EMPATHETIC: {_E.AFFECTION: 5},
            Trait.NURTURING: {_E.AFFECTION: 7, _E.CALM: 3},
            Trait.FLIRTATIOUS: {_E.ROMANTIC: 10, _E.EXCITEMENT: 5},
            Trait.ROMANTIC: {_E.ROMANTIC: 15, _E.AFFECTION: 5},
            Trait.SLOW_BURN: {_E.ROMANTIC: -5, _E.CALM: 5},
            Trait.INTENSE: {_E.ROMANTIC: 10, _E.EXCITEMENT: 8},
        }.items()
    }
)

# ── 표시 라벨 (감정, 강도) → 문자열 ─────────────────────────

_LABEL_ROWS = {
    _E.JOY: ("content", "happy", "joyful", "ecstatic"),
    _E.AFFECTION: ("friendly", "warm", "affectionate", "adoring"),
    _E.EXCITEMENT: ("interested", "intrigued", "excited", "thrilled"),
    _E.CALM: ("neutral", "relaxed", "serene", "blissful"),
    _E.SADNESS: ("disappointed", "sad", "upset", "devastated"),
    _E.ANGER: ("annoyed", "irritated", "angry", "furious"),
    _E.ANXIETY: ("uneasy", "nervous", "anxious", "distressed"),
    _E.ROMANTIC: ("curious", "flirty", "romantic", "passionate"),
}

EMOTION_DISPLAY_LABELS: Mapping[EmotionType, Mapping[IntensityTier, str]] = (
    MappingProxyType(
        {
            emotion: MappingProxyType(dict(zip(IntensityTier, labels)))
            for emotion, labels in _LABEL_ROWS.items()
        }
    )
)

# ── 지배 감정 판정 ───────────────────────────────────────────

# 2순위가 1순위와 이 값 이내면 secondary 포함
SECONDARY_EMOTION_THRESHOLD = 10.0

# 1순위 포함 3개 이상이 이 범위 안이면 "복합" 상태
MIXED_EMOTION_THRESHOLD = 15.0
MIXED_EMOTION_MIN_COUNT = 3

# ── 클램프 범위 ──────────────────────────────────────────────

EMOTION_MIN = 0.0
EMOTION_MAX = 100.0
TRUST_MIN = -100.0
TRUST_MAX = 100.0

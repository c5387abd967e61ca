"""시간 경과에 따른 감정 감쇠

각 감정은 특성 보정 기준치를 향해 움직이며 기준치를 넘어가지 않는다.
- 감정별 기본 속도 (DECAY_RATES)
- 현재 강도가 높을수록 느림 (INTENSITY_DECAY_MULTIPLIERS)
- romantic만 trust로 속도 보정
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, Optional, Union

from src.core.emotion.baseline import TraitLike, clamp_emotion, resolve_baseline
from src.core.emotion.config import (
    DECAY_RATES,
    INTENSITY_DECAY_MULTIPLIERS,
    TRUST_MAX,
    TRUST_MIN,
)
from src.core.emotion.display import intensity_tier
from src.core.emotion.models import EmotionState, EmotionType, utc_now
from src.core.logging import get_logger

logger = get_logger(__name__)

_SECONDS_PER_HOUR = 3600.0


def trust_decay_factor(trust: float) -> float:
    """romantic 감쇠 배율.

    trust=-100 → 1.5, 0 → 1.0, +100 → 0.5. 범위 밖 trust는 클램프.
    """
    trust = max(TRUST_MIN, min(TRUST_MAX, trust))
    return 1.0 - trust / 200


def intensity_decay_multiplier(value: float) -> float:
    """감쇠 전 값의 강도 구간에 따른 배율"""
    return INTENSITY_DECAY_MULTIPLIERS[intensity_tier(value)]


def _decay_toward(current: float, baseline: float, amount: float) -> float:
    """기준치 방향으로 최대 amount 이동. 기준치 초과 없음."""
    if current > baseline:
        return max(baseline, current - amount)
    return min(baseline, current + amount)


def decay_emotions(
    state: EmotionState,
    hours_elapsed: float,
    trust: float,
    traits: Iterable[TraitLike] = (),
    now: Optional[datetime] = None,
) -> EmotionState:
    """경과 시간만큼 감정을 기준치로 감쇠.

    Args:
        state: 현재 감정 상태
        hours_elapsed: 경과 시간 (소수 가능). 0 이하면 입력 그대로 반환.
        trust: 관계 신뢰도 (-100 ~ +100). romantic 감쇠에만 영향.
        traits: 성격 특성 (기준치 보정)
        now: 결과에 기록할 시각. None이면 현재 UTC.

    Returns:
        감쇠가 적용된 새 EmotionState
    """
    if hours_elapsed <= 0:
        return state

    baselines = resolve_baseline(traits)
    result: Dict[EmotionType, float] = {}

    for emotion, current in state.values().items():
        baseline = baselines[emotion]
        if current == baseline:
            result[emotion] = current
            continue

        rate = DECAY_RATES[emotion]
        if emotion is EmotionType.ROMANTIC:
            rate *= trust_decay_factor(trust)

        total_decay = rate * intensity_decay_multiplier(current) * hours_elapsed
        result[emotion] = clamp_emotion(_decay_toward(current, baseline, total_decay))

    logger.debug(
        f"감정 감쇠: {hours_elapsed:.2f}h trust={trust:+.0f} "
        f"joy {state.joy:.1f}→{result[EmotionType.JOY]:.1f}"
    )
    return EmotionState.from_values(result, now or utc_now())


def hours_since_update(
    last_updated: Union[datetime, str],
    now: Optional[Union[datetime, str]] = None,
) -> float:
    """두 시각 사이 경과 시간 (시간 단위, 소수).

    ISO-8601 문자열도 허용. tz 정보 없는 값은 UTC로 간주.
    시계 오차로 음수가 나올 수 있으며 그대로 반환한다
    (decay_emotions는 0 이하를 무시).
    """
    start = _as_utc(last_updated)
    end = _as_utc(now) if now is not None else utc_now()
    return (end - start).total_seconds() / _SECONDS_PER_HOUR


def _as_utc(value: Union[datetime, str]) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

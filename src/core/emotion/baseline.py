"""성격 특성 → 감정 기준치

전부 순수 함수. 외부 의존 없음.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional, Union

from src.core.emotion.config import (
    EMOTION_BASELINES,
    EMOTION_MAX,
    EMOTION_MIN,
    TRAIT_EMOTION_MODIFIERS,
)
from src.core.emotion.models import EmotionState, EmotionType, Trait, utc_now

TraitLike = Union[Trait, str]


def clamp_emotion(value: float) -> float:
    """0 ~ 100 클램프."""
    return max(EMOTION_MIN, min(EMOTION_MAX, value))


def _trait_key(trait: TraitLike) -> str:
    return trait.value if isinstance(trait, Trait) else str(trait)


def resolve_baseline(traits: Iterable[TraitLike] = ()) -> Dict[EmotionType, float]:
    """특성 보정이 적용된 감정별 기준치.

    보정치를 전부 합산한 뒤 마지막에 한 번만 클램프한다.
    중간 클램프가 없으므로 특성 처리 순서와 무관하게 같은 결과.
    미등록 특성은 보정 없음.
    """
    totals: Dict[EmotionType, float] = dict(EMOTION_BASELINES)

    for key in {_trait_key(t) for t in traits}:
        for emotion, offset in TRAIT_EMOTION_MODIFIERS.get(key, {}).items():
            totals[emotion] += offset

    return {emotion: clamp_emotion(total) for emotion, total in totals.items()}


def initialize_emotions(
    traits: Iterable[TraitLike] = (),
    now: Optional[datetime] = None,
) -> EmotionState:
    """캐릭터 생성 시 초기 감정 상태.

    Args:
        traits: 성격 특성 집합
        now: 기록할 시각. None이면 현재 UTC.

    Returns:
        특성 보정 기준치로 채운 EmotionState

    Example:
        >>> state = initialize_emotions([Trait.OPTIMISTIC])
        >>> state.joy
        25.0
    """
    return EmotionState.from_values(resolve_baseline(traits), now or utc_now())

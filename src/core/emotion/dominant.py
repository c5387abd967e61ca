"""지배 감정 판정 (UI/내러티브 요약용)"""

from typing import List, Tuple

from src.core.emotion.config import (
    MIXED_EMOTION_MIN_COUNT,
    MIXED_EMOTION_THRESHOLD,
    SECONDARY_EMOTION_THRESHOLD,
)
from src.core.emotion.display import emotion_display
from src.core.emotion.models import DominantEmotions, EmotionState, EmotionType


def rank_emotions(state: EmotionState) -> List[Tuple[EmotionType, float]]:
    """값 내림차순 정렬. 동점은 EmotionType 선언 순서 (안정 정렬)."""
    return sorted(state.values().items(), key=lambda pair: pair[1], reverse=True)


def dominant_emotions(state: EmotionState) -> DominantEmotions:
    """1순위 + (근접 시) 2순위 감정.

    2순위는 1순위와의 차이가 SECONDARY_EMOTION_THRESHOLD 이하일 때만 포함.
    """
    ranked = rank_emotions(state)
    (top, top_value), (second, second_value) = ranked[0], ranked[1]

    primary = emotion_display(top, top_value)
    if top_value - second_value <= SECONDARY_EMOTION_THRESHOLD:
        return DominantEmotions(primary, emotion_display(second, second_value))
    return DominantEmotions(primary)


def is_mixed_state(state: EmotionState) -> bool:
    """1순위 포함 3개 이상의 감정이 MIXED_EMOTION_THRESHOLD 안에 몰려 있는지"""
    ranked = rank_emotions(state)
    top_value = ranked[0][1]
    close = [v for _, v in ranked if top_value - v <= MIXED_EMOTION_THRESHOLD]
    return len(close) >= MIXED_EMOTION_MIN_COUNT

"""감정 값 → 강도 구간 + 표시 라벨"""

from src.core.emotion.config import (
    EMOTION_DISPLAY_LABELS,
    INTENSITY_THRESHOLDS,
    INTENSITY_TIER_DEFAULT,
)
from src.core.emotion.models import EmotionDisplay, EmotionType, IntensityTier


def intensity_tier(value: float) -> IntensityTier:
    """강도 구간 매칭. 0은 mild."""
    for upper, tier in INTENSITY_THRESHOLDS:
        if value <= upper:
            return tier
    return INTENSITY_TIER_DEFAULT


def emotion_display(emotion: EmotionType, value: float) -> EmotionDisplay:
    """(감정, 값) → 표시 레코드

    Example:
        >>> emotion_display(EmotionType.JOY, 72).label
        'joyful'
    """
    emotion = EmotionType(emotion)
    tier = intensity_tier(value)
    return EmotionDisplay(
        emotion=emotion,
        intensity=tier,
        value=value,
        label=EMOTION_DISPLAY_LABELS[emotion][tier],
    )

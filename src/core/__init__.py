"""NPC Emotion Engine Core"""
__version__ = "0.1.0"

from src.core.emotion import (
    DominantEmotions,
    EmotionDelta,
    EmotionDisplay,
    EmotionState,
    EmotionType,
    IntensityTier,
    Trait,
    apply_delta,
    decay_emotions,
    dominant_emotions,
    emotion_display,
    initialize_emotions,
    resolve_baseline,
)

__all__ = [
    "DominantEmotions",
    "EmotionDelta",
    "EmotionDisplay",
    "EmotionState",
    "EmotionType",
    "IntensityTier",
    "Trait",
    "apply_delta",
    "decay_emotions",
    "dominant_emotions",
    "emotion_display",
    "initialize_emotions",
    "resolve_baseline",
]

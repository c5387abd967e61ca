"""감정 시뮬레이션 Core 패키지. 공개 API"""

from src.core.emotion.models import (
    DominantEmotions,
    EmotionDelta,
    EmotionDisplay,
    EmotionState,
    EmotionType,
    IntensityTier,
    Trait,
)
from src.core.emotion.baseline import (
    clamp_emotion,
    initialize_emotions,
    resolve_baseline,
)
from src.core.emotion.delta import apply_delta
from src.core.emotion.decay import (
    decay_emotions,
    hours_since_update,
    intensity_decay_multiplier,
    trust_decay_factor,
)
from src.core.emotion.display import emotion_display, intensity_tier
from src.core.emotion.dominant import (
    dominant_emotions,
    is_mixed_state,
    rank_emotions,
)

__all__ = [
    "DominantEmotions",
    "EmotionDelta",
    "EmotionDisplay",
    "EmotionState",
    "EmotionType",
    "IntensityTier",
    "Trait",
    "clamp_emotion",
    "initialize_emotions",
    "resolve_baseline",
    "apply_delta",
    "decay_emotions",
    "hours_since_update",
    "intensity_decay_multiplier",
    "trust_decay_factor",
    "emotion_display",
    "intensity_tier",
    "dominant_emotions",
    "is_mixed_state",
    "rank_emotions",
]

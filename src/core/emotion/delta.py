"""이벤트 기반 순간 감정 변동"""

from dataclasses import replace
from datetime import datetime
from typing import Mapping, Optional, Union

from src.core.emotion.baseline import clamp_emotion
from src.core.emotion.models import EmotionDelta, EmotionState, utc_now

DeltaLike = Union[EmotionDelta, Mapping]


def apply_delta(
    state: EmotionState,
    deltas: DeltaLike,
    now: Optional[datetime] = None,
) -> EmotionState:
    """지정된 감정에만 변동량 가산 후 0~100 클램프.

    변동이 비어 있어도 last_updated는 항상 갱신한다
    (이후 감쇠 계산의 경과 시간 기준점).
    입력 스냅샷은 변경하지 않는다.
    """
    if not isinstance(deltas, EmotionDelta):
        deltas = EmotionDelta.from_mapping(deltas)

    changes = {
        emotion.value: clamp_emotion(state.get(emotion) + amount)
        for emotion, amount in deltas.items()
    }
    return replace(state, last_updated=now or utc_now(), **changes)

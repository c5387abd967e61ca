"""Emotion Service: Core 감정 엔진과 게임 루프를 연결

캐릭터별 감정 레코드를 메모리에 보관한다 (영속화는 외부 담당).
Service → Core 허용, Service → Service 금지 (EventBus 경유).
"""

from dataclasses import dataclass, field
from datetime import datetime
from itertools import count
from typing import Dict, FrozenSet, Iterable, List, Optional

from src.config import settings
from src.core.emotion.baseline import TraitLike, initialize_emotions
from src.core.emotion.decay import decay_emotions, hours_since_update
from src.core.emotion.delta import DeltaLike, apply_delta
from src.core.emotion.dominant import dominant_emotions
from src.core.emotion.models import DominantEmotions, EmotionState, Trait, utc_now
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class EmotionRecord:
    """캐릭터 1명의 감정 추적 정보"""

    npc_id: str
    state: EmotionState
    traits: FrozenSet[str] = field(default_factory=frozenset)
    trust: float = 0.0  # -100 ~ +100


def _normalize_traits(traits: Iterable[TraitLike]) -> FrozenSet[str]:
    return frozenset(t.value if isinstance(t, Trait) else str(t) for t in traits)


class EmotionService:
    """감정 초기화, 이벤트 변동, 시간 감쇠, 지배 감정 조회"""

    def __init__(self, event_bus: EventBus) -> None:
        self._bus = event_bus
        self._records: Dict[str, EmotionRecord] = {}
        self._emit_seq = count(1)

    # ── 추적 등록/해제 ───────────────────────────────────────

    def track(
        self,
        npc_id: str,
        traits: Iterable[TraitLike] = (),
        trust: Optional[float] = None,
        now: Optional[datetime] = None,
    ) -> EmotionState:
        """신규 캐릭터 감정 초기화. 이미 추적 중이면 기존 상태 반환."""
        existing = self._records.get(npc_id)
        if existing is not None:
            logger.warning(f"이미 추적 중인 캐릭터: {npc_id}")
            return existing.state

        trait_set = _normalize_traits(traits)
        state = initialize_emotions(trait_set, now)
        self._records[npc_id] = EmotionRecord(
            npc_id=npc_id,
            state=state,
            traits=trait_set,
            trust=settings.DEFAULT_TRUST if trust is None else trust,
        )
        logger.info(f"감정 추적 시작: {npc_id} traits={sorted(trait_set)}")

        self._bus.emit(
            GameEvent(
                event_type=EventTypes.EMOTION_INITIALIZED,
                data={"npc_id": npc_id, "emotions": state.to_dict()},
                source=self._source(npc_id),
            )
        )
        return state

    def untrack(self, npc_id: str) -> bool:
        """추적 해제. 미등록이면 False."""
        if self._records.pop(npc_id, None) is None:
            return False
        logger.info(f"감정 추적 해제: {npc_id}")
        return True

    # ── 조회 ─────────────────────────────────────────────────

    def get_record(self, npc_id: str) -> Optional[EmotionRecord]:
        return self._records.get(npc_id)

    def tracked_ids(self) -> List[str]:
        return list(self._records)

    def current_state(
        self, npc_id: str, now: Optional[datetime] = None
    ) -> EmotionState:
        """마지막 갱신 이후 경과 시간만큼 감쇠를 반영한 상태 (지연 감쇠)"""
        record = self._require(npc_id)
        now = now or utc_now()
        hours = hours_since_update(record.state.last_updated, now)
        decayed = decay_emotions(record.state, hours, record.trust, record.traits, now)
        self._update(record, decayed)
        return record.state

    def dominant(self, npc_id: str, now: Optional[datetime] = None) -> DominantEmotions:
        return dominant_emotions(self.current_state(npc_id, now))

    # ── 변동 ─────────────────────────────────────────────────

    def set_trust(self, npc_id: str, trust: float) -> None:
        record = self._require(npc_id)
        record.trust = trust
        logger.debug(f"trust 갱신: {npc_id} → {trust:+.1f}")

    def apply_event(
        self,
        npc_id: str,
        deltas: DeltaLike,
        now: Optional[datetime] = None,
    ) -> EmotionState:
        """이벤트 변동 적용. 적용 전 경과 시간 감쇠를 먼저 반영한다."""
        now = now or utc_now()
        before = self.current_state(npc_id, now)
        record = self._records[npc_id]
        self._update(record, apply_delta(before, deltas, now))
        logger.debug(f"감정 변동: {npc_id} {record.state.to_dict()}")
        return record.state

    def advance(
        self, hours: float, now: Optional[datetime] = None
    ) -> Dict[str, EmotionState]:
        """추적 중인 전 캐릭터에 hours만큼 감쇠 적용 (턴 진행용)

        now는 갱신 시각 기록용. 시뮬레이션 시계를 쓰는 호출자는 직접 넘긴다.
        """
        now = now or utc_now()
        results: Dict[str, EmotionState] = {}
        for record in list(self._records.values()):
            decayed = decay_emotions(
                record.state, hours, record.trust, record.traits, now
            )
            self._update(record, decayed)
            results[record.npc_id] = record.state
        return results

    # ── 내부 ─────────────────────────────────────────────────

    def _require(self, npc_id: str) -> EmotionRecord:
        record = self._records.get(npc_id)
        if record is None:
            raise ValueError(f"Emotion record not found: {npc_id}")
        return record

    def _source(self, npc_id: str) -> str:
        """발행마다 고유한 source (같은 턴 내 반복 발행 허용)"""
        return f"emotion_service:{npc_id}#{next(self._emit_seq)}"

    def _update(self, record: EmotionRecord, new_state: EmotionState) -> None:
        """상태 교체 + 지배 감정(종류/강도) 변화 시 EMOTION_CHANGED 발행"""
        old_primary = dominant_emotions(record.state).primary
        record.state = new_state
        new_primary = dominant_emotions(new_state).primary

        if (old_primary.emotion, old_primary.intensity) == (
            new_primary.emotion,
            new_primary.intensity,
        ):
            return

        logger.info(
            f"지배 감정 변화: {record.npc_id} "
            f"{old_primary.label} → {new_primary.label}"
        )
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.EMOTION_CHANGED,
                data={
                    "npc_id": record.npc_id,
                    "old_emotion": old_primary.emotion.value,
                    "old_label": old_primary.label,
                    "new_emotion": new_primary.emotion.value,
                    "new_label": new_primary.label,
                    "new_intensity": new_primary.intensity.value,
                },
                source=self._source(record.npc_id),
            )
        )

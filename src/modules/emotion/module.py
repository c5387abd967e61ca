"""EmotionModule: GameModule 인터페이스 구현

EmotionService를 래핑하여 ModuleManager 생명주기에 통합.
EventBus 구독: npc_created, npc_removed, trust_changed, emotion_event.
"""

from __future__ import annotations

from typing import Optional

from src.config import settings
from src.core.emotion.models import DominantEmotions, EmotionState
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.modules.base import GameContext, GameModule
from src.services.emotion_service import EmotionService

logger = get_logger(__name__)


class EmotionModule(GameModule):
    """감정 시스템 모듈

    담당:
    - NPC 생성/제거에 맞춘 감정 추적 등록/해제
    - 관계 trust 갱신 반영 (romantic 감쇠 속도)
    - 게임플레이 결과 감정 변동 적용
    - 턴 처리: 전 캐릭터 시간 감쇠
    """

    def __init__(self, event_bus: EventBus) -> None:
        super().__init__()
        self._bus = event_bus
        self._service: Optional[EmotionService] = None

    @property
    def name(self) -> str:
        return "emotion"

    @property
    def service(self) -> Optional[EmotionService]:
        return self._service

    def on_enable(self) -> None:
        self._service = EmotionService(self._bus)
        self._bus.subscribe(EventTypes.NPC_CREATED, self._handle_npc_created)
        self._bus.subscribe(EventTypes.NPC_REMOVED, self._handle_npc_removed)
        self._bus.subscribe(EventTypes.TRUST_CHANGED, self._handle_trust_changed)
        self._bus.subscribe(EventTypes.EMOTION_EVENT, self._handle_emotion_event)
        logger.info("emotion 모듈 활성화")

    def on_disable(self) -> None:
        self._bus.unsubscribe(EventTypes.NPC_CREATED, self._handle_npc_created)
        self._bus.unsubscribe(EventTypes.NPC_REMOVED, self._handle_npc_removed)
        self._bus.unsubscribe(EventTypes.TRUST_CHANGED, self._handle_trust_changed)
        self._bus.unsubscribe(EventTypes.EMOTION_EVENT, self._handle_emotion_event)
        self._service = None
        logger.info("emotion 모듈 비활성화")

    def on_turn(self, context: GameContext) -> None:
        """턴 처리: 경과 게임 시간만큼 감쇠"""
        if self._service is None:
            return
        hours = context.hours_elapsed or settings.GAME_HOURS_PER_TURN
        self._service.advance(hours)

    # ── EventBus 핸들러 ────────────────────────────────────────

    def _handle_npc_created(self, event: GameEvent) -> None:
        if self._service is None:
            logger.warning("emotion: service 미초기화 상태에서 npc_created 수신")
            return
        self._service.track(
            event.data["npc_id"],
            event.data.get("traits", []),
            event.data.get("trust"),
        )

    def _handle_npc_removed(self, event: GameEvent) -> None:
        if self._service is None:
            return
        self._service.untrack(event.data["npc_id"])

    def _handle_trust_changed(self, event: GameEvent) -> None:
        """관계 모듈이 계산한 trust 반영. 미추적 NPC는 무시."""
        if self._service is None:
            return
        npc_id = event.data["npc_id"]
        if self._service.get_record(npc_id) is None:
            logger.debug(f"emotion: 미추적 NPC trust 변경 무시 {npc_id}")
            return
        self._service.set_trust(npc_id, event.data["trust"])

    def _handle_emotion_event(self, event: GameEvent) -> None:
        """게임플레이 결과 감정 변동 (data["deltas"]: 감정명 → 변동량)"""
        if self._service is None:
            logger.warning("emotion: service 미초기화 상태에서 emotion_event 수신")
            return
        npc_id = event.data["npc_id"]
        deltas = event.data.get("deltas", {})
        self._service.apply_event(npc_id, deltas)
        logger.info(f"emotion: {npc_id} 변동 적용 ({event.data.get('reason', 'event')})")

    # ── 공개 쿼리 API ──────────────────────────────────────────

    def get_state(self, npc_id: str) -> Optional[EmotionState]:
        if self._service is None or self._service.get_record(npc_id) is None:
            return None
        return self._service.current_state(npc_id)

    def get_dominant(self, npc_id: str) -> Optional[DominantEmotions]:
        if self._service is None or self._service.get_record(npc_id) is None:
            return None
        return self._service.dominant(npc_id)

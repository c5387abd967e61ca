"""EventBus - 모듈/서비스 간 동기 이벤트 전달

규칙:
- 모듈은 다른 모듈을 직접 import하지 않고 이벤트로만 통신한다
- 이벤트 data는 식별자와 원시 값 위주 (감정 스냅샷 객체 금지)
- 한 턴 내 전파 깊이 최대 MAX_DEPTH
- 같은 체인에서 동일 source:event_type 재발행 금지
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5


@dataclass
class GameEvent:
    """이벤트 컨테이너

    Args:
        event_type: EventTypes 상수 (예: "emotion_changed")
        data: 페이로드 (예: {"npc_id": "npc-001", "deltas": {"joy": 10}})
        source: 발행 주체 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    depth: int = field(default=0, repr=False)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 예:
        bus = EventBus()
        bus.subscribe(EventTypes.NPC_CREATED, emotion_module.handle_npc_created)
        bus.emit(GameEvent(EventTypes.NPC_CREATED, {"npc_id": "npc-001"}, "npc_core"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._depth = 0
        self._chain: Set[str] = set()

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug(f"EventBus 구독: {event_type} → {handler.__qualname__}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """미등록 핸들러 해제는 경고만 남긴다"""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(f"EventBus 구독 해제: {event_type} → {handler.__qualname__}")
        else:
            logger.warning(f"핸들러 미등록: {event_type} → {handler.__qualname__}")

    def emit(self, event: GameEvent) -> None:
        """등록된 핸들러를 순서대로 동기 호출.

        깊이 초과 또는 체인 내 중복이면 무시.
        핸들러 예외는 로그만 남기고 나머지 핸들러는 계속 호출한다.
        """
        if self._depth >= MAX_DEPTH:
            logger.warning(
                f"EventBus 전파 깊이 초과 ({MAX_DEPTH}): "
                f"{event.source}:{event.event_type} 무시됨"
            )
            return

        chain_key = f"{event.source}:{event.event_type}"
        if chain_key in self._chain:
            logger.warning(f"EventBus 중복 이벤트 차단: {chain_key}")
            return
        self._chain.add(chain_key)
        event.depth = self._depth

        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug(f"EventBus: {event.event_type} 구독자 없음")
            return

        logger.debug(
            f"EventBus 전파: {event.event_type} (source={event.source}, "
            f"depth={self._depth}, handlers={len(handlers)})"
        )
        self._depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        f"EventBus 핸들러 에러: {handler.__qualname__} "
                        f"(event={event.event_type})"
                    )
        finally:
            self._depth -= 1

    def reset_chain(self) -> None:
        """턴 종료 시 호출. 중복 추적 초기화."""
        self._chain.clear()
        self._depth = 0

    def clear(self) -> None:
        """모든 구독 해제 (테스트용)"""
        self._handlers.clear()
        self.reset_chain()

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())

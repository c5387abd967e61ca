"""모듈 관리자 - 등록, 활성화/비활성화, 의존성 검증, 턴 전파"""

from typing import Dict, List, Optional

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.modules.base import GameContext, GameModule

logger = get_logger(__name__)


class ModuleManager:
    """모듈 생명주기 관리. EventBus를 소유하고 모듈에 공유한다."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._modules: Dict[str, GameModule] = {}
        self._event_bus = event_bus or EventBus()

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def modules(self) -> Dict[str, GameModule]:
        """등록된 모듈 (복사본)"""
        return dict(self._modules)

    def get_enabled_modules(self) -> List[GameModule]:
        return [m for m in self._modules.values() if m.enabled]

    def register(self, module: GameModule) -> None:
        """모듈 등록. 같은 이름이면 경고 후 덮어쓰기."""
        if module.name in self._modules:
            logger.warning(f"모듈 덮어쓰기: {module.name}")
        self._modules[module.name] = module
        logger.info(f"모듈 등록: {module.name}")

    def enable(self, name: str) -> bool:
        """모듈 활성화. 미등록이거나 의존성 미충족이면 False."""
        module = self._modules.get(name)
        if module is None:
            logger.error(f"모듈 미등록: {name}")
            return False
        if module.enabled:
            return True

        for dep in module.dependencies:
            if not self.is_enabled(dep):
                logger.warning(f"의존성 미충족: {name} requires {dep}")
                return False

        module.on_enable()
        module.enabled = True
        logger.info(f"모듈 활성화: {name}")
        return True

    def disable(self, name: str) -> bool:
        """모듈 비활성화. 이 모듈에 의존하는 모듈을 먼저 비활성화 (cascade)."""
        module = self._modules.get(name)
        if module is None:
            logger.error(f"모듈 미등록: {name}")
            return False
        if not module.enabled:
            return True

        for other in self._modules.values():
            if name in other.dependencies and other.enabled:
                logger.info(f"cascade 비활성화: {other.name} (depends on {name})")
                self.disable(other.name)

        module.on_disable()
        module.enabled = False
        logger.info(f"모듈 비활성화: {name}")
        return True

    def process_turn(self, context: GameContext) -> None:
        """활성 모듈 on_turn 순차 호출 → TURN_PROCESSED 발행 → 체인 초기화"""
        for module in self.get_enabled_modules():
            module.on_turn(context)

        self._event_bus.emit(
            GameEvent(
                event_type=EventTypes.TURN_PROCESSED,
                data={"turn": context.current_turn},
                source="module_manager",
            )
        )
        self._event_bus.reset_chain()

    def is_enabled(self, name: str) -> bool:
        module = self._modules.get(name)
        return module.enabled if module else False

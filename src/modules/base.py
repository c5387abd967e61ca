"""모듈 기반 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class GameContext:
    """모듈에 전달되는 턴 컨텍스트"""

    current_turn: int
    hours_elapsed: float = 0.0  # 이번 턴 경과 게임 시간. 0이면 설정값 사용

    # 모듈이 추가 데이터를 넣을 수 있는 확장 슬롯
    extra: Dict[str, Any] = field(default_factory=dict)


class GameModule(ABC):
    """게임 루프에 붙는 모듈의 기반 인터페이스

    규칙:
    - 모듈은 다른 모듈을 직접 import하지 않는다
    - 모듈 간 통신은 EventBus를 경유한다
    - Module → Core, Module → Service는 허용
    """

    _enabled: bool

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모듈 고유 이름 (예: 'emotion')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """먼저 활성화되어야 하는 모듈 이름 목록. 기본값 없음."""
        return []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self) -> None:
        """활성화 시 초기화 (서비스 생성, 이벤트 구독)"""
        ...

    @abstractmethod
    def on_disable(self) -> None:
        """비활성화 시 정리 (구독 해제)"""
        ...

    @abstractmethod
    def on_turn(self, context: GameContext) -> None:
        """매 턴 호출"""
        ...

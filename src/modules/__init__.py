"""게임 루프 모듈 시스템"""

from src.modules.base import GameContext, GameModule
from src.modules.module_manager import ModuleManager

__all__ = ["GameModule", "GameContext", "ModuleManager"]

"""Emotion engine bootstrap: logging + ModuleManager wiring."""

from src.config import settings
from src.core.logging import get_logger, setup_logging
from src.modules.emotion.module import EmotionModule
from src.modules.module_manager import ModuleManager

logger = get_logger(__name__)


def create_module_manager() -> ModuleManager:
    """로깅 설정 후 emotion 모듈이 활성화된 ModuleManager 반환"""
    setup_logging(settings.LOG_LEVEL, settings.DEBUG)

    manager = ModuleManager()
    manager.register(EmotionModule(manager.event_bus))
    manager.enable("emotion")
    logger.info(
        f"Emotion engine initialized "
        f"(hours_per_turn={settings.GAME_HOURS_PER_TURN})"
    )
    return manager

"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Emotion engine runtime settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    Emotion tables (baselines, decay rates, labels) are code constants
    in src.core.emotion.config, not settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 게임 1턴당 감쇠에 적용할 경과 시간 (시간 단위)
    GAME_HOURS_PER_TURN: float = 1.0

    # 관계 정보 수신 전 기본 trust
    DEFAULT_TRUST: float = 0.0


settings = Settings()

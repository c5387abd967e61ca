"""Shared test fixtures."""

from datetime import datetime, timezone

import pytest

from src.core.emotion.baseline import initialize_emotions
from src.core.emotion.models import EmotionState
from src.core.event_bus import EventBus

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def t0() -> datetime:
    """고정 기준 시각 (UTC)"""
    return T0


@pytest.fixture()
def base_state() -> EmotionState:
    """특성 없는 기본 감정 상태"""
    return initialize_emotions([], now=T0)


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()

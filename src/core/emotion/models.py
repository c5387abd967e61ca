"""감정 시스템 도메인 모델

저장소/전송 무관 순수 데이터 클래스.
모든 스냅샷은 불변(frozen). 엔진 연산은 새 인스턴스를 반환한다.
"""

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


class EmotionType(str, Enum):
    """감정 8종. 선언 순서 = 동점 시 우선순위."""

    JOY = "joy"
    AFFECTION = "affection"
    EXCITEMENT = "excitement"
    CALM = "calm"
    SADNESS = "sadness"
    ANGER = "anger"
    ANXIETY = "anxiety"
    ROMANTIC = "romantic"


class IntensityTier(str, Enum):
    """강도 구간 4단계"""

    MILD = "mild"  # 0~25
    MODERATE = "moderate"  # 26~50
    STRONG = "strong"  # 51~75
    INTENSE = "intense"  # 76~100


class Trait(str, Enum):
    """감정 기준치를 보정하는 성격 특성"""

    # 감정 스타일
    OPTIMISTIC = "optimistic"
    MELANCHOLIC = "melancholic"
    PASSIONATE = "passionate"
    STOIC = "stoic"

    # 사교 에너지
    OUTGOING = "outgoing"
    RESERVED = "reserved"

    # 위험 성향
    ADVENTUROUS = "adventurous"
    CAUTIOUS = "cautious"
    SPONTANEOUS = "spontaneous"

    # 대인 관계
    EMPATHETIC = "empathetic"
    NURTURING = "nurturing"

    # 연애 성향
    FLIRTATIOUS = "flirtatious"
    ROMANTIC = "romantic"
    SLOW_BURN = "slow_burn"
    INTENSE = "intense"


def utc_now() -> datetime:
    """현재 시각 (UTC, tz-aware)"""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EmotionState:
    """캐릭터 1명의 감정 스냅샷

    각 값: 0.0 ~ 100.0 (엔진 연산 후 항상 클램프 보장)
    """

    joy: float
    affection: float
    excitement: float
    calm: float
    sadness: float
    anger: float
    anxiety: float
    romantic: float
    last_updated: datetime

    @classmethod
    def from_values(
        cls,
        values: Mapping[EmotionType, float],
        last_updated: Optional[datetime] = None,
    ) -> "EmotionState":
        """EmotionType → 값 매핑에서 생성. 8종 전부 필요."""
        return cls(
            **{e.value: float(values[e]) for e in EmotionType},
            last_updated=last_updated or utc_now(),
        )

    def get(self, emotion: EmotionType) -> float:
        return getattr(self, EmotionType(emotion).value)

    def values(self) -> Dict[EmotionType, float]:
        """선언 순서를 유지한 EmotionType → 값"""
        return {e: getattr(self, e.value) for e in EmotionType}

    def to_dict(self) -> Dict[str, Any]:
        """외부 저장소/응답용 평탄화. 타임스탬프는 ISO-8601."""
        data: Dict[str, Any] = {e.value: getattr(self, e.value) for e in EmotionType}
        data["last_updated"] = self.last_updated.isoformat()
        return data


@dataclass(frozen=True)
class EmotionDelta:
    """희소 변동량. None = 해당 감정 변동 없음."""

    joy: Optional[float] = None
    affection: Optional[float] = None
    excitement: Optional[float] = None
    calm: Optional[float] = None
    sadness: Optional[float] = None
    anger: Optional[float] = None
    anxiety: Optional[float] = None
    romantic: Optional[float] = None

    @classmethod
    def from_mapping(cls, deltas: Mapping[Any, float]) -> "EmotionDelta":
        """{"joy": 10} 또는 {EmotionType.JOY: 10} 형태 모두 허용"""
        return cls(**{EmotionType(k).value: v for k, v in deltas.items()})

    def items(self) -> Iterator[Tuple[EmotionType, float]]:
        """값이 지정된 항목만 선언 순서대로"""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield EmotionType(f.name), value

    def is_empty(self) -> bool:
        return next(self.items(), None) is None


@dataclass(frozen=True)
class EmotionDisplay:
    """UI/내러티브용 표시 레코드"""

    emotion: EmotionType
    intensity: IntensityTier
    value: float
    label: str


@dataclass(frozen=True)
class DominantEmotions:
    """지배 감정. secondary는 1순위와 근접할 때만 존재."""

    primary: EmotionDisplay
    secondary: Optional[EmotionDisplay] = None

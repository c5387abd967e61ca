"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # npc lifecycle (외부 발행 → emotion 구독)
    NPC_CREATED = "npc_created"
    NPC_REMOVED = "npc_removed"

    # relationship (외부 발행 → emotion 구독)
    TRUST_CHANGED = "trust_changed"

    # 게임플레이 결과로 인한 감정 변동 요청
    EMOTION_EVENT = "emotion_event"

    # emotion 발행
    EMOTION_INITIALIZED = "emotion_initialized"
    EMOTION_CHANGED = "emotion_changed"

    # engine
    TURN_PROCESSED = "turn_processed"

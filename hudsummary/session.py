"""
session.py - 세션별 이벤트 처리

호스트 플랫폼 세션 하나(글래스 한 대)에 대응하는 SummarySession을 정의합니다.
WebSocket 연결마다 하나씩 생성되며, 세션끼리는 읽기 전용 AppConfig 외에
공유하는 상태가 없습니다.

이벤트 처리 규칙:
    - 세션 시작: 안내 문구 표시 (main, 2.5초)
    - 전사 이벤트: isFinal이 true이고 text가 비어있지 않을 때만 요약 표시
      (부분 인식 중에는 HUD가 자주 깜빡이지 않도록 무시)
    - 원문 표시 옵션: 보조 화면에 "You said: ..." 표시
    - 배터리 이벤트: 로그만 남김

메시지 형식 (클라이언트 → 서버):
    {"type": "transcription", "text": "...", "isFinal": true}
    {"type": "battery", "level": 80, "charging": false}
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from hudsummary.config import AppConfig
from hudsummary.display import DisplayRequest, ViewType
from hudsummary.summary import summarize_text

logger = logging.getLogger(__name__)

ECHO_PREFIX = "You said: "


class TranscriptionEvent(BaseModel):
    """음성 인식 이벤트 (부분 인식 또는 최종 인식)"""
    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = ""
    is_final: bool = Field(default=False, alias="isFinal")


class BatteryEvent(BaseModel):
    """글래스 배터리 상태 이벤트"""
    model_config = ConfigDict(populate_by_name=True)

    level: Optional[int] = None
    charging: bool = False


class UnknownEventError(ValueError):
    """지원하지 않는 이벤트 타입"""


class SummarySession:
    """
    세션별 이벤트 처리기

    Args:
        config: 앱 설정
        session_id: 세션 ID (None이면 자동 생성)

    사용 예시:
        session = SummarySession(config)
        requests = session.start()
        requests = session.handle_message({"type": "transcription", "text": "...", "isFinal": True})
    """

    def __init__(self, config: AppConfig, session_id: Optional[str] = None):
        self.config = config
        self.session_id = session_id or uuid.uuid4().hex[:8]

        # 통계
        self.summary_count = 0
        self.ignored_count = 0
        self.last_battery: Optional[BatteryEvent] = None

    def start(self) -> List[DisplayRequest]:
        """세션 시작 시 안내 문구"""
        logger.info(f"세션 시작: {self.session_id}")
        return [
            DisplayRequest(
                text=self.config.welcome_text,
                view=ViewType.MAIN,
                duration_ms=self.config.welcome_duration_ms,
            )
        ]

    def handle_transcription(self, event: TranscriptionEvent) -> List[DisplayRequest]:
        """
        전사 이벤트 처리

        Args:
            event: 전사 이벤트

        Returns:
            표시 요청 리스트 (부분 인식 또는 빈 텍스트면 빈 리스트)
        """
        if not event.text or not event.is_final:
            self.ignored_count += 1
            return []

        summary = summarize_text(event.text, top_k=self.config.top_k)
        self.summary_count += 1
        logger.debug(f"[{self.session_id}] 요약: {summary}")

        requests = [
            DisplayRequest(
                text=summary,
                view=self.config.view,
                duration_ms=self.config.summary_duration_ms,
            )
        ]
        if self.config.echo_original:
            requests.append(
                DisplayRequest(
                    text=ECHO_PREFIX + event.text,
                    view=ViewType.SECONDARY,
                    duration_ms=self.config.echo_duration_ms,
                )
            )
        return requests

    def handle_battery(self, event: BatteryEvent) -> List[DisplayRequest]:
        self.last_battery = event
        logger.info(f"[{self.session_id}] 글래스 배터리: {event.level}% (충전 중: {event.charging})")
        return []

    def handle_message(self, message: Dict[str, Any]) -> List[DisplayRequest]:
        """
        클라이언트 메시지를 타입별로 분기

        Raises:
            UnknownEventError: type이 없거나 지원하지 않는 값
            pydantic.ValidationError: 필드 형식 오류
        """
        event_type = message.get("type")
        if event_type == "transcription":
            return self.handle_transcription(TranscriptionEvent.model_validate(message))
        if event_type == "battery":
            return self.handle_battery(BatteryEvent.model_validate(message))
        raise UnknownEventError(f"지원하지 않는 이벤트 타입: {event_type!r}")

    def close(self):
        logger.info(f"세션 종료: {self.get_stats()}")

    def get_stats(self) -> Dict[str, Any]:
        """통계 정보 반환"""
        return {
            "session_id": self.session_id,
            "summary_count": self.summary_count,
            "ignored_count": self.ignored_count,
            "battery_level": self.last_battery.level if self.last_battery else None,
        }

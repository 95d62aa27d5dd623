"""
display.py - HUD 표시 요청 데이터 클래스

세션이 호스트 플랫폼에 보내는 표시 요청을 정의합니다.
이 모듈은 렌더링을 하지 않고 "무엇을, 어느 화면에, 얼마나 오래"만 표현합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ViewType(str, Enum):
    """표시 슬롯 (main: 기본 화면, secondary: 보조 화면)"""
    MAIN = "main"
    SECONDARY = "secondary"


@dataclass
class DisplayRequest:
    """
    HUD 텍스트 표시 요청

    Attributes:
        text: 표시할 문자열 (한 줄 요약 등)
        view: 표시 슬롯
        duration_ms: 화면 유지 시간 (밀리초)
    """
    text: str
    view: ViewType = ViewType.MAIN
    duration_ms: int = 3000

    def to_dict(self) -> Dict[str, Any]:
        """클라이언트로 전송할 딕셔너리로 변환"""
        return {
            "type": "display",
            "text": self.text,
            "view": self.view.value,
            "durationMs": self.duration_ms,
        }

"""
hudsummary - 스마트 글래스 HUD용 키워드 요약

STT 최종 전사 결과를 HUD 한 줄에 들어가는 키워드 요약으로 변환합니다.

주요 구성:
    - summary: 토큰 정규화, 키워드 추출, 한 줄 요약 (순수 함수)
    - session: 세션별 전사/배터리 이벤트 처리
    - server: FastAPI WebSocket 서버
"""

from .config import AppConfig, ConfigError, load_config
from .display import DisplayRequest, ViewType
from .parse_args import parse_args
from .session import SummarySession, TranscriptionEvent
from .summary import extract_keywords, is_korean, normalize_token, summarize, summarize_text

__all__ = [
    "AppConfig",
    "ConfigError",
    "DisplayRequest",
    "SummarySession",
    "TranscriptionEvent",
    "ViewType",
    "extract_keywords",
    "is_korean",
    "load_config",
    "normalize_token",
    "parse_args",
    "summarize",
    "summarize_text",
]

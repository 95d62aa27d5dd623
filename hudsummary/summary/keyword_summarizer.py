"""
keyword_summarizer.py - 키워드 추출 기반 한 줄 요약 모듈

음성 인식으로 받은 발화를 HUD 한 줄에 들어갈 만큼 짧게 요약합니다.
언어 모델을 쓰지 않고, 발화 하나만 보고 빈도 + 길이 가중치로 키워드를 고릅니다.

요약 과정:
    1. 공백 기준 토큰 분리 및 정규화 (tokenizer.iter_tokens)
    2. 한 글자 토큰, 불용어, 숫자만으로 된 토큰 제외
    3. 등장 횟수 집계
    4. 점수 = 횟수 + 0.2 * min(길이, 10)
    5. 점수 내림차순, 동점이면 토큰 사전순 정렬 후 상위 K개 선택
    6. "키워드 요약: a, b, c" 또는 "Summary: a, b, c" 형태로 조합

사용 예시:
    from hudsummary.summary import summarize_text

    summarize_text("오늘 날씨가 정말 좋네요 완전 최고")
    # "키워드 요약: 날씨가, 좋네요, 완전, 최고"

모든 함수는 순수 함수이며 문자열 또는 None 입력에 대해 예외를 던지지 않습니다.
"""

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from .stopwords import stopwords_for
from .tokenizer import is_blank, is_korean, iter_tokens

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 6  # HUD 가독성을 위한 최대 키워드 수
MIN_TOKEN_LENGTH = 2
LENGTH_WEIGHT = 0.2  # 길이 가중치 (글자당)
LENGTH_CAP = 10  # 길이 가중치 상한 (글자 수)
MAX_FALLBACK_CHARS = 40  # 키워드가 없을 때 원문을 보여줄 최대 길이
ELLIPSIS = "…"
_NUMERIC_RE = re.compile(r"[0-9]+")  # 숫자 토큰 판별 (ASCII 숫자만)

EMPTY_SUMMARY = "요약할 내용이 없어요."
PREFIX_KO = "키워드 요약"
PREFIX_EN = "Summary"


@dataclass(frozen=True)
class ScoredKeyword:
    """
    점수가 매겨진 키워드

    Attributes:
        token: 정규화된 토큰
        count: 발화 내 등장 횟수
        score: 횟수 + 길이 가중치
    """
    token: str
    count: int
    score: float

    def to_dict(self) -> Dict[str, object]:
        return {"token": self.token, "count": self.count, "score": self.score}


def _is_candidate(token: str) -> bool:
    """한 글자, 불용어, 숫자 토큰이면 False"""
    if len(token) < MIN_TOKEN_LENGTH:
        return False
    if token in stopwords_for(is_korean(token)):
        return False
    if _NUMERIC_RE.fullmatch(token):
        return False
    return True


def keyword_score(token: str, count: int) -> float:
    return count + LENGTH_WEIGHT * min(len(token), LENGTH_CAP)


def score_keywords(text: Optional[str]) -> List[ScoredKeyword]:
    """
    발화에서 살아남은 모든 키워드를 점수순으로 반환

    Args:
        text: 원문 발화 (None 또는 빈 문자열이면 빈 리스트)

    Returns:
        점수 내림차순, 동점이면 토큰 오름차순으로 정렬된 ScoredKeyword 리스트
    """
    if not text:
        return []

    counts = Counter(token for token in iter_tokens(text) if _is_candidate(token))
    scored = [
        ScoredKeyword(token=token, count=count, score=keyword_score(token, count))
        for token, count in counts.items()
    ]
    scored.sort(key=lambda kw: (-kw.score, kw.token))
    return scored


def extract_keywords(text: Optional[str], top_k: int = DEFAULT_TOP_K) -> List[str]:
    """
    상위 top_k개 키워드 추출

    Args:
        text: 원문 발화
        top_k: 최대 키워드 수 (0 이하이면 빈 리스트)

    Returns:
        키워드 리스트 (살아남은 키워드가 top_k보다 적으면 있는 만큼만)
    """
    if top_k <= 0:
        return []
    return [kw.token for kw in score_keywords(text)[:top_k]]


def truncate_text(text: str, max_chars: int = MAX_FALLBACK_CHARS) -> str:
    """max_chars 이하면 그대로, 넘으면 앞부분 + 말줄임표(…)"""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + ELLIPSIS


def summarize_text(text: Optional[str], top_k: int = DEFAULT_TOP_K) -> str:
    """
    발화를 HUD 표시용 한 줄 요약으로 변환

    Args:
        text: 원문 발화 (혼합 언어 가능)
        top_k: 최대 키워드 수

    Returns:
        - 빈 입력: "요약할 내용이 없어요."
        - 키워드 없음: 원문 (40자 초과 시 잘라서 "…" 추가)
        - 그 외: "키워드 요약: ..." (한글 포함) 또는 "Summary: ..."
    """
    if not text or is_blank(text):
        return EMPTY_SUMMARY

    scored = score_keywords(text)[:top_k] if top_k > 0 else []
    logger.debug(f"키워드 점수: {[kw.to_dict() for kw in scored]}")

    keywords = [kw.token for kw in scored]
    if not keywords:
        logger.debug("키워드 없음, 원문으로 대체")
        return truncate_text(text)

    # 한국어 문장이면 '키워드 요약:', 아니면 'Summary:'
    prefix = PREFIX_KO if is_korean(text) else PREFIX_EN
    return f"{prefix}: {', '.join(keywords)}"


summarize = summarize_text

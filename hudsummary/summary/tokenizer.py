"""
tokenizer.py - 토큰 분리 및 정규화

입력 문장을 공백 기준으로 나누고, 각 조각을 비교용 정규형으로 변환합니다.
공백은 탭, 줄바꿈, 유니코드 공백(U+00A0, U+3000 등)과 BOM이며
정보 구분자(U+001C-U+001F)는 공백으로 보지 않습니다.

정규화 규칙:
    1. 소문자 변환
    2. 유니코드 글자(L*) / 숫자(N*) 범주가 아닌 문자 제거
    3. 양끝 공백 제거 (빈 결과는 토큰이 아님)

한국어 판별(is_korean)은 한글 스크립트 코드 포인트가 하나라도 있는지 보는
존재 검사입니다. 다수결 판별이 아니므로 영어 문장 안에 한글이 한 글자만
섞여 있어도 문장 전체가 한국어로 분류됩니다. 접두어/대체 문구 선택이
이 동작에 의존하므로 그대로 유지합니다.
"""

import re
import unicodedata
from typing import Iterator

# Unicode Script=Hangul 범위
_HANGUL_RE = re.compile(
    "["
    "\u1100-\u11ff"  # Hangul Jamo
    "\u302e-\u302f"  # 방점
    "\u3131-\u318e"  # Hangul Compatibility Jamo
    "\u3200-\u321e"  # 괄호 한글
    "\u3260-\u327e"  # 원문자 한글
    "\ua960-\ua97c"  # Hangul Jamo Extended-A
    "\uac00-\ud7a3"  # Hangul Syllables
    "\ud7b0-\ud7c6"  # Hangul Jamo Extended-B
    "\ud7cb-\ud7fb"
    "\uffa0-\uffbe"  # 반각 한글
    "\uffc2-\uffc7"
    "\uffca-\uffcf"
    "\uffd2-\uffd7"
    "\uffda-\uffdc"
    "]"
)

# 공백 문자 집합 (U+001C-U+001F 정보 구분자는 공백이 아님)
_WHITESPACE_RE = re.compile(
    "["
    "\t\n\v\f\r "
    "\u00a0\u1680"
    "\u2000-\u200a"
    "\u2028\u2029\u202f\u205f"
    "\u3000\ufeff"
    "]+"
)


def is_blank(text: str) -> bool:
    """빈 문자열이거나 공백 문자로만 이루어져 있으면 True"""
    return not _WHITESPACE_RE.sub("", text)


def is_korean(text: str) -> bool:
    """한글 스크립트 문자가 하나라도 포함되어 있으면 True"""
    if not text:
        return False
    return _HANGUL_RE.search(text) is not None


def _is_letter_or_number(char: str) -> bool:
    return unicodedata.category(char)[0] in ("L", "N")


def normalize_token(segment: str) -> str:
    """
    공백으로 분리된 한 조각을 정규화된 토큰으로 변환

    Args:
        segment: 원문 조각 (예: "Hello,", "날씨가!")

    Returns:
        정규화된 토큰 (예: "hello", "날씨가"), 남는 글자가 없으면 빈 문자열
    """
    lowered = segment.lower()
    return "".join(ch for ch in lowered if _is_letter_or_number(ch)).strip()


def iter_tokens(text: str) -> Iterator[str]:
    """공백 기준으로 나눈 뒤 정규화된 비어있지 않은 토큰만 순서대로 반환"""
    for segment in _WHITESPACE_RE.split(text):
        token = normalize_token(segment)
        if token:
            yield token

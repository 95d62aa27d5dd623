"""
summary 모듈 - 키워드 추출 기반 발화 요약

이 모듈은 STT 최종 전사 결과를 HUD 한 줄 요약으로 변환합니다.
"""

from .keyword_summarizer import (DEFAULT_TOP_K, EMPTY_SUMMARY, ScoredKeyword,
                                 extract_keywords, score_keywords, summarize,
                                 summarize_text, truncate_text)
from .stopwords import STOPWORDS_EN, STOPWORDS_KO
from .tokenizer import is_blank, is_korean, iter_tokens, normalize_token

__all__ = [
    'DEFAULT_TOP_K',
    'EMPTY_SUMMARY',
    'STOPWORDS_EN',
    'STOPWORDS_KO',
    'ScoredKeyword',
    'extract_keywords',
    'is_blank',
    'is_korean',
    'iter_tokens',
    'normalize_token',
    'score_keywords',
    'summarize',
    'summarize_text',
    'truncate_text',
]

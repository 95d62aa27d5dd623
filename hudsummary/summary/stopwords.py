"""
stopwords.py - 키워드 추출에서 제외할 불용어 사전

스크립트(문자 체계)별로 고정된 불용어 집합을 제공합니다.
모든 항목은 normalize_token()을 거친 형태(소문자, 글자/숫자만)로 저장되어 있어
정규화된 토큰과 바로 비교할 수 있습니다.

    - STOPWORDS_KO: 한국어 접속사, 대명사, 부사, 조사, 용언 활용형
    - STOPWORDS_EN: 영어 관사, 전치사, 대명사, 조동사, 부사
"""

from typing import FrozenSet

STOPWORDS_KO: FrozenSet[str] = frozenset({
    # 접속사
    "그리고", "그래서", "하지만", "그러나", "또", "또한",
    # 지시/인칭 대명사
    "이건", "이것", "그것", "저것",
    "저는", "나는", "우리는", "너는", "여기는", "거기는", "저기는",
    # 시간 부사
    "오늘", "내일", "어제",
    # 정도 부사, 군말
    "정말", "진짜", "너무", "매우", "아주", "좀", "조금", "그냥", "약간",
    "및", "등", "등등",
    # 조사
    "에서", "으로", "까지", "부터", "에게", "에게서", "한테",
    # 용언 활용형
    "하면서", "하면서도", "하며",
    "하다", "했다", "하는", "하는데", "됩니다", "합니다",
    "있다", "있어요", "없는", "없다",
})

STOPWORDS_EN: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "else",
    "for", "to", "of", "in", "on", "at",
    "is", "are", "was", "were", "be", "been", "being",
    "i", "you", "he", "she", "it", "we", "they",
    "this", "that", "these", "those",
    "with", "as", "by", "about", "from", "into", "over", "under",
    "very", "really", "just", "so", "too", "also",
})


def stopwords_for(is_korean_token: bool) -> FrozenSet[str]:
    """토큰의 스크립트에 맞는 불용어 집합 반환"""
    return STOPWORDS_KO if is_korean_token else STOPWORDS_EN

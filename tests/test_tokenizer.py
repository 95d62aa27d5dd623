"""
Tests for token normalization and the Hangul script test.
"""

from __future__ import annotations

import pytest

from hudsummary.summary import is_blank, is_korean, iter_tokens, normalize_token


@pytest.mark.parametrize(
    "segment, expected",
    [
        ("Hello,", "hello"),
        ("날씨가!", "날씨가"),
        ("(MeetUp)", "meetup"),
        ("abc-123", "abc123"),
        ("ÉCOLE", "école"),
        ("...", ""),
        ("", ""),
    ],
)
def test_normalize_token(segment, expected):
    assert normalize_token(segment) == expected


def test_normalize_token_keeps_unicode_numbers():
    """ASCII가 아닌 숫자(N*)도 남는다"""
    assert normalize_token("１２３!") == "１２３"


def test_iter_tokens_splits_on_any_whitespace():
    text = "  Hello,\tWORLD!!\n...  안녕\u3000세상 "
    assert list(iter_tokens(text)) == ["hello", "world", "안녕", "세상"]


def test_iter_tokens_empty():
    assert list(iter_tokens("")) == []
    assert list(iter_tokens("   \n\t")) == []


def test_is_korean_empty_is_false():
    assert is_korean("") is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", False),
        ("漢字 かな", False),
        ("안녕하세요", True),
        ("ㅋㅋ", True),
        ("\u1100", True),
        ("\u3260", True),
    ],
)
def test_is_korean_script_ranges(text, expected):
    assert is_korean(text) is expected


def test_is_korean_is_existence_test():
    """한글 한 글자만 섞여도 문장 전체가 한국어로 분류된다"""
    text = "This is an English sentence with one 가 syllable"
    assert is_korean(text) is True


def test_iter_tokens_keeps_information_separators_inside_tokens():
    """U+001C-U+001F는 공백이 아니므로 토큰을 나누지 않고 정규화에서 제거된다"""
    assert list(iter_tokens("ab\x1fcd ef\x1cgh")) == ["abcd", "efgh"]


def test_is_blank():
    assert is_blank("") is True
    assert is_blank(" \t\n\u3000\ufeff\u2028") is True
    assert is_blank("\x1f") is False
    assert is_blank(" a ") is False

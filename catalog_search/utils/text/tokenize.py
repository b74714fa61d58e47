"""Tokenization utilities for set-overlap scoring."""

from __future__ import annotations

from typing import Any


_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def tokenize(text: Any) -> list[str]:
    """공백 기준 소문자 토큰화. 문자열이 아니면 빈 리스트."""
    if not text or not isinstance(text, str):
        return []
    return [t for t in text.lower().split() if t]


def to_tokens(value: Any) -> list[str]:
    """Jaccard 입력을 토큰 리스트로 변환.

    이미 시퀀스(키워드 리스트 등)인 입력은 토큰화하지 않고
    원소별 소문자 변환만 합니다. 문자열은 tokenize()를 거칩니다.
    """
    if isinstance(value, _SEQUENCE_TYPES):
        return [str(t).lower() for t in value]
    return tokenize(value)

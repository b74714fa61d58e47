"""Keyword extraction from product name/description."""

from __future__ import annotations

import re
from typing import Optional


STOP_WORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "this", "these", "those", "or", "but",
})

MAX_KEYWORDS = 15

_WORD = re.compile(r"\b[a-z0-9]+\b")


def extract_keywords(name: Optional[str], description: Optional[str], limit: int = MAX_KEYWORDS) -> list[str]:
    """상품명+설명에서 키워드 추출.

    - 소문자 영숫자 단어만 사용
    - 불용어 및 2글자 이하 단어 제외
    - 등장 순서 유지하며 중복 제거, 최대 limit개

    예시:
    - ("Wireless Mouse", "A wireless mouse for the office")
      -> ["wireless", "mouse", "office"]
    """
    text = f"{name or ''} {description or ''}".lower()
    words = _WORD.findall(text)

    keywords = [w for w in words if len(w) > 2 and w not in STOP_WORDS]
    return list(dict.fromkeys(keywords))[: max(0, limit)]

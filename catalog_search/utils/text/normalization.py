"""Search term normalization."""

from __future__ import annotations

import re
from typing import Optional


_DISALLOWED = re.compile(r"[^a-z0-9\s-]")


def normalize_search_term(term: Optional[str]) -> str:
    """검색어/필드 텍스트를 퍼지 비교용으로 정규화.

    - 소문자 변환 후 앞뒤 공백 제거
    - 영문/숫자/공백/하이픈 외 문자 제거 (단어 모양 유지)

    예시:
    - "  Hello@World! " -> "helloworld"
    - "USB-C Cable" -> "usb-c cable"

    Args:
        term: 원본 문자열 (None 허용)

    Returns:
        정규화된 문자열, 입력이 비어 있으면 ""
    """
    if not term:
        return ""
    return _DISALLOWED.sub("", str(term).lower().strip())

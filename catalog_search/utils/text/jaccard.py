"""Jaccard similarity helpers.

키워드 리스트 또는 자유 텍스트 두 개의 집합 겹침 정도를 계산합니다.
연관 상품 추천에서 사용합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .tokenize import to_tokens


@dataclass
class JaccardResult:
    """Jaccard 계산 결과

    Attributes:
        score: |A ∩ B| / |A ∪ B| (0~1)
        intersection: 공통 토큰 (A의 등장 순서 유지)
        union: 전체 고유 토큰 (A, B 순서)
    """

    score: float
    intersection: list[str] = field(default_factory=list)
    union: list[str] = field(default_factory=list)

    @property
    def intersection_size(self) -> int:
        return len(self.intersection)

    @property
    def union_size(self) -> int:
        return len(self.union)


def jaccard_detailed(set_a: Any, set_b: Any) -> JaccardResult:
    """Jaccard 유사도와 교집합/합집합 토큰을 함께 반환.

    두 입력이 모두 비어 있으면(합집합 공집합) 점수는 0입니다.

    Args:
        set_a: 토큰 시퀀스 또는 텍스트
        set_b: 토큰 시퀀스 또는 텍스트

    Returns:
        JaccardResult
    """
    unique_a = list(dict.fromkeys(to_tokens(set_a)))
    unique_b = list(dict.fromkeys(to_tokens(set_b)))
    lookup_b = set(unique_b)

    intersection = [t for t in unique_a if t in lookup_b]
    union = list(dict.fromkeys(unique_a + unique_b))

    score = len(intersection) / len(union) if union else 0.0

    return JaccardResult(score=score, intersection=intersection, union=union)


def jaccard(set_a: Any, set_b: Any) -> float:
    """Jaccard 점수만 반환 (0~1)."""
    return jaccard_detailed(set_a, set_b).score

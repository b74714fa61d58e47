"""Fuzzy scoring helpers (typo-tolerant search).

상품명/설명/키워드 각각에 대해 rapidfuzz 유사도를 구하고
필드별 가중치를 적용한 최댓값을 점수(0~100)로 사용합니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from rapidfuzz import fuzz, utils

from .normalization import normalize_search_term


NAME_WEIGHT = 1.5
KEYWORD_WEIGHT = 1.2
DESCRIPTION_WEIGHT = 1.0

DEFAULT_THRESHOLD = 70
MIN_QUERY_LENGTH = 3


@dataclass
class FuzzyMatch:
    """퍼지 매칭 결과 (상품 + 점수)"""

    product: Any
    score: float


def _field(product: Any, name: str) -> Any:
    # pydantic 모델과 dict 모두 허용
    if isinstance(product, dict):
        return product.get(name)
    return getattr(product, name, None)


def _prepare(text: Any) -> str:
    return utils.default_process(normalize_search_term(text))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# 비율은 가중치 적용 전에 0~100 정수로 반올림
def _ratio(a: str, b: str) -> int:
    if not a or not b:
        return 0
    return _round_half_up(fuzz.ratio(a, b))


def _partial_ratio(a: str, b: str) -> int:
    if not a or not b:
        return 0
    return _round_half_up(fuzz.partial_ratio(a, b))


def calculate_fuzzy_score(search_term: Optional[str], product: Any) -> float:
    """단일 상품에 대한 퍼지 점수 계산.

    - 상품명: 전체 문자열 ratio(정수 반올림) × 1.5
    - 키워드: 키워드별 ratio 중 최댓값 × 1.2
    - 설명: partial_ratio × 1.0

    세 값 중 최댓값 (100 상한)

    Args:
        search_term: 사용자 검색어
        product: name/description/keywords를 가진 상품

    Returns:
        0~100 점수. 검색어가 비었거나 상품이 None이면 0
    """
    if not search_term or product is None:
        return 0.0

    term = _prepare(search_term)
    if not term:
        return 0.0

    name_score = _ratio(term, _prepare(_field(product, "name")))
    desc_score = _partial_ratio(term, _prepare(_field(product, "description")))

    max_keyword_score = 0.0
    keywords = _field(product, "keywords")
    if isinstance(keywords, (list, tuple)):
        for kw in keywords:
            max_keyword_score = max(max_keyword_score, _ratio(term, _prepare(kw)))

    weighted_name = name_score * NAME_WEIGHT
    weighted_keyword = max_keyword_score * KEYWORD_WEIGHT
    weighted_desc = desc_score * DESCRIPTION_WEIGHT

    return min(100.0, max(weighted_name, weighted_keyword, weighted_desc))


def fuzzy_match_products(
    search_term: Optional[str],
    products: Optional[Iterable[Any]],
    threshold: float = DEFAULT_THRESHOLD,
    min_query_length: int = MIN_QUERY_LENGTH,
) -> list[FuzzyMatch]:
    """상품 목록에 퍼지 매칭 수행.

    strip 후 min_query_length 미만인 검색어는 결과 0건.

    Args:
        search_term: 사용자 검색어
        products: 후보 상품 목록
        threshold: 최소 점수 (기본 70)
        min_query_length: 퍼지 매칭을 수행할 최소 검색어 길이 (strip 기준)

    Returns:
        점수 내림차순 FuzzyMatch 리스트
    """
    if not search_term or products is None or isinstance(products, (str, dict)):
        return []

    if len(search_term.strip()) < min_query_length:
        return []

    scored = [FuzzyMatch(product=p, score=calculate_fuzzy_score(search_term, p)) for p in products]
    matched = [m for m in scored if m.score >= threshold]
    matched.sort(key=lambda m: m.score, reverse=True)
    return matched

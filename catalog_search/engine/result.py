"""Search Result - Standardized Result Format

Provides standardized result objects for the search and related-product
pipelines.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from catalog_search.core.exceptions import ProductNotFoundException
from catalog_search.schemas.product_schema import RelatedProduct, SearchHit


class SearchStatus(str, Enum):
    """검색 상태

    어떤 단계까지 실행되었는지를 나타냅니다.
    """

    EXACT_ONLY = "exact_only"  # 정확 매칭 결과가 충분 → 퍼지 생략
    FUZZY_DISABLED = "fuzzy_disabled"  # 설정으로 퍼지 비활성화
    FUZZY_MERGED = "fuzzy_merged"  # 퍼지 단계 실행 후 병합
    INVALID_QUERY = "invalid_query"  # 빈 검색어


@dataclass
class SearchResult:
    """검색 결과

    Attributes:
        status: 검색 상태
        query: 검색어
        products: 정확 매칭(저장소 순서) + 퍼지 매칭(점수 내림차순)
        exact_count: 정확 매칭 개수
        fuzzy_count: 병합 후 남은 퍼지 매칭 개수
        elapsed_ms: 소요 시간 (밀리초)
    """

    status: SearchStatus
    query: str = ""
    products: list[SearchHit] = field(default_factory=list)
    exact_count: int = 0
    fuzzy_count: int = 0
    elapsed_ms: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def fuzzy_escalated(self) -> bool:
        """퍼지 단계가 실행되었는지 여부"""
        return self.status == SearchStatus.FUZZY_MERGED

    @classmethod
    def invalid_query(cls, query: str) -> "SearchResult":
        return cls(status=SearchStatus.INVALID_QUERY, query=query, elapsed_ms=0.0)

    def to_payload(self) -> list[dict[str, Any]]:
        """응답용 상품 dict 리스트"""
        return [hit.to_payload() for hit in self.products]


class RelatedStatus(str, Enum):
    """연관 상품 조회 상태"""

    FOUND = "found"
    NO_SIMILAR = "no_similar"  # 기준 상품은 있으나 유사 상품 없음
    SOURCE_NOT_FOUND = "source_not_found"  # 기준 상품 없음


@dataclass
class RelatedResult:
    """연관 상품 결과

    SOURCE_NOT_FOUND와 NO_SIMILAR는 둘 다 products가 비어 있지만
    호출자가 오류 화면과 빈 상태를 구분할 수 있도록 상태를 분리합니다.
    """

    status: RelatedStatus
    product_id: str
    products: list[RelatedProduct] = field(default_factory=list)
    candidate_count: int = 0

    @property
    def source_found(self) -> bool:
        return self.status != RelatedStatus.SOURCE_NOT_FOUND

    @classmethod
    def source_not_found(cls, product_id: str) -> "RelatedResult":
        return cls(status=RelatedStatus.SOURCE_NOT_FOUND, product_id=product_id)

    @classmethod
    def no_similar(cls, product_id: str, candidate_count: int) -> "RelatedResult":
        return cls(status=RelatedStatus.NO_SIMILAR, product_id=product_id, candidate_count=candidate_count)

    def raise_for_status(self) -> "RelatedResult":
        """기준 상품이 없으면 ProductNotFoundException

        Raises:
            ProductNotFoundException: status가 SOURCE_NOT_FOUND인 경우
        """
        if self.status == RelatedStatus.SOURCE_NOT_FOUND:
            raise ProductNotFoundException(self.product_id)
        return self

    def to_payload(self) -> list[dict[str, Any]]:
        return [p.to_payload() for p in self.products]

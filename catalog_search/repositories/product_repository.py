"""상품 저장소 인터페이스 (외부 협력자 계약)"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from catalog_search.schemas.product_schema import Product


@dataclass(frozen=True)
class CandidateFilter:
    """후보 조회 필터

    Attributes:
        category_id: 지정 시 해당 카테고리 상품만
        exclude_id: 지정 시 해당 상품 제외 (연관 상품의 기준 상품)
    """

    category_id: Optional[str] = None
    exclude_id: Optional[str] = None


class ProductStore(Protocol):
    """검색 코어가 사용하는 상품 저장소 프로토콜

    저장소 구현체(DB, 검색 인덱스 등)는 호스트 애플리케이션이 제공합니다.
    호출 실패 시 예외를 그대로 던지면 되고, 재시도는 구현체 책임입니다.
    """

    async def find_by_text_match(self, query: str) -> list[Product]:
        """대소문자 무시 부분 문자열 매칭

        name, description, keywords 중 하나라도 query를 포함하는 상품 전부.
        반환 순서는 저장소의 자연 순서를 따릅니다.
        """
        ...

    async def find_candidates(self, candidate_filter: CandidateFilter, limit: Optional[int] = None) -> list[Product]:
        """필터에 맞는 후보 상품 조회 (limit=None이면 제한 없음)"""
        ...

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """ID로 상품 조회 (없으면 None)"""
        ...

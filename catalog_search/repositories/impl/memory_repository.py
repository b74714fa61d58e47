"""인메모리 상품 리포지토리 - ProductStore 참조 구현."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Union

from catalog_search.core.logging import get_logger
from catalog_search.repositories.product_repository import CandidateFilter
from catalog_search.schemas.product_schema import Product
from catalog_search.utils.text.keywords import extract_keywords


logger = get_logger(__name__)


class InMemoryProductRepository:
    """리스트 기반 상품 저장소

    - 삽입 순서가 자연 순서
    - 정확 매칭은 name/description/keywords 대소문자 무시 부분 문자열
    """

    def __init__(self, products: Optional[Iterable[Union[Product, dict[str, Any]]]] = None):
        self._products: list[Product] = []
        for p in products or []:
            self.add(p)

    def add(self, product: Union[Product, dict[str, Any]]) -> Product:
        """상품 추가 (dict면 Product로 검증)"""
        if not isinstance(product, Product):
            product = Product.model_validate(product)
        self._products.append(product)
        return product

    def all(self) -> list[Product]:
        return list(self._products)

    async def find_by_text_match(self, query: str) -> list[Product]:
        if not query:
            return []
        needle = query.lower()
        return [p for p in self._products if self._contains(p, needle)]

    async def find_candidates(self, candidate_filter: CandidateFilter, limit: Optional[int] = None) -> list[Product]:
        matched = [
            p for p in self._products
            if (candidate_filter.category_id is None or p.category_id == candidate_filter.category_id)
            and (candidate_filter.exclude_id is None or p.id != candidate_filter.exclude_id)
        ]
        if limit is not None:
            matched = matched[: max(0, limit)]
        return matched

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def backfill_keywords(self) -> int:
        """키워드가 비어 있는 상품에 name/description 기반 키워드 생성

        Returns:
            int: 갱신된 상품 수
        """
        updated = 0
        for idx, product in enumerate(self._products):
            if product.keywords:
                continue
            keywords = extract_keywords(product.name, product.description)
            self._products[idx] = product.model_copy(update={"keywords": keywords})
            updated += 1
            logger.info(f"Keywords generated: id={product.id}, keywords={keywords}")

        logger.info(f"Keyword backfill complete: updated={updated}")
        return updated

    @staticmethod
    def _contains(product: Product, needle: str) -> bool:
        if needle in product.name.lower():
            return True
        if needle in product.description.lower():
            return True
        return any(needle in kw.lower() for kw in product.keywords)

"""상품 검색 서비스 - 호스트 핸들러용 파사드"""
from typing import Any, Dict, Optional

from pydantic import ValidationError

from catalog_search.core.config import SearchConfig, Settings
from catalog_search.core.exceptions import InvalidQueryException
from catalog_search.core.logging import get_logger
from catalog_search.engine import (
    ProductSearchOrchestrator,
    RelatedProductOrchestrator,
    RelatedStatus,
)
from catalog_search.repositories.product_repository import ProductStore
from catalog_search.schemas.product_schema import RelatedRequest, SearchRequest


logger = get_logger(__name__)


class ProductSearchService:
    """
    상품 검색 서비스 - SRP: 요청 검증과 응답 조립만 담당

    - 검색 파이프라인은 ProductSearchOrchestrator
    - 연관 상품은 RelatedProductOrchestrator
    - 설정은 생성 시 한 번 읽어 SearchConfig로 고정
    """

    def __init__(
        self,
        store: ProductStore,
        config: Optional[SearchConfig] = None,
        app_settings: Optional[Settings] = None,
    ):
        self.store = store
        self.config = config or SearchConfig.from_settings(app_settings)
        self.search_orchestrator = ProductSearchOrchestrator(store, self.config)
        self.related_orchestrator = RelatedProductOrchestrator(store, self.config)

    async def search_products(self, keyword: str) -> Dict[str, Any]:
        """
        상품 검색

        Args:
            keyword: 검색어

        Returns:
            {
                "success": True,
                "products": [...],   # 정확 매칭 → 퍼지 매칭 (isFuzzyMatch, fuzzyScore)
                "status": str,
            }

        Raises:
            InvalidQueryException: 요청 검증 실패
            SearchFailedException: 검색 실패 (UpstreamFetchException 포함)
        """
        try:
            request = SearchRequest(keyword=keyword)
        except ValidationError as e:
            raise InvalidQueryException(f"invalid search request: {e.error_count()} error(s)") from e

        result = await self.search_orchestrator.search(request.keyword)
        return {
            "success": True,
            "products": result.to_payload(),
            "status": result.status.value,
        }

    async def related_products(
        self,
        product_id: str,
        category_id: str,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        연관 상품 조회

        Returns:
            기준 상품 없음: {"success": False, "message": "Product not found", "products": []}
            그 외: {"success": True, "products": [...]}  # similarityScore, commonKeywords

        Raises:
            InvalidQueryException: 요청 검증 실패
            SearchFailedException: 조회 실패
        """
        try:
            request = RelatedRequest(product_id=product_id, category_id=category_id, limit=limit)
        except ValidationError as e:
            raise InvalidQueryException(f"invalid related request: {e.error_count()} error(s)") from e

        result = await self.related_orchestrator.related(
            request.product_id, request.category_id, limit=request.limit
        )

        if result.status == RelatedStatus.SOURCE_NOT_FOUND:
            return {"success": False, "message": "Product not found", "products": []}

        return {
            "success": True,
            "products": result.to_payload(),
        }

    def backfill_keywords(self) -> int:
        """저장소가 지원하면 빈 키워드 상품에 키워드 생성

        Returns:
            int: 갱신된 상품 수 (미지원 저장소면 0)
        """
        backfill = getattr(self.store, "backfill_keywords", None)
        if backfill is None:
            logger.warning(f"Keyword backfill not supported by store: {type(self.store).__name__}")
            return 0
        return backfill()

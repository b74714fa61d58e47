"""Related-Product Orchestrator - Category filter + Jaccard ranking"""

from typing import Optional, Union

from catalog_search.core.config import SearchConfig
from catalog_search.core.exceptions import SearchFailedException, UpstreamFetchException
from catalog_search.core.logging import get_logger
from catalog_search.repositories.product_repository import CandidateFilter, ProductStore
from catalog_search.schemas.product_schema import Product, RelatedProduct
from catalog_search.utils.text.jaccard import jaccard_detailed

from .result import RelatedResult, RelatedStatus
from .store_adapter import StoreAdapter


logger = get_logger(__name__)


def comparison_basis(product: Product) -> Union[list[str], str]:
    """Jaccard 비교 기준

    키워드가 있으면 키워드 리스트, 없으면 "name description" 텍스트
    (Jaccard 엔진에서 토큰화).
    """
    if product.keywords:
        return list(product.keywords)
    return f"{product.name or ''} {product.description or ''}"


class RelatedProductOrchestrator:
    """연관 상품 오케스트레이터

    같은 카테고리의 다른 상품을 Jaccard 유사도로 정렬해 상위 N개를 반환합니다.
    유사도 0(공통 토큰 없음)인 상품은 제외합니다.
    """

    def __init__(self, store: ProductStore, config: Optional[SearchConfig] = None):
        if store is None:
            raise ValueError("store must not be None")

        self.store = StoreAdapter(store)
        self.config = config or SearchConfig()

    async def related(
        self,
        product_id: str,
        category_id: str,
        limit: Optional[int] = None,
    ) -> RelatedResult:
        """연관 상품 조회

        Args:
            product_id: 기준 상품 ID
            category_id: 카테고리 ID
            limit: 최대 개수 (None이면 설정값, 음수는 0)

        Returns:
            RelatedResult: FOUND / NO_SIMILAR / SOURCE_NOT_FOUND

        Raises:
            UpstreamFetchException: 저장소 조회 실패
            SearchFailedException: 그 외 실패
        """
        max_items = max(0, self.config.related_limit if limit is None else int(limit))

        try:
            source = await self.store.find_by_id(product_id)
            if source is None:
                logger.info(f"Related products: source not found, product_id={product_id}")
                return RelatedResult.source_not_found(product_id)

            candidates = await self.store.find_candidates(
                CandidateFilter(category_id=category_id, exclude_id=product_id)
            )
            # 저장소 필터와 무관하게 기준 상품은 제외
            candidates = [c for c in candidates if c.id != source.id]

            scored = self._rank(source, candidates)

        except UpstreamFetchException as e:
            logger.error(f"Related products failed: product_id={product_id}, error={e}")
            raise
        except Exception as e:
            logger.error(
                f"Related products failed: product_id={product_id}, error={type(e).__name__}",
                exc_info=True,
            )
            raise SearchFailedException(
                "Error while getting related products",
                details={"product_id": product_id, "reason": str(e)},
            ) from e

        if not scored:
            logger.info(
                f"Related products: no similar products, product_id={product_id}, candidates={len(candidates)}"
            )
            return RelatedResult.no_similar(product_id, candidate_count=len(candidates))

        products = scored[:max_items]
        logger.info(
            f"Related products: product_id={product_id}, candidates={len(candidates)}, "
            f"similar={len(scored)}, returned={len(products)}"
        )
        return RelatedResult(
            status=RelatedStatus.FOUND,
            product_id=product_id,
            products=products,
            candidate_count=len(candidates),
        )

    @staticmethod
    def _rank(source: Product, candidates: list[Product]) -> list[RelatedProduct]:
        """후보별 Jaccard 계산 → 0점 제외 → 점수 내림차순 (동점은 저장소 순서)"""
        base = comparison_basis(source)
        seen: set[str] = set()
        scored: list[RelatedProduct] = []

        for candidate in candidates:
            if candidate.id in seen:
                continue
            seen.add(candidate.id)

            similarity = jaccard_detailed(base, comparison_basis(candidate))
            if similarity.score <= 0:
                continue

            scored.append(
                RelatedProduct(
                    **candidate.model_dump(),
                    similarity_score=similarity.score,
                    common_keywords=similarity.intersection,
                )
            )

        scored.sort(key=lambda p: p.similarity_score, reverse=True)
        return scored

"""Search Orchestrator - Tiered Exact/Fuzzy Pipeline

Coordinates the product search pipeline:
1. Exact tier (store substring match)
2. Escalation gate
3. Fuzzy tier over a bounded candidate window
4. Merge / dedup
"""

from time import perf_counter
from typing import Optional

from catalog_search.core.config import SearchConfig
from catalog_search.core.exceptions import (
    InvalidQueryException,
    SearchFailedException,
    UpstreamFetchException,
)
from catalog_search.core.logging import get_logger, sanitize_for_log
from catalog_search.repositories.product_repository import CandidateFilter, ProductStore
from catalog_search.schemas.product_schema import Product, SearchHit
from catalog_search.utils.text.fuzzy import FuzzyMatch, fuzzy_match_products

from .result import SearchResult, SearchStatus
from .store_adapter import StoreAdapter
from .strategy import EscalationStrategy, SearchTier


logger = get_logger(__name__)


class ProductSearchOrchestrator:
    """상품 검색 오케스트레이터

    Exact → (조건부) Fuzzy → Merge 파이프라인을 관리합니다.

    - 요청 단위 실행, 요청 간 공유 상태 없음
    - 퍼지 후보 윈도우는 candidate_cap(기본 50)으로 제한
    - 저장소 실패는 재시도 없이 UpstreamFetchException으로 전달
    """

    def __init__(self, store: ProductStore, config: Optional[SearchConfig] = None):
        """
        Args:
            store: 상품 저장소 (find_by_text_match / find_candidates 구현)
            config: 검색 설정 (기본값: SearchConfig())
        """
        if store is None:
            raise ValueError("store must not be None")

        self.store = StoreAdapter(store)
        self.config = config or SearchConfig()
        self.strategy = EscalationStrategy()

    async def search(self, query: str, config: Optional[SearchConfig] = None) -> SearchResult:
        """통합 검색 실행

        Args:
            query: 검색어 (원문)
            config: 이번 호출에만 적용할 설정 (없으면 생성 시 설정)

        Returns:
            SearchResult: 정확 매칭 뒤에 퍼지 매칭이 이어지는 결과

        Raises:
            InvalidQueryException: query가 문자열이 아닌 경우
            UpstreamFetchException: 저장소 조회 실패
            SearchFailedException: 그 외 파이프라인 실패
        """
        if query is not None and not isinstance(query, str):
            raise InvalidQueryException(f"query must be a string, got {type(query).__name__}")

        if not query or not query.strip():
            logger.debug("Search skipped: empty query")
            return SearchResult.invalid_query(query or "")

        cfg = config or self.config
        started = perf_counter()
        safe_query = sanitize_for_log(query)
        logger.info(f"Search started: query='{safe_query}'")

        tier = SearchTier.EXACT_ONLY
        fuzzy_matches: list[FuzzyMatch] = []
        try:
            # 1. Exact tier
            exact_matches = await self.store.find_by_text_match(query)

            # 2. Escalation gate
            escalate = self.strategy.should_escalate_to_fuzzy(len(exact_matches), cfg)

            # 3. Fuzzy tier
            if escalate:
                tier = SearchTier.FUZZY_ESCALATION
                fuzzy_matches = await self._run_fuzzy_tier(query, cfg)

            # 4. Merge
            tier = SearchTier.MERGE
            hits = self._merge(exact_matches, fuzzy_matches)

        except UpstreamFetchException as e:
            logger.error(f"Search failed: query='{safe_query}', tier={tier.value}, error={e}")
            raise
        except Exception as e:
            logger.error(
                f"Search failed: query='{safe_query}', tier={tier.value}, error={type(e).__name__}",
                exc_info=True,
            )
            raise SearchFailedException(
                "Error in search pipeline",
                details={"query": query, "tier": tier.value, "reason": str(e)},
            ) from e

        fuzzy_count = sum(1 for h in hits if h.is_fuzzy_match)
        exact_count = len(hits) - fuzzy_count

        if not escalate:
            status = SearchStatus.EXACT_ONLY if cfg.fuzzy_enabled else SearchStatus.FUZZY_DISABLED
        else:
            status = SearchStatus.FUZZY_MERGED

        logger.info(
            f"Search completed: query='{safe_query}', status={status.value}, "
            f"exact={exact_count}, fuzzy={fuzzy_count}"
        )
        return SearchResult(
            status=status,
            query=query,
            products=hits,
            exact_count=exact_count,
            fuzzy_count=fuzzy_count,
            elapsed_ms=(perf_counter() - started) * 1000,
        )

    async def _run_fuzzy_tier(self, query: str, cfg: SearchConfig) -> list[FuzzyMatch]:
        """후보 윈도우 조회 후 퍼지 점수 계산

        Returns:
            list[FuzzyMatch]: threshold 이상, 점수 내림차순
        """
        if not self.strategy.is_fuzzy_eligible(query, cfg):
            logger.debug(f"Fuzzy tier skipped: query too short (len={len(query.strip())})")
            return []

        candidates = await self.store.find_candidates(CandidateFilter(), limit=cfg.candidate_cap)

        matches = fuzzy_match_products(
            query,
            candidates,
            threshold=cfg.fuzzy_threshold,
            min_query_length=cfg.min_fuzzy_query_length,
        )
        logger.debug(
            f"Fuzzy tier: candidates={len(candidates)}, matched={len(matches)}, threshold={cfg.fuzzy_threshold}"
        )
        return matches

    @staticmethod
    def _merge(exact_matches: list[Product], fuzzy_matches: list[FuzzyMatch]) -> list[SearchHit]:
        """정확 매칭 + 퍼지 매칭 병합 (ID 기준 중복 제거)"""
        seen: set[str] = set()
        hits: list[SearchHit] = []

        for product in exact_matches:
            if product.id in seen:
                continue
            seen.add(product.id)
            hits.append(SearchHit.exact(product))

        for match in fuzzy_matches:
            if match.product.id in seen:
                continue
            seen.add(match.product.id)
            hits.append(SearchHit.fuzzy(match.product, match.score))

        return hits


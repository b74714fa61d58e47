"""Store Adapter - Product store calls with uniform failure semantics"""

import inspect
from typing import Any, Callable, Optional

from pydantic import ValidationError

from catalog_search.core.exceptions import UpstreamFetchException
from catalog_search.core.logging import get_logger
from catalog_search.repositories.product_repository import CandidateFilter, ProductStore
from catalog_search.schemas.product_schema import Product


logger = get_logger(__name__)


class StoreAdapter:
    """상품 저장소 어댑터

    호스트가 제공한 ProductStore를 오케스트레이터가 기대하는 형태로 맞춥니다.
    - 동기/비동기 구현 모두 허용
    - dict 레코드는 Product로 검증
    - 모든 실패는 UpstreamFetchException (재시도 없음)
    """

    def __init__(self, store: ProductStore):
        """
        Args:
            store: 상품 저장소

        Raises:
            ValueError: store가 None인 경우
        """
        if store is None:
            raise ValueError("store must not be None")
        self.store = store

    async def find_by_text_match(self, query: str) -> list[Product]:
        return await self._call_list("find_by_text_match", self.store.find_by_text_match, query)

    async def find_candidates(self, candidate_filter: CandidateFilter, limit: Optional[int] = None) -> list[Product]:
        products = await self._call_list(
            "find_candidates", self.store.find_candidates, candidate_filter, limit=limit
        )
        # 저장소가 limit을 무시하더라도 윈도우 상한 유지
        if limit is not None:
            products = products[: max(0, limit)]
        return products

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        record = await self._call("find_by_id", self.store.find_by_id, product_id)
        if record is None:
            return None
        return self._to_product("find_by_id", record)

    async def _call_list(self, operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> list[Product]:
        records = await self._call(operation, func, *args, **kwargs)
        if not records:
            return []
        return [self._to_product(operation, r) for r in records]

    @staticmethod
    async def _call(operation: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        try:
            result = func(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            logger.warning(f"Store call failed: operation={operation}, error={type(e).__name__}: {e}")
            raise UpstreamFetchException(operation, f"{type(e).__name__}: {e}") from e

    @staticmethod
    def _to_product(operation: str, record: Any) -> Product:
        if isinstance(record, Product):
            return record
        try:
            return Product.model_validate(record)
        except ValidationError as e:
            raise UpstreamFetchException(operation, f"invalid product record: {e.error_count()} error(s)") from e

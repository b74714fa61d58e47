"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Dummy/Fake 저장소 주입

금지:
- 대량 카탈로그 데이터 (tests/fixtures 사용)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from catalog_search.repositories import CandidateFilter, InMemoryProductRepository  # noqa: E402
from catalog_search.schemas.product_schema import Product  # noqa: E402
from tests.fixtures import CATALOG, RELATED_CATALOG, SHOES  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class RecordingStore:
    """호출 기록용 저장소 래퍼

    - 실제 조회는 InMemoryProductRepository에 위임
    - 메서드별 호출 인자를 기록
    """

    inner: InMemoryProductRepository
    calls: list[tuple[str, Any]] = field(default_factory=list)

    async def find_by_text_match(self, query: str) -> list[Product]:
        self.calls.append(("find_by_text_match", query))
        return await self.inner.find_by_text_match(query)

    async def find_candidates(self, candidate_filter: CandidateFilter, limit: Optional[int] = None) -> list[Product]:
        self.calls.append(("find_candidates", (candidate_filter, limit)))
        return await self.inner.find_candidates(candidate_filter, limit)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        self.calls.append(("find_by_id", product_id))
        return await self.inner.find_by_id(product_id)

    def called(self, name: str) -> list[Any]:
        return [args for op, args in self.calls if op == name]


@dataclass
class FailingStore:
    """지정한 메서드에서 예외를 던지는 저장소"""

    inner: InMemoryProductRepository
    fail_on: str = "find_by_text_match"
    error: Exception = field(default_factory=lambda: ConnectionError("store unavailable"))

    async def find_by_text_match(self, query: str) -> list[Product]:
        if self.fail_on == "find_by_text_match":
            raise self.error
        return await self.inner.find_by_text_match(query)

    async def find_candidates(self, candidate_filter: CandidateFilter, limit: Optional[int] = None) -> list[Product]:
        if self.fail_on == "find_candidates":
            raise self.error
        return await self.inner.find_candidates(candidate_filter, limit)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        if self.fail_on == "find_by_id":
            raise self.error
        return await self.inner.find_by_id(product_id)


@pytest.fixture
def catalog_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository(CATALOG)


@pytest.fixture
def related_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository(RELATED_CATALOG + SHOES)


@pytest.fixture
def recording_store(catalog_repo: InMemoryProductRepository) -> RecordingStore:
    return RecordingStore(inner=catalog_repo)


@pytest.fixture
def failing_store_factory():
    """FailingStore 생성 함수 (fail_on, error 지정)"""

    def _make(fail_on: str = "find_by_text_match", error: Optional[Exception] = None,
              products: Optional[list[dict[str, Any]]] = None) -> FailingStore:
        inner = InMemoryProductRepository(CATALOG if products is None else products)
        if error is None:
            return FailingStore(inner=inner, fail_on=fail_on)
        return FailingStore(inner=inner, fail_on=fail_on, error=error)

    return _make


@pytest.fixture
def recording_store_factory():
    """RecordingStore 생성 함수 (임의 상품 목록)"""

    def _make(products: list[dict[str, Any]]) -> RecordingStore:
        return RecordingStore(inner=InMemoryProductRepository(products))

    return _make

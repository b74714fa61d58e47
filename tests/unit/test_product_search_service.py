"""ProductSearchService 파사드 테스트."""

import pytest

from catalog_search.core.config import SearchConfig, Settings
from catalog_search.core.exceptions import InvalidQueryException, SearchFailedException
from catalog_search.services import ProductSearchService


@pytest.fixture
def service(catalog_repo):
    return ProductSearchService(catalog_repo, config=SearchConfig())


@pytest.mark.asyncio
async def test_search_products_envelope(service):
    response = await service.search_products("wireles mose")

    assert response["success"] is True
    assert response["status"] == "fuzzy_merged"
    first = response["products"][0]
    assert first["name"] == "Wireless Mouse"
    assert first["isFuzzyMatch"] is True
    assert 0 <= first["fuzzyScore"] <= 100


@pytest.mark.asyncio
async def test_search_products_exact_payload(service):
    response = await service.search_products("mouse")

    first = response["products"][0]
    assert first["id"] == "1"
    assert "isFuzzyMatch" not in first


@pytest.mark.asyncio
async def test_search_products_empty_keyword(service):
    response = await service.search_products("")

    assert response == {"success": True, "products": [], "status": "invalid_query"}


@pytest.mark.asyncio
async def test_search_products_long_keyword(service):
    """긴 검색어도 예외 없이 빈 결과"""
    response = await service.search_products("x" * 201)

    assert response["success"] is True
    assert response["products"] == []


@pytest.mark.asyncio
async def test_search_products_non_string_keyword(service):
    with pytest.raises(InvalidQueryException):
        await service.search_products(None)


@pytest.mark.asyncio
async def test_search_products_store_failure(failing_store_factory):
    service = ProductSearchService(failing_store_factory(), config=SearchConfig())

    with pytest.raises(SearchFailedException):
        await service.search_products("mouse")


@pytest.mark.asyncio
async def test_related_products(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    response = await service.related_products("laptop-1", "computers")

    assert response["success"] is True
    assert [p["id"] for p in response["products"]] == ["laptop-4", "laptop-2"]
    assert response["products"][1]["commonKeywords"] == ["gaming", "computer"]
    assert response["products"][1]["similarityScore"] == pytest.approx(0.5)


@pytest.mark.asyncio
async def test_related_products_not_found(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    response = await service.related_products("missing", "computers")

    assert response == {"success": False, "message": "Product not found", "products": []}


@pytest.mark.asyncio
async def test_related_products_no_similar(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    response = await service.related_products("p3", "shoes")

    assert response == {"success": True, "products": []}


@pytest.mark.asyncio
async def test_related_products_large_limit(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    response = await service.related_products("laptop-1", "computers", limit=500)

    assert [p["id"] for p in response["products"]] == ["laptop-4", "laptop-2"]


@pytest.mark.asyncio
async def test_related_products_invalid_request(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    with pytest.raises(InvalidQueryException):
        await service.related_products("", "computers")


def test_config_from_settings(catalog_repo):
    service = ProductSearchService(
        catalog_repo,
        app_settings=Settings(_env_file=None, fuzzy_matching_enabled=False, related_products_limit=2),
    )

    assert service.config.fuzzy_enabled is False
    assert service.config.related_limit == 2
    assert service.search_orchestrator.config is service.config
    assert service.related_orchestrator.config is service.config


@pytest.mark.asyncio
async def test_backfill_keywords(related_repo):
    service = ProductSearchService(related_repo, config=SearchConfig())

    assert service.backfill_keywords() == 4
    assert (await related_repo.find_by_id("p3")).keywords


def test_backfill_unsupported_store(recording_store):
    service = ProductSearchService(recording_store, config=SearchConfig())

    assert service.backfill_keywords() == 0

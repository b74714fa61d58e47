"""Product search relevance engine.

Tiered exact/fuzzy product search and Jaccard-ranked related products
over a host-supplied product store.
"""

from catalog_search.core.config import SearchConfig, Settings
from catalog_search.engine import (
    ProductSearchOrchestrator,
    RelatedProductOrchestrator,
    RelatedResult,
    RelatedStatus,
    SearchResult,
    SearchStatus,
)
from catalog_search.repositories import CandidateFilter, InMemoryProductRepository, ProductStore
from catalog_search.schemas import Product, RelatedProduct, SearchHit
from catalog_search.services import ProductSearchService

__version__ = "1.0.0"

__all__ = [
    "SearchConfig",
    "Settings",
    "ProductSearchOrchestrator",
    "RelatedProductOrchestrator",
    "SearchResult",
    "SearchStatus",
    "RelatedResult",
    "RelatedStatus",
    "CandidateFilter",
    "InMemoryProductRepository",
    "ProductStore",
    "Product",
    "SearchHit",
    "RelatedProduct",
    "ProductSearchService",
]

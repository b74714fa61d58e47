"""비즈니스 로직 서비스 - export only."""

from .product_search_service import ProductSearchService

__all__ = ["ProductSearchService"]

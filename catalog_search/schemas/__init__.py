"""Pydantic 스키마 - export only."""

from .product_schema import Product, RelatedProduct, RelatedRequest, SearchHit, SearchRequest

__all__ = ["Product", "SearchHit", "RelatedProduct", "SearchRequest", "RelatedRequest"]

"""상품 저장소 계약 및 구현 - export only."""

from .product_repository import CandidateFilter, ProductStore
from .impl import InMemoryProductRepository

__all__ = ["CandidateFilter", "ProductStore", "InMemoryProductRepository"]

"""Engine Layer - Core Orchestration

This module provides the core engine layer for product relevance:
- ProductSearchOrchestrator: tiered exact/fuzzy search pipeline
- RelatedProductOrchestrator: Jaccard-ranked related products
- SearchResult / RelatedResult: Standardized result format
- EscalationStrategy: Exact → Fuzzy decision logic
- StoreAdapter: Product store adapter
"""

from .related_orchestrator import RelatedProductOrchestrator, comparison_basis
from .result import RelatedResult, RelatedStatus, SearchResult, SearchStatus
from .search_orchestrator import ProductSearchOrchestrator
from .store_adapter import StoreAdapter
from .strategy import EscalationStrategy, SearchTier

__all__ = [
    "ProductSearchOrchestrator",
    "RelatedProductOrchestrator",
    "comparison_basis",
    "SearchResult",
    "SearchStatus",
    "RelatedResult",
    "RelatedStatus",
    "EscalationStrategy",
    "SearchTier",
    "StoreAdapter",
]

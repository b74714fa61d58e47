"""Utilities package"""

from .debounce import Debouncer
from .text import (
    normalize_search_term,
    tokenize,
    to_tokens,
    FuzzyMatch,
    calculate_fuzzy_score,
    fuzzy_match_products,
    JaccardResult,
    jaccard,
    jaccard_detailed,
    extract_keywords,
)

__all__ = [
    "Debouncer",
    "normalize_search_term",
    "tokenize",
    "to_tokens",
    "FuzzyMatch",
    "calculate_fuzzy_score",
    "fuzzy_match_products",
    "JaccardResult",
    "jaccard",
    "jaccard_detailed",
    "extract_keywords",
]

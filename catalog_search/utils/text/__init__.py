"""Text utilities.

- normalization: 퍼지 비교용 검색어 정규화
- tokenize: Jaccard용 토큰화
- fuzzy: 가중 퍼지 점수
- jaccard: 집합 유사도
- keywords: 키워드 추출
"""

from .normalization import normalize_search_term
from .tokenize import to_tokens, tokenize
from .fuzzy import FuzzyMatch, calculate_fuzzy_score, fuzzy_match_products
from .jaccard import JaccardResult, jaccard, jaccard_detailed
from .keywords import extract_keywords

__all__ = [
    # normalization
    "normalize_search_term",
    # tokenize
    "tokenize",
    "to_tokens",
    # fuzzy
    "FuzzyMatch",
    "calculate_fuzzy_score",
    "fuzzy_match_products",
    # jaccard
    "JaccardResult",
    "jaccard",
    "jaccard_detailed",
    # keywords
    "extract_keywords",
]

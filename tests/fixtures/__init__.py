"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진/저장소 의존 없음
"""

from .products import CATALOG, MOUSE, RELATED_CATALOG, SHOES

__all__ = [
    "CATALOG",
    "MOUSE",
    "RELATED_CATALOG",
    "SHOES",
]

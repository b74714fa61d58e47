"""Escalation Strategy - Exact/Fuzzy Tier Decision Logic

Determines whether a search escalates from the exact tier to the fuzzy tier.
"""

from enum import Enum

from catalog_search.core.config import SearchConfig


class SearchTier(str, Enum):
    """검색 파이프라인 단계

    EXACT_ONLY → FUZZY_ESCALATION → MERGE 순서로 진행합니다.
    """

    EXACT_ONLY = "exact_only"
    FUZZY_ESCALATION = "fuzzy_escalation"
    MERGE = "merge"


class EscalationStrategy:
    """퍼지 단계 진입 여부 결정

    Usage:
        strategy = EscalationStrategy()

        exact = await store.find_by_text_match(query)
        if strategy.should_escalate_to_fuzzy(len(exact), config):
            candidates = await store.find_candidates(CandidateFilter(), limit=config.candidate_cap)
    """

    @staticmethod
    def should_escalate_to_fuzzy(exact_count: int, config: SearchConfig) -> bool:
        """퍼지 단계로 진입할지 결정

        다음 경우 정확 매칭 결과만 반환 (short-circuit):
        - 설정으로 퍼지 매칭이 비활성화된 경우
        - 정확 매칭이 이미 escalation floor(기본 10개) 이상인 경우

        Args:
            exact_count: 정확 매칭 개수
            config: 검색 설정

        Returns:
            bool: 퍼지 단계를 실행해야 하는지 여부
        """
        if not config.fuzzy_enabled:
            return False
        return exact_count < config.exact_match_escalation_floor

    @staticmethod
    def is_fuzzy_eligible(query: str, config: SearchConfig) -> bool:
        """검색어 길이 기준 퍼지 매칭 대상 여부 (strip 후 길이)"""
        return len(query.strip()) >= config.min_fuzzy_query_length

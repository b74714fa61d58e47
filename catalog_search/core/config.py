"""설정 관리 - 환경 변수 로드 및 검증"""
from dataclasses import dataclass
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 퍼지 매칭 (Tier 2)
    fuzzy_matching_enabled: bool = True
    fuzzy_threshold: int = 70  # 0~100

    # 퍼지 후보 윈도우 상한
    fuzzy_candidate_cap: int = 50

    # 정확 매칭 결과가 이 개수 이상이면 퍼지 단계를 건너뜀
    exact_match_escalation_floor: int = 10

    # 이보다 짧은 검색어(strip 기준)는 퍼지 결과 0건
    min_fuzzy_query_length: int = 3

    # 연관 상품
    related_products_limit: int = 6

    # 로깅
    log_level: str = "INFO"

    @field_validator("fuzzy_threshold")
    @classmethod
    def validate_fuzzy_threshold(cls, v: int) -> int:
        if v < 0 or v > 100:
            raise ValueError("fuzzy_threshold must be between 0 and 100")
        return v

    @field_validator("fuzzy_candidate_cap", "exact_match_escalation_floor")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("candidate cap and escalation floor must be positive")
        return v

    @field_validator("min_fuzzy_query_length")
    @classmethod
    def validate_min_fuzzy_query_length(cls, v: int) -> int:
        if v < 1:
            raise ValueError("min_fuzzy_query_length must be >= 1")
        return v

    @field_validator("related_products_limit")
    @classmethod
    def validate_related_products_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError("related_products_limit must be >= 0")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()


@dataclass(frozen=True)
class SearchConfig:
    """요청 단위로 전달되는 검색 설정 (불변)

    전역 settings를 호출 지점마다 읽지 않고, 오케스트레이터 생성 시
    (또는 호출 시) 명시적으로 주입합니다.
    """

    fuzzy_enabled: bool = True
    fuzzy_threshold: int = 70
    candidate_cap: int = 50
    exact_match_escalation_floor: int = 10
    min_fuzzy_query_length: int = 3
    related_limit: int = 6

    def __post_init__(self):
        """설정 검증"""
        if not 0 <= self.fuzzy_threshold <= 100:
            raise ValueError(f"fuzzy_threshold out of range: {self.fuzzy_threshold}")
        if self.candidate_cap <= 0:
            raise ValueError(f"candidate_cap must be positive: {self.candidate_cap}")
        if self.exact_match_escalation_floor <= 0:
            raise ValueError(
                f"exact_match_escalation_floor must be positive: {self.exact_match_escalation_floor}"
            )

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "SearchConfig":
        """Settings 인스턴스에서 SearchConfig 생성"""
        s = source or settings
        return cls(
            fuzzy_enabled=s.fuzzy_matching_enabled,
            fuzzy_threshold=s.fuzzy_threshold,
            candidate_cap=s.fuzzy_candidate_cap,
            exact_match_escalation_floor=s.exact_match_escalation_floor,
            min_fuzzy_query_length=s.min_fuzzy_query_length,
            related_limit=s.related_products_limit,
        )

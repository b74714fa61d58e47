"""Pydantic 스키마 정의 (상품 / 검색 결과)"""
import math
from typing import Optional, List, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """상품 레코드 (카탈로그 저장소 소유, 이 코어는 읽기만 함)"""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str = Field(..., min_length=1, description="상품 식별자 (opaque)")
    name: str = Field("", description="상품명")
    description: str = Field("", description="상품 설명")
    keywords: List[str] = Field(default_factory=list, description="키워드 (순서 무관)")
    price: float = Field(0.0, description="가격 (정보용, 비정상 값은 0)")
    category_id: Optional[str] = Field(None, description="카테고리 식별자")
    slug: Optional[str] = Field(None, description="URL slug")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """ObjectId 등 비문자열 식별자를 문자열로 통일"""
        if v is None:
            return v
        return str(v)

    @field_validator("name", "description", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> str:
        """누락된 텍스트 필드는 빈 문자열로 처리"""
        if v is None:
            return ""
        return str(v)

    @field_validator("price", mode="before")
    @classmethod
    def default_price(cls, v: Any) -> float:
        """가격 누락/음수/숫자 아님은 0.0으로 처리"""
        try:
            price = float(v)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(price) or price < 0:
            return 0.0
        return price

    @field_validator("keywords", mode="before")
    @classmethod
    def default_keywords(cls, v: Any) -> List[str]:
        """keywords 누락/비정상 값은 빈 리스트로 처리"""
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v else []
        return [str(k) for k in v if k is not None]


class SearchHit(Product):
    """검색 결과 항목 - 퍼지 매칭이면 메타데이터가 붙음"""
    is_fuzzy_match: bool = Field(False, serialization_alias="isFuzzyMatch", description="퍼지 매칭 여부")
    fuzzy_score: Optional[float] = Field(None, ge=0, le=100, serialization_alias="fuzzyScore", description="퍼지 점수 (0~100)")

    @classmethod
    def exact(cls, product: Product) -> "SearchHit":
        """정확 매칭 결과 (플래그 없음)"""
        return cls(**product.model_dump())

    @classmethod
    def fuzzy(cls, product: Product, score: float) -> "SearchHit":
        """퍼지 매칭 결과"""
        return cls(**product.model_dump(), is_fuzzy_match=True, fuzzy_score=score)

    def to_payload(self) -> dict[str, Any]:
        """응답용 dict (정확 매칭이면 퍼지 필드 생략)"""
        exclude = None if self.is_fuzzy_match else {"is_fuzzy_match", "fuzzy_score"}
        return self.model_dump(by_alias=True, exclude=exclude)


class RelatedProduct(Product):
    """연관 상품 항목"""
    similarity_score: float = Field(..., ge=0, le=1, serialization_alias="similarityScore", description="Jaccard 유사도 (0~1)")
    common_keywords: List[str] = Field(default_factory=list, serialization_alias="commonKeywords", description="공통 토큰")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SearchRequest(BaseModel):
    """검색 요청 (호스트 핸들러용 입력 검증)"""
    keyword: str = Field(..., description="검색어 (원문 그대로 사용)")


class RelatedRequest(BaseModel):
    """연관 상품 요청"""
    product_id: str = Field(..., min_length=1, description="기준 상품 ID")
    category_id: str = Field(..., min_length=1, description="카테고리 ID")
    limit: Optional[int] = Field(None, description="최대 개수 (음수는 0으로 처리)")

"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class SearchEngineException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 검색 실패
class SearchFailedException(SearchEngineException):
    """검색 파이프라인 실패 (호출자에게는 일반 실패로 보고)"""
    def __init__(self, message: str = "Error in search pipeline", error_code: str = "SEARCH_FAILED", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "SEARCH_FAILED", details)


class UpstreamFetchException(SearchFailedException):
    """상품 저장소(후보 조회) 호출 실패 - 내부 재시도 없음"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Candidate fetch '{operation}' failed: {reason}"
        super().__init__(message, "UPSTREAM_FETCH_ERROR",
                        details or {"operation": operation, "reason": reason})
        self.operation = operation


class ProductNotFoundException(SearchEngineException):
    """기준 상품을 찾을 수 없을 때 (연관 상품)"""
    def __init__(self, product_id: str, details: Optional[dict[str, Any]] = None):
        message = f"Product not found: {product_id}"
        super().__init__(message, "PRODUCT_NOT_FOUND", details or {"product_id": product_id})
        self.product_id = product_id


# 유효성 검증 관련 예외
class ValidationException(SearchEngineException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)

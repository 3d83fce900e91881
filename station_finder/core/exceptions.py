"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class StationFinderException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 편의시설 조회 관련 예외
class AmenityLookupException(StationFinderException, LookupError):
    """선택 인덱스 또는 표시 라벨을 편의시설 식별자로 변환할 수 없을 때

    파이프라인 전체를 중단시키며 자동 재시도하지 않습니다.
    """
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Amenity lookup failed: {reason}"
        super().__init__(message, "AMENITY_LOOKUP_FAILED", details or {"reason": reason})


class AmenityIndexOutOfRangeException(AmenityLookupException):
    """선택 인덱스가 표시 라벨 범위를 벗어남"""
    def __init__(self, index: int, size: int, details: Optional[dict[str, Any]] = None):
        super().__init__(
            f"selection index {index} out of range (0..{size - 1})",
            details or {"index": index, "size": size},
        )


class UnknownAmenityLabelException(AmenityLookupException):
    """표시 라벨에 대응하는 식별자가 없음"""
    def __init__(self, label: str, details: Optional[dict[str, Any]] = None):
        super().__init__(f"no identifier for label '{label}'", details or {"label": label})


# 거리 계산 관련 예외
class ResolutionFailureException(StationFinderException):
    """거리 계산 실패

    DistanceResolver 구현체가 발생시키며, 정렬 엔진은 이를 실패 보고로 흡수합니다.
    """
    def __init__(self, station_id: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Distance resolution failed for station '{station_id}': {reason}"
        super().__init__(message, "RESOLUTION_FAILED",
                        details or {"station_id": station_id, "reason": reason})


# 호출자 오류
class PreconditionViolationException(StationFinderException, ValueError):
    """호출자가 보장해야 할 전제 조건 위반 (예: 빈 목록에서 최저가 주유소 조회)"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Precondition violated in '{operation}': {reason}"
        super().__init__(message, "PRECONDITION_VIOLATION",
                        details or {"operation": operation, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(StationFinderException):
    """유효성 검증 예외"""
    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidSortModeException(ValidationException):
    """지원하지 않는 정렬 방식"""
    def __init__(self, mode: Any, details: Optional[dict[str, Any]] = None):
        super().__init__("sort_mode", f"unsupported sort mode (value: {mode})", details)


# 리소스 관련 예외
class ResourceLoadException(StationFinderException):
    """리소스(YAML) 파일 로드 실패"""
    def __init__(self, path: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to load resource {path}: {reason}"
        super().__init__(message, "RESOURCE_LOAD_ERROR",
                        details or {"path": path, "reason": reason})

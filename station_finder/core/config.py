"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 거리 계산
    # 단일 주유소 거리 계산 타임아웃 (초). 초과 시 해당 계산은 실패로 간주합니다.
    distance_resolve_timeout_s: float = 10.0

    # 필터
    # True면 close < open 인 영업시간(예: 20시~2시)을 자정을 넘는 구간으로 해석
    open_now_wraps_overnight: bool = False

    # 파이프라인
    # True면 검색 결과가 비어 있는 경우도 네트워크 오류로 취급 (기존 앱 동작)
    treat_empty_as_failure: bool = False
    network_error_message: str = "Network Error"

    # 리소스
    amenity_table_resource: str = "amenities.yaml"

    # 로깅
    log_level: str = "INFO"

    @field_validator("distance_resolve_timeout_s")
    @classmethod
    def validate_resolve_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("distance_resolve_timeout_s must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @field_validator("amenity_table_resource")
    @classmethod
    def validate_amenity_table_resource(cls, v: str) -> str:
        if not v:
            raise ValueError("amenity_table_resource must not be empty")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()

"""Pydantic 스키마 정의 (주유소 레코드)"""
from datetime import time
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_hour(value: Any) -> Any:
    """time / "HH:MM" / int 를 시(hour) 정수로 변환

    분 단위는 버립니다 (영업 중 판정은 시 단위로만 비교).
    """
    if isinstance(value, time):
        return value.hour
    if isinstance(value, str):
        text = value.strip()
        head = text.split(":", 1)[0]
        if not head.isdigit():
            raise ValueError(f"영업시간 형식이 올바르지 않습니다: {value}")
        return int(head)
    return value


class OperatingHours(BaseModel):
    """영업시간 (시 단위, 0~23)"""
    model_config = ConfigDict(frozen=True)

    open: int = Field(..., ge=0, le=23, description="개점 시각 (시)")
    close: int = Field(..., ge=0, le=23, description="폐점 시각 (시)")

    @field_validator("open", "close", mode="before")
    @classmethod
    def coerce_hour(cls, v: Any) -> Any:
        return _coerce_hour(v)

    @property
    def wraps_midnight(self) -> bool:
        """폐점 시각이 개점 시각보다 이른가 (예: 20시~2시)"""
        return self.close < self.open


class GasStation(BaseModel):
    """주유소 레코드

    파이프라인 실행 중에는 읽기 전용으로 취급합니다.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="주유소 식별자")
    name: str = Field(..., description="주유소명")
    address: str = Field("", description="주소")
    amenities: Tuple[str, ...] = Field(default=(), description="편의시설 식별자 목록")
    items: Tuple[str, ...] = Field(default=(), description="판매 품목 목록")
    gas_price: float = Field(..., ge=0, description="유가")
    hours: OperatingHours = Field(..., description="영업시간")
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="위도")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="경도")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """숫자 ID도 문자열 키로 통일"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("amenities")
    @classmethod
    def dedupe_amenities(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """중복 식별자 제거 (첫 등장 순서 유지)"""
        seen: set[str] = set()
        out: list[str] = []
        for amenity in v:
            if amenity not in seen:
                seen.add(amenity)
                out.append(amenity)
        return tuple(out)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

"""Amenity Filter Engine - Conjunctive Amenity Predicates

요청된 모든 편의시설 조건(AND)을 만족하는 주유소만 남깁니다.
"openNow"는 현재 시각(로컬) 기준 영업 여부를 검사하는 가상 편의시설입니다.
"""

from datetime import datetime
from typing import Callable, List, Optional, Sequence

from station_finder.core.config import settings
from station_finder.core.logging import logger
from station_finder.schemas.station_schema import GasStation, OperatingHours

from .amenities import OPEN_NOW


def is_open_at(hours: OperatingHours, hour: int, wraps_overnight: bool = False) -> bool:
    """주어진 시(hour)에 영업 중인가

    기본은 [open, close) 반구간입니다. close < open 인 구간(예: 20시~2시)은
    wraps_overnight=True 일 때만 자정을 넘는 구간으로 해석하고,
    그렇지 않으면 항상 False 입니다.
    """
    if wraps_overnight and hours.wraps_midnight:
        return hour >= hours.open or hour < hours.close
    return hours.open <= hour < hours.close


class AmenityFilterEngine:
    """편의시설 필터

    - 빈 조건 목록이면 모두 통과
    - 입력 순서 유지 (멱등)
    - 일반 편의시설은 정확히 일치하는 식별자만 인정 (대소문자 구분)
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        wraps_overnight: Optional[bool] = None,
    ):
        """
        Args:
            clock: 현재 시각 함수 (기본값: datetime.now)
            wraps_overnight: 자정을 넘는 영업시간 처리 여부 (기본값: 설정값)
        """
        self.clock = clock or datetime.now
        self.wraps_overnight = (
            settings.open_now_wraps_overnight if wraps_overnight is None else wraps_overnight
        )

    def filter(
        self,
        stations: Sequence[GasStation],
        amenity_identifiers: Sequence[str],
        now: Optional[datetime] = None,
    ) -> List[GasStation]:
        """편의시설 조건으로 필터링

        Args:
            stations: 필터 대상
            amenity_identifiers: 편의시설 식별자 (OPEN_NOW 포함 가능)
            now: 기준 시각 (기본값: clock())

        Returns:
            List[GasStation]: 조건을 모두 만족하는 주유소
        """
        if not amenity_identifiers:
            return list(stations)

        current_hour = (now or self.clock()).hour
        results = [
            station
            for station in stations
            if self.matches(station, amenity_identifiers, current_hour)
        ]

        logger.debug(
            f"Amenity filter: amenities={list(amenity_identifiers)}, hour={current_hour}, "
            f"kept={len(results)}/{len(stations)}"
        )
        return results

    def matches(
        self, station: GasStation, amenity_identifiers: Sequence[str], current_hour: int
    ) -> bool:
        for amenity in amenity_identifiers:
            if amenity == OPEN_NOW:
                if not is_open_at(station.hours, current_hour, self.wraps_overnight):
                    return False
            elif amenity not in station.amenities:
                return False
        return True

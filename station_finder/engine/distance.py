"""Distance Resolver - Asynchronous Per-station Distance Capability

정렬 엔진이 주유소마다 한 번씩 호출하는 거리 계산 인터페이스와
기본 구현(하버사인 공식)을 제공합니다.
"""

import asyncio
import inspect
import math
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol, Union

from station_finder.core.logging import logger
from station_finder.schemas.station_schema import GasStation

EARTH_RADIUS_KM = 6371.0088


@dataclass(frozen=True)
class Coordinate:
    """위경도 좌표"""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class DistanceReport:
    """거리 계산 결과

    Attributes:
        position: 요청 시 전달한 위치 태그 (입력 목록 인덱스)
        distance: 거리 (km). 실패 시 None
        success: 성공 여부
    """

    position: int
    distance: Optional[float]
    success: bool

    @classmethod
    def ok(cls, position: int, distance: float) -> "DistanceReport":
        return cls(position=position, distance=distance, success=True)

    @classmethod
    def failed(cls, position: int) -> "DistanceReport":
        return cls(position=position, distance=None, success=False)


class DistanceResolver(Protocol):
    """거리 계산기 인터페이스

    호출 1회당 정확히 1개의 DistanceReport를 반환해야 합니다.
    """

    async def resolve_distance(self, position: int, station: GasStation) -> DistanceReport:
        """사용자 위치로부터 주유소까지의 거리 계산

        Args:
            position: 위치 태그 (그대로 돌려줘야 함)
            station: 대상 주유소

        Returns:
            DistanceReport: 계산 결과

        Raises:
            ResolutionFailureException: 구현체가 실패를 예외로 알리는 경우
        """
        ...


OriginProvider = Callable[[], Union[Optional[Coordinate], Awaitable[Optional[Coordinate]]]]


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 사이의 대원 거리 (km)"""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


class HaversineDistanceResolver:
    """사용자 위치 기준 직선 거리 계산기

    좌표가 없는 주유소나 사용자 위치를 모르는 경우 실패로 보고합니다.
    동시에 진행 중인 계산들은 사용자 위치 조회 1건을 공유하므로,
    한 번의 거리 정렬 안에서는 모든 주유소가 같은 기준 좌표로 계산됩니다.
    """

    def __init__(self, origin: Union[Coordinate, OriginProvider, None]):
        """
        Args:
            origin: 사용자 좌표, 또는 좌표를 돌려주는 함수 (동기/비동기)
        """
        self._origin = origin
        self._pending_origin: Optional[asyncio.Future] = None

    async def _current_origin(self) -> Optional[Coordinate]:
        if self._origin is None or isinstance(self._origin, Coordinate):
            return self._origin
        if self._pending_origin is None or self._pending_origin.done():
            self._pending_origin = asyncio.ensure_future(self._lookup_origin())
        # 한 계산이 타임아웃으로 취소돼도 공유 조회는 계속 진행
        return await asyncio.shield(self._pending_origin)

    async def _lookup_origin(self) -> Optional[Coordinate]:
        value = self._origin()
        if inspect.isawaitable(value):
            value = await value
        return value

    async def resolve_distance(self, position: int, station: GasStation) -> DistanceReport:
        origin = await self._current_origin()
        if origin is None:
            logger.warning("User location unavailable, distance resolution failed")
            return DistanceReport.failed(position)

        if not station.has_location:
            logger.debug(f"Station has no coordinates: id={station.id}")
            return DistanceReport.failed(position)

        distance = haversine_km(
            origin.latitude, origin.longitude, station.latitude, station.longitude
        )
        return DistanceReport.ok(position, distance)

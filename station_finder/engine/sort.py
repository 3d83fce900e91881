"""Sort Engine - Price / Distance Ordering

정렬 방식:
- PRICE: 유가 오름차순 (동기, 안정 정렬)
- DISTANCE: 주유소마다 거리 계산을 동시에 요청하고, 모든 응답이 도착한 뒤
  거리 오름차순으로 정렬 (하나라도 실패하면 전체 실패)
"""

import asyncio
from enum import Enum
from time import time
from typing import Dict, List, Optional, Sequence, Union

from station_finder.core.config import settings
from station_finder.core.exceptions import (
    PreconditionViolationException,
    ResolutionFailureException,
)
from station_finder.core.logging import logger
from station_finder.schemas.station_schema import GasStation

from .distance import DistanceReport, DistanceResolver
from .result import SortResult


class SortMode(int, Enum):
    """정렬 방식 (검색 화면 세그먼트 인덱스와 동일한 값)"""

    DISTANCE = 0
    PRICE = 1


def sort_by_price(stations: Sequence[GasStation]) -> List[GasStation]:
    """유가 오름차순 정렬 (같은 가격은 입력 순서 유지)"""
    return sorted(stations, key=lambda station: station.gas_price)


class SortEngine:
    """주유소 정렬 엔진

    Usage:
        engine = SortEngine(resolver=HaversineDistanceResolver(origin))
        result = await engine.sort(SortMode.DISTANCE, stations)
        if result.is_retryable:
            ...
    """

    def __init__(
        self,
        resolver: Optional[DistanceResolver] = None,
        resolve_timeout: Optional[float] = None,
    ):
        """
        Args:
            resolver: 거리 계산기 (DISTANCE 정렬에만 필요)
            resolve_timeout: 주유소당 거리 계산 타임아웃 (초, 기본값: 설정값)

        Raises:
            ValueError: resolve_timeout이 0 이하인 경우
        """
        self.resolver = resolver
        if resolve_timeout is None:
            resolve_timeout = settings.distance_resolve_timeout_s
        if resolve_timeout <= 0:
            raise ValueError(f"resolve_timeout must be positive (value: {resolve_timeout})")
        self.resolve_timeout = resolve_timeout

    async def sort(
        self, mode: Union[SortMode, int], stations: Sequence[GasStation]
    ) -> SortResult:
        """정렬 방식에 따라 정렬

        Args:
            mode: 정렬 방식
            stations: 정렬 대상

        Returns:
            SortResult: 정렬 결과. 알 수 없는 방식이면 INVALID_MODE
        """
        try:
            mode = SortMode(mode)
        except ValueError:
            logger.error(f"Unsupported sort mode: {mode}")
            return SortResult.invalid_mode(mode)

        if mode == SortMode.DISTANCE:
            return await self.sort_by_distance(stations)
        return self.sort_by_price(stations)

    def sort_by_price(self, stations: Sequence[GasStation]) -> SortResult:
        """유가 오름차순 정렬"""
        if not stations:
            return SortResult.empty_input("price")

        start = time()
        ordered = sort_by_price(stations)
        return SortResult.success(ordered, "price", (time() - start) * 1000)

    async def sort_by_distance(self, stations: Sequence[GasStation]) -> SortResult:
        """거리 오름차순 정렬

        모든 주유소의 거리 계산이 끝날 때까지(성공/실패 무관) 대기한 뒤 정렬합니다.
        거리 매핑(입력 위치 → 거리)은 이 호출 안에서만 존재합니다.

        Args:
            stations: 정렬 대상

        Returns:
            SortResult: 성공 시 정렬 결과, 하나라도 실패하면 RESOLUTION_FAILED

        Raises:
            ValueError: 거리 계산기가 설정되지 않은 경우
        """
        if not stations:
            return SortResult.empty_input("distance")

        if self.resolver is None:
            raise ValueError("resolver must not be None for distance sort")

        start = time()
        distances: Dict[int, float] = {}
        failed_positions: List[int] = []

        async def _resolve(position: int, station: GasStation) -> None:
            report = await self._resolve_one(position, station)

            # 도착 순서가 아니라 위치 태그로 주유소를 식별
            if report.position != position:
                logger.warning(
                    f"Distance report tag mismatch: expected={position}, got={report.position}"
                )
                report = DistanceReport.failed(position)

            if report.success and report.distance is not None:
                distances[position] = report.distance
            else:
                failed_positions.append(position)

        await asyncio.gather(
            *(_resolve(position, station) for position, station in enumerate(stations))
        )

        elapsed_ms = (time() - start) * 1000

        if failed_positions:
            logger.warning(
                f"Distance sort failed: {len(failed_positions)}/{len(stations)} resolutions failed"
            )
            return SortResult.resolution_failed(failed_positions, elapsed_ms)

        ordered = [
            station
            for _, station in sorted(enumerate(stations), key=lambda pair: distances[pair[0]])
        ]
        logger.debug(f"Distance sort completed: count={len(ordered)}, elapsed={elapsed_ms:.1f}ms")
        return SortResult.success(ordered, "distance", elapsed_ms)

    async def _resolve_one(self, position: int, station: GasStation) -> DistanceReport:
        """거리 계산 1건 (타임아웃/예외는 실패 보고로 변환)"""
        try:
            return await asyncio.wait_for(
                self.resolver.resolve_distance(position, station),
                timeout=self.resolve_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Distance resolution timeout: station={station.id}, timeout={self.resolve_timeout}s"
            )
        except ResolutionFailureException as e:
            logger.warning(f"Distance resolution failed: {e}")
        except Exception as e:
            logger.error(
                f"Distance resolver error: station={station.id}, error={type(e).__name__}: {e}",
                exc_info=True,
            )
        return DistanceReport.failed(position)

    async def get_closest_gas_station(
        self, stations: Sequence[GasStation]
    ) -> Optional[GasStation]:
        """가장 가까운 주유소 (없거나 거리 계산 실패 시 None)"""
        result = await self.sort_by_distance(stations)
        if result.stations:
            return result.stations[0]
        return None

    def get_cheapest_gas_station(self, stations: Sequence[GasStation]) -> GasStation:
        """가장 저렴한 주유소

        Raises:
            PreconditionViolationException: 빈 목록인 경우 (호출자가 보장해야 함)
        """
        if not stations:
            raise PreconditionViolationException(
                "get_cheapest_gas_station", "stations must not be empty"
            )
        return sort_by_price(stations)[0]

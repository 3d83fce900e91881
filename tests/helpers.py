"""테스트 공용 Fake 구현

- pytest fixture 선언하지 않음 (conftest.py에서 주입)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Sequence

from station_finder.engine.distance import DistanceReport
from station_finder.schemas.station_schema import GasStation


@dataclass
class FakeDistanceResolver:
    """정렬 엔진 Unit 테스트용 거리 계산기

    - station.id → 거리 (km)
    - failing에 포함된 id는 실패 보고
    - delays로 응답 도착 순서를 뒤섞을 수 있음
    """

    distances: dict[str, float]
    failing: set[str] = field(default_factory=set)
    delays: dict[str, float] = field(default_factory=dict)
    calls: list[tuple[int, str]] = field(default_factory=list)
    completed: list[str] = field(default_factory=list)

    async def resolve_distance(self, position: int, station: GasStation) -> DistanceReport:
        self.calls.append((position, station.id))
        delay = self.delays.get(station.id, 0.0)
        if delay:
            await asyncio.sleep(delay)
        self.completed.append(station.id)
        if station.id in self.failing:
            return DistanceReport.failed(position)
        return DistanceReport.ok(position, self.distances[station.id])


@dataclass
class RecordingObserver:
    """전달받은 결과를 기록하는 옵저버"""

    name: str = "observer"
    received: list[list[GasStation]] = field(default_factory=list)

    def deliver(self, results: Sequence[GasStation]) -> None:
        self.received.append(list(results))

    def __hash__(self) -> int:
        return id(self)

    def __eq__(self, other: Any) -> bool:
        return self is other


def make_station(**overrides: Any) -> GasStation:
    """기본값을 채운 GasStation 생성"""
    data: dict[str, Any] = {
        "id": "station",
        "name": "Test Station",
        "address": "1 Test Rd",
        "amenities": [],
        "items": [],
        "gas_price": 3.0,
        "hours": {"open": 0, "close": 23},
    }
    data.update(overrides)
    return GasStation.model_validate(data)

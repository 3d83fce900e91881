"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Dummy/Fake 주입
- 전역 상태 초기화
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from station_finder.schemas.station_schema import GasStation  # noqa: E402
from tests.fixtures import STATIONS  # noqa: E402
from tests.helpers import FakeDistanceResolver, RecordingObserver, make_station  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture
def station_factory():
    """GasStation 생성 함수"""
    return make_station


@pytest.fixture
def stations() -> list[GasStation]:
    """기본 주유소 3곳 (s1, s2, s3)"""
    return [GasStation.model_validate(data) for data in STATIONS.values()]


@pytest.fixture
def fake_resolver() -> FakeDistanceResolver:
    return FakeDistanceResolver(distances={"s1": 1.2, "s2": 0.4, "s3": 9.8})


@pytest.fixture
def recording_observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def amenity_table() -> dict[str, str]:
    """테스트 전용 편의시설 테이블 (번들 YAML과 독립)"""
    return {
        "Open Now": "openNow",
        "Car Wash": "carWash",
        "Convenience Store": "convenienceStore",
        "Restrooms": "restrooms",
        "Air Pump": "airPump",
        "EV Charging": "evCharging",
        "Electric Vehicle Charging": "evCharging",
    }

"""AmenityFilterEngine 단위 테스트"""
from datetime import datetime

import pytest

from station_finder.engine.amenities import OPEN_NOW
from station_finder.engine.filters import AmenityFilterEngine, is_open_at
from station_finder.schemas.station_schema import OperatingHours


def at_hour(hour: int) -> datetime:
    return datetime(2026, 10, 17, hour, 30)


@pytest.fixture
def engine():
    return AmenityFilterEngine(clock=lambda: at_hour(14), wraps_overnight=False)


class TestOpenNow:
    """openNow 가상 편의시설"""

    def test_open_during_business_hours(self, engine, station_factory):
        """14시, 8~18시 영업 → 통과"""
        station = station_factory(hours={"open": 8, "close": 18})
        assert engine.filter([station], [OPEN_NOW]) == [station]

    def test_overnight_window_fails_without_wrapping(self, engine, station_factory):
        """14시, 20~2시 영업 → 탈락"""
        station = station_factory(hours={"open": 20, "close": 2})
        assert engine.filter([station], [OPEN_NOW]) == []

    def test_overnight_window_never_matches_without_wrapping(self, station_factory):
        """자정을 넘는 구간 미처리: 영업 중인 23시에도 탈락"""
        engine = AmenityFilterEngine(wraps_overnight=False)
        station = station_factory(hours={"open": 20, "close": 2})
        assert engine.filter([station], [OPEN_NOW], now=at_hour(23)) == []

    def test_close_hour_is_exclusive(self, engine, station_factory):
        station = station_factory(hours={"open": 8, "close": 14})
        assert engine.filter([station], [OPEN_NOW]) == []

    def test_open_hour_is_inclusive(self, engine, station_factory):
        station = station_factory(hours={"open": 14, "close": 15})
        assert engine.filter([station], [OPEN_NOW]) == [station]

    def test_explicit_now_overrides_clock(self, engine, station_factory):
        station = station_factory(hours={"open": 8, "close": 18})
        assert engine.filter([station], [OPEN_NOW], now=at_hour(19)) == []


class TestOvernightWrapping:
    """자정을 넘는 영업시간 (옵션)"""

    @pytest.mark.parametrize(
        "hour,expected",
        [(19, False), (20, True), (23, True), (0, True), (1, True), (2, False), (14, False)],
    )
    def test_wrapping_window(self, hour, expected):
        hours = OperatingHours(open=20, close=2)
        assert is_open_at(hours, hour, wraps_overnight=True) is expected

    def test_regular_window_unaffected(self):
        hours = OperatingHours(open=8, close=18)
        assert is_open_at(hours, 14, wraps_overnight=True) is True
        assert is_open_at(hours, 18, wraps_overnight=True) is False

    def test_engine_uses_setting(self, station_factory):
        engine = AmenityFilterEngine(clock=lambda: at_hour(23), wraps_overnight=True)
        station = station_factory(hours={"open": 20, "close": 2})
        assert engine.filter([station], [OPEN_NOW]) == [station]


class TestAmenityConjunction:
    """일반 편의시설 AND 조건"""

    def test_empty_amenities_keeps_everything(self, engine, stations):
        assert engine.filter(stations, []) == stations

    def test_single_amenity(self, engine, stations):
        results = engine.filter(stations, ["carWash"])
        assert [s.id for s in results] == ["s1"]

    def test_all_amenities_required(self, engine, stations):
        assert [s.id for s in engine.filter(stations, ["carWash", "restrooms"])] == ["s1"]
        assert engine.filter(stations, ["carWash", "atm"]) == []

    def test_exact_match_only(self, engine, stations):
        """부분 문자열/대소문자 다른 식별자는 불일치"""
        assert engine.filter(stations, ["car"]) == []
        assert engine.filter(stations, ["CARWASH"]) == []

    def test_open_now_combined_with_amenity(self, engine, stations):
        """14시: s1(6~22), s2(8~18) 영업 / s3(20~2) 미영업"""
        results = engine.filter(stations, [OPEN_NOW, "atm"])
        assert [s.id for s in results] == ["s2"]

    def test_preserves_order(self, engine, stations):
        reversed_input = list(reversed(stations))
        results = engine.filter(reversed_input, [OPEN_NOW])
        assert [s.id for s in results] == ["s2", "s1"]

    @pytest.mark.parametrize(
        "amenities",
        [[], [OPEN_NOW], ["carWash"], [OPEN_NOW, "restrooms"], ["diesel", "evCharging"]],
    )
    def test_filter_is_idempotent(self, engine, stations, amenities):
        once = engine.filter(stations, amenities)
        assert engine.filter(once, amenities) == once

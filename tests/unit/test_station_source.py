"""주유소 데이터 소스 / 리소스 로더 테스트"""
import pytest

from station_finder.core.exceptions import ResourceLoadException
from station_finder.services.impl.station_source import InMemoryStationSource, YamlStationSource
from station_finder.utils.resource_loader import load_amenity_table, load_yaml_resource


STATION_YAML = """
stations:
  - id: 7
    name: "Lamar Valero"
    address: "1500 N Lamar Blvd"
    amenities: [atm, restrooms]
    items: [coffee]
    gas_price: 3.05
    hours: {open: "07:00", close: "23:00"}
  - id: "s8"
    name: "Burnet Circle K"
    gas_price: 2.99
    hours: {open: 0, close: 23}
"""


class TestInMemoryStationSource:
    def test_returns_copy(self, stations):
        source = InMemoryStationSource(stations)

        loaded = source.get_stations()
        loaded.clear()

        assert len(source.get_stations()) == 3

    def test_replace(self, stations):
        source = InMemoryStationSource()
        assert source.get_stations() == []

        source.replace(stations[:1])

        assert [s.id for s in source.get_stations()] == ["s1"]


class TestYamlStationSource:
    def test_load_stations(self, tmp_path):
        path = tmp_path / "stations.yaml"
        path.write_text(STATION_YAML, encoding="utf-8")

        stations = YamlStationSource(path).get_stations()

        assert [s.id for s in stations] == ["7", "s8"]
        assert stations[0].hours.open == 7
        assert stations[0].amenities == ("atm", "restrooms")
        assert stations[1].address == ""

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert YamlStationSource(path).get_stations() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ResourceLoadException) as exc_info:
            YamlStationSource(tmp_path / "nope.yaml").get_stations()

        assert exc_info.value.error_code == "RESOURCE_LOAD_ERROR"
        assert exc_info.value.details["reason"] == "file not found"

    def test_broken_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("stations: [unclosed", encoding="utf-8")

        with pytest.raises(ResourceLoadException):
            YamlStationSource(path).get_stations()

    def test_invalid_entry(self, tmp_path):
        """가격 누락 항목 → 전체 로드 실패"""
        path = tmp_path / "invalid.yaml"
        path.write_text(
            "stations:\n  - id: x\n    name: No Price\n    hours: {open: 1, close: 2}\n",
            encoding="utf-8",
        )

        with pytest.raises(ResourceLoadException) as exc_info:
            YamlStationSource(path).get_stations()

        assert "invalid station entry" in exc_info.value.message


class TestResourceLoader:
    def test_bundled_amenity_table(self):
        table = load_amenity_table()

        assert list(table)[0] == "Open Now"
        assert table["Open Now"] == "openNow"
        assert table["Car Wash"] == "carWash"
        # 두 라벨이 같은 식별자를 가리킴
        assert table["EV Charging"] == table["Electric Vehicle Charging"] == "evCharging"

    def test_missing_resource(self):
        with pytest.raises(ResourceLoadException):
            load_yaml_resource("does_not_exist.yaml")

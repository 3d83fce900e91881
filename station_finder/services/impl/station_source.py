"""주유소 데이터 소스 - 파이프라인 실행마다 전체 목록을 1회 읽음"""
from pathlib import Path
from typing import List, Protocol, Sequence, Union

import yaml
from pydantic import ValidationError

from station_finder.core.exceptions import ResourceLoadException
from station_finder.core.logging import logger
from station_finder.schemas.station_schema import GasStation


class StationSource(Protocol):
    """주유소 목록 제공자"""

    def get_stations(self) -> List[GasStation]:
        ...


class InMemoryStationSource:
    """메모리 보관 데이터 소스 (사용자 데이터 동기화 결과를 그대로 보관)"""

    def __init__(self, stations: Sequence[GasStation] = ()):
        self._stations: List[GasStation] = list(stations)

    def get_stations(self) -> List[GasStation]:
        return list(self._stations)

    def replace(self, stations: Sequence[GasStation]) -> None:
        """전체 목록 교체 (다음 실행부터 반영)"""
        self._stations = list(stations)
        logger.debug(f"Station source replaced: count={len(self._stations)}")


class YamlStationSource:
    """
    YAML 파일 데이터 소스

    형식:
        stations:
          - id: "s1"
            name: "..."
            gas_price: 3.1
            hours: {open: "08:00", close: "18:00"}
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_stations(self) -> List[GasStation]:
        """
        파일을 읽어 검증된 주유소 목록 반환

        Raises:
            ResourceLoadException: 파일이 없거나 형식이 잘못된 경우
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ResourceLoadException(str(self.path), "file not found") from e
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse station file {self.path}: {e}")
            raise ResourceLoadException(str(self.path), str(e)) from e

        entries = data.get("stations", []) if isinstance(data, dict) else []
        try:
            stations = [GasStation.model_validate(entry) for entry in entries]
        except ValidationError as e:
            logger.error(f"Invalid station entry in {self.path}: {e.error_count()} error(s)")
            raise ResourceLoadException(str(self.path), f"invalid station entry: {e}") from e

        logger.debug(f"Loaded stations: path={self.path}, count={len(stations)}")
        return stations

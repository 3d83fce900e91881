"""Text Search Engine - Free-text Match over Station Fields

이름 → 주소 → 편의시설(식별자 + 표시 라벨) → 품목 순으로 부분 문자열을 검사합니다.
"""

from typing import List, Optional, Sequence

from station_finder.core.logging import logger, sanitize_for_log
from station_finder.schemas.station_schema import GasStation
from station_finder.utils.text import contains_folded, fold_text

from .amenities import AmenitySelector


class TextSearchEngine:
    """자유 텍스트 검색

    - 빈 검색어(길이 0)는 입력을 그대로 반환 (항등)
    - 대소문자 구분 없음
    - 입력 순서 유지, 주유소당 최대 1회 포함
    """

    def __init__(self, selector: Optional[AmenitySelector] = None):
        self.selector = selector or AmenitySelector()

    def search(self, query: str, stations: Sequence[GasStation]) -> List[GasStation]:
        """검색어가 포함된 주유소 목록 반환

        Args:
            query: 사용자 입력 검색어
            stations: 검색 대상

        Returns:
            List[GasStation]: 입력의 부분 수열
        """
        if len(query) == 0:
            return list(stations)

        needle = fold_text(query)
        results = [station for station in stations if self.matches(station, needle)]

        logger.debug(
            f"Text search: query='{sanitize_for_log(query)}', matched={len(results)}/{len(stations)}"
        )
        return results

    def matches(self, station: GasStation, needle: str) -> bool:
        """fold된 검색어가 주유소 필드 중 하나에 포함되는지 여부 (첫 일치에서 중단)"""
        if contains_folded(station.name, needle):
            return True

        if contains_folded(station.address, needle):
            return True

        for amenity in station.amenities:
            if contains_folded(amenity, needle):
                return True
            # 사용자는 식별자 대신 화면 라벨("Car Wash")로 입력할 수도 있음
            for label in self.selector.labels_for(amenity):
                if contains_folded(label, needle):
                    return True

        for item in station.items:
            if contains_folded(item, needle):
                return True

        return False

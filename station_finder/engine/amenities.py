"""Amenity Selector - Selection Index → Canonical Identifier

표시 라벨(테이블 셀 제목)과 편의시설 식별자 사이의 정적 양방향 테이블을 관리합니다.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from station_finder.core.exceptions import (
    AmenityIndexOutOfRangeException,
    UnknownAmenityLabelException,
)
from station_finder.core.logging import logger
from station_finder.utils.resource_loader import load_amenity_table

# 현재 시각 기준 영업 중 여부를 뜻하는 가상 편의시설
OPEN_NOW = "openNow"


class AmenitySelector:
    """편의시설 선택 해석기

    Usage:
        selector = AmenitySelector()
        selector.resolve([0, 2])   # ["openNow", "convenienceStore"]
        selector.labels_for("evCharging")   # ["EV Charging", "Electric Vehicle Charging"]
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None):
        """
        Args:
            table: 표시 라벨 → 식별자 (순서 = 선택 인덱스). 기본값은 번들 YAML 테이블.
        """
        self._identifier_by_label: Dict[str, str] = dict(
            table if table is not None else load_amenity_table()
        )
        self._labels_by_identifier: Dict[str, List[str]] = {}
        for label, identifier in self._identifier_by_label.items():
            self._labels_by_identifier.setdefault(identifier, []).append(label)

    @property
    def display_labels(self) -> List[str]:
        """표시 순서대로의 라벨 목록"""
        return list(self._identifier_by_label)

    def identifier_for(self, label: str) -> str:
        """표시 라벨 → 식별자

        Raises:
            UnknownAmenityLabelException: 대응하는 식별자가 없는 경우
        """
        try:
            return self._identifier_by_label[label]
        except KeyError:
            raise UnknownAmenityLabelException(label) from None

    def labels_for(self, identifier: str) -> List[str]:
        """식별자에 대응하는 모든 표시 라벨 (없으면 빈 목록)"""
        return list(self._labels_by_identifier.get(identifier, ()))

    def resolve(
        self,
        selection_indices: Sequence[int],
        available_amenities: Optional[Sequence[str]] = None,
    ) -> List[str]:
        """선택 인덱스를 편의시설 식별자 목록으로 변환

        하나라도 실패하면 부분 결과 없이 예외를 발생시킵니다.

        Args:
            selection_indices: 선택된 행 인덱스
            available_amenities: 화면에 표시된 라벨 목록 (기본값: display_labels)

        Returns:
            List[str]: 선택 순서대로의 식별자

        Raises:
            AmenityIndexOutOfRangeException: 인덱스가 범위를 벗어난 경우
            UnknownAmenityLabelException: 라벨에 대응하는 식별자가 없는 경우
        """
        labels = list(available_amenities) if available_amenities is not None else self.display_labels

        identifiers: List[str] = []
        for index in selection_indices:
            # 음수 인덱스는 파이썬 슬라이스 의미로 해석하지 않음
            if index < 0 or index >= len(labels):
                logger.warning(f"Amenity index out of range: index={index}, size={len(labels)}")
                raise AmenityIndexOutOfRangeException(index, len(labels))
            identifiers.append(self.identifier_for(labels[index]))

        logger.debug(f"Resolved amenities: indices={list(selection_indices)} -> {identifiers}")
        return identifiers

"""검색 파이프라인 - 검색 → 정렬 → 필터 → 알림 오케스트레이션"""
from functools import partial
from typing import Optional, Sequence, Union

from station_finder.core.config import settings
from station_finder.core.exceptions import InvalidSortModeException, ValidationException
from station_finder.core.logging import logger, sanitize_for_log
from station_finder.engine.amenities import AmenitySelector
from station_finder.engine.distance import DistanceResolver
from station_finder.engine.filters import AmenityFilterEngine
from station_finder.engine.result import SortResult
from station_finder.engine.sort import SortEngine, SortMode
from station_finder.engine.text_search import TextSearchEngine
from station_finder.services.failure_reporter import (
    FailureReporter,
    LoggingFailureReporter,
    RetryableSearchFailure,
)
from station_finder.services.impl.result_notifier import ResultNotifier, get_default_notifier
from station_finder.services.impl.station_source import StationSource


class SearchPipeline:
    """
    검색 파이프라인 - SRP: 단계 조율만 담당

    - 편의시설 해석은 AmenitySelector
    - 텍스트 검색은 TextSearchEngine
    - 정렬은 SortEngine
    - 필터는 AmenityFilterEngine
    - 결과 전달은 ResultNotifier
    """

    def __init__(
        self,
        station_source: StationSource,
        resolver: Optional[DistanceResolver] = None,
        notifier: Optional[ResultNotifier] = None,
        failure_reporter: Optional[FailureReporter] = None,
        selector: Optional[AmenitySelector] = None,
        sort_engine: Optional[SortEngine] = None,
        filter_engine: Optional[AmenityFilterEngine] = None,
        treat_empty_as_failure: Optional[bool] = None,
    ):
        self.station_source = station_source
        self.notifier = notifier or get_default_notifier()
        self.failure_reporter = failure_reporter or LoggingFailureReporter()
        self.selector = selector or AmenitySelector()
        self.text_search = TextSearchEngine(self.selector)
        self.sort_engine = sort_engine or SortEngine(resolver=resolver)
        self.filter_engine = filter_engine or AmenityFilterEngine()
        self.treat_empty_as_failure = (
            settings.treat_empty_as_failure if treat_empty_as_failure is None else treat_empty_as_failure
        )
        self._generation = 0

    @property
    def generation(self) -> int:
        """마지막으로 시작된 실행 번호"""
        return self._generation

    async def run(
        self,
        query: str,
        sort_mode: Union[SortMode, int],
        amenity_selection: Sequence[int] = (),
    ) -> Optional[RetryableSearchFailure]:
        """
        검색 실행

        1. 선택된 편의시설 해석 (실패 시 예외 전파, 재시도 없음)
        2. 전체 주유소 목록에서 텍스트 검색
        3. 정렬 (거리 정렬은 모든 거리 계산이 끝날 때까지 대기)
        4. 편의시설 필터 후 옵저버에게 전달

        거리 계산 실패 시 옵저버 대신 failure_reporter에 재시도 가능한 실패를 전달합니다.
        더 최근 실행이 시작된 경우 이 실행의 결과는 버립니다.

        Args:
            query: 검색어 (빈 문자열이면 전체)
            sort_mode: 정렬 방식
            amenity_selection: 편의시설 선택 인덱스

        Returns:
            Optional[RetryableSearchFailure]: 실패 시 재시도 핸들, 그 외 None

        Raises:
            AmenityLookupException: 편의시설 인덱스/라벨 해석 실패
            ValidationException: query 또는 sort_mode가 유효하지 않은 경우
        """
        if not isinstance(query, str):
            raise ValidationException("query", f"must be a string (value: {query!r})")
        try:
            sort_mode = SortMode(sort_mode)
        except ValueError:
            raise InvalidSortModeException(sort_mode) from None

        selection = tuple(amenity_selection)

        # 1. 편의시설 해석
        amenities = self.selector.resolve(selection)

        # 2. 텍스트 검색
        stations = self.station_source.get_stations()
        matched = self.text_search.search(query, stations)

        # 예외로 중단된 실행은 번호를 받지 않음
        self._generation += 1
        generation = self._generation

        logger.info(
            f"Search started: query='{sanitize_for_log(query)}', sort={sort_mode.name}, "
            f"amenities={list(selection)}, generation={generation}"
        )

        # 3. 정렬
        sort_result = await self.sort_engine.sort(sort_mode, matched)

        if generation != self._generation:
            logger.info(
                f"Discarding stale search result: generation={generation}, latest={self._generation}"
            )
            return None

        if self._is_failure(sort_result):
            failure = RetryableSearchFailure(
                message=settings.network_error_message,
                query=query,
                sort_mode=sort_mode,
                amenity_selection=selection,
                retry=partial(self.run, query, sort_mode, selection),
                failed_positions=tuple(sort_result.failed_positions),
            )
            self.failure_reporter.show(failure)
            return failure

        # 4. 필터 + 알림
        filtered = self.filter_engine.filter(sort_result.stations, amenities)
        self.failure_reporter.hide()
        self.notifier.notify(filtered)

        logger.info(
            f"Search completed: matched={len(matched)}, delivered={len(filtered)}, "
            f"elapsed={sort_result.elapsed_ms or 0.0:.1f}ms"
        )
        return None

    def _is_failure(self, sort_result: SortResult) -> bool:
        """재시도 경로로 보낼 결과인가"""
        if sort_result.is_failure:
            return True
        # 기존 앱 동작: 빈 결과를 네트워크 오류와 구분하지 않음
        if self.treat_empty_as_failure and not sort_result.stations:
            return True
        return False

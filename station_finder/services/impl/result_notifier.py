"""결과 알림 서비스 - 등록된 옵저버에게 검색 결과 전달"""
from typing import List, Protocol, Sequence

from station_finder.core.logging import logger
from station_finder.schemas.station_schema import GasStation


class SearchResultObserver(Protocol):
    """검색 결과 수신자"""

    def deliver(self, results: Sequence[GasStation]) -> None:
        ...


class ResultNotifier:
    """
    옵저버 레지스트리 - 등록 순서대로 결과를 전달

    - 같은 옵저버는 한 번만 등록
    - 옵저버 하나가 실패해도 나머지에게는 계속 전달
    """

    def __init__(self):
        self._observers: List[SearchResultObserver] = []

    @property
    def observers(self) -> List[SearchResultObserver]:
        """등록된 옵저버 스냅샷"""
        return list(self._observers)

    def add_observer(self, observer: SearchResultObserver) -> None:
        if observer in self._observers:
            logger.debug(f"Observer already registered: {observer!r}")
            return
        self._observers.append(observer)

    def remove_observer(self, observer: SearchResultObserver) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            logger.debug(f"Observer not registered, nothing to remove: {observer!r}")

    def notify(self, results: Sequence[GasStation]) -> int:
        """
        모든 옵저버에게 결과 전달

        Args:
            results: 최종 정렬/필터된 주유소 목록

        Returns:
            int: 전달에 성공한 옵저버 수
        """
        delivered = 0
        # 전달 중 등록/해제가 일어나도 이번 알림 대상은 고정
        for observer in self.observers:
            try:
                observer.deliver(list(results))
                delivered += 1
            except Exception as e:
                logger.error(
                    f"Observer {observer!r} failed to receive results: {type(e).__name__}: {e}",
                    exc_info=True,
                )

        logger.info(f"Search results delivered: count={len(results)}, observers={delivered}")
        return delivered


_default_notifier = ResultNotifier()


def get_default_notifier() -> ResultNotifier:
    """프로세스 전역 알림 서비스"""
    return _default_notifier

"""검색 실패 알림 - 재시도 가능한 실패를 외부(UI)에 전달"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, List, Optional, Protocol

from station_finder.core.logging import logger, sanitize_for_log

if TYPE_CHECKING:
    from station_finder.engine.sort import SortMode


@dataclass(frozen=True)
class RetryableSearchFailure:
    """재시도 가능한 검색 실패

    retry()는 원래 인자(query, sort_mode, amenity_selection) 그대로 파이프라인을 다시 실행합니다.

    Attributes:
        message: 사용자에게 표시할 메시지
        query: 원래 검색어
        sort_mode: 원래 정렬 방식
        amenity_selection: 원래 편의시설 선택 인덱스
        retry: 인자 없는 재실행 함수
        failed_positions: 거리 계산에 실패한 위치 (진단용)
    """

    message: str
    query: str
    sort_mode: "SortMode"
    amenity_selection: tuple[int, ...]
    retry: Callable[[], Awaitable[Optional["RetryableSearchFailure"]]] = field(repr=False, compare=False)
    failed_positions: tuple[int, ...] = ()


class FailureReporter(Protocol):
    """실패 알림 수신자 (예: 경고 배너 + 다시 시도 버튼)"""

    def show(self, failure: RetryableSearchFailure) -> None:
        ...

    def hide(self) -> None:
        ...


class LoggingFailureReporter:
    """로그로만 실패를 알리는 기본 구현"""

    def __init__(self):
        self.visible = False

    def show(self, failure: RetryableSearchFailure) -> None:
        self.visible = True
        logger.warning(
            f"{failure.message}: query='{sanitize_for_log(failure.query)}', "
            f"sort_mode={failure.sort_mode.name}, failed_positions={list(failure.failed_positions)}"
        )

    def hide(self) -> None:
        if self.visible:
            logger.info("Search recovered, failure notice cleared")
        self.visible = False


class CollectingFailureReporter:
    """마지막 실패를 보관해 두는 구현 (재시도 버튼 연결용)"""

    def __init__(self):
        self.failures: List[RetryableSearchFailure] = []
        self.current: Optional[RetryableSearchFailure] = None

    def show(self, failure: RetryableSearchFailure) -> None:
        self.failures.append(failure)
        self.current = failure

    def hide(self) -> None:
        self.current = None

    async def retry_current(self) -> Optional[RetryableSearchFailure]:
        """표시 중인 실패를 재실행 (없으면 None)"""
        if self.current is None:
            return None
        return await self.current.retry()

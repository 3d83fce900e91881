"""Sort Result - Standardized Sort Outcome

가격/거리 정렬 결과를 하나의 형식으로 표현합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from station_finder.schemas.station_schema import GasStation


class SortStatus(str, Enum):
    """정렬 상태"""

    SUCCESS = "success"  # 정렬 완료
    EMPTY_INPUT = "empty_input"  # 정렬할 주유소 없음 (검색 결과 0건)
    RESOLUTION_FAILED = "resolution_failed"  # 거리 계산 실패 (일시적, 재시도 대상)
    INVALID_MODE = "invalid_mode"  # 지원하지 않는 정렬 방식


@dataclass
class SortResult:
    """정렬 결과 표준 포맷

    Attributes:
        status: 정렬 상태
        stations: 정렬된 주유소 (실패 시 빈 목록)
        mode: 정렬 방식 ("distance" | "price")
        elapsed_ms: 소요 시간 (밀리초)
        failed_positions: 거리 계산에 실패한 입력 위치
        error_message: 오류 메시지
    """

    status: SortStatus
    stations: List[GasStation] = field(default_factory=list)
    mode: Optional[str] = None
    elapsed_ms: Optional[float] = None
    failed_positions: List[int] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """성공 여부 (빈 입력도 정상 종료로 간주)"""
        return self.status in [SortStatus.SUCCESS, SortStatus.EMPTY_INPUT]

    @property
    def is_failure(self) -> bool:
        """실패 여부"""
        return self.status in [SortStatus.RESOLUTION_FAILED, SortStatus.INVALID_MODE]

    @property
    def is_retryable(self) -> bool:
        """재시도로 회복 가능한 실패인가"""
        return self.status == SortStatus.RESOLUTION_FAILED

    @classmethod
    def success(
        cls, stations: List[GasStation], mode: str, elapsed_ms: float
    ) -> "SortResult":
        return cls(
            status=SortStatus.SUCCESS,
            stations=list(stations),
            mode=mode,
            elapsed_ms=elapsed_ms,
        )

    @classmethod
    def empty_input(cls, mode: str) -> "SortResult":
        """빈 입력 결과 생성 (거리 계산 요청 없이 즉시 반환)"""
        return cls(status=SortStatus.EMPTY_INPUT, mode=mode, elapsed_ms=0.0)

    @classmethod
    def resolution_failed(
        cls, failed_positions: List[int], elapsed_ms: float
    ) -> "SortResult":
        """거리 계산 실패 결과 생성

        Args:
            failed_positions: 실패한 입력 위치
            elapsed_ms: 소요 시간 (밀리초)
        """
        return cls(
            status=SortStatus.RESOLUTION_FAILED,
            mode="distance",
            elapsed_ms=elapsed_ms,
            failed_positions=sorted(failed_positions),
            error_message=f"Distance resolution failed for {len(failed_positions)} station(s)",
        )

    @classmethod
    def invalid_mode(cls, mode: object) -> "SortResult":
        return cls(
            status=SortStatus.INVALID_MODE,
            mode=str(mode),
            elapsed_ms=0.0,
            error_message=f"Unsupported sort mode: {mode}",
        )

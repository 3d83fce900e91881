"""파이프라인 서비스 - export only."""

from .failure_reporter import (
    CollectingFailureReporter,
    FailureReporter,
    LoggingFailureReporter,
    RetryableSearchFailure,
)
from .impl import (
    InMemoryStationSource,
    ResultNotifier,
    SearchPipeline,
    SearchResultObserver,
    StationSource,
    YamlStationSource,
    get_default_notifier,
)

__all__ = [
    "SearchPipeline",
    "ResultNotifier",
    "SearchResultObserver",
    "get_default_notifier",
    "StationSource",
    "InMemoryStationSource",
    "YamlStationSource",
    "FailureReporter",
    "LoggingFailureReporter",
    "CollectingFailureReporter",
    "RetryableSearchFailure",
]

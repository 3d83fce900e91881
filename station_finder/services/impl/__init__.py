"""Services implementation package."""

from .result_notifier import ResultNotifier, SearchResultObserver, get_default_notifier
from .search_pipeline import SearchPipeline
from .station_source import InMemoryStationSource, StationSource, YamlStationSource

__all__ = [
    "ResultNotifier",
    "SearchResultObserver",
    "get_default_notifier",
    "SearchPipeline",
    "StationSource",
    "InMemoryStationSource",
    "YamlStationSource",
]

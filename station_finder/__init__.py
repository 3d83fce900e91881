"""Gas station search, sort and amenity filter pipeline."""

from station_finder.engine import (
    OPEN_NOW,
    AmenityFilterEngine,
    AmenitySelector,
    Coordinate,
    HaversineDistanceResolver,
    SortEngine,
    SortMode,
    SortResult,
    SortStatus,
    TextSearchEngine,
)
from station_finder.schemas import GasStation, OperatingHours
from station_finder.services import (
    InMemoryStationSource,
    ResultNotifier,
    RetryableSearchFailure,
    SearchPipeline,
    get_default_notifier,
)

__version__ = "1.0.0"

__all__ = [
    "OPEN_NOW",
    "AmenitySelector",
    "TextSearchEngine",
    "SortEngine",
    "SortMode",
    "SortResult",
    "SortStatus",
    "AmenityFilterEngine",
    "Coordinate",
    "HaversineDistanceResolver",
    "GasStation",
    "OperatingHours",
    "SearchPipeline",
    "ResultNotifier",
    "RetryableSearchFailure",
    "InMemoryStationSource",
    "get_default_notifier",
]

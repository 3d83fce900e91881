"""Engine Layer - Search, Sort and Filter Stages

This module provides the stages the search pipeline composes:
- AmenitySelector: selection index → amenity identifier
- TextSearchEngine: free-text match across station fields
- SortEngine: price / distance ordering with a resolution join
- AmenityFilterEngine: conjunctive amenity predicates including "openNow"
- SortResult: standardized sort outcome
"""

from .amenities import OPEN_NOW, AmenitySelector
from .distance import (
    Coordinate,
    DistanceReport,
    DistanceResolver,
    HaversineDistanceResolver,
    haversine_km,
)
from .filters import AmenityFilterEngine, is_open_at
from .result import SortResult, SortStatus
from .sort import SortEngine, SortMode, sort_by_price
from .text_search import TextSearchEngine

__all__ = [
    "OPEN_NOW",
    "AmenitySelector",
    "TextSearchEngine",
    "Coordinate",
    "DistanceReport",
    "DistanceResolver",
    "HaversineDistanceResolver",
    "haversine_km",
    "SortEngine",
    "SortMode",
    "sort_by_price",
    "SortResult",
    "SortStatus",
    "AmenityFilterEngine",
    "is_open_at",
]

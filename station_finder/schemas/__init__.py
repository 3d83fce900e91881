"""Record schemas."""

from .station_schema import GasStation, OperatingHours

__all__ = ["GasStation", "OperatingHours"]

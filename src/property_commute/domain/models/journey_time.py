"""Journey time domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class JourneyTime:
    """Elapsed wall-clock time of one itinerary."""

    total_minutes: int
    hours: int
    minutes: int
    formatted: str  # "1h 30m" or "47m"
    start_time: datetime
    end_time: datetime

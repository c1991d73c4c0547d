"""Domain models for CDN traffic analytics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeRange:
    """Inclusive analytics window in ``YYYY-MM-DD`` form."""

    since: str
    until: str


@dataclass(frozen=True)
class TrafficTotals:
    """Aggregate traffic over the analytics window."""

    requests: int
    bytes: int


@dataclass(frozen=True)
class DailyTraffic:
    """Traffic for one reported day."""

    date: str
    requests: int
    bytes: int


@dataclass(frozen=True)
class AnalyticsResult:
    """Normalized zone analytics."""

    zone_id: str
    time_range: TimeRange
    totals: TrafficTotals
    daily: tuple[DailyTraffic, ...]

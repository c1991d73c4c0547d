"""Cloudflare traffic analytics with soft failure."""

import json
import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

import httpx
from pydantic import ValidationError

from co2_action.adapters.cloudflare_client import CloudflareClient
from co2_action.domain.analytics import (
    AnalyticsResult,
    DailyTraffic,
    TimeRange,
    TrafficTotals,
)
from co2_action.domain.cloudflare import GraphQLResponse, RequestGroup
from co2_action.domain.config import CloudflareConfig

DEFAULT_WINDOW_DAYS = 30

_logger = logging.getLogger(__name__)


@dataclass
class TrafficAnalyticsService:
    """Fetch and normalize daily zone traffic.

    Every failure path logs a warning and returns ``None``; nothing raised by
    the client or by response parsing reaches the caller.
    """

    client: CloudflareClient
    window_days: int = DEFAULT_WINDOW_DAYS

    async def fetch(
        self, config: CloudflareConfig, today: date | None = None
    ) -> AnalyticsResult | None:
        """Return analytics for the configured zone, or ``None``."""
        if not config.enabled:
            return None
        if not config.api_token or not config.zone_id:
            _logger.warning(
                "Cloudflare analytics enabled but api token or zone id not "
                "provided; skipping Cloudflare integration."
            )
            return None

        time_range = self.resolve_range(config, today)
        try:
            payload = await self.client.query_zone_analytics(
                config.api_token, config.zone_id, time_range.since, time_range.until
            )
            response = GraphQLResponse.model_validate(payload)
        except httpx.HTTPStatusError as exc:
            _logger.warning(
                "Cloudflare API request failed: %s %s",
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            return None
        except Exception as exc:
            _logger.warning("Failed to fetch Cloudflare analytics: %s", exc)
            return None

        if response.errors:
            _logger.warning(
                "Cloudflare API returned errors: %s",
                json.dumps(response.errors, default=str, separators=(",", ":")),
            )
            return None

        groups = _parse_groups(response.first_zone_groups())
        return _normalize(config.zone_id, time_range, groups)

    def resolve_range(
        self, config: CloudflareConfig, today: date | None = None
    ) -> TimeRange:
        """Resolve the analytics window, defaulting to the trailing window."""
        until_day = today or datetime.now(tz=UTC).date()
        since_day = until_day - timedelta(days=self.window_days)
        since = (config.since or since_day.isoformat())[:10]
        until = (config.until or until_day.isoformat())[:10]
        return TimeRange(since=since, until=until)


def _parse_groups(raw_groups: list[object]) -> list[RequestGroup]:
    """Validate groups one at a time; null rows are empty, invalid rows are skipped."""
    groups: list[RequestGroup] = []
    for index, raw in enumerate(raw_groups):
        if raw is None:
            groups.append(RequestGroup())
            continue
        try:
            groups.append(RequestGroup.model_validate(raw))
        except ValidationError as exc:
            _logger.warning(
                "Skipping malformed Cloudflare analytics row %s: %s",
                index,
                exc.errors(include_url=False, include_input=False),
            )
    return groups


def _normalize(
    zone_id: str, time_range: TimeRange, groups: list[RequestGroup]
) -> AnalyticsResult:
    """Fold upstream groups into totals and dated daily rows."""
    total_requests = 0
    total_bytes = 0
    daily: list[DailyTraffic] = []
    for group in groups:
        day = group.dimensions.date if group.dimensions else None
        requests = (group.sum.requests if group.sum else None) or 0
        bytes_count = (group.sum.bytes if group.sum else None) or 0
        total_requests += requests
        total_bytes += bytes_count
        if day:
            daily.append(DailyTraffic(date=day, requests=requests, bytes=bytes_count))

    return AnalyticsResult(
        zone_id=zone_id,
        time_range=time_range,
        totals=TrafficTotals(requests=total_requests, bytes=total_bytes),
        daily=tuple(daily),
    )

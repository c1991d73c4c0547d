"""Report composition for build emissions."""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from co2_action.domain.analytics import AnalyticsResult
from co2_action.services.emissions import EmissionsEstimator

REPORT_HEADER = "# Generated by CO2.js GitHub Action"
REPORT_VERSION = "0.3"
REPORT_FILENAME = "report.txt"


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ReportComposer:
    """Render the TOML emissions report."""

    estimator: EmissionsEstimator
    clock: Callable[[], datetime] = field(default=_utc_now)

    def compose(
        self,
        bytes_count: int,
        green: bool,
        estimated_grams: float,
        analytics: AnalyticsResult | None,
    ) -> str:
        """Return the report text for a build and optional analytics."""
        timestamp = format_timestamp(self.clock())
        lines = [
            REPORT_HEADER,
            f"version = {_string(REPORT_VERSION)}",
            f"last_updated = {_string(timestamp)}",
            "",
            "[build]",
            f"date = {_string(timestamp)}",
            f"total_bytes = {bytes_count}",
            f"green_hosting = {_boolean(green)}",
            f"estimated_co2_grams = {_number(estimated_grams)}",
        ]
        if analytics is not None:
            lines.extend(self._cloudflare_lines(analytics, green))
        return "\n".join(lines)

    def _cloudflare_lines(self, analytics: AnalyticsResult, green: bool) -> list[str]:
        lines = [
            "",
            "[cloudflare]",
            f"zone_id = {_string(analytics.zone_id)}",
            f"since = {_string(analytics.time_range.since)}",
            f"until = {_string(analytics.time_range.until)}",
            f"requests = {analytics.totals.requests}",
            f"bytes = {analytics.totals.bytes}",
            "estimated_co2_grams = "
            f"{_number(self.estimator.estimate(analytics.totals.bytes, green))}",
        ]
        for day in analytics.daily:
            lines.extend(
                [
                    "",
                    "[[cloudflare.daily]]",
                    f"date = {_string(day.date)}",
                    f"requests = {day.requests}",
                    f"bytes = {day.bytes}",
                    "estimated_co2_grams = "
                    f"{_number(self.estimator.estimate(day.bytes, green))}",
                ]
            )
        return lines


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    utc = moment.astimezone(UTC) if moment.tzinfo else moment.replace(tzinfo=UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _boolean(value: bool) -> str:
    return "true" if value else "false"


def _number(value: float) -> str:
    return repr(float(value))

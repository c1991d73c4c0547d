"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from co2_action.adapters.cloudflare_client import CloudflareClient
from co2_action.adapters.github_actions import ActionOutputs
from co2_action.config import Settings
from co2_action.services.analytics import TrafficAnalyticsService
from co2_action.services.bytes import ByteAccountant
from co2_action.services.emissions import EmissionsEstimator, EmissionsModel
from co2_action.services.report import ReportComposer
from co2_action.services.runner import ReportRunner

FIXED_NOW = datetime(2024, 1, 3, 12, 30, 45, 123000, tzinfo=UTC)


@dataclass
class LinearEmissionsModel(EmissionsModel):
    """Deterministic model: one milligram per byte, half when green."""

    calls: list[tuple[int, bool]] = field(default_factory=list)

    def per_byte(self, bytes_count: int, green: bool) -> float:
        self.calls.append((bytes_count, green))
        grams = bytes_count / 1000
        return grams / 2 if green else grams


@dataclass
class FakeCloudflareClient(CloudflareClient):
    """Fake Cloudflare client returning a fixed payload or raising."""

    payload: dict[str, object] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[dict[str, str]] = field(default_factory=list)

    async def query_zone_analytics(
        self, api_token: str, zone_tag: str, since: str, until: str
    ) -> dict[str, object]:
        self.calls.append(
            {"api_token": api_token, "zone_tag": zone_tag, "since": since, "until": until}
        )
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class RecordingOutputs(ActionOutputs):
    """Outputs adapter that keeps values in memory."""

    values: dict[str, object] = field(default_factory=dict)

    def set_output(self, name: str, value: object) -> None:
        self.values[name] = value


def analytics_payload(groups: list[object]) -> dict[str, object]:
    """Wrap daily groups in a Cloudflare GraphQL response."""
    return {
        "data": {"viewer": {"zones": [{"httpRequests1dGroups": groups}]}},
        "errors": None,
    }


TWO_DAY_GROUPS = [
    {"dimensions": {"date": "2024-01-01"}, "sum": {"requests": 10, "bytes": 1000}},
    {"dimensions": {"date": "2024-01-02"}, "sum": {"requests": 5, "bytes": 500}},
]


@pytest.fixture
def emissions_model() -> LinearEmissionsModel:
    return LinearEmissionsModel()


@pytest.fixture
def estimator(emissions_model: LinearEmissionsModel) -> EmissionsEstimator:
    return EmissionsEstimator(emissions_model)


@pytest.fixture
def cloudflare_client() -> FakeCloudflareClient:
    return FakeCloudflareClient(payload=analytics_payload(TWO_DAY_GROUPS))


@pytest.fixture
def outputs() -> RecordingOutputs:
    return RecordingOutputs()


@pytest.fixture
def composer(estimator: EmissionsEstimator) -> ReportComposer:
    return ReportComposer(estimator, clock=lambda: FIXED_NOW)


@pytest.fixture
def runner(
    estimator: EmissionsEstimator,
    cloudflare_client: FakeCloudflareClient,
    composer: ReportComposer,
    outputs: RecordingOutputs,
) -> ReportRunner:
    return ReportRunner(
        accountant=ByteAccountant(),
        estimator=estimator,
        analytics_service=TrafficAnalyticsService(cloudflare_client),
        composer=composer,
        outputs=outputs,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        path=str(tmp_path / "dist"),
        destination=str(tmp_path / "out"),
    )

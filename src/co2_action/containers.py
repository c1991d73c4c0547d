"""Dependency container wiring for the action."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from co2_action.adapters.cloudflare_client import HttpxCloudflareClient
from co2_action.adapters.github_actions import ActionOutputs, GitHubActionsOutputs
from co2_action.adapters.one_byte_model import OneByteModel
from co2_action.config import Settings
from co2_action.services.analytics import TrafficAnalyticsService
from co2_action.services.bytes import ByteAccountant
from co2_action.services.emissions import EmissionsEstimator
from co2_action.services.report import ReportComposer
from co2_action.services.runner import ReportRunner


@dataclass
class AppContainer:
    """Holds run-wide dependencies."""

    settings: Settings
    outputs: ActionOutputs
    accountant: ByteAccountant
    estimator: EmissionsEstimator
    analytics_service: TrafficAnalyticsService
    composer: ReportComposer
    runner: ReportRunner
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, outputs: ActionOutputs | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_outputs = outputs or GitHubActionsOutputs()
    cloudflare_client = HttpxCloudflareClient.create(
        graphql_url=resolved_settings.cloudflare_graphql_url
    )
    accountant = ByteAccountant()
    estimator = EmissionsEstimator(OneByteModel())
    analytics_service = TrafficAnalyticsService(cloudflare_client)
    composer = ReportComposer(estimator)
    runner = ReportRunner(
        accountant=accountant,
        estimator=estimator,
        analytics_service=analytics_service,
        composer=composer,
        outputs=resolved_outputs,
    )

    async def close_resources() -> None:
        await cloudflare_client.close()

    return AppContainer(
        settings=resolved_settings,
        outputs=resolved_outputs,
        accountant=accountant,
        estimator=estimator,
        analytics_service=analytics_service,
        composer=composer,
        runner=runner,
        close_resources=close_resources,
    )

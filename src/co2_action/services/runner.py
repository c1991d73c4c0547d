"""Report run orchestration."""

import logging
from dataclasses import dataclass
from pathlib import Path

from co2_action.adapters.github_actions import ActionOutputs
from co2_action.domain.analytics import AnalyticsResult
from co2_action.domain.config import RunConfiguration
from co2_action.services.analytics import TrafficAnalyticsService
from co2_action.services.bytes import ByteAccountant
from co2_action.services.emissions import EmissionsEstimator
from co2_action.services.report import REPORT_FILENAME, ReportComposer

EMISSIONS_OUTPUT = "emissions"

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Outcome of a successful report run."""

    report_path: Path
    total_bytes: int
    estimated_grams: float
    analytics: AnalyticsResult | None


@dataclass
class ReportRunner:
    """Measure a path, estimate emissions and write the report."""

    accountant: ByteAccountant
    estimator: EmissionsEstimator
    analytics_service: TrafficAnalyticsService
    composer: ReportComposer
    outputs: ActionOutputs

    async def execute(self, config: RunConfiguration) -> RunResult:
        """Run every stage; errors from the mandatory stages propagate."""
        _logger.info("Measuring size for path: %s", config.input_path)
        _logger.info("Green hosting: %s", str(config.green_hosting).lower())
        _logger.info("Destination: %s", config.destination)
        _logger.info(
            "Cloudflare integration enabled: %s",
            str(config.cloudflare.enabled).lower(),
        )

        total_bytes = self.accountant.measure(config.input_path)
        _logger.info("Total bytes: %s", total_bytes)

        estimated_grams = self.estimator.estimate(total_bytes, config.green_hosting)
        _logger.info("Estimated CO2 emissions: %s grams", estimated_grams)
        self.outputs.set_output(EMISSIONS_OUTPUT, estimated_grams)

        analytics = await self.analytics_service.fetch(config.cloudflare)

        report = self.composer.compose(
            total_bytes, config.green_hosting, estimated_grams, analytics
        )
        destination = Path(config.destination)
        destination.mkdir(parents=True, exist_ok=True)
        report_path = destination / REPORT_FILENAME
        report_path.write_text(report, encoding="utf-8")
        _logger.info("Created %s at %s", REPORT_FILENAME, report_path)

        return RunResult(
            report_path=report_path,
            total_bytes=total_bytes,
            estimated_grams=estimated_grams,
            analytics=analytics,
        )

"""Action entrypoint."""

import asyncio
import logging
import sys

from co2_action.adapters.github_actions import ActionOutputs
from co2_action.app_logging import configure_logging
from co2_action.config import Settings
from co2_action.containers import build_container

_logger = logging.getLogger(__name__)


async def run(
    settings: Settings | None = None, outputs: ActionOutputs | None = None
) -> int:
    """Run the action once and return the process exit code."""
    try:
        container = build_container(settings or Settings(), outputs)
        try:
            await container.runner.execute(container.settings.to_configuration())
        finally:
            await container.close_resources()
    except Exception as exc:
        _logger.error("%s", exc)
        return 1
    return 0


def main() -> None:
    """Console entrypoint."""
    configure_logging()
    sys.exit(asyncio.run(run()))

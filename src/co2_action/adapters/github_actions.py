"""GitHub Actions output adapter."""

import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Protocol

_logger = logging.getLogger(__name__)


class ActionOutputs(Protocol):
    """Interface for publishing named step outputs."""

    def set_output(self, name: str, value: object) -> None:
        """Publish a named output value."""


@dataclass
class GitHubActionsOutputs(ActionOutputs):
    """Write step outputs to the ``$GITHUB_OUTPUT`` file."""

    output_path: str | None = field(
        default_factory=lambda: os.environ.get("GITHUB_OUTPUT")
    )

    def set_output(self, name: str, value: object) -> None:
        """Append ``name=value`` to the output file, or log it when unset."""
        text = str(value)
        if not self.output_path:
            _logger.info("Output %s=%s", name, text)
            return
        with open(self.output_path, "a", encoding="utf-8") as handle:
            if "\n" in text:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                handle.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
            else:
                handle.write(f"{name}={text}\n")

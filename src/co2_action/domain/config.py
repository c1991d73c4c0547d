"""Run configuration models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CloudflareConfig:
    """Cloudflare analytics settings for a single run."""

    enabled: bool = False
    api_token: str | None = None
    zone_id: str | None = None
    since: str | None = None
    until: str | None = None


@dataclass(frozen=True)
class RunConfiguration:
    """Inputs for one report run."""

    input_path: str = "."
    green_hosting: bool = False
    destination: str = "."
    cloudflare: CloudflareConfig = field(default_factory=CloudflareConfig)

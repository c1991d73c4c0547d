"""Action configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from co2_action.domain.config import CloudflareConfig, RunConfiguration

CLOUDFLARE_GRAPHQL_URL = "https://api.cloudflare.com/client/v4/graphql"


class Settings(BaseSettings):
    """Action inputs loaded from ``INPUT_*`` environment variables."""

    path: str = "."
    green_hosting: bool = False
    destination: str = "."
    cloudflare_enabled: bool = False
    cloudflare_api_token: str | None = None
    cloudflare_zone_id: str | None = None
    cloudflare_since: str | None = None
    cloudflare_until: str | None = None
    cloudflare_graphql_url: str = CLOUDFLARE_GRAPHQL_URL

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("green_hosting", "cloudflare_enabled", mode="before")
    @classmethod
    def _parse_flag(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_flag(value)
        return value

    def to_configuration(self) -> RunConfiguration:
        """Build the immutable run configuration."""
        return RunConfiguration(
            input_path=self.path,
            green_hosting=self.green_hosting,
            destination=self.destination,
            cloudflare=CloudflareConfig(
                enabled=self.cloudflare_enabled,
                api_token=self.cloudflare_api_token,
                zone_id=self.cloudflare_zone_id,
                since=self.cloudflare_since,
                until=self.cloudflare_until,
            ),
        )


def parse_flag(raw: str | None) -> bool:
    """Parse a boolean action input; only ``true`` enables it."""
    if raw is None:
        return False
    return raw.strip().lower() == "true"

"""Cloudflare GraphQL analytics client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from co2_action.config import CLOUDFLARE_GRAPHQL_URL

ZONE_ANALYTICS_QUERY = """
query GetZoneAnalytics($zoneTag: String!, $since: String!, $until: String!) {
  viewer {
    zones(filter: { zoneTag: $zoneTag }) {
      httpRequests1dGroups(
        limit: 100,
        filter: { date_geq: $since, date_leq: $until }
      ) {
        dimensions {
          date
        }
        sum {
          requests
          bytes
        }
      }
    }
  }
}
"""


class CloudflareClient(Protocol):
    """Interface for Cloudflare analytics queries."""

    async def query_zone_analytics(
        self, api_token: str, zone_tag: str, since: str, until: str
    ) -> dict[str, object]:
        """Run the daily zone analytics query and return the raw response."""


@dataclass
class HttpxCloudflareClient(CloudflareClient):
    """HTTPX-backed Cloudflare GraphQL client."""

    http_client: httpx.AsyncClient
    graphql_url: str = CLOUDFLARE_GRAPHQL_URL

    @classmethod
    def create(cls, graphql_url: str = CLOUDFLARE_GRAPHQL_URL) -> "HttpxCloudflareClient":
        """Create a Cloudflare client with a managed httpx session."""
        return cls(http_client=httpx.AsyncClient(), graphql_url=graphql_url)

    async def query_zone_analytics(
        self, api_token: str, zone_tag: str, since: str, until: str
    ) -> dict[str, object]:
        """POST the zone analytics query; raises on non-2xx responses."""
        response = await self.http_client.post(
            self.graphql_url,
            headers={"Authorization": f"Bearer {api_token}"},
            json={
                "query": ZONE_ANALYTICS_QUERY,
                "variables": {"zoneTag": zone_tag, "since": since, "until": until},
            },
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

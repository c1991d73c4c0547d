"""Pydantic models for Cloudflare GraphQL analytics payloads."""

from pydantic import BaseModel, Field


class GroupDimensions(BaseModel):
    """Dimensions of a daily request group."""

    date: str | None = None


class GroupSum(BaseModel):
    """Summed metrics of a daily request group."""

    requests: int | None = None
    bytes: int | None = None


class RequestGroup(BaseModel):
    """One ``httpRequests1dGroups`` row."""

    dimensions: GroupDimensions | None = None
    sum: GroupSum | None = None


class Zone(BaseModel):
    """Zone analytics payload."""

    groups: list[object] | None = Field(
        default=None, alias="httpRequests1dGroups"
    )


class Viewer(BaseModel):
    """GraphQL viewer payload."""

    zones: list[Zone | None] | None = None


class ResponseData(BaseModel):
    """GraphQL data payload."""

    viewer: Viewer | None = None


class GraphQLResponse(BaseModel):
    """GraphQL response envelope."""

    data: ResponseData | None = None
    errors: list[object] | None = None

    def first_zone_groups(self) -> list[object]:
        """Return the first zone's raw daily groups, or an empty list."""
        viewer = self.data.viewer if self.data else None
        zone = viewer.zones[0] if viewer and viewer.zones else None
        if zone is None or not zone.groups:
            return []
        return zone.groups

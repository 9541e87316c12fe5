"""Discovered route response models."""

from pydantic import BaseModel, Field


class RouteEntry(BaseModel):
    """One service reachable through the gateway."""

    service: str
    path: str


class RoutesResponse(BaseModel):
    """Response for GET /api/routes."""

    routes: list[RouteEntry] = Field(default_factory=list)

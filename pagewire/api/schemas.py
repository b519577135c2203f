"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from pagewire.models import AssemblyPlan, Page, Site


class AssembleRequest(BaseModel):
    """Request body for the /assemble endpoint."""
    site: Site
    apply: bool = False


class AssembleResponse(BaseModel):
    """Response from the /assemble endpoint."""
    plan: AssemblyPlan
    site: Site | None = None   # Only when apply was requested
    injected_count: int


class TriggersRequest(BaseModel):
    pages: dict[str, Page]


class ResolutionRequest(BaseModel):
    action_id: str
    existing_keys: list[str] = []


class FeatureInfo(BaseModel):
    feature_id: str
    name: str
    slot: str | None = None
    provides_actions: list[str] = []

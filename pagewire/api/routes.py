"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, Query

from pagewire.models import ActionResolution, AvailableAction, TriggerableWidget
from pagewire.services.wiring_service import WiringService
from pagewire.api.schemas import (
    AssembleRequest, AssembleResponse, FeatureInfo, ResolutionRequest,
    TriggersRequest,
)

router = APIRouter()

# Shared service instance
_service = WiringService()


@router.post("/assemble", response_model=AssembleResponse)
async def assemble_site(request: AssembleRequest) -> AssembleResponse:
    """Plan which features a site needs injected, optionally applying them."""
    if request.apply:
        plan, site = _service.assemble_and_apply(request.site)
    else:
        plan, site = _service.assemble(request.site), None

    return AssembleResponse(plan=plan, site=site, injected_count=len(plan.injected))


@router.post("/triggers", response_model=list[TriggerableWidget])
async def list_triggers(request: TriggersRequest) -> list[TriggerableWidget]:
    """List every node that can emit trigger events, with its current wiring."""
    return _service.triggers(request.pages)


@router.post("/resolution", response_model=ActionResolution)
async def action_resolution(request: ResolutionRequest) -> ActionResolution:
    return _service.resolution(request.action_id, request.existing_keys)


@router.get("/features", response_model=list[FeatureInfo])
async def list_features() -> list[FeatureInfo]:
    """List all features in the catalog."""
    return [FeatureInfo(**f) for f in _service.list_features()]


@router.get("/actions/available", response_model=list[AvailableAction])
async def available_actions(keys: list[str] = Query(default=[])) -> list[AvailableAction]:
    return _service.available_actions(keys)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

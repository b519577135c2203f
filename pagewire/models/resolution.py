"""Scanner and resolver output models."""

from __future__ import annotations

from pydantic import BaseModel

from .actions import EventMap


class TriggerableWidget(BaseModel):
    """
    A node whose type can emit trigger events, flattened with its location.

    Used by authoring tools to build the trigger -> response board.
    """
    page_id: str
    section_index: int
    section_id: str
    widget_path: list[str]   # Ancestor ids from the section root, ending with widget_id
    widget_id: str
    widget_type: str
    triggers: list[str]
    current_on: EventMap = {}


class ResolvedOverlayBinding(BaseModel):
    """Inject `feature_id` and make it addressable under `key`."""
    key: str
    feature_id: str


class ActionResolution(BaseModel):
    """Whether a single action id is served by a feature already on the page."""
    resolved: bool
    feature_key: str | None = None
    feature_id: str | None = None
    candidates: list[str] = []


class AvailableAction(BaseModel):
    """A concrete action id a mounted (or mountable) feature would answer to."""
    action_id: str
    feature_id: str
    feature_key: str


class AssemblyPlan(BaseModel):
    """Everything page assembly decided for one site."""
    required_actions: list[str] = []
    injected: list[ResolvedOverlayBinding] = []
    unresolved_actions: list[str] = []
    triggerable_widgets: list[TriggerableWidget] = []
    action_sections: dict[str, list[str]] = {}
    locked_feature_keys: dict[str, list[str]] = {}   # key -> section patterns requiring it

    @property
    def injected_keys(self) -> list[str]:
        return [b.key for b in self.injected]

"""Action bindings and payloads — what a node declares and what a handler receives."""

from __future__ import annotations
from typing import Annotated, Any, Callable, Literal, Mapping, Union

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, PlainSerializer,
)


class ActionPayload(BaseModel):
    """
    Data handed to an action handler.

    `element` and `event` are the fields every dispatch may carry. Anything
    else the caller wants to pass along goes in `extra`.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    element: Any = None          # Triggering element, opaque to the core
    event: str | None = None     # Event name that fired (e.g. "click")
    extra: dict[str, Any] = {}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ActionPayload:
        extra = {k: v for k, v in data.items() if k not in ("element", "event")}
        return cls(element=data.get("element"), event=data.get("event"), extra=extra)

    def get(self, name: str, default: Any = None) -> Any:
        if name in ("element", "event"):
            value = getattr(self, name)
            return default if value is None else value
        return self.extra.get(name, default)


ActionHandler = Callable[[ActionPayload], None]


class LiteralBinding(BaseModel):
    """A bare action id, e.g. ``"modal.open"``."""
    kind: Literal["literal"] = "literal"
    action: str


class StructuredBinding(BaseModel):
    """An action id with extra params merged into the payload by the renderer."""
    kind: Literal["structured"] = "structured"
    action: str
    params: dict[str, Any] = {}


def _tag_binding(value: Any) -> Any:
    """Tag raw input so the union below can pick its variant."""
    if isinstance(value, str):
        return {"kind": "literal", "action": value}
    if isinstance(value, Mapping) and "kind" not in value:
        return {"kind": "structured", **value}
    return value


def _untag_binding(binding: Any) -> Any:
    """Write a binding back out in the shape it was declared in."""
    if isinstance(binding, LiteralBinding):
        return binding.action
    if isinstance(binding, StructuredBinding):
        return {"action": binding.action, "params": binding.params}
    return binding


ActionBinding = Annotated[
    Union[LiteralBinding, StructuredBinding],
    BeforeValidator(_tag_binding),
    PlainSerializer(_untag_binding, return_type=Any),
]


def _as_binding_list(value: Any) -> Any:
    # A single binding is shorthand for a one-element fan-out list
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


BindingList = Annotated[list[ActionBinding], BeforeValidator(_as_binding_list)]

# DOM event name -> ordered bindings fired for it
EventMap = dict[str, BindingList]


def binding_actions(on: EventMap | None) -> list[str]:
    """Flatten an event map into its action ids, in declaration order."""
    if not on:
        return []
    return [binding.action for bindings in on.values() for binding in bindings]

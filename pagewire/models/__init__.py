from .actions import (
    ActionPayload, ActionHandler, ActionBinding, LiteralBinding, StructuredBinding,
    EventMap, binding_actions,
)
from .nodes import DecoratorRef, UINode, Section, Page, FeatureInstance, Site
from .catalog import (
    FeatureDescriptor, WidgetMeta, DecoratorDefinition, SectionPatternMeta,
    ComponentCatalog,
)
from .resolution import (
    TriggerableWidget, ResolvedOverlayBinding, ActionResolution,
    AvailableAction, AssemblyPlan,
)
from .settings import WiringConfig

__all__ = [
    "ActionPayload", "ActionHandler", "ActionBinding", "LiteralBinding",
    "StructuredBinding", "EventMap", "binding_actions",
    "DecoratorRef", "UINode", "Section", "Page", "FeatureInstance", "Site",
    "FeatureDescriptor", "WidgetMeta", "DecoratorDefinition",
    "SectionPatternMeta", "ComponentCatalog",
    "TriggerableWidget", "ResolvedOverlayBinding", "ActionResolution",
    "AvailableAction", "AssemblyPlan",
    "WiringConfig",
]

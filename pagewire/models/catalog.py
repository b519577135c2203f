"""Component catalog models — feature descriptors and capability metadata."""

from __future__ import annotations
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field

from .nodes import DecoratorRef

FeatureSlot = Literal["header", "footer"]


class FeatureDescriptor(BaseModel):
    """
    An optional feature (modal, cursor tracker, nav bar...) and the action
    ids it can satisfy.

    Entries in `provides_actions` are either literal ids (``"modal.open"``)
    or templates where ``{key}`` stands for whatever key the feature is
    mounted under (``"{key}.show"``).
    """
    feature_id: str = Field(validation_alias=AliasChoices("feature_id", "featureId"))
    name: str | None = None
    slot: FeatureSlot | None = None   # None = free overlay
    provides_actions: list[str] = Field(
        default=[], validation_alias=AliasChoices("provides_actions", "providesActions"),
    )


class WidgetMeta(BaseModel):
    """Capability metadata for a node type."""
    type: str
    triggers: list[str] = []
    default_decorators: list[DecoratorRef] = Field(
        default=[], validation_alias=AliasChoices("default_decorators", "defaultDecorators"),
    )


class DecoratorDefinition(BaseModel):
    id: str
    required_overlays: list[str] = Field(
        default=[], validation_alias=AliasChoices("required_overlays", "requiredOverlays"),
    )


class SectionPatternMeta(BaseModel):
    """Section pattern metadata; sections may pin features they cannot live without."""
    pattern_id: str = Field(validation_alias=AliasChoices("pattern_id", "patternId"))
    name: str | None = None
    required_overlays: list[str] = Field(
        default=[], validation_alias=AliasChoices("required_overlays", "requiredOverlays"),
    )


class ComponentCatalog(BaseModel):
    """
    Read-only lookups the scanner and resolver consume.

    `features` order matters: it is the tie-break order when several
    features could provide the same action.
    """
    features: list[FeatureDescriptor] = []
    widgets: dict[str, WidgetMeta] = {}
    decorators: dict[str, DecoratorDefinition] = {}
    section_patterns: dict[str, SectionPatternMeta] = Field(
        default={}, validation_alias=AliasChoices("section_patterns", "sectionPatterns"),
    )

    def get_feature(self, feature_id: str) -> FeatureDescriptor | None:
        for f in self.features:
            if f.feature_id == feature_id:
                return f
        return None

    def get_widget_meta(self, node_type: str) -> WidgetMeta | None:
        return self.widgets.get(node_type)

    def get_decorator(self, decorator_id: str) -> DecoratorDefinition | None:
        return self.decorators.get(decorator_id)

    def get_section_pattern(self, pattern_id: str) -> SectionPatternMeta | None:
        return self.section_patterns.get(pattern_id)

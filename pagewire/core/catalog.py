"""Built-in component catalog."""

from __future__ import annotations

from pagewire.models import (
    ComponentCatalog, DecoratorDefinition, DecoratorRef, FeatureDescriptor,
    SectionPatternMeta, WidgetMeta,
)


def create_default_catalog() -> ComponentCatalog:
    """Create a catalog with the standard chrome features and widget metadata."""
    features = [
        FeatureDescriptor(feature_id="MinimalNav", slot="header"),
        FeatureDescriptor(feature_id="FixedNav", slot="header"),
        FeatureDescriptor(feature_id="ContactFooter", slot="footer"),
        FeatureDescriptor(
            feature_id="CursorTracker",
            name="Cursor Tracker",
            provides_actions=["{key}.show", "{key}.hide"],
        ),
        FeatureDescriptor(
            feature_id="FloatingContact",
            name="Floating Contact",
            provides_actions=["{key}.toggle"],
        ),
        FeatureDescriptor(
            feature_id="VideoModal",
            name="Video Modal",
            provides_actions=["{key}.open", "{key}.close"],
        ),
    ]

    widgets = [
        WidgetMeta(type="Text"),
        WidgetMeta(type="Flex"),
        WidgetMeta(type="Image", triggers=["click"]),
        WidgetMeta(type="Link", triggers=["click", "mouseenter", "mouseleave"]),
        WidgetMeta(type="Video", triggers=["click", "mouseenter", "mouseleave"]),
        WidgetMeta(
            type="ProjectCard",
            triggers=["click", "mouseenter", "mouseleave"],
            default_decorators=[
                DecoratorRef(id="video-modal"),
                DecoratorRef(id="cursor-label", params={"label": "WATCH"}),
                DecoratorRef(id="hover-scale"),
            ],
        ),
    ]

    decorators = [
        DecoratorDefinition(id="video-modal", required_overlays=["VideoModal"]),
        DecoratorDefinition(id="cursor-label", required_overlays=["CursorTracker"]),
        DecoratorDefinition(id="hover-scale"),
    ]

    section_patterns = [
        SectionPatternMeta(
            pattern_id="ProjectFeatured",
            name="Project Featured",
            required_overlays=["VideoModal"],
        ),
    ]

    return ComponentCatalog(
        features=features,
        widgets={w.type: w for w in widgets},
        decorators={d.id: d for d in decorators},
        section_patterns={p.pattern_id: p for p in section_patterns},
    )

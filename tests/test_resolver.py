"""Tests for overlay resolution."""
from __future__ import annotations

import pytest

from pagewire.core.resolver import OverlayResolver
from pagewire.models import ComponentCatalog, FeatureDescriptor, ResolvedOverlayBinding


def _pairs(bindings: list[ResolvedOverlayBinding]) -> list[tuple[str, str]]:
    return [(b.key, b.feature_id) for b in bindings]


def test_end_to_end_single_modal(video_modal_resolver: OverlayResolver) -> None:
    result = video_modal_resolver.resolve_required_overlays({"modal.open"}, [])
    assert _pairs(result) == [("modal", "VideoModal")]

    assert video_modal_resolver.resolve_required_overlays({"modal.open"}, ["modal"]) == []


def test_empty_requirements_short_circuit(video_modal_resolver: OverlayResolver) -> None:
    assert video_modal_resolver.resolve_required_overlays(set(), ["modal"]) == []


def test_action_without_provider_is_left_out(video_modal_resolver: OverlayResolver) -> None:
    result = video_modal_resolver.resolve_required_overlays(["nav.toggle", "modal.open"], [])
    assert _pairs(result) == [("modal", "VideoModal")]


def test_catalog_order_breaks_ties() -> None:
    resolver = OverlayResolver([
        FeatureDescriptor(feature_id="ImageLightbox", provides_actions=["{key}.open"]),
        FeatureDescriptor(feature_id="VideoModal", provides_actions=["{key}.open"]),
    ])

    assert _pairs(resolver.resolve_required_overlays(["modal.open"], [])) == [("modal", "ImageLightbox")]


def test_claimed_feature_falls_through_to_next_provider() -> None:
    resolver = OverlayResolver([
        FeatureDescriptor(feature_id="ImageLightbox", provides_actions=["{key}.open"]),
        FeatureDescriptor(feature_id="VideoModal", provides_actions=["{key}.open"]),
    ])

    result = resolver.resolve_required_overlays(["gallery.open", "reel.open"], [])
    assert _pairs(result) == [("gallery", "ImageLightbox"), ("reel", "VideoModal")]


def test_same_key_is_only_injected_once(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)

    result = resolver.resolve_required_overlays(["modal.open", "modal.close"], [])
    assert _pairs(result) == [("modal", "VideoModal")]


def test_action_without_namespace_uses_feature_key() -> None:
    resolver = OverlayResolver([
        FeatureDescriptor(feature_id="ScrollTop", provides_actions=["scrollTop"]),
    ])

    assert _pairs(resolver.resolve_required_overlays(["scrollTop"], [])) == [("scrollTop", "ScrollTop")]


def test_literal_provider() -> None:
    resolver = OverlayResolver([
        FeatureDescriptor(feature_id="Intro", provides_actions=["intro.skip"]),
    ])

    assert _pairs(resolver.resolve_required_overlays(["intro.skip"], [])) == [("intro", "Intro")]
    assert resolver.resolve_required_overlays(["intro.replay"], []) == []


REQUIRED_SETS = [
    ["modal.open", "modal.close", "cursorLabel.show", "cursorLabel.hide", "contact.toggle"],
    ["a.open", "a.close", "c.show", "c.hide", "d.toggle", "nav.jump"],
    ["x.show", "x.hide", "modal.open"],
]


@pytest.mark.parametrize("required", REQUIRED_SETS)
@pytest.mark.parametrize("existing", [[], ["modal"], ["a", "cursor", "header"]])
def test_output_keys_are_unique_and_new(catalog: ComponentCatalog, required: list[str], existing: list[str]) -> None:
    resolver = OverlayResolver(catalog.features)

    result = resolver.resolve_required_overlays(required, existing)
    keys = [b.key for b in result]
    features = [b.feature_id for b in result]

    assert len(keys) == len(set(keys))
    assert len(features) == len(set(features))
    assert not set(keys) & set(existing)


@pytest.mark.parametrize("required", REQUIRED_SETS)
def test_applying_the_result_closes_the_gap(catalog: ComponentCatalog, required: list[str]) -> None:
    resolver = OverlayResolver(catalog.features)
    existing = ["header"]

    first = resolver.resolve_required_overlays(required, existing)
    again = resolver.resolve_required_overlays(required, existing + [b.key for b in first])

    assert again == []


def test_find_candidates_lists_every_provider(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)

    assert resolver.find_candidates("modal.open") == ["VideoModal"]
    assert resolver.find_candidates("cursorLabel.show") == ["CursorTracker"]
    assert resolver.find_candidates("nav.jump") == []


def test_resolution_by_namespace_key(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)

    resolution = resolver.get_action_resolution("modal.open", ["modal"])
    assert resolution.resolved
    assert resolution.feature_key == "modal"
    assert resolution.feature_id == "VideoModal"
    assert resolution.candidates == ["VideoModal"]


def test_resolution_by_default_feature_key(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)

    resolution = resolver.get_action_resolution("modal.open", ["videoModal"])
    assert resolution.resolved
    assert resolution.feature_key == "videoModal"
    assert resolution.feature_id == "VideoModal"


def test_unresolved_action_still_lists_candidates(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)

    resolution = resolver.get_action_resolution("modal.open", ["header"])
    assert not resolution.resolved
    assert resolution.feature_key is None
    assert resolution.candidates == ["VideoModal"]


def test_resolution_does_not_mutate_inputs(catalog: ComponentCatalog) -> None:
    resolver = OverlayResolver(catalog.features)
    existing = ["modal"]

    first = resolver.get_action_resolution("modal.open", existing)
    second = resolver.get_action_resolution("modal.open", existing)

    assert first == second
    assert existing == ["modal"]


def test_resolve_feature_ids_uses_default_keys() -> None:
    resolver = OverlayResolver([])

    result = resolver.resolve_feature_ids(["VideoModal", "CursorTracker", "VideoModal"], ["cursorTracker"])
    assert _pairs(result) == [("videoModal", "VideoModal")]


def test_available_actions_expand_templates() -> None:
    resolver = OverlayResolver([
        FeatureDescriptor(feature_id="VideoModal", provides_actions=["{key}.open", "{key}.close"]),
        FeatureDescriptor(feature_id="Intro", provides_actions=["intro.skip"]),
    ])

    actions = [(a.action_id, a.feature_id, a.feature_key) for a in resolver.get_available_actions(["modal", "reel"])]
    assert actions == [
        ("modal.open", "VideoModal", "modal"),
        ("reel.open", "VideoModal", "reel"),
        ("modal.close", "VideoModal", "modal"),
        ("reel.close", "VideoModal", "reel"),
        ("intro.skip", "Intro", "intro"),
    ]

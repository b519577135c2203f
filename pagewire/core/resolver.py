"""Overlay resolution — decides which features a page is missing."""

from __future__ import annotations
import logging
from typing import Iterable

from pagewire.models import (
    ActionResolution, AvailableAction, FeatureDescriptor, ResolvedOverlayBinding,
)
from pagewire.core.matching import (
    action_matches, action_namespace, default_feature_key, derive_key,
    expand_template, KEY_PLACEHOLDER,
)

logger = logging.getLogger(__name__)


class OverlayResolver:
    """
    Matches required action ids against the feature catalog.

    Features are tried in catalog order, so when two features can serve
    the same action the one declared first wins. The resolver holds no
    state between calls.
    """

    def __init__(self, features: list[FeatureDescriptor]) -> None:
        self.features = features

    def resolve_required_overlays(
        self,
        required_actions: Iterable[str],
        existing_keys: Iterable[str],
    ) -> list[ResolvedOverlayBinding]:
        """
        Return the features to inject so every required action has a provider.

        Never returns a key that is in `existing_keys`, and never the same
        key or feature twice. Actions no feature provides are left out.
        """
        required = list(required_actions)
        if not required:
            return []

        claimed_keys = set(existing_keys)
        claimed_features: set[str] = set()
        to_add: list[ResolvedOverlayBinding] = []

        for action_id in required:
            feature = self._first_provider(action_id, exclude=claimed_features)
            if feature is None:
                logger.debug("No feature provides action %s", action_id)
                continue

            key = derive_key(action_id, feature.feature_id)
            if key in claimed_keys:
                logger.debug("Key %s already claimed, skipping %s", key, action_id)
                continue

            to_add.append(ResolvedOverlayBinding(key=key, feature_id=feature.feature_id))
            claimed_keys.add(key)
            claimed_features.add(feature.feature_id)

        return to_add

    def resolve_feature_ids(
        self,
        feature_ids: Iterable[str],
        existing_keys: Iterable[str],
    ) -> list[ResolvedOverlayBinding]:
        """
        Bind features required by id (decorators, section patterns) under
        their default keys, skipping claimed keys and repeats.
        """
        claimed_keys = set(existing_keys)
        to_add: list[ResolvedOverlayBinding] = []

        for feature_id in feature_ids:
            key = default_feature_key(feature_id)
            if key in claimed_keys:
                continue
            to_add.append(ResolvedOverlayBinding(key=key, feature_id=feature_id))
            claimed_keys.add(key)

        return to_add

    def find_candidates(self, action_id: str) -> list[str]:
        """Ids of every feature that could provide `action_id`, in catalog order."""
        return [
            f.feature_id for f in self.features
            if any(action_matches(pa, action_id) for pa in f.provides_actions)
        ]

    def get_action_resolution(
        self, action_id: str, existing_keys: Iterable[str],
    ) -> ActionResolution:
        """
        Check whether `action_id` is already served by a feature on the page.

        A key matching the action's namespace counts first; otherwise a
        candidate feature mounted under its default key does.
        """
        candidates = self.find_candidates(action_id)
        existing = set(existing_keys)

        namespace = action_namespace(action_id)
        if namespace is not None and namespace in existing:
            # Best effort: several features may share a namespace convention
            return ActionResolution(
                resolved=True,
                feature_key=namespace,
                feature_id=candidates[0] if candidates else None,
                candidates=candidates,
            )

        for feature_id in candidates:
            key = default_feature_key(feature_id)
            if key in existing:
                return ActionResolution(
                    resolved=True, feature_key=key, feature_id=feature_id,
                    candidates=candidates,
                )

        return ActionResolution(resolved=False, candidates=candidates)

    def get_available_actions(self, feature_keys: Iterable[str]) -> list[AvailableAction]:
        """
        Concrete action ids on offer for the given feature keys.

        Template entries are expanded once per key; literal entries are
        listed under the providing feature's default key.
        """
        keys = list(feature_keys)
        actions: list[AvailableAction] = []

        for feature in self.features:
            for entry in feature.provides_actions:
                if KEY_PLACEHOLDER in entry:
                    for key in keys:
                        actions.append(AvailableAction(
                            action_id=expand_template(entry, key),
                            feature_id=feature.feature_id,
                            feature_key=key,
                        ))
                else:
                    actions.append(AvailableAction(
                        action_id=entry,
                        feature_id=feature.feature_id,
                        feature_key=default_feature_key(feature.feature_id),
                    ))

        return actions

    def _first_provider(self, action_id: str, exclude: set[str]) -> FeatureDescriptor | None:
        for feature in self.features:
            if feature.feature_id in exclude:
                continue
            if any(action_matches(pa, action_id) for pa in feature.provides_actions):
                return feature
        return None

"""Action id matching and feature key derivation shared by the resolver."""

from __future__ import annotations

KEY_PLACEHOLDER = "{key}"


def action_matches(provided: str, action_id: str) -> bool:
    """
    Check whether a `provides_actions` entry satisfies `action_id`.

    Literal entries match by equality. Template entries (containing
    ``{key}``) match any action ending in the template's verb suffix with
    a non-empty key in front of it.
    """
    if provided == action_id:
        return True

    if KEY_PLACEHOLDER in provided:
        suffix = provided.replace(KEY_PLACEHOLDER, "", 1)
        if suffix and action_id.endswith(suffix):
            return len(action_id) > len(suffix)

    return False


def action_namespace(action_id: str) -> str | None:
    """Key part of ``"key.verb"``, or None when there is no leading key."""
    dot = action_id.find(".")
    return action_id[:dot] if dot > 0 else None


def default_feature_key(feature_id: str) -> str:
    """'VideoModal' -> 'videoModal'."""
    return feature_id[:1].lower() + feature_id[1:]


def derive_key(action_id: str, feature_id: str) -> str:
    """Key a feature providing `action_id` should be mounted under."""
    return action_namespace(action_id) or default_feature_key(feature_id)


def expand_template(provided: str, key: str) -> str:
    return provided.replace(KEY_PLACEHOLDER, key, 1)

"""Action registry — routes action ids to the handlers mounted features register."""

from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from pagewire.models import ActionHandler, ActionPayload

logger = logging.getLogger(__name__)


class ActionRegistry:
    """
    Maps action ids (``"{key}.{verb}"``) to at most one handler each.

    Features register their handlers when they mount and unregister them
    when they unmount. Nodes execute actions by id without knowing who
    handles them; an id nobody registered is a no-op, so pages that leave
    a feature out degrade instead of failing.

    Not thread-safe. Handlers that unregister actions while being
    dispatched are not guarded against.
    """

    def __init__(self, diagnostics: bool = False) -> None:
        self.diagnostics = diagnostics
        self._handlers: dict[str, ActionHandler] = {}

    def register(self, action_id: str, handler: ActionHandler) -> None:
        """Register a handler. Replaces any handler already under this id."""
        self._handlers[action_id] = handler
        logger.debug("Registered action %s", action_id)

    def unregister(self, action_id: str) -> None:
        """Remove a handler. Unknown ids are ignored."""
        if self._handlers.pop(action_id, None) is not None:
            logger.debug("Unregistered action %s", action_id)

    def execute(self, action_id: str, payload: ActionPayload | Mapping[str, Any] | None = None) -> bool:
        """
        Invoke the handler registered for `action_id`.

        Returns True if a handler ran. Exceptions raised by the handler
        propagate to the caller.
        """
        handler = self._handlers.get(action_id)
        if handler is None:
            if self.diagnostics:
                logger.warning(
                    'Action "%s" not registered. Is the feature providing it mounted?',
                    action_id,
                )
            return False

        handler(_as_payload(payload))
        return True

    def has(self, action_id: str) -> bool:
        return action_id in self._handlers

    def list_actions(self) -> list[str]:
        """Return all registered action ids."""
        return list(self._handlers.keys())

    @contextmanager
    def mount(self, key: str, handlers: Mapping[str, ActionHandler]) -> Iterator[list[str]]:
        """
        Register ``{key}.{verb}`` for each verb/handler pair for the
        duration of the block, then unregister them.

        Yields the registered action ids.
        """
        action_ids = [f"{key}.{verb}" for verb in handlers]
        for action_id, handler in zip(action_ids, handlers.values()):
            self.register(action_id, handler)
        try:
            yield action_ids
        finally:
            for action_id in action_ids:
                self.unregister(action_id)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


def _as_payload(payload: ActionPayload | Mapping[str, Any] | None) -> ActionPayload:
    if payload is None:
        return ActionPayload()
    if isinstance(payload, ActionPayload):
        return payload
    return ActionPayload.from_mapping(payload)

"""Errors raised by the wiring core for input it cannot process."""

from __future__ import annotations


class WiringError(Exception):
    """Base class for wiring errors."""


class CyclicTreeError(WiringError):
    """A node tree refers back to one of its own ancestors."""

    def __init__(self, node_type: str, node_id: str | None) -> None:
        label = f"{node_type}#{node_id}" if node_id else node_type
        super().__init__(f"Cycle detected in node tree at {label}")
        self.node_type = node_type
        self.node_id = node_id

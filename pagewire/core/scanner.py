"""Tree scanning — action ids, triggerable widgets, and implied features."""

from __future__ import annotations
import logging
from typing import Iterator, Mapping

from pagewire.models import (
    ComponentCatalog, Page, Section, TriggerableWidget, UINode, binding_actions,
)
from pagewire.core.errors import CyclicTreeError
from pagewire.core.matching import default_feature_key

logger = logging.getLogger(__name__)


class TreeScanner:
    """
    Walks declarative node trees and reports what they depend on.

    The scanner holds only read-only catalog lookups, so one instance can
    scan any number of pages, concurrently if needed.
    """

    def __init__(self, catalog: ComponentCatalog) -> None:
        self.catalog = catalog

    def collect_actions(self, nodes: list[UINode]) -> set[str]:
        """Every action id bound in any node's `on` map."""
        actions: set[str] = set()
        for node, _ in self._walk(nodes):
            actions.update(binding_actions(node.on))
        return actions

    def collect_section_actions(self, section: Section) -> set[str]:
        return self.collect_actions(section.nodes)

    def collect_preset_actions(self, pages: Mapping[str, Page]) -> dict[str, list[str]]:
        """Map each action id to the sections that reference it, in first-seen order."""
        action_sections: dict[str, list[str]] = {}
        for page in pages.values():
            for section in page.sections:
                for action_id in sorted(self.collect_section_actions(section)):
                    section_ids = action_sections.setdefault(action_id, [])
                    if section.id not in section_ids:
                        section_ids.append(section.id)
        return action_sections

    def collect_triggerable_widgets(self, pages: Mapping[str, Page]) -> list[TriggerableWidget]:
        """
        Flatten every node whose type declares trigger events.

        Nodes without an explicit id get a positional one,
        ``"{type}-{depth}"``, both in their own record and in the paths of
        their descendants.
        """
        result: list[TriggerableWidget] = []

        for page_id, page in pages.items():
            for section_index, section in enumerate(page.sections):
                for node, path in self._walk(section.nodes):
                    meta = self.catalog.get_widget_meta(node.type)
                    if meta is None or not meta.triggers:
                        continue
                    widget_id = _node_label(node, len(path))
                    result.append(TriggerableWidget(
                        page_id=page_id,
                        section_index=section_index,
                        section_id=section.id,
                        widget_path=[*path, widget_id],
                        widget_id=widget_id,
                        widget_type=node.type,
                        triggers=list(meta.triggers),
                        current_on=node.on or {},
                    ))

        return result

    def collect_decorator_overlays(self, nodes: list[UINode]) -> set[str]:
        """Feature ids required by the decorators attached to any node."""
        overlays: set[str] = set()

        for node, _ in self._walk(nodes):
            refs = node.decorators
            if refs is None:
                meta = self.catalog.get_widget_meta(node.type)
                refs = meta.default_decorators if meta else []
            for ref in refs:
                definition = self.catalog.get_decorator(ref.id)
                if definition is None:
                    logger.debug("Decorator %s not found in catalog", ref.id)
                    continue
                overlays.update(definition.required_overlays)

        return overlays

    def collect_section_overlays(self, pages: Mapping[str, Page]) -> dict[str, list[str]]:
        """
        Features pinned by section patterns, keyed by default feature key.

        Values are the names of the patterns requiring that feature, so an
        authoring tool can explain why it cannot be removed.
        """
        locked: dict[str, list[str]] = {}
        for page in pages.values():
            for section in page.sections:
                if not section.pattern_id:
                    continue
                pattern = self.catalog.get_section_pattern(section.pattern_id)
                if pattern is None:
                    continue
                name = pattern.name or section.pattern_id
                for feature_id in pattern.required_overlays:
                    names = locked.setdefault(default_feature_key(feature_id), [])
                    if name not in names:
                        names.append(name)
        return locked

    def _walk(self, nodes: list[UINode]) -> Iterator[tuple[UINode, list[str]]]:
        """
        Depth-first, pre-order traversal yielding each node with the ids of
        its ancestors.
        """
        on_path: set[int] = set()
        # (remaining siblings, ancestor ids, parent node)
        stack: list[tuple[Iterator[UINode], list[str], UINode | None]] = [(iter(nodes), [], None)]

        while stack:
            siblings, path, parent = stack[-1]
            node = next(siblings, None)
            if node is None:
                stack.pop()
                if parent is not None:
                    on_path.discard(id(parent))
                continue

            if id(node) in on_path:
                raise CyclicTreeError(node.type, node.id)
            yield node, path

            if node.children:
                on_path.add(id(node))
                stack.append((iter(node.children), [*path, _node_label(node, len(path))], node))


def _node_label(node: UINode, depth: int) -> str:
    return node.id if node.id is not None else f"{node.type}-{depth}"

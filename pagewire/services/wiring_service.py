"""High-level wiring service — facade for the API layer."""

from __future__ import annotations
from typing import Iterable

from pagewire.models import (
    ActionResolution, AssemblyPlan, AvailableAction, ComponentCatalog,
    Page, Site, TriggerableWidget, WiringConfig,
)
from pagewire.core.assembler import PageAssembler
from pagewire.core.catalog import create_default_catalog
from pagewire.core.registry import ActionRegistry


class WiringService:
    """
    Composition root: owns the catalog, the assembler, and the
    process-wide action registry.
    """

    def __init__(
        self,
        catalog: ComponentCatalog | None = None,
        config: WiringConfig | None = None,
        registry: ActionRegistry | None = None,
    ) -> None:
        self.config = config or WiringConfig.from_env()
        self.catalog = catalog or create_default_catalog()
        self.registry = registry or ActionRegistry(diagnostics=self.config.diagnostics)
        self.assembler = PageAssembler(self.catalog, self.config)

    def assemble(self, site: Site) -> AssemblyPlan:
        return self.assembler.assemble(site)

    def assemble_and_apply(self, site: Site) -> tuple[AssemblyPlan, Site]:
        plan = self.assembler.assemble(site)
        return plan, self.assembler.apply(site, plan)

    def triggers(self, pages: dict[str, Page]) -> list[TriggerableWidget]:
        return self.assembler.scanner.collect_triggerable_widgets(pages)

    def resolution(self, action_id: str, existing_keys: Iterable[str]) -> ActionResolution:
        return self.assembler.resolver.get_action_resolution(action_id, existing_keys)

    def available_actions(self, feature_keys: Iterable[str]) -> list[AvailableAction]:
        return self.assembler.resolver.get_available_actions(feature_keys)

    def list_features(self) -> list[dict[str, object]]:
        return [
            {
                "feature_id": f.feature_id,
                "name": f.name or f.feature_id,
                "slot": f.slot,
                "provides_actions": list(f.provides_actions),
            }
            for f in self.catalog.features
        ]

"""Page assembly — scans a site and plans which features to inject."""

from __future__ import annotations
import logging

from pagewire.models import (
    AssemblyPlan, ComponentCatalog, FeatureInstance, ResolvedOverlayBinding,
    Site, WiringConfig,
)
from pagewire.core.resolver import OverlayResolver
from pagewire.core.scanner import TreeScanner

logger = logging.getLogger(__name__)


class PageAssembler:
    """
    Build-time orchestration: scan -> resolve -> plan.

    Takes a site, collects the actions its nodes bind and the features its
    decorators and section patterns imply, and returns the features that
    must be added so every bound action has a provider when the page
    renders. The assembler never touches the action registry.
    """

    def __init__(
        self,
        catalog: ComponentCatalog,
        config: WiringConfig | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config or WiringConfig()
        self.scanner = TreeScanner(catalog)
        self.resolver = OverlayResolver(catalog.features)

    def assemble(self, site: Site) -> AssemblyPlan:
        pages = site.pages
        existing_keys = site.feature_keys

        # Scan phase
        required: set[str] = set()
        implied: set[str] = set()
        for page in pages.values():
            for section in page.sections:
                required |= self.scanner.collect_section_actions(section)
                implied |= self.scanner.collect_decorator_overlays(section.nodes)
                pattern = self.catalog.get_section_pattern(section.pattern_id or "")
                if pattern is not None:
                    implied.update(pattern.required_overlays)
        locked = self.scanner.collect_section_overlays(pages)

        # Resolution phase
        required_actions = sorted(required)
        injected: list[ResolvedOverlayBinding] = []
        if self.config.auto_inject:
            injected = self._resolve_until_stable(required_actions, existing_keys)

        if self.config.inject_decorator_overlays:
            present = {f.feature_id for f in site.features.values()}
            present.update(b.feature_id for b in injected)
            missing = []
            for feature_id in sorted(implied - present):
                if self.catalog.get_feature(feature_id) is None:
                    logger.debug("Implied feature %s is not in the catalog", feature_id)
                    continue
                missing.append(feature_id)
            injected += self.resolver.resolve_feature_ids(
                missing, [*existing_keys, *(b.key for b in injected)],
            )

        unresolved = self._unresolved(required_actions, [*existing_keys, *(b.key for b in injected)])
        for action_id in unresolved:
            logger.debug("Action %s has no provider on this site", action_id)

        return AssemblyPlan(
            required_actions=required_actions,
            injected=injected,
            unresolved_actions=unresolved,
            triggerable_widgets=self.scanner.collect_triggerable_widgets(pages),
            action_sections=self.scanner.collect_preset_actions(pages),
            locked_feature_keys=locked,
        )

    def apply(self, site: Site, plan: AssemblyPlan) -> Site:
        """Return a copy of `site` with the plan's injected features mounted."""
        updated = site.model_copy(deep=True)
        for binding in plan.injected:
            updated.features[binding.key] = FeatureInstance(feature_id=binding.feature_id)
        return updated

    def _resolve_until_stable(
        self, actions: list[str], existing_keys: list[str],
    ) -> list[ResolvedOverlayBinding]:
        """
        Resolve repeatedly until no action is left that a new binding
        could serve.

        One resolver pass schedules each feature at most once, so actions
        sharing a provider under different keys (``a.open``, ``b.open``)
        need one pass each.
        """
        injected: list[ResolvedOverlayBinding] = []
        pending = actions
        while pending:
            batch = self.resolver.resolve_required_overlays(
                pending, [*existing_keys, *(b.key for b in injected)],
            )
            if not batch:
                break
            injected += batch
            pending = self._unresolved(pending, [*existing_keys, *(b.key for b in injected)])
        return injected

    def _unresolved(self, actions: list[str], keys: list[str]) -> list[str]:
        return [
            action_id for action_id in actions
            if not self.resolver.get_action_resolution(action_id, keys).resolved
        ]

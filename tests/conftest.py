from __future__ import annotations

import pytest

from pagewire.core.catalog import create_default_catalog
from pagewire.core.resolver import OverlayResolver
from pagewire.core.scanner import TreeScanner
from pagewire.models import ComponentCatalog, FeatureDescriptor, Site


@pytest.fixture
def catalog() -> ComponentCatalog:
    return create_default_catalog()


@pytest.fixture
def scanner(catalog: ComponentCatalog) -> TreeScanner:
    return TreeScanner(catalog)


@pytest.fixture
def video_modal_resolver() -> OverlayResolver:
    return OverlayResolver([
        FeatureDescriptor(feature_id="VideoModal", provides_actions=["{key}.open"]),
    ])


@pytest.fixture
def portfolio_site() -> Site:
    """Two pages: a home page with a featured project grid, and a contact page."""
    return Site.model_validate({
        "pages": {
            "home": {
                "id": "home",
                "sections": [
                    {
                        "id": "hero",
                        "widgets": [
                            {
                                "id": "hero-root",
                                "type": "Flex",
                                "widgets": [
                                    {"type": "Link", "on": {"click": "modal.open"}},
                                    {"id": "reel", "type": "Video",
                                     "on": {"mouseenter": ["cursorLabel.show"],
                                            "mouseleave": "cursorLabel.hide"}},
                                ],
                            },
                        ],
                    },
                    {
                        "id": "projects",
                        "patternId": "ProjectFeatured",
                        "widgets": [
                            {"id": "card-1", "type": "ProjectCard",
                             "on": {"click": {"action": "modal.open",
                                              "params": {"animationType": "expand"}}}},
                        ],
                    },
                ],
            },
            "contact": {
                "id": "contact",
                "sections": [
                    {
                        "id": "form",
                        "widgets": [
                            {"type": "Text"},
                            {"id": "cta", "type": "Link",
                             "on": {"click": "contact.toggle"}},
                        ],
                    },
                ],
            },
        },
        "features": {"header": {"featureId": "FixedNav"}},
    })

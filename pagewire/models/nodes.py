"""Declarative page tree — sites, pages, sections, and UI nodes."""

from __future__ import annotations
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .actions import EventMap


class DecoratorRef(BaseModel):
    """Reference to a reusable behaviour attached to a node."""
    id: str
    params: dict[str, Any] = {}


class UINode(BaseModel):
    """
    A node in the declarative tree.

    `type` names the node's kind and is only used to look up capability
    metadata. `decorators` left as None means "use the type's defaults";
    an explicit empty list means "no decorators".
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    type: str
    props: dict[str, Any] = {}
    on: EventMap | None = None
    decorators: list[DecoratorRef] | None = None
    children: list[UINode] = Field(
        default=[], validation_alias=AliasChoices("children", "widgets"),
    )


class Section(BaseModel):
    """A page section holding a list of root nodes."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    pattern_id: str | None = Field(
        default=None, validation_alias=AliasChoices("pattern_id", "patternId"),
    )
    nodes: list[UINode] = Field(
        default=[], validation_alias=AliasChoices("nodes", "widgets"),
    )


class Page(BaseModel):
    id: str
    sections: list[Section] = []


class FeatureInstance(BaseModel):
    """A feature mounted on a site under some key."""
    feature_id: str = Field(validation_alias=AliasChoices("feature_id", "featureId"))
    props: dict[str, Any] = {}


class Site(BaseModel):
    """A whole site: its pages and the features already configured on it."""
    pages: dict[str, Page] = {}
    features: dict[str, FeatureInstance] = {}   # feature key -> instance

    @property
    def feature_keys(self) -> list[str]:
        return list(self.features.keys())

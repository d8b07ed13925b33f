"""Read-only snapshot contracts for the sidebar query layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Mapping

INACTIVE_SIDEBAR_ID = "wp_inactive_widgets"
INACTIVE_SIDEBAR_NAME = "Inactive Widgets"
INACTIVE_SIDEBAR_DESCRIPTION = "Drag widgets here to remove them from the sidebar but keep their settings."

PRESENTATION_ATTRIBUTES = ("class", "before_widget", "after_widget", "before_title", "after_title")


@dataclass(frozen=True)
class Sidebar:
    id: str
    name: str
    description: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)

    def value(self, key: str) -> str:
        if key == "id":
            return self.id
        if key == "name":
            return self.name
        if key == "description":
            return self.description
        return str(self.attributes.get(key, ""))


Normalizer = Callable[["SidebarRegistry"], "SidebarRegistry"]


@dataclass(frozen=True)
class SidebarRegistry:
    """Snapshot of registered sidebars and their widget assignments.

    ``sidebars`` keeps host registration order. ``normalizer`` is the optional
    host hook that materializes declared-but-unrendered sidebars.
    """

    sidebars: Mapping[str, Sidebar] = field(default_factory=dict)
    widgets: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    normalizer: Normalizer | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "sidebars", MappingProxyType(dict(self.sidebars)))
        object.__setattr__(
            self,
            "widgets",
            MappingProxyType({key: tuple(ids) for key, ids in self.widgets.items()}),
        )

    def normalized(self) -> "SidebarRegistry":
        if self.normalizer is None:
            return self
        return self.normalizer(self)

    def has(self, sidebar_id: str) -> bool:
        return sidebar_id in self.sidebars

    def get(self, sidebar_id: str) -> Sidebar | None:
        return self.sidebars.get(sidebar_id)

    def visible(self) -> list[Sidebar]:
        return [s for key, s in self.sidebars.items() if key != INACTIVE_SIDEBAR_ID]

    def widgets_for(self, sidebar_id: str) -> tuple[str, ...]:
        return self.widgets.get(sidebar_id, ())

    def with_sidebar(self, sidebar: Sidebar) -> "SidebarRegistry":
        sidebars = dict(self.sidebars)
        sidebars[sidebar.id] = sidebar
        return replace(self, sidebars=sidebars)


def register_unused_sidebar(registry: SidebarRegistry) -> SidebarRegistry:
    """Register the inactive-widgets placeholder if the host has not already."""
    if registry.has(INACTIVE_SIDEBAR_ID):
        return registry
    placeholder = Sidebar(
        id=INACTIVE_SIDEBAR_ID,
        name=INACTIVE_SIDEBAR_NAME,
        description=INACTIVE_SIDEBAR_DESCRIPTION,
        attributes={
            "class": "inactive-sidebar",
            "before_widget": "",
            "after_widget": "",
            "before_title": "",
            "after_title": "",
        },
    )
    return registry.with_sidebar(placeholder)

"""Registry query operations behind the ``sidebar`` subcommands.

Each operation takes an explicit ``SidebarRegistry`` snapshot, applies the
registry's normalization hook, and writes through a ``Formatter``. Return
values are process exit codes.
"""

from __future__ import annotations

from typing import TextIO

from sidebar_core.errors import InvalidField, SidebarNotFound
from sidebar_core.fields import (
    DEFAULT_SIDEBAR_FIELDS,
    SIDEBAR_FIELDS,
    WIDGET_FIELDS,
    parse_fields,
    project_sidebar,
    project_widget,
)
from sidebar_core.formatter import Formatter
from sidebar_core.models import SidebarRegistry


def _single_field(field: str | None, allowed: list[str]) -> str | None:
    if field is None:
        return None
    name = field.strip()
    if name not in allowed:
        raise InvalidField(name)
    return name


def list_sidebars(
    registry: SidebarRegistry,
    fmt: str = "table",
    fields: str | list[str] | None = None,
    field: str | None = None,
    default_fields: list[str] | None = None,
    out: TextIO | None = None,
) -> int:
    registry = registry.normalized()
    sidebars = registry.visible()
    selected = parse_fields(fields, SIDEBAR_FIELDS, default_fields or DEFAULT_SIDEBAR_FIELDS)
    formatter = Formatter(fmt, selected, out=out, field=_single_field(field, SIDEBAR_FIELDS))

    if fmt == "ids":
        formatter.display_ids([s.id for s in sidebars])
        return 0
    if fmt == "count":
        formatter.display_count(len(sidebars))
        return 0

    formatter.display_items([project_sidebar(s, SIDEBAR_FIELDS) for s in sidebars])
    return 0


def get_sidebar(
    registry: SidebarRegistry,
    sidebar_id: str,
    fmt: str = "table",
    fields: str | list[str] | None = None,
    field: str | None = None,
    out: TextIO | None = None,
) -> int:
    registry = registry.normalized()
    selected = parse_fields(fields, SIDEBAR_FIELDS, DEFAULT_SIDEBAR_FIELDS)
    single = _single_field(field, SIDEBAR_FIELDS)

    sidebar = registry.get(sidebar_id)
    if sidebar is None:
        raise SidebarNotFound(sidebar_id)

    formatter = Formatter(fmt, selected, out=out, field=single)
    formatter.display_item(project_sidebar(sidebar, SIDEBAR_FIELDS))
    return 0


def sidebar_exists(registry: SidebarRegistry, sidebar_id: str) -> int:
    return 0 if registry.normalized().has(sidebar_id) else 1


def list_widgets(
    registry: SidebarRegistry,
    sidebar_id: str,
    fmt: str = "table",
    out: TextIO | None = None,
    warn=None,
) -> int:
    registry = registry.normalized()
    if not registry.has(sidebar_id):
        raise SidebarNotFound(sidebar_id)

    widget_ids = list(registry.widgets_for(sidebar_id))
    if not widget_ids:
        if warn is not None:
            warn(f"No widgets found in sidebar '{sidebar_id}'.")
        return 0

    formatter = Formatter(fmt, WIDGET_FIELDS, out=out)
    if fmt == "ids":
        formatter.display_ids(widget_ids)
        return 0

    formatter.display_items([project_widget(w, WIDGET_FIELDS) for w in widget_ids])
    return 0

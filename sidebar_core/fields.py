"""Field schema and projection for sidebar and widget records."""

from __future__ import annotations

from typing import Any, Iterable

from sidebar_core.errors import InvalidField
from sidebar_core.models import PRESENTATION_ATTRIBUTES, Sidebar

DEFAULT_SIDEBAR_FIELDS = ["name", "id", "description"]
OPTIONAL_SIDEBAR_FIELDS = list(PRESENTATION_ATTRIBUTES)
SIDEBAR_FIELDS = DEFAULT_SIDEBAR_FIELDS + OPTIONAL_SIDEBAR_FIELDS

WIDGET_FIELDS = ["id"]


def parse_fields(raw: str | Iterable[str] | None, allowed: list[str], default: list[str]) -> list[str]:
    """Turn ``"name, id"`` (or a list) into a validated, de-duplicated field list."""
    if raw is None:
        return list(default)

    tokens = raw.split(",") if isinstance(raw, str) else [str(t) for t in raw]
    selected: list[str] = []
    for token in tokens:
        name = token.strip()
        if not name or name in selected:
            continue
        if name not in allowed:
            raise InvalidField(name)
        selected.append(name)

    return selected or list(default)


def project_sidebar(sidebar: Sidebar, fields: list[str]) -> dict[str, Any]:
    return {name: sidebar.value(name) for name in fields}


def project_widget(widget_id: str, fields: list[str]) -> dict[str, Any]:
    record = {"id": widget_id}
    return {name: record[name] for name in fields}

"""Load the host's sidebar registry dump into a ``SidebarRegistry``."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from sidebar_core.errors import SnapshotError
from sidebar_core.models import PRESENTATION_ATTRIBUTES, Sidebar, SidebarRegistry, register_unused_sidebar

DEFAULT_SNAPSHOT = "sidebars.json"

# capability name -> normalization hook
HOOKS = {
    "unused_sidebar": register_unused_sidebar,
}


def env_snapshot_path() -> Path:
    return Path(os.environ.get("SIDEBAR_SNAPSHOT", DEFAULT_SNAPSHOT))


def read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except OSError as exc:
        raise SnapshotError(f"cannot read snapshot {path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"invalid JSON snapshot {path}: {exc}") from exc


def _sidebar_from_entry(entry: Any, fallback_id: str | None = None) -> Sidebar:
    if not isinstance(entry, dict):
        raise SnapshotError(f"sidebar entry must be an object, got {type(entry).__name__}")

    sidebar_id = entry.get("id") or fallback_id
    if not sidebar_id:
        raise SnapshotError("sidebar entry without id")

    attributes = {key: str(entry.get(key) or "") for key in PRESENTATION_ATTRIBUTES}
    return Sidebar(
        id=str(sidebar_id),
        name=str(entry.get("name") or ""),
        description=str(entry.get("description") or ""),
        attributes=attributes,
    )


def _parse_sidebars(raw: Any) -> dict[str, Sidebar]:
    if raw is None:
        return {}

    if isinstance(raw, dict):
        pairs = [(key, entry) for key, entry in raw.items()]
    elif isinstance(raw, list):
        pairs = [(None, entry) for entry in raw]
    else:
        raise SnapshotError("'sidebars' must be a list or an object")

    sidebars: dict[str, Sidebar] = {}
    for key, entry in pairs:
        sidebar = _sidebar_from_entry(entry, key)
        if sidebar.id in sidebars:
            raise SnapshotError(f"duplicate sidebar id: {sidebar.id}")
        sidebars[sidebar.id] = sidebar
    return sidebars


def _parse_widgets(raw: Any) -> dict[str, tuple[str, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SnapshotError("'sidebars_widgets' must be an object")

    widgets: dict[str, tuple[str, ...]] = {}
    for sidebar_id, ids in raw.items():
        # hosts store bookkeeping scalars (e.g. array_version) next to real areas
        if not isinstance(ids, list):
            continue
        widgets[str(sidebar_id)] = tuple(str(w) for w in ids)
    return widgets


def registry_from_payload(payload: Any) -> SidebarRegistry:
    if not isinstance(payload, dict):
        raise SnapshotError("snapshot must be a JSON object")

    capabilities = payload.get("capabilities") or []
    if isinstance(capabilities, str):
        capabilities = [capabilities]
    normalizer = None
    for capability in capabilities:
        hook = HOOKS.get(str(capability))
        if hook is not None:
            normalizer = hook
            break

    return SidebarRegistry(
        sidebars=_parse_sidebars(payload.get("sidebars")),
        widgets=_parse_widgets(payload.get("sidebars_widgets")),
        normalizer=normalizer,
    )


def load_snapshot(path: Path) -> SidebarRegistry:
    return registry_from_payload(read_json(path))

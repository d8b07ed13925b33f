"""Settings resolution: built-in defaults merged with an optional JSON config."""

from __future__ import annotations

import json
import os
from pathlib import Path

from sidebar_core.fields import DEFAULT_SIDEBAR_FIELDS, SIDEBAR_FIELDS, parse_fields
from sidebar_core.formatter import LIST_FORMATS
from sidebar_core.snapshot import env_snapshot_path

BUILTIN_SETTINGS: dict = {
    "format": "table",
    "fields": DEFAULT_SIDEBAR_FIELDS,
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        payload = json.loads(config_path.read_text())
    except OSError as exc:
        raise ValueError(f"cannot read config {config_path}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError(f"config must be a JSON object: {config_path}")
    return payload


def resolve_settings(config_path: str | None = None, snapshot: str | None = None) -> dict:
    config_path = config_path or os.environ.get("SIDEBAR_CLI_CONFIG")
    resolved = dict(BUILTIN_SETTINGS)
    user_config = load_user_config(config_path)

    selected_format = user_config.get("format")
    if selected_format:
        if selected_format not in LIST_FORMATS:
            raise ValueError(f"unknown format in config: {selected_format}")
        resolved["format"] = selected_format

    if "fields" in user_config:
        resolved["fields"] = parse_fields(user_config["fields"], SIDEBAR_FIELDS, DEFAULT_SIDEBAR_FIELDS)

    if snapshot:
        resolved["snapshot"] = Path(snapshot)
    elif user_config.get("snapshot"):
        resolved["snapshot"] = Path(str(user_config["snapshot"]))
    else:
        resolved["snapshot"] = env_snapshot_path()

    return resolved

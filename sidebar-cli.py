#!/usr/bin/env python3
"""Thin compatibility entrypoint for sidebar-cli."""

from __future__ import annotations

from sidebar_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())

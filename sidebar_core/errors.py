"""Exceptions surfaced to the CLI as ``Error: ...`` lines."""

from __future__ import annotations


class SidebarCliError(Exception):
    pass


class SidebarNotFound(SidebarCliError):
    def __init__(self, sidebar_id: str):
        super().__init__(f"Sidebar '{sidebar_id}' does not exist.")
        self.sidebar_id = sidebar_id


class InvalidField(SidebarCliError):
    def __init__(self, name: str):
        super().__init__(f"Invalid field: {name}.")
        self.name = name


class SnapshotError(SidebarCliError):
    pass

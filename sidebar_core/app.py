"""CLI entrypoint for sidebar-cli."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from sidebar_core.commands import get_sidebar, list_sidebars, list_widgets, sidebar_exists
from sidebar_core.errors import SidebarCliError
from sidebar_core.formatter import ITEM_FORMATS, LIST_FORMATS, WIDGET_FORMATS
from sidebar_core.profiles import resolve_settings
from sidebar_core.snapshot import load_snapshot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidebar-cli",
        description="Query sidebars (widget areas) registered by the host CMS",
    )
    parser.add_argument("--snapshot", help="Registry snapshot JSON (default: $SIDEBAR_SNAPSHOT or ./sidebars.json)")
    parser.add_argument("--config", help="Optional JSON config file for default format/fields/snapshot")
    parser.add_argument("--debug", action="store_true", help="Print resolved snapshot details to stderr")

    groups = parser.add_subparsers(dest="group", required=True)
    sidebar = groups.add_parser("sidebar", help="Lists registered sidebars")
    commands = sidebar.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="List registered sidebars")
    list_cmd.add_argument("--fields", help="Limit the output to specific object fields")
    list_cmd.add_argument("--field", help="Print the value of a single field for each sidebar")
    list_cmd.add_argument("--format", choices=LIST_FORMATS, help="Render output in a particular format")

    get_cmd = commands.add_parser("get", help="Get details about a specific sidebar")
    get_cmd.add_argument("id", help="The sidebar ID")
    get_cmd.add_argument("--fields", help="Limit the output to specific object fields")
    get_cmd.add_argument("--field", help="Print the value of a single field")
    get_cmd.add_argument("--format", choices=ITEM_FORMATS, default="table", help="Render output in a particular format")

    exists_cmd = commands.add_parser("exists", help="Check if a sidebar exists (exit status only)")
    exists_cmd.add_argument("id", help="The sidebar ID")

    widgets_cmd = commands.add_parser("widgets", help="List widgets assigned to a sidebar")
    widgets_cmd.add_argument("id", help="The sidebar ID")
    widgets_cmd.add_argument("--format", choices=WIDGET_FORMATS, default="table", help="Render output in a particular format")

    return parser


def _dispatch(args: argparse.Namespace, err: Console) -> int:
    settings = resolve_settings(args.config, args.snapshot)
    registry = load_snapshot(settings["snapshot"])

    if args.debug:
        err.print(f"Debug: snapshot {escape(str(settings['snapshot']))} ({len(registry.sidebars)} sidebars)")

    if args.command == "list":
        return list_sidebars(
            registry,
            fmt=args.format or settings["format"],
            fields=args.fields,
            field=args.field,
            default_fields=settings["fields"],
        )
    if args.command == "get":
        return get_sidebar(registry, args.id, fmt=args.format, fields=args.fields, field=args.field)
    if args.command == "exists":
        return sidebar_exists(registry, args.id)
    if args.command == "widgets":
        return list_widgets(
            registry,
            args.id,
            fmt=args.format,
            warn=lambda message: err.print(f"[yellow]Warning:[/yellow] {escape(message)}", markup=True, highlight=False),
        )
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None, err: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    err = err or Console(stderr=True)

    try:
        return _dispatch(args, err)
    except (SidebarCliError, ValueError) as exc:
        err.print(f"[red]Error:[/red] {escape(str(exc))}", markup=True, highlight=False)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entry point for IndexBridge administrative commands."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from indexbridge import __version__
from indexbridge.models.query import QueryDescriptor

if TYPE_CHECKING:
    from indexbridge.config.settings import Settings


class _NamedIndex:
    """Bare index reference for commands that take a model."""

    def __init__(self, name: str) -> None:
        self.name = name

    def searchable_as(self) -> str:
        return self.name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indexbridge",
        description="IndexBridge — search index administration",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"IndexBridge {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    flush = commands.add_parser("flush", help="Delete an entire index")
    flush.add_argument("index", help="Index name (before prefixing)")
    flush.add_argument("--yes", action="store_true", help="Confirm the deletion")

    ids = commands.add_parser("ids", help="Print matching document identifiers")
    ids.add_argument("index", help="Index name (before prefixing)")
    ids.add_argument("--query", "-q", default="", help="Free-text term")
    ids.add_argument(
        "--where",
        "-w",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Equality filter (repeatable)",
    )
    ids.add_argument(
        "--sort",
        "-s",
        action="append",
        default=[],
        metavar="COLUMN[:asc|desc]",
        help="Sort clause (repeatable, most significant first)",
    )
    ids.add_argument("--limit", "-n", type=int, default=None, help="Maximum number of identifiers")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    from indexbridge.config.settings import Settings
    from indexbridge.observability.logging import setup_logging

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    if args.command == "flush" and not args.yes:
        print(
            f"Refusing to delete index '{args.index}' without --yes.",
            file=sys.stderr,
        )
        sys.exit(2)

    try:
        descriptor = _descriptor_from_args(args) if args.command == "ids" else None
    except ValueError as e:
        parser.error(str(e))

    for line in asyncio.run(_run(args, settings, descriptor)):
        print(line)


async def _run(args: argparse.Namespace, settings: Settings, descriptor: QueryDescriptor | None) -> list[str]:
    from indexbridge.adapters.opensearch import OpenSearchIndexAdapter, create_client

    client = create_client(settings.engine)
    try:
        adapter = OpenSearchIndexAdapter(client, settings.search)
        if args.command == "flush":
            await adapter.flush(_NamedIndex(args.index))
            return [f"Deleted index '{args.index}'."]
        if descriptor is None:
            raise ValueError("ids command requires a query descriptor")
        return await adapter.keys(descriptor)
    finally:
        await client.close()


def _descriptor_from_args(args: argparse.Namespace) -> QueryDescriptor:
    """Build a query descriptor from ``ids`` arguments.

    Raises:
        ValueError: On a malformed ``--where``, ``--sort`` or ``--limit``.
    """
    descriptor = QueryDescriptor(query=args.query, index=args.index)

    for raw in args.where:
        field, sep, value = raw.partition("=")
        if not sep or not field:
            raise ValueError(f"--where expects FIELD=VALUE, got '{raw}'")
        descriptor.where(field, value)

    for raw in args.sort:
        column, _, direction = raw.partition(":")
        direction = direction.lower() or "asc"
        if not column or direction not in ("asc", "desc"):
            raise ValueError(f"--sort expects COLUMN[:asc|desc], got '{raw}'")
        descriptor.order_by(column, direction)

    if args.limit is not None:
        descriptor.take(args.limit)

    return descriptor


if __name__ == "__main__":
    main()

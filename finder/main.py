"""element-finder CLI.

    element-finder find --tree dump.json --by text "Sign in"
    element-finder find --url http://localhost:8100/source --by id login_button --all
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from finder.config import FinderConfig
from finder.models import InvalidLocatorError, LocatorKind, NoSuchElementError, TreeSourceError
from finder.search.engine import ElementFinder
from finder.sources import BaseTreeSource
from finder.sources.file import FileTreeSource
from finder.sources.remote import HttpTreeSource

logger = logging.getLogger("element-finder")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_ERROR = 2

_BY_CHOICES = {
    "id": LocatorKind.ID,
    "text": LocatorKind.TEXT,
    "partial-text": LocatorKind.PARTIAL_TEXT,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="element-finder",
        description="Find elements in a UI hierarchy dump",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command")

    find = sub.add_parser("find", help="Find one element (or all with --all)")
    source = find.add_mutually_exclusive_group(required=True)
    source.add_argument("--tree", help="Path to a JSON hierarchy dump")
    source.add_argument("--url", help="URL returning a JSON hierarchy dump")
    find.add_argument("--by", choices=sorted(_BY_CHOICES), default="id", help="Locator kind (default: id)")
    find.add_argument("value", help="Id ($literal, #123, or resource name) or text to find")
    find.add_argument("--all", action="store_true", help="Return every match instead of the first")
    find.add_argument("--resources", help="JSON resource table ({group: {name: id}})")
    find.add_argument("--timeout", type=float, default=None, help="Seconds to keep polling")
    find.add_argument("--interval", type=float, default=None, help="Seconds between polls")
    return parser


def _make_source(args: argparse.Namespace, config: FinderConfig) -> BaseTreeSource:
    if args.tree:
        return FileTreeSource(args.tree)
    return HttpTreeSource(args.url, timeout=config.http_timeout)


def run_find(args: argparse.Namespace) -> int:
    config = FinderConfig.from_user_config(
        timeout=args.timeout,
        poll_interval=args.interval,
        resources_file=args.resources,
    )
    try:
        resolver = config.make_resolver()
    except (OSError, ValueError) as e:
        print(f"Error: cannot load resources: {e}", file=sys.stderr)
        return EXIT_ERROR

    finder = ElementFinder(resolver, config.make_wait())
    source = _make_source(args, config)
    kind = _BY_CHOICES[args.by]

    try:
        if args.all:
            nodes = finder.find_all(kind, args.value, source.scope())
            print(json.dumps([n.summary() for n in nodes], indent=2))
        else:
            node = finder.find_one(kind, args.value, source.scope())
            print(json.dumps(node.summary(), indent=2))
    except NoSuchElementError as e:
        print(f"Not found: {e.message}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except (TreeSourceError, InvalidLocatorError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    finally:
        if isinstance(source, HttpTreeSource):
            source.close()

    logger.debug("Took %d snapshots from %r", source.snapshots_taken, source)
    return EXIT_OK


def cli(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.command == "find":
        return run_find(args)

    parser.print_help()
    return EXIT_ERROR


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()

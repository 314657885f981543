"""Command line interface: query a menu location in a YAML site file."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from menu_query.load_config import load_config
from menu_query.menu_request import MenuRequest
from menu_query.page_context import PageContext
from menu_query.query_report import QueryReport
from menu_query.yaml_menu_source import YamlMenuSource


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(
        prog="menu-query",
        description="Query the menu items attached to a menu location.",
    )
    parser.add_argument("site", type=Path, help="YAML file describing the menus")
    parser.add_argument("--location", default="", help="Menu location to query")
    parser.add_argument(
        "--parent",
        default=None,
        help="Menu item id or URL whose children should be listed",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="Only keep items with this URL (repeatable)",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Drop items with this URL (repeatable)",
    )
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--limit-children", type=int, default=None)
    parser.add_argument("--offset", type=int, default=None)
    parser.add_argument(
        "--current-url",
        default=None,
        help="URL of the page being viewed, for current item detection",
    )
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--report", help="Write a JSON report to this path")
    parser.add_argument("--verbose", action="store_true", help="Log debug output")
    return parser.parse_args(argv)


def build_query_args(args: argparse.Namespace) -> dict[str, Any]:
    """Turn command line options into query options, skipping unset ones."""
    query_args: dict[str, Any] = {"location": args.location}
    if args.parent is not None:
        parent = args.parent
        query_args["parent"] = int(parent) if parent.isdigit() else parent
    if args.include:
        query_args["include"] = args.include
    if args.exclude:
        query_args["exclude"] = args.exclude
    if args.limit is not None:
        query_args["limit"] = args.limit
    if args.limit_children is not None:
        query_args["limit_children"] = args.limit_children
    if args.offset is not None:
        query_args["offset"] = args.offset
    return query_args


def main(argv: list[str] | None = None) -> int:
    """Run one query and print its items as JSON lines."""
    args = parse_args(argv)
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else str(config.get("log_level", "WARNING"))
    logging.basicConfig(
        level=level.upper(), format="%(levelname)s %(name)s: %(message)s"
    )

    site = config["site"]
    current_url = site["current_url"]
    if args.current_url is not None:
        current_url = args.current_url
    context = PageContext(home=site["home_url"], current_url=current_url)
    request = MenuRequest(
        YamlMenuSource.from_file(args.site),
        context,
        defaults=config.get("query_defaults") or {},
    )

    query = request.query(**build_query_args(args))
    while query.have_items():
        item = query.the_item()
        print(json.dumps(asdict(item), default=str))

    if args.report:
        report = QueryReport()
        report.add_query(query)
        report.generate_report(args.report)

    return 1 if query.diagnostics.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())

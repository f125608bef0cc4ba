#!/usr/bin/env python3
"""
CLI for breach-query - run a query chain from the shell

Usage:
  breach-query --verified --sort=-PwnCount --pluck Name --pluck PwnCount --limit 10
  breach-query --domain "" --no-sensitive --data-class names --data-class job-titles
  breach-query --profile hibp --name Adobe --name LinkedIn
  breach-query --file breaches.json --no-validate --any-domain
  breach-query --file breaches.json --sort PwnCount --direction desc

Filters are applied in a fixed order (name, domain, flags, data classes),
then sort, then pluck. Output is a JSON array on stdout.
"""

from __future__ import annotations

import argparse
import json
import locale
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import yaml

from breach_query import configure_logging
from breach_query.adapters.http_provider import TransportError
from breach_query.adapters.static_provider import StaticBreachProvider
from breach_query.config.loader import ConfigLoader
from breach_query.pipeline.collection import BreachCollection
from breach_query.pipeline.loader import BreachLoader
from breach_query.validation.schema_validator import ValidationError

logger = logging.getLogger(__name__)

# CLI option -> collection method
FLAG_OPTIONS = {
    "verified": "is_verified",
    "fabricated": "is_fabricated",
    "sensitive": "is_sensitive",
    "retired": "is_retired",
    "spam_list": "is_spam_list",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="breach-query",
        description="Query the public breach list with chained filters",
    )
    source = parser.add_argument_group("source")
    source.add_argument("--config", help="YAML config file")
    source.add_argument("--profile", help="Profile under config/profiles/")
    source.add_argument(
        "--base-path", default=".", help="Base path for config and profiles"
    )
    source.add_argument("--endpoint", help="Override the configured endpoint path")
    source.add_argument("--file", help="Read breaches from a JSON file instead of HTTP")
    source.add_argument(
        "--no-validate", action="store_true", help="Skip schema validation"
    )

    query = parser.add_argument_group("query")
    query.add_argument("--name", action="append", default=[], help="Breach name (repeatable)")
    domain = query.add_mutually_exclusive_group()
    domain.add_argument("--domain", help='Exact domain ("" for breaches without one)')
    domain.add_argument(
        "--any-domain", action="store_true", help="Only breaches with a domain"
    )
    query.add_argument(
        "--data-class", action="append", default=[], help="Required data class (repeatable)"
    )
    for option in FLAG_OPTIONS:
        query.add_argument(
            f"--{option.replace('_', '-')}",
            dest=option,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Filter on Is{option.title().replace('_', '')}",
        )
    query.add_argument(
        "--sort", help='Sort key; "-" prefix (as --sort=-PwnCount) forces descending'
    )
    query.add_argument(
        "--direction",
        choices=["asc", "desc"],
        default="asc",
        help="Sort direction (default: asc)",
    )
    query.add_argument("--pluck", action="append", default=[], help="Field to keep (repeatable)")
    query.add_argument("--limit", type=int, default=None, help="Max breaches to print")

    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _json_default(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def run_query(collection: BreachCollection, args: argparse.Namespace) -> List[Any]:
    """Apply the options in args to a loaded collection."""
    if args.name:
        collection.by_name(args.name)
    if args.domain is not None:
        collection.by_domain(args.domain)
    elif args.any_domain:
        collection.by_domain()
    for option, method in FLAG_OPTIONS.items():
        expected = getattr(args, option)
        if expected is not None:
            getattr(collection, method)(expected)
    if args.data_class:
        collection.by_data_class(args.data_class)
    if args.sort:
        collection.sort(args.sort, args.direction)
    if args.pluck:
        collection.pluck(args.pluck)
    return collection.breaches(args.limit)


def _use_system_collation() -> None:
    """Collate strings by the user's locale (LC_COLLATE) rather than C."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Keeping C collation; system locale unavailable: {e}")


def _open_collection(args: argparse.Namespace) -> BreachCollection:
    """Build an unloaded collection from the source options."""
    config = ConfigLoader(base_path=Path(args.base_path)).load(args.config, args.profile)
    if args.no_validate:
        config.loader.validate_schema = False

    provider = StaticBreachProvider.from_file(args.file) if args.file else None
    return BreachCollection(config, loader=BreachLoader(config, provider=provider))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    _use_system_collation()

    try:
        collection = _open_collection(args)
    except (OSError, yaml.YAMLError, ValueError) as e:
        # unreadable or malformed config, profile or --file input
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        collection.load(args.endpoint)
        result = run_query(collection, args)
    except (TransportError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2, default=_json_default))
    return 0


if __name__ == "__main__":
    sys.exit(main())

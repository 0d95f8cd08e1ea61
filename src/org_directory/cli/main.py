"""Main CLI entry point for the organization directory."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..core.connectors import ConnectorFactory
from ..core.facets import apply_filters, build_vocabulary, check_state, reset_selection, toggle_selection
from ..core.models import CheckState, FacetKey, FacetNode, FacetVocabulary, FilterSelection, YearRange

# CLI option name -> facet
FACET_OPTIONS = {
    "type": FacetKey.TYPE,
    "area": FacetKey.AREAS,
    "status": FacetKey.STATUS,
    "visibility": FacetKey.VISIBILITY,
    "tag": FacetKey.TAGS,
}


def _create_connector(args):
    if args.source == 'json':
        if not args.input:
            raise ValueError("--input is required with --source json")
        return ConnectorFactory.create('json', path=args.input)

    api_key = os.environ.get(args.api_key_env) if args.api_key_env else None
    return ConnectorFactory.create(
        'supabase',
        base_url=args.supabase_url,
        api_key=api_key,
        table=args.table,
        timeout=args.timeout,
        max_retries=args.max_retries,
    )


def _write_output(text: str, output: Optional[Path]) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding='utf-8')
        print(f"Output saved to: {output}")
    else:
        print(text)


def _render_tree(nodes: List[FacetNode], depth: int = 1) -> List[str]:
    lines = []
    for node in nodes:
        lines.append(f"{'  ' * depth}- {node.name}")
        lines.extend(_render_tree(node.children, depth + 1))
    return lines


def render_vocabulary(vocabulary: FacetVocabulary) -> str:
    """Plain-text listing of every filterable value."""
    lines = []
    for facet in FacetKey:
        lines.append(f"{facet.value}:")
        lines.extend(_render_tree(vocabulary.nodes(facet)) or ["  (none)"])
    bounds = vocabulary.year_bounds
    lines.append(f"Founded: {bounds.start}-{bounds.end}")
    return "\n".join(lines)


def build_selection(args, vocabulary: FacetVocabulary) -> FilterSelection:
    """Selection from CLI options; branch values select their descendants."""
    selection = reset_selection(vocabulary)
    for option, facet in FACET_OPTIONS.items():
        for value in getattr(args, option) or []:
            if check_state(vocabulary, selection, facet, value) is not CheckState.CHECKED:
                selection = toggle_selection(selection, vocabulary, facet, value, propagate=True)

    if args.search:
        selection = selection.with_search(args.search)
    if args.year_min is not None or args.year_max is not None:
        bounds = vocabulary.year_bounds
        selection = selection.with_year_range(YearRange(
            start=args.year_min if args.year_min is not None else bounds.start,
            end=args.year_max if args.year_max is not None else bounds.end,
        ))
    return selection


def vocabulary_command(args):
    """Print every filterable value of the directory."""
    try:
        organizations = _create_connector(args).fetch_all_organizations()
        vocabulary = build_vocabulary(organizations)
        if args.format == 'json':
            text = json.dumps(
                {
                    "facets": vocabulary.as_options(),
                    "year_bounds": [vocabulary.year_bounds.start, vocabulary.year_bounds.end],
                },
                indent=2,
                ensure_ascii=False,
            )
        else:
            text = render_vocabulary(vocabulary)
        _write_output(text, args.output)
    except Exception as e:
        print(f"Error building vocabulary: {e}", file=sys.stderr)
        sys.exit(1)


def filter_command(args):
    """Print the organizations matching the given filters."""
    try:
        organizations = _create_connector(args).fetch_all_organizations()
        vocabulary = build_vocabulary(organizations)
        selection = build_selection(args, vocabulary)
        results = apply_filters(organizations, selection)
        logging.getLogger(__name__).info(
            "%d of %d organizations match (%d active filters)",
            len(results), len(organizations), selection.active_count,
        )
        if args.format == 'json':
            text = json.dumps(
                [r.model_dump(mode='json', exclude_none=True) for r in results],
                indent=2,
                ensure_ascii=False,
            )
        else:
            text = "\n".join(r.name or "" for r in results)
        _write_output(text, args.output)
    except Exception as e:
        print(f"Error filtering organizations: {e}", file=sys.stderr)
        sys.exit(1)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=ConnectorFactory.get_available_connectors(),
        default="supabase",
        help="Where to read organization records from",
    )
    parser.add_argument("--input", type=Path, help="JSON export (only used with --source json)")
    parser.add_argument(
        "--supabase-url",
        type=str,
        default=os.environ.get("SUPABASE_URL"),
        help="Supabase project URL (defaults to $SUPABASE_URL)",
    )
    parser.add_argument(
        "--api-key-env",
        type=str,
        default="SUPABASE_ANON_KEY",
        help="Environment variable that holds the Supabase API key",
    )
    parser.add_argument("--table", type=str, default="organizations", help="Organizations table name")
    parser.add_argument("--timeout", type=float, default=30.0, help="Request timeout in seconds")
    parser.add_argument("--max-retries", type=int, default=3, help="Retries for failed requests")
    parser.add_argument("--output", type=Path, help="Output file")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="org-directory",
        description="Browse and filter the organization directory"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"org-directory {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Vocabulary command
    vocabulary_parser = subparsers.add_parser("vocabulary", help="List every filterable value")
    _add_source_arguments(vocabulary_parser)
    vocabulary_parser.set_defaults(func=vocabulary_command)

    # Filter command
    filter_parser = subparsers.add_parser("filter", help="List organizations matching filters")
    _add_source_arguments(filter_parser)
    filter_parser.add_argument("--type", action="append", help="Type value, e.g. 'NGO' or 'NGO/Medical'")
    filter_parser.add_argument("--area", action="append", help="Area of operation, e.g. 'Sudan/Khartoum'")
    filter_parser.add_argument("--status", action="append", help="Status value")
    filter_parser.add_argument("--visibility", action="append", help="Visibility value")
    filter_parser.add_argument("--tag", action="append", help="Tag value")
    filter_parser.add_argument("--search", type=str, default="", help="Free-text search term")
    filter_parser.add_argument("--year-min", type=int, help="Earliest founding year")
    filter_parser.add_argument("--year-max", type=int, help="Latest founding year")
    filter_parser.set_defaults(func=filter_command)

    # Parse arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    # Execute command
    args.func(args)


if __name__ == "__main__":
    main()

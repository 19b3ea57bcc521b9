"""
citegraph.commands.load - Load a citation dataset and summarize it.
"""

import argparse
import json
import sys

from citegraph.config import get_config, merge_configs
from citegraph.graph import EdgeKind, NodeKind
from citegraph.graph.factory import LoadResult, load_citation_file


def run(args: argparse.Namespace) -> int:
    """Run the load command."""
    if not args.path.is_file():
        print(f"Error: file not found: {args.path}", file=sys.stderr)
        return 1

    config = get_config(args.config)
    overrides: dict = {}
    if args.merge_satellites:
        overrides["graph"] = {"merge_equal_satellites": True}
    if args.strict:
        overrides["parser"] = {"on_malformed": "raise"}
    config = merge_configs(config, overrides)

    progress = _print_progress if args.verbose else None
    result = load_citation_file(
        args.path,
        config=config,
        max_records=args.max_records,
        progress=progress,
    )

    if args.verbose:
        _print_diagnostics(result)

    if args.json:
        print(json.dumps(_summary(result), indent=2))
    else:
        _print_summary(result)
    return 0


def _summary(result: LoadResult) -> dict:
    data = result.summary()
    graph = result.graph
    data["vertices"] = {kind.value: graph.node_count(kind) for kind in NodeKind}
    data["edges"] = {kind.value: graph.edge_count(kind) for kind in EdgeKind}
    return data


def _print_summary(result: LoadResult) -> None:
    data = _summary(result)
    print(f"Records sealed:      {data['records_sealed']} of {data['records_started']}")
    print(f"Citations resolved:  {data['citations_resolved']} of {data['deferred_references']}")
    print(f"Lines skipped:       {data['malformed_lines']}")
    if data["stopped_at_cap"]:
        print("Stopped at record limit")
    print("Vertices:")
    for kind, count in data["vertices"].items():
        print(f"  {kind:<16} {count}")
    print("Edges:")
    for kind, count in data["edges"].items():
        if count:
            print(f"  {kind:<16} {count}")


def _print_progress(count: int) -> None:
    print(f"  ... {count} records", file=sys.stderr)


def _print_diagnostics(result: LoadResult) -> None:
    for diagnostic in (*result.malformed, *result.duplicates, *result.unresolved):
        print(f"warning: {diagnostic}", file=sys.stderr)

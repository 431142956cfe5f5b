"""``switchyard routes`` — print the route table in dispatch order."""

import argparse
import sys

from switchyard.cli._resolve import ResolveError, resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print one line per layer: index, method, anchor, handler."""
    try:
        app = resolve_app(args.app)
    except ResolveError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    lines = app.router.table.describe()
    if not lines:
        print("No layers registered.")
        return

    for line in lines:
        print(line)

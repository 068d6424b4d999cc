"""``wren routes``: list registered routes.

Routes print in registration order, which is also the order the
dispatcher tries them in.
"""

import argparse
import sys

from wren.cli._load import load_app
from wren.errors import ConfigurationError


def format_routes(rows: list[tuple[str, str, str]]) -> list[str]:
    """Lay out ``(method, pattern, handlers)`` rows as an aligned table."""
    max_method = max([len(r[0]) for r in rows] + [6])  # "METHOD" header
    max_path = max([len(r[1]) for r in rows] + [7])  # "PATTERN" header
    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATTERN", "HANDLERS")]
    sep_len = max_method + max_path + 4 + max((len(r[2]) for r in rows), default=8)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """Resolve ``args.app``, freeze it, and print its route table."""
    app = load_app(args.app)
    try:
        table = app.routes
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(table):
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for entry in table.entries():
        handlers = " -> ".join(entry.handler_names)
        if entry.name:
            handlers = f"{handlers} ({entry.name})"
        rows.append((entry.method, entry.path, handlers))

    for line in format_routes(rows):
        print(line)

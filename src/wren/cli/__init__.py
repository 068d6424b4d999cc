"""Wren CLI: inspect a route table and dispatch requests in-process.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren: an HTTP request dispatcher with handler chains.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for wren loggers (default: the app's config.log_level)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren routes ------------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes in order")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- wren request -----------------------------------------------------
    request_parser = subparsers.add_parser(
        "request", help="Dispatch one request in-process and print the response"
    )
    request_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    request_parser.add_argument("path", help="Request path, optionally with ?query")
    request_parser.add_argument("-X", "--method", default="GET", help="HTTP method (default GET)")
    request_parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Request header; may be repeated",
    )
    request_parser.add_argument(
        "-i",
        "--include",
        action="store_true",
        help="Print the status line and headers before the body",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from wren.cli._routes import run_routes

        run_routes(args)
    elif args.command == "request":
        from wren.cli._request import run_request

        run_request(args)

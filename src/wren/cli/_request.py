"""``wren request``: dispatch a single request without a server.

Runs the app's dispatcher under ``anyio`` and prints the response body,
which makes it easy to check a route chain from a shell.
"""

import argparse
import sys

import anyio

from wren.cli._load import load_app
from wren.errors import WrenError
from wren.logs import configure_logging


def _parse_headers(values: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            print(f"Error: malformed header {raw!r}, expected NAME:VALUE", file=sys.stderr)
            raise SystemExit(2)
        headers[name.strip()] = value.strip()
    return headers


def run_request(args: argparse.Namespace) -> None:
    """Dispatch ``args.method args.path`` through ``args.app`` and print the result."""
    app = load_app(args.app)
    configure_logging(args.log_level or app.config.log_level)
    headers = _parse_headers(args.header)

    async def _run():
        await app.startup()
        try:
            return await app.dispatch(args.method, args.path, headers=headers)
        finally:
            await app.shutdown()

    try:
        response = anyio.run(_run)
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.include:
        print(f"{response.status} {response.content_type}")
        for name, value in response.headers:
            print(f"{name}: {value}")
        print()
    print(response.text)

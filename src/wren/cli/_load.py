"""Locate the App a CLI command operates on.

``wren routes`` and ``wren request`` both take an ``APP`` argument of the
form ``module[:attribute]``.
"""

import importlib
import sys
from typing import NoReturn

from wren.app import App
from wren.errors import ConfigurationError


def _fail(message: str, cause: BaseException | None = None) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    raise SystemExit(1) from cause


def load_app(target: str) -> App:
    """Import *target* and return the wren App it names.

    The attribute defaults to ``app``. If it names a callable that is
    not an App, it is called with no arguments and must return one.
    Problems are reported on stderr and end the command with status 1.
    """
    module_name, _, attr = target.partition(":")
    attr = attr or "app"

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        _fail(f"cannot import {module_name!r} ({exc})", exc)
    except ConfigurationError as exc:
        _fail(f"{module_name!r} failed to configure its app: {exc}", exc)

    obj = getattr(module, attr, None)
    if obj is None:
        _fail(f"module {module_name!r} has no attribute {attr!r}")

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj()
        except (ConfigurationError, TypeError) as exc:
            _fail(f"factory {target!r} failed: {exc}", exc)

    if not isinstance(obj, App):
        _fail(f"{target!r} is a {type(obj).__name__}, not a wren App")
    return obj

"""Logger names and CLI logging setup.

The library only ever talks to named loggers; it never touches the root
logger on import. ``configure_logging`` is for entry points (the CLI)
that own the process.
"""

import logging
import sys

dispatch_logger = logging.getLogger("wren.dispatch")
"""Routing decisions (matched route, fallback, error channel). Debug level."""

access_logger = logging.getLogger("wren.access")
"""One record per request: method, path, status, elapsed milliseconds."""

error_logger = logging.getLogger("wren.errors")
"""Error-channel values and exceptions raised by handlers."""

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """Attach a stderr handler to the ``wren`` logger.

    Idempotent: calling it twice does not duplicate output.
    """
    logger = logging.getLogger("wren")
    logger.setLevel(level.upper())
    if any(getattr(h, "_wren_cli", False) for h in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._wren_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

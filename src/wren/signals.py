"""Continuation signals: what a handler tells the chain executor.

Every handler ends in exactly one of three signals:

- ``Continue``: run the next handler in the chain.
- ``Responded(response)``: a response is final; nothing else runs.
- ``Error(value)``: abandon the chain and every unattempted route and
  hand *value* to the error channel.

Handlers rarely build these directly. Calling ``next()`` produces
``Continue``, ``next(value)`` produces ``Error``, and returning a
``Response`` or a string is read as ``Responded``.
"""

from dataclasses import dataclass
from typing import Any, TypeAlias

from wren.http.response import Response


@dataclass(frozen=True, slots=True)
class Continue:
    """Proceed to the next handler."""


CONTINUE = Continue()


@dataclass(frozen=True, slots=True)
class Responded:
    """The handler produced the final response."""

    response: Response


@dataclass(frozen=True, slots=True)
class Error:
    """The handler routed *value* to the error channel."""

    value: Any


Signal: TypeAlias = Continue | Responded | Error

# What a complete route chain resolves to
Outcome: TypeAlias = Responded | Error

"""Wren exception hierarchy.

Shared across the route table, chain executor, dispatcher, and app so
every module raises and catches the same types.

Two families matter at request time:

- ``HTTPError`` and friends are *request* errors. A handler may raise
  one; the executor turns it into an ``Error`` signal and the error
  channel renders it.
- ``ChainError`` subclasses are *programming* faults. They are never
  converted into a response and always propagate out of the dispatcher.
"""

from dataclasses import dataclass


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when the app or route table is misconfigured.

    Always raised at startup, while routes are being registered or the
    app is freezing, never while a request is in flight.
    """


class ChainError(WrenError):
    """A handler chain broke its contract at request time."""


class UnhandledChain(ChainError):  # noqa: N818
    """Every handler in a chain continued and none produced a response."""

    def __init__(self, method: str, path: str, pattern: str) -> None:
        self.method = method
        self.path = path
        self.pattern = pattern
        super().__init__(
            f"Chain for {method} {pattern!r} finished without responding or erroring "
            f"(request path {path!r}). The last handler must return a response."
        )


class ContinuationReused(ChainError):  # noqa: N818
    """A handler invoked its ``next`` capability more than once."""


class HandlerContractError(ChainError):
    """A handler returned something that is not a continuation signal."""


@dataclass(frozen=True, slots=True)
class HTTPError(WrenError):
    """An error that carries an HTTP status code.

    Handlers may raise these instead of calling ``next(value)``; both
    end up on the error channel.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return self.detail
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: raised by handlers that cannot find the addressed resource."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)

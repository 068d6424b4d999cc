"""Route table and its builder.

Routes are registered on a ``RouteTableBuilder`` during setup and frozen
into an immutable ``RouteTable`` before the first request. The table is
a plain ordered tuple: registration order is the only tie-break, and no
pattern is ever ranked above another for being more specific.
"""

from collections.abc import Callable, Iterator

from wren._internal.types import Handler
from wren.errors import ConfigurationError
from wren.routing.matcher import parse_pattern
from wren.routing.route import RouteEntry


class RouteTable:
    """Ordered, immutable sequence of ``RouteEntry``.

    Safe to share across concurrent dispatches without locking: nothing
    mutates it after construction.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: tuple[RouteEntry, ...] = ()) -> None:
        self._entries = tuple(entries)

    def entries(self) -> tuple[RouteEntry, ...]:
        """Return the entries in registration order."""
        return self._entries

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        routes = ", ".join(f"{e.method} {e.path}" for e in self._entries)
        return f"RouteTable([{routes}])"


class RouteTableBuilder:
    """Collects route registrations, then freezes them into a ``RouteTable``.

    Usage::

        builder = RouteTableBuilder()
        builder.register("GET", "/hello", say_hello)
        builder.register("GET", "/states/:abbreviation", check_length, describe_state)
        table = builder.build()
    """

    __slots__ = ("_built", "_entries")

    def __init__(self) -> None:
        self._entries: list[RouteEntry] = []
        self._built = False

    def register(
        self,
        method: str,
        pattern: str,
        *handlers: Handler,
        name: str | None = None,
    ) -> RouteEntry:
        """Append a route. Must be called before ``build()``.

        Raises ``ConfigurationError`` if the pattern is malformed or
        repeats a parameter name, if no handler is given, or if a
        handler is not callable.
        """
        if self._built:
            msg = "Cannot register routes after the route table has been built."
            raise ConfigurationError(msg)
        if not method or not method.isalpha():
            msg = f"Invalid HTTP method {method!r} for route {pattern!r}."
            raise ConfigurationError(msg)
        if not handlers:
            msg = f"Route {method.upper()} {pattern!r} needs at least one handler."
            raise ConfigurationError(msg)
        for handler in handlers:
            _check_callable(handler, method, pattern)

        entry = RouteEntry(
            method=method.upper(),
            pattern=parse_pattern(pattern),
            handlers=tuple(handlers),
            name=name,
        )
        self._entries.append(entry)
        return entry

    def build(self) -> RouteTable:
        """Freeze the builder and return the finished table."""
        self._built = True
        return RouteTable(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


def _check_callable(handler: Callable[..., object], method: str, pattern: str) -> None:
    if not callable(handler):
        msg = (
            f"Handler {handler!r} for route {method.upper()} {pattern!r} is not callable."
        )
        raise ConfigurationError(msg)

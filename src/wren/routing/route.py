"""Route pattern, entry, and match frozen dataclasses."""

from dataclasses import dataclass

from wren._internal.types import Handler


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:  ``/users``   (is_param=False, value="users")
    Param:    ``/:id``     (is_param=True, value="id")
    """

    value: str
    is_param: bool = False

    def __str__(self) -> str:
        return f":{self.value}" if self.is_param else self.value


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A parsed route pattern. Parameter names are unique within one pattern."""

    source: str
    segments: tuple[PathSegment, ...]

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.value for seg in self.segments if seg.is_param)

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A registered route: one method, one pattern, an ordered handler chain.

    Created while the route table is being built; never mutated after.
    """

    method: str
    pattern: RoutePattern
    handlers: tuple[Handler, ...]
    name: str | None = None

    @property
    def path(self) -> str:
        """The pattern as it was registered (e.g. ``/say/:greeting``)."""
        return self.pattern.source

    @property
    def handler_names(self) -> tuple[str, ...]:
        return tuple(getattr(h, "__name__", repr(h)) for h in self.handlers)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful table lookup."""

    entry: RouteEntry
    params: dict[str, str]

"""Segment-wise path matching.

Patterns and paths are split on ``/`` and compared position by
position. A literal segment must equal the path segment; a ``:name``
segment matches anything and binds the raw segment text. Segment counts
must agree exactly: there are no optional or wildcard segments, so
matching is O(segments) with no backtracking.
"""

from wren.errors import ConfigurationError
from wren.routing.route import PathSegment, RoutePattern


def split_path(path: str, *, strict_slashes: bool = False) -> list[str]:
    """Split a path into segments.

    The leading ``/`` is not a segment. Unless *strict_slashes* is set,
    one trailing ``/`` is dropped too, so ``/hello/`` splits like
    ``/hello``. Every other empty segment is kept (``/a//b`` has three).

    Examples::

        "/"              -> []
        "/hello"         -> ["hello"]
        "/say/goodbye"   -> ["say", "goodbye"]
        "/hello/"        -> ["hello"]          (["hello", ""] when strict)
    """
    if path.startswith("/"):
        path = path[1:]
    if not strict_slashes and path.endswith("/"):
        path = path[:-1]
    if not path:
        return []
    return path.split("/")


def parse_pattern(pattern: str) -> RoutePattern:
    """Parse a route pattern string.

    Examples::

        "/hello"               -> [PathSegment("hello")]
        "/say/:greeting"       -> [PathSegment("say"), PathSegment("greeting", is_param=True)]

    Raises ``ConfigurationError`` for a pattern that does not start with
    ``/``, an unnamed parameter (``/:``), or a repeated parameter name.
    """
    if not pattern.startswith("/"):
        msg = f"Route pattern {pattern!r} must start with '/'."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in split_path(pattern, strict_slashes=True):
        if not part.startswith(":"):
            segments.append(PathSegment(part))
            continue
        name = part[1:]
        if not name:
            msg = f"Route pattern {pattern!r} has a parameter with no name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route pattern {pattern!r} repeats the parameter name {name!r}."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(PathSegment(name, is_param=True))
    return RoutePattern(source=pattern, segments=tuple(segments))


def match(
    pattern: RoutePattern,
    path: str,
    *,
    strict_slashes: bool = False,
) -> dict[str, str] | None:
    """Match *path* against *pattern*.

    Returns the bound parameters (possibly empty) on a match and
    ``None`` otherwise. Values are the raw path segments: no decoding,
    no type conversion. An empty segment never binds a parameter.
    """
    parts = split_path(path, strict_slashes=strict_slashes)
    if len(parts) != len(pattern.segments):
        return None

    params: dict[str, str] = {}
    for seg, part in zip(pattern.segments, parts, strict=True):
        if seg.is_param:
            # A parameter needs at least one character to bind
            if not part:
                return None
            params[seg.value] = part
        elif seg.value != part:
            return None
    return params

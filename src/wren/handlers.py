"""Terminal handlers: the error channel and the not-found fallback.

Both always finalize a response and never receive a ``next``. The
dispatcher owns one of each, handed in at construction time.

User callables are wrapped the same way route handlers are: sync or
async, and the return value is coerced to a ``Response``.
"""

from typing import Any

from wren._internal.invoke import invoke
from wren._internal.types import ErrorHandler, FallbackFunc
from wren.context import RequestContext
from wren.errors import HandlerContractError, HTTPError
from wren.http.response import Response
from wren.logs import error_logger


def to_response(value: Any, *, status: int = 200, source: str = "handler") -> Response:
    """Convert a terminal handler's return value to a Response.

    1. ``Response``  -> pass through
    2. ``str``       -> *status*, text/html
    3. ``bytes``     -> *status*, application/octet-stream
    """
    match value:
        case Response():
            return value
        case str():
            return Response(body=value, status=status)
        case bytes():
            return Response(
                body=value, status=status, content_type="application/octet-stream"
            )
        case _:
            msg = f"{source} returned {type(value).__name__}; expected Response, str, or bytes."
            raise HandlerContractError(msg)


def render_error(value: Any) -> str:
    """Body text for an error value: the value itself, as text."""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class ErrorChannel:
    """The single place every ``Error`` signal ends up.

    Without a user callable, renders the error value itself as the
    response body. An ``HTTPError`` value keeps its own status.
    """

    __slots__ = ("_func", "status")

    def __init__(self, func: ErrorHandler | None = None, *, status: int = 200) -> None:
        self._func = func
        self.status = status

    async def handle(self, value: Any, ctx: RequestContext) -> Response:
        if isinstance(value, BaseException):
            error_logger.error(
                "%s %s -> %s",
                ctx.method,
                ctx.path,
                render_error(value),
                exc_info=value,
            )
        else:
            error_logger.error("%s %s -> %s", ctx.method, ctx.path, render_error(value))

        status = value.status if isinstance(value, HTTPError) else self.status
        if self._func is None:
            return Response(body=render_error(value), status=status)
        result = await invoke(self._func, value, ctx)
        return to_response(result, status=status, source="error handler")


class FallbackHandler:
    """Answers requests that no route matched.

    Without a user callable, renders *message* with the unmatched path
    substituted verbatim for ``{path}``.
    """

    __slots__ = ("_func", "message", "status")

    def __init__(
        self,
        func: FallbackFunc | None = None,
        *,
        status: int = 200,
        message: str = "The route {path} does not exist!",
    ) -> None:
        self._func = func
        self.status = status
        self.message = message

    async def handle(self, ctx: RequestContext) -> Response:
        if self._func is None:
            return Response(body=self.message.format(path=ctx.path), status=self.status)
        result = await invoke(self._func, ctx)
        return to_response(result, status=self.status, source="fallback handler")

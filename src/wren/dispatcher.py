"""Dispatcher: turns one request into exactly one response.

Per request::

    Matching -> Executing -> Responded
    Matching -> Exhausted -> Fallback -> Responded
    Executing -> Errored -> ErrorHandled -> Responded

Application middleware (``App.use``) runs first as a prefix chain with
the same signal rules. Then the route table is walked in registration
order; the first entry whose method and pattern match runs its chain.
An ``Error`` from either chain skips every remaining handler and every
unattempted route and goes straight to the error channel. If no entry
matches, the fallback answers.

Exactly one of {a chain's response, the error channel, the fallback}
produces the final response. Request-time errors never escape
``dispatch``; chain faults (``ChainError``) always do.
"""

import time
from collections.abc import Mapping, Sequence
from contextvars import Token

from wren._internal.types import Handler
from wren.chain import run_chain, run_handlers
from wren.context import RequestContext, request_var
from wren.errors import ChainError
from wren.handlers import ErrorChannel, FallbackHandler
from wren.http.headers import Headers
from wren.http.query import parse_query
from wren.http.response import Response
from wren.logs import access_logger, dispatch_logger, error_logger
from wren.routing.matcher import match
from wren.routing.route import RouteEntry, RouteMatch
from wren.routing.table import RouteTable
from wren.signals import Error, Outcome, Responded


def method_allows(entry: RouteEntry, method: str) -> bool:
    """Whether *entry* serves *method*. ``HEAD`` is served by ``GET`` routes."""
    return entry.method == method or (method == "HEAD" and entry.method == "GET")


class Dispatcher:
    """Routes requests through a frozen route table.

    Holds only immutable collaborators, so one instance serves any
    number of concurrent requests.
    """

    __slots__ = (
        "_access_log",
        "_error_channel",
        "_fallback",
        "_middleware",
        "_strict_slashes",
        "table",
    )

    def __init__(
        self,
        table: RouteTable,
        error_channel: ErrorChannel,
        fallback: FallbackHandler,
        *,
        middleware: Sequence[Handler] = (),
        strict_slashes: bool = False,
        access_log: bool = True,
    ) -> None:
        self.table = table
        self._error_channel = error_channel
        self._fallback = fallback
        self._middleware = tuple(middleware)
        self._strict_slashes = strict_slashes
        self._access_log = access_log

    def find_route(self, method: str, path: str) -> RouteMatch | None:
        """Return the first entry matching *method* and *path*, in registration order."""
        for entry in self.table:
            if not method_allows(entry, method):
                continue
            params = match(entry.pattern, path, strict_slashes=self._strict_slashes)
            if params is not None:
                return RouteMatch(entry=entry, params=params)
        return None

    async def dispatch(
        self,
        method: str,
        path: str,
        query: bytes | str = b"",
        headers: Headers | Mapping[str, str] | None = None,
    ) -> Response:
        """Dispatch one request and return its single response."""
        if not isinstance(headers, Headers):
            headers = Headers(headers)
        ctx = RequestContext(
            method=method.upper(),
            path=path,
            query=parse_query(query),
            headers=headers,
        )

        start = time.perf_counter()
        token: Token[RequestContext] = request_var.set(ctx)
        try:
            response = await self._dispatch(ctx)
        finally:
            request_var.reset(token)

        if self._access_log:
            elapsed_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %d %.3f ms - %d",
                ctx.method,
                ctx.url,
                response.status,
                elapsed_ms,
                len(response.body_bytes),
            )
        return response

    async def _dispatch(self, ctx: RequestContext) -> Response:
        try:
            if self._middleware:
                signal = await run_handlers(self._middleware, ctx)
                if isinstance(signal, Responded):
                    return signal.response
                if isinstance(signal, Error):
                    return await self._errored(signal, ctx)

            found = self.find_route(ctx.method, ctx.path)
            if found is None:
                dispatch_logger.debug("%s %s: no route matched", ctx.method, ctx.path)
                return await self._fallback.handle(ctx)

            dispatch_logger.debug(
                "%s %s matched %s %s", ctx.method, ctx.path, found.entry.method, found.entry.path
            )
            ctx.params = found.params
            outcome: Outcome = await run_chain(found.entry.handlers, ctx, pattern=found.entry.path)
            if isinstance(outcome, Error):
                return await self._errored(outcome, ctx)
            return outcome.response
        except ChainError:
            raise
        except Exception:
            # The error channel or fallback itself failed
            error_logger.exception("terminal handler failed for %s %s", ctx.method, ctx.path)
            return Response(body="Internal Server Error", status=500)

    async def _errored(self, signal: Error, ctx: RequestContext) -> Response:
        dispatch_logger.debug("%s %s: chain errored, using error channel", ctx.method, ctx.path)
        return await self._error_channel.handle(signal.value, ctx)

"""Wren application class.

Mutable during setup (route registration, middleware, error handler,
fallback). Frozen into an immutable route table and dispatcher when the
first request arrives.
"""

import inspect
import threading
from collections.abc import Callable, Mapping
from typing import Any

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.types import ErrorHandler, FallbackFunc, Handler
from wren.config import AppConfig
from wren.dispatcher import Dispatcher
from wren.errors import ConfigurationError
from wren.handlers import ErrorChannel, FallbackHandler
from wren.http.response import Response
from wren.routing.route import RouteEntry
from wren.routing.table import RouteTable, RouteTableBuilder
from wren.server.handler import handle_request


class App:
    """The wren application.

    Usage::

        app = App()

        def say_hello(ctx, next):
            name = ctx.query.get("name")
            return f"Hello, {name}!" if name else "Hello!"

        app.get("/hello", say_hello)

        @app.error
        def on_error(value, ctx):
            return str(value)

    Thread safety:
        The setup phase is single-threaded (registration at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread builds the route table, even if several ASGI workers
        deliver their first request at the same moment.
    """

    __slots__ = (
        "_builder",
        "_dispatcher",
        "_error_func",
        "_fallback_func",
        "_freeze_lock",
        "_frozen",
        "_middleware_list",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._builder = RouteTableBuilder()
        self._middleware_list: list[Handler] = []
        self._error_func: ErrorHandler | None = None
        self._fallback_func: FallbackFunc | None = None
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state: set during _freeze()
        self._dispatcher: Dispatcher | None = None

    # -- Route registration --

    def register(
        self,
        method: str,
        pattern: str,
        *handlers: Handler,
        name: str | None = None,
    ) -> RouteEntry:
        """Register a route with an ordered chain of handlers.

        Routes are tried in registration order; the first match wins.
        """
        self._check_not_frozen()
        return self._builder.register(method, pattern, *handlers, name=name)

    def get(self, pattern: str, *handlers: Handler, name: str | None = None) -> RouteEntry:
        """Register a ``GET`` route. Shorthand for ``register("GET", ...)``."""
        return self.register("GET", pattern, *handlers, name=name)

    def route(
        self,
        pattern: str,
        *,
        method: str = "GET",
        before: tuple[Handler, ...] = (),
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            pattern: Route pattern. Use ``:name`` for path parameters.
            method: HTTP method. Defaults to ``"GET"``.
            before: Handlers that run ahead of the decorated one, in order.
            name: Optional route name, shown by ``wren routes``.
        """

        def decorator(func: Handler) -> Handler:
            self.register(method, pattern, *before, func, name=name)
            return func

        return decorator

    # -- Middleware --

    def use(self, *handlers: Handler) -> None:
        """Add application middleware that runs before routing.

        Middleware has the route-handler shape ``(ctx, next)``. Returning
        ``next()`` lets the request continue to route matching.
        """
        self._check_not_frozen()
        if not handlers:
            msg = "use() needs at least one handler."
            raise ConfigurationError(msg)
        for handler in handlers:
            if not callable(handler):
                msg = f"Middleware {handler!r} is not callable."
                raise ConfigurationError(msg)
        self._middleware_list.extend(handlers)

    # -- Terminal handlers --

    def error(self, func: ErrorHandler) -> ErrorHandler:
        """Register the error channel handler via decorator.

        Called as ``func(value, ctx)`` at most once per request, with the
        value a handler passed to ``next(value)`` or the exception it raised.
        """
        self._check_not_frozen()
        if self._error_func is not None:
            msg = "An error handler is already registered; there is one error channel per app."
            raise ConfigurationError(msg)
        self._error_func = func
        return func

    def fallback(self, func: FallbackFunc) -> FallbackFunc:
        """Register the handler for requests no route matches.

        Called as ``func(ctx)``; ``ctx.path`` holds the unmatched path.
        """
        self._check_not_frozen()
        if self._fallback_func is not None:
            msg = "A fallback handler is already registered."
            raise ConfigurationError(msg)
        self._fallback_func = func
        return func

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Introspection --

    @property
    def routes(self) -> RouteTable:
        """The frozen route table. Freezes the app on first access."""
        return self.dispatcher.table

    @property
    def dispatcher(self) -> Dispatcher:
        self._ensure_frozen()
        assert self._dispatcher is not None
        return self._dispatcher

    # -- Dispatch --

    async def dispatch(
        self,
        method: str,
        path: str,
        query: bytes | str = b"",
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Dispatch one request in-process and return its response.

        *path* may carry its own query string (``/hello?name=Danni``)
        when *query* is not given.
        """
        if not query and "?" in path:
            path, query = path.split("?", 1)
        return await self.dispatcher.dispatch(method, path, query, headers)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles the lifespan scope directly, then delegates HTTP scopes
        to the request handler.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            dispatcher=self.dispatcher,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so configuration errors surface
        before the first HTTP request, then runs the registered hooks.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                    await self.startup()
                    await send({"type": "lifespan.startup.complete"})
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Build the route table and dispatcher.

        MUST only be called while holding _freeze_lock.
        """
        table = self._builder.build()
        cfg = self.config
        self._dispatcher = Dispatcher(
            table,
            ErrorChannel(self._error_func, status=cfg.error_status),
            FallbackHandler(
                self._fallback_func,
                status=cfg.fallback_status,
                message=cfg.fallback_message,
            ),
            middleware=tuple(self._middleware_list),
            strict_slashes=cfg.strict_slashes,
            access_log=cfg.access_log,
        )
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and handlers before the first request."
            )
            raise RuntimeError(msg)

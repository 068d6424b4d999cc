"""Chain executor: runs an ordered list of handlers.

A handler is any callable matching::

    def handler(ctx: RequestContext, next: Next) -> ...
    async def handler(ctx: RequestContext, next: Next) -> ...

No base class required. What the handler returns decides what happens
next:

==============================  ==========================================
Handler does                    Executor reads it as
==============================  ==========================================
``return next()``               ``Continue``: run the next handler
``return next(value)``          ``Error(value)``: go to the error channel
``return Response(...)``        ``Responded``: stop, this is the answer
``return "text"``               ``Responded`` with a text body
raises an exception             ``Error(exc)``
returns ``None``, never calls   contract fault (``HandlerContractError``)
``next``
==============================  ==========================================

``next`` may be called at most once per handler. Calling it again is a
``ContinuationReused`` fault; faults propagate, they are never turned
into responses.
"""

from collections.abc import Sequence
from typing import Any

from wren._internal.invoke import invoke
from wren._internal.types import Handler
from wren.context import RequestContext
from wren.errors import ChainError, ContinuationReused, HandlerContractError, UnhandledChain
from wren.http.response import Response
from wren.logs import dispatch_logger
from wren.signals import CONTINUE, Continue, Error, Outcome, Responded, Signal

_UNSET: Any = object()


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class Next:
    """The continuation capability handed to one handler invocation.

    ``next()`` continues, and so does any falsy value (``None``, ``""``,
    ``0``, ``False``). Any other value goes to the error channel as
    ``Error(value)``. Each ``Next`` is single-use.
    """

    __slots__ = ("_handler", "_signal")

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self._signal: Continue | Error | None = None

    def __call__(self, error: Any = None) -> Continue | Error:
        if self._signal is not None:
            msg = f"Handler {_handler_name(self._handler)} called next() more than once."
            raise ContinuationReused(msg)
        signal: Continue | Error = Error(error) if error else CONTINUE
        self._signal = signal
        return signal

    @property
    def called(self) -> bool:
        return self._signal is not None

    @property
    def signal(self) -> Continue | Error | None:
        """The signal produced by the call, or ``None`` if never called."""
        return self._signal

    def __repr__(self) -> str:
        return f"<Next for {_handler_name(self._handler)} signal={self._signal!r}>"


def resolve_signal(result: Any, nxt: Next) -> Signal:
    """Turn a handler's return value into exactly one signal.

    A handler that called ``next`` may return that call's result or
    ``None``; returning anything else as well would be two signals.
    """
    name = _handler_name(nxt._handler)

    if nxt.signal is not None:
        if result is None or result is nxt.signal:
            return nxt.signal
        msg = (
            f"Handler {name} called next() and also returned {type(result).__name__}. "
            "A handler must either continue, error, or respond, not several."
        )
        raise HandlerContractError(msg)

    match result:
        case Continue() | Responded() | Error():
            return result
        case Response():
            return Responded(result)
        case str() | bytes():
            return Responded(Response(body=result))
        case None:
            msg = (
                f"Handler {name} returned None without calling next(). "
                "Return a response, or return next() / next(error)."
            )
            raise HandlerContractError(msg)
        case _:
            msg = f"Handler {name} returned unsupported type {type(result).__name__}."
            raise HandlerContractError(msg)


async def run_handlers(handlers: Sequence[Handler], ctx: RequestContext) -> Signal:
    """Run *handlers* in order until one does not continue.

    Returns ``CONTINUE`` when every handler continued; callers decide
    whether that is acceptable.
    """
    for handler in handlers:
        nxt = Next(handler)
        try:
            result = await invoke(handler, ctx, nxt)
        except ChainError:
            raise
        except Exception as exc:
            dispatch_logger.debug(
                "handler %s raised %s; routing to error channel",
                _handler_name(handler),
                type(exc).__name__,
            )
            return Error(exc)

        signal = resolve_signal(result, nxt)
        if not isinstance(signal, Continue):
            return signal
    return CONTINUE


async def run_chain(
    handlers: Sequence[Handler],
    ctx: RequestContext,
    *,
    pattern: str = "",
) -> Outcome:
    """Run a route's chain to completion.

    A chain must end by responding or erroring. If every handler
    continues, the chain is misconfigured and ``UnhandledChain`` is
    raised.
    """
    signal = await run_handlers(handlers, ctx)
    if isinstance(signal, Continue):
        raise UnhandledChain(ctx.method, ctx.path, pattern)
    return signal

"""Per-request context.

``RequestContext`` is created fresh by the dispatcher for every request
and owned by that dispatch alone. Nothing in it is shared between
requests, so no locking is needed.

``request_var`` exposes the active context to code that cannot receive
it as an argument (loggers, helpers deep in a handler). It is set for
the duration of one dispatch and reset afterwards.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from wren.http.headers import Headers
from wren.http.query import QueryParams


@dataclass(slots=True)
class RequestContext:
    """Everything a handler knows about the request it is serving.

    ``params`` starts empty and is filled by the path matcher when a
    route matches. ``state`` is scratch space that handlers in the same
    chain can use to pass values forward.
    """

    method: str
    path: str
    query: QueryParams = field(default_factory=QueryParams)
    params: dict[str, str] = field(default_factory=dict)
    headers: Headers = field(default_factory=Headers)
    state: dict[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Request path plus query string, as received."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path


request_var: ContextVar[RequestContext] = ContextVar("wren_request")
"""The context of the request being dispatched. Set by the dispatcher."""


def get_context() -> RequestContext:
    """Return the context of the request being dispatched.

    Raises ``LookupError`` if called outside a dispatch.
    """
    return request_var.get()

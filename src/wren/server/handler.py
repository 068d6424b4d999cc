"""ASGI handler: translates ASGI scope/messages to a dispatch call.

The only component that reads raw ASGI scopes. Pulls method, raw path,
query string and headers out of the scope, dispatches, and sends the
Response back through ASGI send().
"""

import logging

from wren._internal.asgi import Receive, Scope, Send
from wren.dispatcher import Dispatcher
from wren.errors import ChainError
from wren.http.headers import Headers
from wren.http.response import Response
from wren.server.sender import send_response

logger = logging.getLogger("wren.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    dispatcher: Dispatcher,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the dispatcher."""
    if scope["type"] != "http":
        return

    method = scope["method"].upper()
    # Route on the bytes the client sent; "path" is already percent-decoded
    raw_path = scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else scope["path"]
    try:
        response = await dispatcher.dispatch(
            method,
            path,
            scope.get("query_string", b""),
            Headers.from_asgi(scope.get("headers", ())),
        )
    except ChainError as exc:
        # Chain faults are programming errors; the client only sees a 500
        logger.exception("chain fault on %s %s", method, path)
        body = f"Internal Server Error\n\n{exc}" if debug else "Internal Server Error"
        response = Response(body=body, status=500, content_type="text/plain; charset=utf-8")

    await send_response(response, send, head=method == "HEAD")

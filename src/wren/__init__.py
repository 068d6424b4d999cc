"""Wren: a small HTTP request dispatcher with handler chains.

Routes map a method and a ``/``-delimited pattern to an ordered chain of
handlers. Each handler either responds, continues with ``next()``, or
sends a value to the app's single error channel with ``next(value)``.

Basic usage::

    from wren import App

    app = App()

    def check_length(ctx, next):
        if len(ctx.params["abbreviation"]) != 2:
            return next("State abbreviation is invalid.")
        return next()

    def describe(ctx, next):
        return f"{ctx.params['abbreviation']} is a nice state, I'd like to visit."

    app.get("/states/:abbreviation", check_length, describe)

Serve it with any ASGI server, or dispatch in-process::

    response = await app.dispatch("GET", "/states/OR")
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ChainError",
    "ConfigurationError",
    "Continue",
    "Error",
    "HTTPError",
    "Next",
    "NotFound",
    "RequestContext",
    "Responded",
    "Response",
    "WrenError",
    "get_context",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name == "Next":
        from wren.chain import Next

        return Next

    if name in ("Continue", "Error", "Responded"):
        from wren import signals as _signals

        return getattr(_signals, name)

    if name in ("RequestContext", "get_context"):
        from wren import context as _ctx

        return getattr(_ctx, name)

    if name in ("ChainError", "ConfigurationError", "HTTPError", "NotFound", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

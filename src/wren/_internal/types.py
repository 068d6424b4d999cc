"""Shared type aliases used across wren modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Chain handler: called as handler(ctx, next); sync or async
Handler: TypeAlias = Callable[..., Any]

# Error channel handler: called as handler(value, ctx); sync or async
ErrorHandler: TypeAlias = Callable[..., Any]

# Fallback handler: called as handler(ctx); sync or async
FallbackFunc: TypeAlias = Callable[..., Any]

"""HTTP primitives: headers, query parameters, and responses."""

from wren.http.headers import Headers
from wren.http.query import QueryParams, parse_query
from wren.http.response import Response

__all__ = ["Headers", "QueryParams", "Response", "parse_query"]

"""Routing: an ordered route table with segment-wise path matching.

Routes are registered during setup and frozen into an immutable table
before the first request. Lookup walks the table in registration order
and stops at the first matching pattern.
"""

from wren.routing.matcher import match, parse_pattern, split_path
from wren.routing.route import PathSegment, RouteEntry, RouteMatch, RoutePattern
from wren.routing.table import RouteTable, RouteTableBuilder

__all__ = [
    "PathSegment",
    "RouteEntry",
    "RouteMatch",
    "RoutePattern",
    "RouteTable",
    "RouteTableBuilder",
    "match",
    "parse_pattern",
    "split_path",
]

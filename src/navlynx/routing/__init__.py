"""Routing — the reference recognizer and URL builder for nav links.

Routes map path patterns to endpoint names; the table recognizes a path's
endpoint and builds paths back from route-parameter mappings.
"""

from navlynx.routing.route import PathSegment, Route, RouteMatch
from navlynx.routing.router import RouteTable, parse_path

__all__ = ["PathSegment", "Route", "RouteMatch", "RouteTable", "parse_path"]

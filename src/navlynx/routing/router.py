"""Route table with trie-based path recognition and URL building.

A reference implementation of both routing collaborators the link
matcher needs: ``recognize`` (path -> endpoint name) and ``build_path``
(target -> path). Routes are registered during setup and the table is
frozen with ``compile()``.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass

from navlynx.errors import BuildError, ConfigurationError, NotFound
from navlynx.http.query import encode_query
from navlynx.routing.params import CONVERTERS, format_param
from navlynx.routing.route import PathSegment, Route, RouteMatch

logger = logging.getLogger("navlynx.routing")

_FLASK_PARAM = re.compile(r"<[^>]+>")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/posts"          -> [PathSegment("posts")]
        "/posts/{id}"     -> [PathSegment("posts"), PathSegment("{id}", is_param=True, ...)]
        "/posts/{id:int}" -> [PathSegment("{id:int}", is_param=True, param_type="int")]
        "/files/{path:path}" -> [PathSegment("{path:path}", is_param=True, param_type="path")]
    """
    if _FLASK_PARAM.search(path):
        msg = f"Route path {path!r} uses <param> syntax; navlynx expects {{param}}."
        raise ConfigurationError(msg)

    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name = inner
                param_type = "str"
            if param_type not in CONVERTERS:
                msg = f"Unknown converter {param_type!r} in route path {path!r}."
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during compilation only."""

    __slots__ = ("catch_all", "children", "param_child", "route")

    def __init__(self) -> None:
        # Static segment children: "posts" -> node
        self.children: dict[str, _TrieNode] = {}
        # Single parameter child (only one param pattern per level)
        self.param_child: _ParamEdge | None = None
        # Catch-all route (path converter)
        self.catch_all: _CatchAllEdge | None = None
        # Route terminating at this node
        self.route: Route | None = None


@dataclass(slots=True)
class _ParamEdge:
    """A parameter edge in the trie."""

    param_name: str
    param_type: str
    regex: re.Pattern[str]
    node: _TrieNode


@dataclass(slots=True)
class _CatchAllEdge:
    """A catch-all (path) edge — consumes remaining path."""

    param_name: str
    route: Route


class RouteTable:
    """Compiled route table with trie-based path matching.

    Usage::

        table = RouteTable()
        table.add(Route("/posts", "posts"))
        table.add(Route("/posts/{id:int}", "posts"))
        table.add(Route("/admin/posts", "admin/posts"))
        table.compile()

        table.recognize("/posts/42")                    # "posts"
        table.build_path({"endpoint": "posts", "id": 42})  # "/posts/42"
    """

    __slots__ = ("_by_endpoint", "_compiled", "_root")

    def __init__(self, routes: list[Route] | None = None) -> None:
        self._root = _TrieNode()
        self._compiled = False
        # Registration order per endpoint, with parsed segments for building
        self._by_endpoint: dict[str, list[tuple[Route, list[PathSegment]]]] = {}
        for route in routes or ():
            self.add(route)

    def add(self, route: Route) -> None:
        """Add a route to the table. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise ConfigurationError(msg)

        segments = parse_path(route.path)
        node = self._root

        for seg in segments:
            if seg.is_param and seg.param_type == "path":
                # Catch-all: consumes rest of path, must be last segment
                if node.catch_all is not None:
                    _duplicate(route, node.catch_all.route)
                node.catch_all = _CatchAllEdge(param_name=seg.param_name or "path", route=route)
                self._by_endpoint.setdefault(route.endpoint, []).append((route, segments))
                return

            if seg.is_param:
                if node.param_child is None:
                    pattern = CONVERTERS[seg.param_type]
                    node.param_child = _ParamEdge(
                        param_name=seg.param_name or "",
                        param_type=seg.param_type,
                        regex=re.compile(f"^{pattern}$"),
                        node=_TrieNode(),
                    )
                elif (node.param_child.param_name, node.param_child.param_type) != (
                    seg.param_name or "",
                    seg.param_type,
                ):
                    # One param edge per node: a second name or converter would never match
                    edge = node.param_child
                    msg = (
                        f"Route {route.path!r} declares {{{seg.param_name}:{seg.param_type}}} "
                        f"where another route already declares "
                        f"{{{edge.param_name}:{edge.param_type}}}."
                    )
                    raise ConfigurationError(msg)
                node = node.param_child.node
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        if node.route is not None:
            _duplicate(route, node.route)
        node.route = route
        self._by_endpoint.setdefault(route.endpoint, []).append((route, segments))

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order per endpoint."""
        return [route for entries in self._by_endpoint.values() for route, _ in entries]

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    def match(self, path: str) -> RouteMatch:
        """Match a path against the registered routes.

        Any query string or fragment is ignored.
        Raises ``NotFound`` if no route matches the path.
        """
        bare = path.partition("?")[0].partition("#")[0]
        parts = [p for p in bare.strip("/").split("/") if p]
        result = self._match_node(self._root, parts, 0, {})
        if result is None:
            raise NotFound(f"No route matches {path!r}")
        route, params = result
        return RouteMatch(route=route, path_params=params)

    def recognize(self, path: str) -> str:
        """Return the endpoint name *path* maps to.

        Raises ``NotFound`` if no route matches.
        """
        return self.match(path).endpoint

    def build_path(self, target: str | Mapping[str, object]) -> str:
        """Build a path from a raw string or a route-parameter mapping.

        Strings pass through unchanged. A mapping needs an ``endpoint``
        key; among that endpoint's routes, the one consuming the most of
        the supplied parameters wins (first registered on a tie), and any
        parameters it does not consume become the query string::

            build_path({"endpoint": "posts", "id": 5, "tab": "comments"})
            # "/posts/5?tab=comments"

        Raises ``BuildError`` if no route of the endpoint can be built.
        """
        if isinstance(target, str):
            return target

        params = {k: v for k, v in target.items() if v is not None}
        endpoint = params.pop("endpoint", None)
        if endpoint is None:
            raise BuildError("", "Route parameters need an 'endpoint' key.")
        endpoint = str(endpoint)

        best: tuple[str, set[str]] | None = None
        for _route, segments in self._by_endpoint.get(endpoint, ()):
            built = _fill(segments, params)
            if built is None:
                continue
            if best is None or len(built[1]) > len(best[1]):
                best = built

        if best is None:
            supplied = ", ".join(sorted(params)) or "no parameters"
            raise BuildError(endpoint, f"No route for endpoint {endpoint!r} accepts {supplied}.")

        path, consumed = best
        leftover = {k: v for k, v in params.items() if k not in consumed}
        if leftover:
            return f"{path}?{encode_query(leftover)}"
        return path

    def _match_node(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> tuple[Route, dict[str, str]] | None:
        """Recursively match path parts against the trie."""
        # All parts consumed — return this node's route
        if index == len(parts):
            if node.route is not None:
                return node.route, params
            return None

        part = parts[index]

        # 1. Try static child first (exact match)
        if part in node.children:
            result = self._match_node(node.children[part], parts, index + 1, params)
            if result is not None:
                return result

        # 2. Try parameter child
        if node.param_child is not None:
            edge = node.param_child
            if edge.regex.match(part):
                new_params = {**params, edge.param_name: part}
                result = self._match_node(edge.node, parts, index + 1, new_params)
                if result is not None:
                    return result

        # 3. Try catch-all
        if node.catch_all is not None:
            remaining = "/".join(parts[index:])
            return node.catch_all.route, {**params, node.catch_all.param_name: remaining}

        return None


def _fill(segments: list[PathSegment], params: Mapping[str, object]) -> tuple[str, set[str]] | None:
    """Substitute *params* into *segments*; None if a parameter is missing or invalid."""
    parts: list[str] = []
    consumed: set[str] = set()
    for seg in segments:
        if not seg.is_param:
            parts.append(seg.value)
            continue
        name = seg.param_name or ""
        if name not in params:
            return None
        formatted = format_param(params[name], seg.param_type)
        if formatted is None:
            logger.debug("Parameter %s=%r does not fit {%s:%s}", name, params[name], name, seg.param_type)
            return None
        parts.append(formatted)
        consumed.add(name)
    return "/" + "/".join(parts), consumed


def _duplicate(route: Route, existing: Route) -> None:
    msg = f"Route {route.path!r} ({route.endpoint}) duplicates {existing.path!r} ({existing.endpoint})."
    raise ConfigurationError(msg)

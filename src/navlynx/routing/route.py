"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:  ``/posts``  (is_param=False)
    Param:   ``/{id}``   (is_param=True, param_name="id")
    Typed:   ``/{id:int}`` (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``endpoint`` is the logical handler name the path maps to, with
    ``/`` separating namespaces (``"admin/posts"``). Several routes may
    share an endpoint (``/posts`` and ``/posts/{id:int}``).
    """

    path: str
    endpoint: str


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    path_params: dict[str, str]

    @property
    def endpoint(self) -> str:
        return self.route.endpoint

"""navlynx exception hierarchy.

Shared across the route table, the option parser, and the link matcher
so every module raises and catches the same types.
"""

from dataclasses import dataclass


class NavLynxError(Exception):
    """Base for all navlynx-specific errors."""


class ConfigurationError(NavLynxError):
    """Raised when configuration or link options are invalid.

    Typically raised while building ``NavConfig`` or ``MatchOptions``,
    before any path is compared.
    """


@dataclass(frozen=True, slots=True)
class RoutingError(NavLynxError):
    """A route table could not resolve a path or build a URL."""

    detail: str = ""

    def __str__(self) -> str:
        return self.detail


class NotFound(RoutingError):  # noqa: N818 — conventional name in web frameworks
    """No route matches the given path.

    The link matcher treats this as "no endpoint name", so an unroutable
    link never segment-matches.
    """

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(detail=detail)


class BuildError(RoutingError):
    """No route can be built for the given endpoint and parameters.

    Not caught by the link matcher: a link that cannot be built is
    a bug in the template, not a navigation state.
    """

    def __init__(self, endpoint: str, detail: str = "") -> None:
        default_detail = f"Cannot build a path for endpoint {endpoint!r}"
        super().__init__(detail=detail or default_detail)

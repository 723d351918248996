"""Collaborator contracts for the link matcher.

The matcher never routes or builds URLs itself. It talks to two
structural interfaces, so any framework's router can be adapted by
wrapping it in a class with ``recognize`` and ``build_path`` methods.
``navlynx.routing.RouteTable`` implements both.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from navlynx.errors import BuildError, NotFound

type RouteParams = Mapping[str, object]
type LinkTarget = str | RouteParams
"""A raw path, or route parameters (``{"endpoint": "posts", "id": 5}``)."""


@runtime_checkable
class Recognizer(Protocol):
    """Maps a path to the logical endpoint name that would handle it."""

    def recognize(self, path: str) -> str:
        """Return the endpoint name for *path*.

        Raises ``navlynx.errors.NotFound`` when no endpoint matches.
        """
        ...


@runtime_checkable
class UrlBuilder(Protocol):
    """Builds a path string from a link target."""

    def build_path(self, target: LinkTarget) -> str:
        """Return the path (with query, if any) for *target*.

        Raises ``navlynx.errors.BuildError`` when *target* cannot be built.
        """
        ...


class PassthroughBuilder:
    """URL builder for apps whose links are always raw paths."""

    def build_path(self, target: LinkTarget) -> str:
        if isinstance(target, str):
            return target
        endpoint = str(target.get("endpoint", ""))
        raise BuildError(endpoint, "Route parameters need a route table; only raw paths pass through.")


class NoRoutes:
    """Recognizer that knows no endpoints, so segment matching never applies."""

    def recognize(self, path: str) -> str:
        raise NotFound(f"No route table configured for {path!r}")

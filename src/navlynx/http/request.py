"""Immutable view of the current request.

The link matcher only needs two things from the request being served:
the path, and the path with its query string. ``RequestContext`` holds
exactly that, so any framework's request can be adapted in one line.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from navlynx.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class RequestContext:
    """The current request as seen by the server.

    Usage::

        ctx = RequestContext.from_url("/posts?page=2")
        ctx.path       # "/posts"
        ctx.full_path  # "/posts?page=2"
    """

    path: str
    query: QueryParams = field(default_factory=QueryParams)

    @classmethod
    def from_url(cls, url: str) -> RequestContext:
        """Split a path+query string (``request.fullpath``) into a context.

        A ``#fragment`` is never sent to the server and is dropped.
        """
        url, _, _ = url.partition("#")
        path, _, query_string = url.partition("?")
        return cls(path=path or "/", query=QueryParams(query_string))

    @property
    def full_path(self) -> str:
        """Path plus query string, as received."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs}"
        return self.path

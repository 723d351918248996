"""navlynx — current-location matching for navigation links.

Decides whether a nav link points at the page being served, under a
configurable policy (exact path, selected query parameters, or a path or
endpoint segment), and renders the link with a selected class and an
optional wrapper element.

Basic usage::

    from navlynx import LinkMatcher, NavConfig, RequestContext

    matcher = LinkMatcher(NavConfig(selected_class="active", wrapper="li"))
    request = RequestContext.from_url("/posts?page=2")

    nav = matcher.bind(request)
    nav("Posts", "/posts", ignore_params=["page"])
    # <li class="active"><a href="/posts">Posts</a></li>
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "BuildError",
    "ConfigurationError",
    "LinkMatcher",
    "MatchOptions",
    "MatchResult",
    "NavConfig",
    "NavHelper",
    "NavLink",
    "NavLynxError",
    "NotFound",
    "RequestContext",
    "Route",
    "RouteTable",
    "normalize",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import navlynx`` fast while providing a clean top-level API.
    """
    if name in ("LinkMatcher", "NavHelper", "NavLink"):
        from navlynx import evaluator as _evaluator

        return getattr(_evaluator, name)

    if name == "NavConfig":
        from navlynx.config import NavConfig

        return NavConfig

    if name == "MatchOptions":
        from navlynx.options import MatchOptions

        return MatchOptions

    if name == "MatchResult":
        from navlynx.matching.selection import MatchResult

        return MatchResult

    if name == "normalize":
        from navlynx.matching.normalize import normalize

        return normalize

    if name == "RequestContext":
        from navlynx.http.request import RequestContext

        return RequestContext

    if name in ("Route", "RouteTable"):
        from navlynx import routing as _routing

        return getattr(_routing, name)

    if name in ("BuildError", "ConfigurationError", "NavLynxError", "NotFound"):
        from navlynx import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

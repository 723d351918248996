"""The link matcher — decides whether a nav link is the current location.

Wires the pure matching functions to the routing collaborators and the
current request::

    from navlynx import LinkMatcher, MatchOptions, NavConfig, RequestContext
    from navlynx.routing import Route, RouteTable

    routes = RouteTable([Route("/posts", "posts"), Route("/posts/{id:int}", "posts")])
    matcher = LinkMatcher(NavConfig(selected_class="active"), router=routes)

    request = RequestContext.from_url("/posts/5")
    matcher.match(request, {"endpoint": "posts"}, MatchOptions(controller_segment=1)).selected
    # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from navlynx.config import NavConfig
from navlynx.contracts import LinkTarget, NoRoutes, PassthroughBuilder, Recognizer, UrlBuilder
from navlynx.errors import NotFound
from navlynx.matching.normalize import normalize
from navlynx.matching.segments import segment
from navlynx.matching.selection import MatchResult, resolve
from navlynx.options import DEFAULT_OPTIONS, MatchOptions

if TYPE_CHECKING:
    from kida.template import Markup

    from navlynx.http.request import RequestContext

logger = logging.getLogger("navlynx.matching")

_OPTION_NAMES = frozenset(f.name for f in fields(MatchOptions))


@dataclass(frozen=True, slots=True)
class NavLink:
    """Everything the renderer needs to emit one nav link."""

    title: str
    href: str
    selected: bool
    html_attributes: dict[str, str] = field(default_factory=dict)
    wrapper: str | None = None
    wrapper_classes: str | None = None


class LinkMatcher:
    """Match and build nav links against the current request.

    ``router`` recognizes endpoint names; ``url_builder`` turns link
    targets into paths. A router that also has ``build_path`` (like
    ``RouteTable``) serves as both. Without a router, segment matching
    on endpoint names never applies and only raw-path targets build.
    """

    __slots__ = ("_builder", "_config", "_recognizer")

    def __init__(
        self,
        config: NavConfig | None = None,
        *,
        router: Recognizer | None = None,
        url_builder: UrlBuilder | None = None,
    ) -> None:
        self._config = config or NavConfig()
        self._recognizer: Recognizer = router or NoRoutes()
        if url_builder is None:
            url_builder = router if isinstance(router, UrlBuilder) else PassthroughBuilder()
        self._builder: UrlBuilder = url_builder

    @property
    def config(self) -> NavConfig:
        return self._config

    def endpoint_for(self, path: str) -> str | None:
        """Endpoint name for *path*, or None if nothing routes it."""
        try:
            return self._recognizer.recognize(path)
        except NotFound:
            logger.debug("No endpoint recognized for %r", path)
            return None

    def match(
        self,
        request: RequestContext,
        target: LinkTarget,
        options: MatchOptions | None = None,
        html_class: str | None = None,
    ) -> MatchResult:
        """Match *target* against *request* under *options*.

        Override predicates in *options* run exactly once per call.
        """
        result, _ = self._evaluate(request, target, options, html_class)
        return result

    def _evaluate(
        self,
        request: RequestContext,
        target: LinkTarget,
        options: MatchOptions | None,
        html_class: str | None,
    ) -> tuple[MatchResult, str]:
        options = options or DEFAULT_OPTIONS
        raw_link = self._builder.build_path(target)
        current_path = normalize(request.full_path, options)
        link_path = normalize(raw_link, options)

        current_segment = link_segment = None
        if options.compares_segments:
            current_endpoint = link_endpoint = None
            if options.controller_segment is not None:
                current_endpoint = self.endpoint_for(request.path)
                link_endpoint = self._link_endpoint(target, raw_link)
            link_segment = segment(options, link_endpoint, link_path)
            current_segment = segment(options, current_endpoint, current_path)

        result = resolve(
            current_path,
            link_path,
            current_segment,
            link_segment,
            options,
            self._config,
            html_class=html_class,
        )
        return result, raw_link

    def build(
        self,
        request: RequestContext,
        title: str,
        target: LinkTarget,
        options: MatchOptions | None = None,
        html_options: Mapping[str, Any] | None = None,
    ) -> NavLink:
        """Match *target* and merge the selected class into its attributes."""
        attrs = _attributes(html_options)
        result, href = self._evaluate(request, target, options, attrs.get("class"))
        if result.link_classes:
            attrs["class"] = result.link_classes
        return NavLink(
            title=title,
            href=href,
            selected=result.selected,
            html_attributes=attrs,
            wrapper=result.wrapper,
            wrapper_classes=result.wrapper_classes,
        )

    def render(
        self,
        request: RequestContext,
        title: str,
        target: LinkTarget,
        options: MatchOptions | None = None,
        html_options: Mapping[str, Any] | None = None,
    ) -> Markup:
        """Build the link and render it as escaped HTML."""
        from navlynx.templating.render import render_link

        return render_link(self.build(request, title, target, options, html_options))

    def bind(self, request: RequestContext) -> NavHelper:
        """Return a template helper bound to *request*."""
        return NavHelper(self, request)

    def _link_endpoint(self, target: LinkTarget, raw_link: str) -> str | None:
        if isinstance(target, Mapping) and target.get("endpoint") is not None:
            return str(target["endpoint"])
        return self.endpoint_for(raw_link)


class NavHelper:
    """A ``LinkMatcher`` bound to one request, for use inside templates.

    Keyword arguments naming a ``MatchOptions`` field are match options;
    the rest are HTML attributes (``class_`` for ``class``)::

        {{ nav("Posts", "/posts", ignore_params="all", class_="nav-link") }}
        {% if nav.is_current("/drafts", url_segment=0) %}...{% end %}
    """

    __slots__ = ("_matcher", "_request")

    def __init__(self, matcher: LinkMatcher, request: RequestContext) -> None:
        self._matcher = matcher
        self._request = request

    def __call__(self, title: str, target: LinkTarget, **kwargs: Any) -> Markup:
        options, html_options = _split_kwargs(kwargs)
        return self._matcher.render(self._request, title, target, options, html_options)

    def is_current(self, target: LinkTarget, **kwargs: Any) -> bool:
        """True if *target* is the current location under the given options."""
        options, _ = _split_kwargs(kwargs)
        return self._matcher.match(self._request, target, options).selected


def _split_kwargs(kwargs: Mapping[str, Any]) -> tuple[MatchOptions, dict[str, Any]]:
    option_kwargs = {k: v for k, v in kwargs.items() if k in _OPTION_NAMES}
    html_options = {k: v for k, v in kwargs.items() if k not in _OPTION_NAMES}
    return MatchOptions.from_kwargs(**option_kwargs), html_options


def _attributes(html_options: Mapping[str, Any] | None) -> dict[str, str]:
    """Normalize attribute names (``class_`` -> ``class``, ``data_x`` -> ``data-x``).

    ``None`` and ``False`` values are dropped; ``True`` renders as the bare name.
    """
    attrs: dict[str, str] = {}
    for name, value in (html_options or {}).items():
        if value is None or value is False:
            continue
        key = name.removesuffix("_").replace("_", "-")
        attrs[key] = key if value is True else str(value)
    return attrs

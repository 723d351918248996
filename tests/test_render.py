"""Tests for navlynx.templating — HTML emission, filters, kida integration."""

from kida import Environment

from navlynx.config import NavConfig
from navlynx.evaluator import LinkMatcher, NavLink
from navlynx.http.request import RequestContext
from navlynx.templating.filters import BUILTIN_FILTERS, attr, class_names, selected_class
from navlynx.templating.integration import create_environment, install
from navlynx.templating.render import render_attrs, render_element, render_link


def _render(env: Environment, source: str, **ctx: object) -> str:
    tpl = env.from_string(source)
    return tpl.render(ctx).strip()


class TestRenderLink:
    def test_anchor(self) -> None:
        html = render_link(NavLink(title="Posts", href="/posts", selected=False))
        assert str(html) == '<a href="/posts">Posts</a>'

    def test_escapes_title_and_attributes(self) -> None:
        link = NavLink(
            title="<b>Posts</b>",
            href="/posts?a=1&b=2",
            selected=False,
            html_attributes={"title": 'say "hi"'},
        )
        html = str(render_link(link))
        assert "&lt;b&gt;Posts&lt;/b&gt;" in html
        assert 'href="/posts?a=1&amp;b=2"' in html
        assert 'title="say &quot;hi&quot;"' in html

    def test_markup_title_not_escaped_twice(self) -> None:
        title = render_element("span", "Posts")
        html = str(render_link(NavLink(title=title, href="/posts", selected=False)))  # type: ignore[arg-type]
        assert "<span>Posts</span>" in html

    def test_wrapper(self) -> None:
        link = NavLink(title="Posts", href="/posts", selected=True, wrapper="li", wrapper_classes="active")
        assert str(render_link(link)) == '<li class="active"><a href="/posts">Posts</a></li>'

    def test_wrapper_without_classes(self) -> None:
        link = NavLink(title="Posts", href="/posts", selected=False, wrapper="li")
        assert str(render_link(link)) == '<li><a href="/posts">Posts</a></li>'

    def test_href_attribute_not_overridden(self) -> None:
        link = NavLink(title="P", href="/posts", selected=False, html_attributes={"href": "/evil"})
        assert str(render_link(link)) == '<a href="/posts">P</a>'

    def test_returns_markup(self) -> None:
        html = render_link(NavLink(title="Posts", href="/posts", selected=False))
        assert hasattr(html, "__html__")


class TestRenderAttrs:
    def test_order_preserved(self) -> None:
        assert render_attrs({"id": "x", "class": "y"}) == ' id="x" class="y"'

    def test_empty(self) -> None:
        assert render_attrs({}) == ""


class TestFilters:
    def test_attr_truthy(self) -> None:
        assert 'class="active"' in str(attr("active", "class"))

    def test_attr_falsy(self) -> None:
        assert attr("", "class") == ""
        assert attr(None, "class") == ""

    def test_attr_escapes(self) -> None:
        assert "&quot;" in str(attr('a"b', "data-x"))

    def test_class_names(self) -> None:
        assert class_names("nav-link", False, None, "active") == "nav-link active"

    def test_selected_class(self) -> None:
        assert selected_class(True, "active") == "active"
        assert selected_class(False, "active") == ""
        assert selected_class(True) == "selected"

    def test_registry(self) -> None:
        assert set(BUILTIN_FILTERS) == {"attr", "class_names", "selected_class"}


class TestKidaIntegration:
    def test_helper_in_context(self) -> None:
        matcher = LinkMatcher(NavConfig(selected_class="active"))
        env = create_environment(matcher)
        html = _render(
            env,
            '{{ nav("Posts", "/posts") }}',
            nav=matcher.bind(RequestContext.from_url("/posts")),
        )
        assert html == '<a href="/posts" class="active">Posts</a>'

    def test_helper_not_selected(self) -> None:
        matcher = LinkMatcher()
        env = create_environment(matcher)
        html = _render(env, '{{ nav("Posts", "/posts") }}', nav=matcher.bind(RequestContext.from_url("/")))
        assert html == '<a href="/posts">Posts</a>'

    def test_nav_links_global(self) -> None:
        matcher = LinkMatcher()
        env = create_environment(matcher)
        html = _render(
            env,
            '{{ nav_links(request)("Home", "/") }}',
            request=RequestContext.from_url("/"),
        )
        assert html == '<a href="/" class="selected">Home</a>'

    def test_install_registers_filters(self) -> None:
        matcher = LinkMatcher()
        env = install(Environment(autoescape=True), matcher)
        html = _render(env, "<li{{ cls | attr('class') }}></li>", cls="active")
        assert html == '<li class="active"></li>'

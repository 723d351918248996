"""HTML emission for nav links.

Pure templating: escapes the title and every attribute value and wraps
the anchor in the configured element. Returns ``Markup`` so kida's
autoescape does not escape the result a second time.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import TYPE_CHECKING

from kida.template import Markup

if TYPE_CHECKING:
    from navlynx.evaluator import NavLink


def render_attrs(attrs: Mapping[str, str]) -> str:
    """Render attributes as `` name="value"`` pairs, in the given order."""
    return "".join(
        f' {html.escape(name, quote=True)}="{html.escape(value, quote=True)}"' for name, value in attrs.items()
    )


def render_element(name: str, content: str, cls: str | None = None) -> Markup:
    """Wrap already-escaped *content* in ``<name class="cls">``."""
    class_attr = f' class="{html.escape(cls, quote=True)}"' if cls else ""
    return Markup(f"<{name}{class_attr}>{content}</{name}>")


def render_link(link: NavLink) -> Markup:
    """Render *link* as ``<a>``, wrapped when ``link.wrapper`` is set.

    Example::

        <li class="active nav-item"><a href="/posts">Posts</a></li>
    """
    title = link.title if hasattr(link.title, "__html__") else html.escape(str(link.title))
    attrs = {"href": link.href, **{k: v for k, v in link.html_attributes.items() if k != "href"}}
    anchor = f"<a{render_attrs(attrs)}>{title}</a>"
    if link.wrapper:
        return render_element(link.wrapper, anchor, link.wrapper_classes)
    return Markup(anchor)

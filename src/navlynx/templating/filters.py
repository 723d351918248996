"""Template filters for nav markup.

Registered on a kida Environment by ``navlynx.templating.integration.install``.
"""

import html
from typing import Any

from kida.template import Markup


def attr(value: Any, name: str) -> str | Markup:
    """Output an HTML attribute when value is truthy, else empty string.

    Shorthand for optional attributes without ``{% if %}`` blocks.

    Example:
        <li{{ item_class | attr("class") }}>...</li>
        → <li class="active">...</li>   (when item_class is "active")
        → <li>...</li>                  (when item_class is None or "")

    """
    if not value:
        return ""
    return Markup(f' {name}="{html.escape(str(value))}"')


def class_names(*names: Any) -> str:
    """Join truthy class names with single spaces.

    Example:
        class="{{ class_names("nav-link", is_current and "active") }}"
        → "nav-link active"

    """
    return " ".join(str(n) for n in names if n)


def selected_class(selected: bool, name: str = "selected") -> str:
    """Return *name* when *selected*, else empty string.

    Example:
        <li class="{{ nav.is_current("/posts") | selected_class("active") }}">
    """
    return name if selected else ""


# All navlynx filters, registered by ``install``.
BUILTIN_FILTERS: dict[str, Any] = {
    "attr": attr,
    "class_names": class_names,
    "selected_class": selected_class,
}

"""Kida environment binding.

``install`` registers the nav filters and a ``nav_links`` global on an
existing kida Environment. Bind per request in the template context::

    env = Environment(autoescape=True)
    install(env, matcher)

    template.render({"nav": matcher.bind(request)})
    # or, from the template itself: {% set nav = nav_links(request) %}
"""

from kida import Environment

from navlynx.evaluator import LinkMatcher
from navlynx.templating.filters import BUILTIN_FILTERS


def install(env: Environment, matcher: LinkMatcher) -> Environment:
    """Register navlynx filters and the ``nav_links`` global on *env*.

    Returns *env* for chaining. Existing filters with the same names are
    replaced.
    """
    env.update_filters(BUILTIN_FILTERS)
    env.add_global("nav_links", matcher.bind)
    return env


def create_environment(matcher: LinkMatcher, **kwargs: object) -> Environment:
    """Create an autoescaping kida Environment with navlynx installed."""
    kwargs.setdefault("autoescape", True)
    return install(Environment(**kwargs), matcher)

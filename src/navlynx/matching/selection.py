"""Selection verdict and CSS class derivation.

Combines path equality and segment equality with the caller's override
predicates, then derives the link and wrapper classes from the verdict
and the configured defaults.
"""

import logging
from dataclasses import dataclass

from navlynx.config import NavConfig
from navlynx.options import MatchOptions

logger = logging.getLogger("navlynx.matching")


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of matching one link against the current request.

    ``paths_match`` and ``segments_match`` are kept separately from
    ``selected`` so callers (and the ``navlynx compare`` command) can see
    which notion of equivalence fired.
    """

    selected: bool
    paths_match: bool
    segments_match: bool
    current_path: str
    link_path: str
    current_segment: str | None = None
    link_segment: str | None = None
    link_classes: str | None = None
    wrapper: str | None = None
    wrapper_classes: str | None = None


def paths_match(current_path: str, link_path: str) -> bool:
    """True if both normalized paths are identical."""
    return current_path == link_path


def segments_match(current_segment: str | None, link_segment: str | None) -> bool:
    """True if the link has a segment and it equals the current one."""
    return link_segment is not None and link_segment == current_segment


def is_selected(
    current_path: str,
    link_path: str,
    current_segment: str | None,
    link_segment: str | None,
    options: MatchOptions,
) -> bool:
    """Decide whether the link is the current location.

    ``and_condition`` gates the match, ``or_condition`` forces it; only
    one is honored, ``and_condition`` first. The predicate is called
    exactly once and anything it raises propagates.
    """
    matched = paths_match(current_path, link_path) or segments_match(current_segment, link_segment)
    if options.and_condition is not None:
        return bool(options.and_condition()) and matched
    if options.or_condition is not None:
        return bool(options.or_condition()) or matched
    return matched


# -- Class resolution --


def selected_class(options: MatchOptions, config: NavConfig) -> str:
    """Per-link selected class, else the configured default."""
    return options.selected_class or config.selected_class


def wrapper_name(options: MatchOptions, config: NavConfig) -> str | None:
    """Wrapper element name; ``False`` on the link disables the default."""
    if options.wrapper is False:
        return None
    return options.wrapper or config.wrapper


def wrapper_class(options: MatchOptions, config: NavConfig) -> str | None:
    """Wrapper class; ``False`` on the link disables the default."""
    if options.wrapper_class is False:
        return None
    return options.wrapper_class or config.wrapper_class


def link_classes(
    selected: bool,
    html_class: str | None,
    options: MatchOptions,
    config: NavConfig,
) -> str | None:
    """Class attribute for the anchor when selected, or None to leave it as given.

    With an explicit class the selected class is appended; with no wrapper
    the selected class stands alone; with a wrapper the wrapper carries it.
    """
    if not selected:
        return None
    if html_class:
        return f"{html_class} {selected_class(options, config)}"
    if wrapper_name(options, config) is None:
        return selected_class(options, config)
    return None


def wrapper_classes(selected: bool, options: MatchOptions, config: NavConfig) -> str | None:
    """Class attribute for the wrapper element, or None without a wrapper.

    Selected: ``"<selected_class> <wrapper_class>"``; otherwise the wrapper
    class alone. Parts that resolve to nothing are left out.
    """
    if wrapper_name(options, config) is None:
        return None
    parts = [selected_class(options, config)] if selected else []
    extra = wrapper_class(options, config)
    if extra:
        parts.append(extra)
    return " ".join(parts) or None


def resolve(
    current_path: str,
    link_path: str,
    current_segment: str | None,
    link_segment: str | None,
    options: MatchOptions,
    config: NavConfig,
    html_class: str | None = None,
) -> MatchResult:
    """Compute the verdict and every class the renderer needs."""
    selected = is_selected(current_path, link_path, current_segment, link_segment, options)
    logger.debug("%s vs %s -> %s", link_path, current_path, "selected" if selected else "not selected")
    return MatchResult(
        selected=selected,
        paths_match=paths_match(current_path, link_path),
        segments_match=segments_match(current_segment, link_segment),
        current_path=current_path,
        link_path=link_path,
        current_segment=current_segment,
        link_segment=link_segment,
        link_classes=link_classes(selected, html_class, options, config),
        wrapper=wrapper_name(options, config),
        wrapper_classes=wrapper_classes(selected, options, config),
    )

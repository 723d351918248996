"""Tests for navlynx.matching.selection — verdicts and class derivation."""

import pytest

from navlynx.config import NavConfig
from navlynx.matching.selection import (
    is_selected,
    link_classes,
    paths_match,
    resolve,
    segments_match,
    wrapper_classes,
    wrapper_name,
)
from navlynx.options import MatchOptions


class _Counter:
    """Predicate test double that records how often it was called."""

    def __init__(self, value: bool) -> None:
        self.value = value
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.value


class TestBaseMatch:
    def test_paths_match(self) -> None:
        assert paths_match("/a", "/a") is True
        assert paths_match("/a", "/b") is False

    def test_segments_match_requires_link_segment(self) -> None:
        assert segments_match(None, None) is False
        assert segments_match("posts", None) is False

    def test_segments_match(self) -> None:
        assert segments_match("posts", "posts") is True
        assert segments_match("admin", "posts") is False

    def test_either_notion_selects(self) -> None:
        opts = MatchOptions()
        assert is_selected("/a", "/a", None, None, opts) is True
        assert is_selected("/a/1", "/a", "a", "a", opts) is True
        assert is_selected("/a", "/b", "a", "b", opts) is False


class TestAndCondition:
    @pytest.mark.parametrize("link", ["/a", "/b"])
    def test_false_never_selects(self, link: str) -> None:
        opts = MatchOptions(and_condition=lambda: False)
        assert is_selected("/a", link, "a", "a", opts) is False

    def test_true_keeps_match(self) -> None:
        opts = MatchOptions(and_condition=lambda: True)
        assert is_selected("/a", "/a", None, None, opts) is True
        assert is_selected("/a", "/b", None, None, opts) is False

    def test_takes_precedence_over_or(self) -> None:
        opts = MatchOptions(and_condition=lambda: False, or_condition=lambda: True)
        assert is_selected("/a", "/a", None, None, opts) is False


class TestOrCondition:
    @pytest.mark.parametrize("link", ["/a", "/b"])
    def test_true_always_selects(self, link: str) -> None:
        opts = MatchOptions(or_condition=lambda: True)
        assert is_selected("/a", link, None, None, opts) is True

    def test_false_keeps_match(self) -> None:
        opts = MatchOptions(or_condition=lambda: False)
        assert is_selected("/a", "/a", None, None, opts) is True
        assert is_selected("/a", "/b", None, None, opts) is False


class TestPredicateCalls:
    def test_called_exactly_once(self) -> None:
        pred = _Counter(True)
        resolve("/a", "/a", None, None, MatchOptions(and_condition=pred), NavConfig())
        assert pred.calls == 1

    def test_called_even_when_paths_match(self) -> None:
        pred = _Counter(False)
        is_selected("/a", "/a", None, None, MatchOptions(or_condition=pred))
        assert pred.calls == 1

    def test_not_memoized(self) -> None:
        pred = _Counter(True)
        opts = MatchOptions(or_condition=pred)
        is_selected("/a", "/b", None, None, opts)
        is_selected("/a", "/b", None, None, opts)
        assert pred.calls == 2

    def test_exceptions_propagate(self) -> None:
        def boom() -> bool:
            raise LookupError("no user")

        with pytest.raises(LookupError, match="no user"):
            is_selected("/a", "/a", None, None, MatchOptions(and_condition=boom))


class TestLinkClasses:
    def test_not_selected(self) -> None:
        assert link_classes(False, "nav", MatchOptions(), NavConfig()) is None

    def test_appends_to_explicit_class(self) -> None:
        assert link_classes(True, "nav", MatchOptions(), NavConfig()) == "nav selected"

    def test_alone_without_wrapper(self) -> None:
        assert link_classes(True, None, MatchOptions(), NavConfig(selected_class="active")) == "active"

    def test_absent_with_wrapper(self) -> None:
        assert link_classes(True, None, MatchOptions(wrapper="li"), NavConfig()) is None

    def test_explicit_class_even_with_wrapper(self) -> None:
        cfg = NavConfig(wrapper="li")
        assert link_classes(True, "nav", MatchOptions(), cfg) == "nav selected"

    def test_per_link_selected_class(self) -> None:
        opts = MatchOptions(selected_class="current")
        assert link_classes(True, None, opts, NavConfig()) == "current"


class TestWrapper:
    def test_default_wrapper(self) -> None:
        assert wrapper_name(MatchOptions(), NavConfig(wrapper="li")) == "li"

    def test_false_disables_default(self) -> None:
        assert wrapper_name(MatchOptions(wrapper=False), NavConfig(wrapper="li")) is None

    def test_no_wrapper_no_classes(self) -> None:
        assert wrapper_classes(True, MatchOptions(), NavConfig()) is None

    def test_selected_scenario(self) -> None:
        cfg = NavConfig(selected_class="active", wrapper="li", wrapper_class="nav-item")
        assert wrapper_classes(True, MatchOptions(), cfg) == "active nav-item"

    def test_not_selected_wrapper_class_only(self) -> None:
        cfg = NavConfig(selected_class="active", wrapper="li", wrapper_class="nav-item")
        assert wrapper_classes(False, MatchOptions(), cfg) == "nav-item"

    def test_wrapper_class_false(self) -> None:
        cfg = NavConfig(selected_class="active", wrapper="li", wrapper_class="nav-item")
        assert wrapper_classes(True, MatchOptions(wrapper_class=False), cfg) == "active"
        assert wrapper_classes(False, MatchOptions(wrapper_class=False), cfg) is None

    def test_per_link_wrapper_class(self) -> None:
        opts = MatchOptions(wrapper="li", wrapper_class="tab")
        assert wrapper_classes(True, opts, NavConfig()) == "selected tab"


class TestResolve:
    def test_intermediates_exposed(self) -> None:
        result = resolve("/posts/5", "/posts", "posts", "posts", MatchOptions(), NavConfig())
        assert result.selected is True
        assert result.paths_match is False
        assert result.segments_match is True
        assert result.link_classes == "selected"
        assert result.wrapper is None
        assert result.wrapper_classes is None

    def test_not_selected(self) -> None:
        result = resolve("/a", "/b", None, None, MatchOptions(), NavConfig(wrapper="li"))
        assert result.selected is False
        assert result.link_classes is None
        assert result.wrapper == "li"

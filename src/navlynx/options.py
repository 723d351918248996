"""Per-link match options.

``MatchOptions`` is the caller-supplied policy for one link: how query
strings are normalized, which segment (if any) is compared, optional
override predicates, and class/wrapper overrides of ``NavConfig``.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Literal

from navlynx.config import is_tag_name
from navlynx.errors import ConfigurationError

type Condition = Callable[[], bool]
"""Zero-argument override predicate supplied by the caller."""

type IgnoreParams = Literal["all"] | tuple[str, ...]
type UseParams = tuple[str, ...] | Mapping[str, str]


@dataclass(frozen=True, slots=True)
class MatchOptions:
    """Read-only match policy for a single link.

    ``None`` means "unset": fall back to the process default (or to no
    policy). ``False`` on the class/wrapper fields disables the default.

    At most one of ``ignore_params``/``use_params`` is honored
    (``use_params`` wins), and at most one of ``controller_segment``/
    ``url_segment`` (``controller_segment`` wins).
    """

    ignore_params: IgnoreParams | None = None
    use_params: UseParams | None = None

    # 1-based index into the "/"-separated endpoint name
    controller_segment: int | None = None
    # 0-based index into the path segments after the leading "/"
    url_segment: int | None = None

    and_condition: Condition | None = field(default=None, compare=False)
    or_condition: Condition | None = field(default=None, compare=False)

    selected_class: str | None = None
    wrapper: str | Literal[False] | None = None
    wrapper_class: str | Literal[False] | None = None

    def __post_init__(self) -> None:
        # Empty collections carry no policy
        for name in ("ignore_params", "use_params"):
            value = getattr(self, name)
            if isinstance(value, (list, tuple, set, frozenset, Mapping)) and not value:
                object.__setattr__(self, name, None)

        if self.ignore_params is not None and self.ignore_params != "all":
            object.__setattr__(self, "ignore_params", _name_tuple("ignore_params", self.ignore_params))
        if self.use_params is not None:
            if isinstance(self.use_params, Mapping):
                expected = MappingProxyType({str(k): str(v) for k, v in self.use_params.items()})
                object.__setattr__(self, "use_params", expected)
            else:
                object.__setattr__(self, "use_params", _name_tuple("use_params", self.use_params))

        _check_position("controller_segment", self.controller_segment, minimum=1)
        _check_position("url_segment", self.url_segment, minimum=0)

        for name in ("and_condition", "or_condition"):
            value = getattr(self, name)
            if value is not None and not callable(value):
                msg = f"{name} must be a zero-argument callable, got {type(value).__name__}."
                raise ConfigurationError(msg)

        if isinstance(self.wrapper, str) and not is_tag_name(self.wrapper):
            msg = f"wrapper {self.wrapper!r} is not a valid element name."
            raise ConfigurationError(msg)
        if self.wrapper is True or self.wrapper_class is True:
            msg = "wrapper and wrapper_class accept a string, False, or None."
            raise ConfigurationError(msg)

    def __hash__(self) -> int:
        # Conditions are excluded, as they are from equality
        use_params = self.use_params
        if isinstance(use_params, Mapping):
            use_params = tuple(sorted(use_params.items()))
        return hash(
            (
                self.ignore_params,
                use_params,
                self.controller_segment,
                self.url_segment,
                self.selected_class,
                self.wrapper,
                self.wrapper_class,
            )
        )

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> MatchOptions:
        """Build options from template-style keyword arguments.

        Example::

            MatchOptions.from_kwargs(ignore_params=["page"], wrapper="li")

        Raises ``ConfigurationError`` for unknown option names.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            msg = f"Unknown nav link option(s): {', '.join(unknown)}."
            raise ConfigurationError(msg)
        return cls(**kwargs)

    @property
    def has_query_policy(self) -> bool:
        """True if either query normalization policy is set."""
        return self.use_params is not None or self.ignore_params is not None

    @property
    def compares_segments(self) -> bool:
        """True if a segment comparison was requested."""
        return self.controller_segment is not None or self.url_segment is not None


def _name_tuple(option: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    try:
        return tuple(str(name) for name in value)  # type: ignore[attr-defined]
    except TypeError:
        msg = f'{option} must be "all", a list of names, or a mapping; got {value!r}.'
        raise ConfigurationError(msg) from None


def _check_position(option: str, value: object, *, minimum: int) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        msg = f"{option} must be an integer >= {minimum}, got {value!r}."
        raise ConfigurationError(msg)


DEFAULT_OPTIONS = MatchOptions()

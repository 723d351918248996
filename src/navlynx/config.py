"""Process-wide link defaults.

NavConfig is a frozen dataclass — set once at startup, immutable for the
process lifetime, passed explicitly to every ``LinkMatcher``.
"""

import re
from dataclasses import dataclass

from navlynx.errors import ConfigurationError

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


@dataclass(frozen=True, slots=True)
class NavConfig:
    """Default classes and wrapper for nav links. Immutable after creation.

    Per-link ``MatchOptions`` override these; a per-link ``False``
    disables the default entirely::

        config = NavConfig(selected_class="active", wrapper="li", wrapper_class="nav-item")
    """

    # Class added to the link (or wrapper) of the current location
    selected_class: str = "selected"

    # Wrapper element name, e.g. "li"; None renders a bare <a>
    wrapper: str | None = None

    # Class always present on the wrapper element
    wrapper_class: str | None = None

    def __post_init__(self) -> None:
        if not self.selected_class or not self.selected_class.strip():
            msg = "NavConfig.selected_class must be a non-empty class name."
            raise ConfigurationError(msg)
        if self.wrapper is not None and not _TAG_NAME.match(self.wrapper):
            msg = f"NavConfig.wrapper {self.wrapper!r} is not a valid element name."
            raise ConfigurationError(msg)


def is_tag_name(value: str) -> bool:
    """True if *value* can be emitted as an HTML element name."""
    return bool(_TAG_NAME.match(value))

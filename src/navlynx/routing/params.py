"""Path parameter converters and formatting.

Built-in converters for route path segments like ``{id:int}``, used
both when recognizing a path and when building one.
"""

import re
from urllib.parse import quote

# Regex each converter matches against a single encoded path segment
# (``path`` spans segments)
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}


def format_param(value: object, param_type: str) -> str | None:
    """Format *value* for a path segment of *param_type*.

    The value is percent-encoded first and the encoded text is checked
    against the converter, so a ``str`` value containing ``/`` becomes
    ``%2F`` rather than being refused. Returns ``None`` if the value does
    not satisfy the converter (``format_param("abc", "int") -> None``).
    """
    pattern = CONVERTERS[param_type]
    encoded = quote(str(value), safe="/" if param_type == "path" else "")
    if not re.fullmatch(pattern, encoded):
        return None
    return encoded

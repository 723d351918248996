"""Link matching — path normalization, segment extraction, selection.

Pure functions over strings and ``MatchOptions``; no request, router, or
rendering state lives here.
"""

from navlynx.matching.normalize import normalize, split_path
from navlynx.matching.segments import path_segments, segment
from navlynx.matching.selection import MatchResult, is_selected, resolve

__all__ = [
    "MatchResult",
    "is_selected",
    "normalize",
    "path_segments",
    "resolve",
    "segment",
    "split_path",
]

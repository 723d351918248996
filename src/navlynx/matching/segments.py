"""Segment extraction for coarse "is this link in the active section" matching."""

from navlynx.options import MatchOptions


def segment_position(options: MatchOptions) -> int | None:
    """Zero-based index requested by *options*, or None.

    ``controller_segment`` counts from 1; ``url_segment`` counts from 0.
    """
    if options.controller_segment is not None:
        return options.controller_segment - 1
    if options.url_segment is not None:
        return options.url_segment
    return None


def path_segments(path: str) -> list[str]:
    """Split the path part of *path* on ``/``, after the leading slash.

    Example::

        >>> path_segments("/admin/posts/5?page=2")
        ['admin', 'posts', '5']
    """
    bare = path.partition("?")[0].partition("#")[0]
    return bare.removeprefix("/").split("/")


def segment(options: MatchOptions, controller_name: str | None, path: str) -> str | None:
    """Return the segment *options* selects, or None.

    ``controller_segment=2`` on endpoint ``"admin/posts"`` gives ``"posts"``;
    ``url_segment=1`` on ``"/admin/posts/5"`` gives ``"posts"``. Out-of-range
    positions and an absent endpoint name give None.
    """
    position = segment_position(options)
    if position is None:
        return None
    if options.controller_segment is not None:
        if controller_name is None:
            return None
        return _at(controller_name.split("/"), position)
    return _at(path_segments(path), position)


def _at(parts: list[str], index: int) -> str | None:
    if 0 <= index < len(parts):
        return parts[index]
    return None

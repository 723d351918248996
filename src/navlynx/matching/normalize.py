"""Path normalization under a query-string policy.

Two paths are "the same location" when their normalized forms are equal.
``normalize`` is pure: the same (path, options) always yields the same
string, and normalizing twice changes nothing.
"""

from collections.abc import Mapping

from navlynx.http.query import QueryParams, encode_query
from navlynx.options import MatchOptions


def split_path(path: str) -> tuple[str, str, str]:
    """Split *path* into (path, query, fragment) without decoding.

    Example::

        >>> split_path("/a?x=1#top")
        ('/a', 'x=1', 'top')
    """
    rest, _, fragment = path.partition("#")
    bare, _, query = rest.partition("?")
    return bare, query, fragment


def normalize(path: str, options: MatchOptions) -> str:
    """Return *path* in the comparable form *options* asks for.

    - ``use_params`` (list): keep only the listed query keys.
    - ``use_params`` (mapping): keep only keys whose value equals the
      expected value, compared as strings.
    - ``ignore_params="all"``: drop the whole query string.
    - ``ignore_params`` (list): drop the listed keys.
    - Neither: *path* unchanged.

    ``use_params`` wins when both are set. Re-serialized queries list keys
    in sorted order with the last value of each key; an empty result
    drops the ``?``. The path before ``?`` and any ``#fragment`` are never
    altered.
    """
    use_params = options.use_params
    ignore_params = options.ignore_params

    if use_params is None and ignore_params is None:
        return path

    bare, query, fragment = split_path(path)

    if use_params is None and ignore_params == "all":
        return _join(bare, "", fragment)

    params = QueryParams(query)

    if use_params is not None:
        if isinstance(use_params, Mapping):
            kept = params.matching(use_params)
        else:
            kept = params.only(use_params)
    else:
        kept = params.without(ignore_params)  # type: ignore[arg-type]

    return _join(bare, encode_query(kept), fragment)


def _join(path: str, query: str, fragment: str) -> str:
    if query:
        path = f"{path}?{query}"
    if fragment:
        path = f"{path}#{fragment}"
    return path

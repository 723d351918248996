"""``navlynx compare`` — explain one match decision.

Prints both normalized paths, both segments, and the verdict. Exits 0
when the link is selected and 1 when it is not, so the command can be
used in shell checks.
"""

import argparse
import sys

from navlynx.errors import ConfigurationError
from navlynx.evaluator import LinkMatcher
from navlynx.http.request import RequestContext
from navlynx.options import MatchOptions
from navlynx.routing.route import Route
from navlynx.routing.router import RouteTable


def parse_ignore_params(value: str | None) -> str | tuple[str, ...] | None:
    """``"all"`` stays a policy name; anything else is a comma list."""
    if value is None:
        return None
    if value == "all":
        return "all"
    return tuple(name for name in value.split(",") if name)


def parse_use_params(value: str | None) -> tuple[str, ...] | dict[str, str] | None:
    """A comma list of keys, or of ``key=value`` pairs for an expected-value filter."""
    if value is None:
        return None
    items = [item for item in value.split(",") if item]
    if any("=" in item for item in items):
        pairs = [item.partition("=") for item in items]
        return {key: expected for key, _, expected in pairs}
    return tuple(items)


def parse_routes(specs: list[str]) -> RouteTable:
    """Build a route table from ``PATTERN=ENDPOINT`` strings."""
    table = RouteTable()
    for spec in specs:
        pattern, sep, endpoint = spec.rpartition("=")
        if not sep or not pattern or not endpoint:
            msg = f"Route {spec!r} must look like PATTERN=ENDPOINT."
            raise ConfigurationError(msg)
        table.add(Route(pattern, endpoint))
    table.compile()
    return table


def run_compare(args: argparse.Namespace) -> None:
    """Match ``args.link`` against ``args.current`` and print the reasoning."""
    try:
        options = MatchOptions(
            ignore_params=parse_ignore_params(args.ignore_params),
            use_params=parse_use_params(args.use_params),
            url_segment=args.url_segment,
            controller_segment=args.controller_segment,
        )
        matcher = LinkMatcher(router=parse_routes(args.route))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    result = matcher.match(RequestContext.from_url(args.current), args.link, options)

    rows = [
        ("current", result.current_path),
        ("link", result.link_path),
        ("paths match", _yes_no(result.paths_match)),
    ]
    if options.compares_segments:
        rows.append(("current segment", _show(result.current_segment)))
        rows.append(("link segment", _show(result.link_segment)))
        rows.append(("segments match", _yes_no(result.segments_match)))
    rows.append(("selected", _yes_no(result.selected)))

    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        print(f"{label:<{width}}  {value}")

    raise SystemExit(0 if result.selected else 1)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def _show(value: str | None) -> str:
    return "-" if value is None else repr(value)

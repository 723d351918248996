"""navlynx CLI — inspect how two paths compare under a match policy.

Entry point registered as ``navlynx`` in ``pyproject.toml``::

    [project.scripts]
    navlynx = "navlynx.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``navlynx`` command."""
    parser = argparse.ArgumentParser(
        prog="navlynx",
        description="navlynx — current-location matching for navigation links.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- navlynx compare --------------------------------------------------
    compare_parser = subparsers.add_parser(
        "compare",
        help="Show whether a link path is selected for a current path",
    )
    compare_parser.add_argument("current", help="Current request path, with query (e.g. /posts?page=2)")
    compare_parser.add_argument("link", help="Link target path (e.g. /posts)")
    compare_parser.add_argument(
        "--ignore-params",
        default=None,
        help='"all", or comma-separated query keys to ignore',
    )
    compare_parser.add_argument(
        "--use-params",
        default=None,
        help="Comma-separated query keys to keep, or key=value pairs to require",
    )
    segment_group = compare_parser.add_mutually_exclusive_group()
    segment_group.add_argument("--url-segment", type=int, default=None, help="Compare this path segment")
    segment_group.add_argument(
        "--controller-segment",
        type=int,
        default=None,
        help="Compare this endpoint-name segment (1-based; needs --route)",
    )
    compare_parser.add_argument(
        "--route",
        action="append",
        default=[],
        metavar="PATTERN=ENDPOINT",
        help="Register a route, e.g. '/posts/{id:int}=posts' (repeatable)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "compare":
        from navlynx.cli._compare import run_compare

        run_compare(args)

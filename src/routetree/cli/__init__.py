"""routetree CLI: inspect a route tree without starting a server.

Entry point registered as ``routetree`` in ``pyproject.toml``::

    [project.scripts]
    routetree = "routetree.cli:main"
"""

import argparse
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("tree", help="Path to a JSON route tree")
    parser.add_argument(
        "--handlers",
        required=True,
        help="Import string for the handler namespace (e.g. myapp.controllers or myapp:handlers)",
    )
    parser.add_argument(
        "--default-method",
        default=None,
        help="Method for keys without a method prefix (default: get)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routetree`` command."""
    parser = argparse.ArgumentParser(
        prog="routetree",
        description="routetree: declarative route trees with reverse URL generation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routetree routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List compiled route bindings")
    _add_common(routes_parser)

    # -- routetree url ----------------------------------------------------
    url_parser = subparsers.add_parser("url", help="Generate the URL for a handler name")
    _add_common(url_parser)
    url_parser.add_argument("name", help="Symbolic handler name (e.g. social.edit_profile)")
    url_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Path parameters",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routetree.cli._routes import run_routes

        run_routes(args)
    elif args.command == "url":
        from routetree.cli._url import run_url

        run_url(args)

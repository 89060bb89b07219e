"""``routetree url``: generate the URL for a handler name."""

import argparse
import sys

from routetree.cli._resolve import compile_from_args
from routetree.errors import RouteTreeError


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Turn ``["key=value", ...]`` into a dict. Raises ``ValueError``."""
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[key] = value
    return params


def run_url(args: argparse.Namespace) -> None:
    router = compile_from_args(args)
    try:
        print(router.get_url(args.name, parse_params(args.params)))
    except (ValueError, RouteTreeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

"""``routetree routes``: list compiled route bindings.

Compiles the tree against the handler namespace and prints a table of
METHOD, PATH and the handler names in chain order.
"""

import argparse

from routetree.cli._resolve import compile_from_args

HEADER = ("METHOD", "PATH", "HANDLERS")


def _render(table: list[tuple[str, str, str]]) -> list[str]:
    # the last column is left ragged
    widths = [max(len(cell) for cell in column) for column in zip(*table)][:-1]
    lines = []
    for row in table:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append("  ".join([*cells, row[-1]]).rstrip())
    lines.insert(1, "=" * len(lines[0]))
    return lines


def run_routes(args: argparse.Namespace) -> None:
    """Print every binding the tree produces."""
    router = compile_from_args(args)
    if not router.routes:
        print("No routes registered.")
        return
    table = [HEADER]
    table.extend((b.method.upper(), b.path, " -> ".join(b.names)) for b in router.routes)
    print("\n".join(_render(table)))

"""``mockingbird routes``: list registered routes.

Resolves an import string to an App and prints its dispatch table with
method, path, and handler name, followed by the default handler.
"""

import argparse
import sys

from mockingbird.cli._load import load_app
from mockingbird.errors import ConfigurationError
from mockingbird.routing.handler import handler_name


def run_routes(args: argparse.Namespace) -> None:
    """Print the frozen dispatch table of ``args.app``."""
    try:
        app = load_app(args.app)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = app.table
    rows = [(key.method, key.path, handler_name(table[key])) for key in sorted(table)]
    rows.append(("*", "*", f"{handler_name(table.default)} (default)"))

    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, name in rows:
        print(fmt.format(method, path, name))

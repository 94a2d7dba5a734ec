"""Mockingbird CLI: serve a stand-in backend or list its routes.

Entry point registered as ``mockingbird`` in ``pyproject.toml``::

    [project.scripts]
    mockingbird = "mockingbird.cli:main"
"""

import argparse
import sys

DEFAULT_APP = "mockingbird.backends.networks:app"


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``mockingbird`` command."""
    parser = argparse.ArgumentParser(
        prog="mockingbird",
        description="Mockingbird: stand-in HTTP backends for integration tests.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- mockingbird serve ------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve a backend")
    serve_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )
    serve_parser.add_argument("--host", default=None, help="Bind host address")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port number (0 picks an unused port)",
    )
    serve_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error", "critical"],
        help="Logging level (default: from app config)",
    )

    # -- mockingbird routes -----------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        nargs="?",
        default=DEFAULT_APP,
        help=f"Import string (default: {DEFAULT_APP})",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "serve":
        from mockingbird.cli._serve import serve

        serve(args)
    elif args.command == "routes":
        from mockingbird.cli._routes import run_routes

        run_routes(args)

"""``mockingbird serve``: resolve an app and run it."""

import argparse
import logging
import sys

from mockingbird.cli._load import load_app
from mockingbird.errors import ConfigurationError


def serve(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and start serving it.

    ``--host``/``--port`` override the app config; a port of 0 picks an
    unused one.
    """
    try:
        app = load_app(args.app)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    level = args.log_level or app.config.log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.run(host=args.host, port=args.port)

"""Command-line entry point."""

import argparse
import logging

from displaymd.app import create_app
from displaymd.config import (
    DEFAULT_HOME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ConfigurationError,
    load_settings,
)

logger = logging.getLogger("displaymd")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="displaymd",
        description="Serve a directory of markdown files over HTTP.",
    )
    p.add_argument(
        "dir",
        nargs="?",
        default=".",
        help="Directory containing markdown files (default: current directory)",
    )
    p.add_argument(
        "-p", "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to serve on (default: {DEFAULT_PORT})",
    )
    p.add_argument(
        "-H", "--home",
        default=DEFAULT_HOME,
        help=f"Home file shown at / (relative path, default: {DEFAULT_HOME})",
    )
    p.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST})",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log scan and request details",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings(args.dir, home=args.home, host=args.host, port=args.port)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    app = create_app(settings)
    logger.info("Serving: %s", settings.root)
    logger.info("http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)
    return 0

"""Command line tool for archiving materialized product installations."""

import argparse
import asyncio
import logging
import sys
import traceback

from product_archiver.exceptions import ProductArchiverException
from . import archive, plan

_LOGGER = logging.getLogger(__name__)


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Command line utility for archiving product installations.",
    )
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )

    subparsers = parser.add_subparsers(dest="command", help="Command", required=True)

    archive.ArchiveAction.register(subparsers)
    plan.PlanAction.register(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Product-archiver command line tool main entry point."""
    parser = _make_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logging.basicConfig(level=args.log_level)

    action = args.cls()
    try:
        asyncio.run(action.run(**vars(args)))
    except ProductArchiverException as err:
        if args.log_level == "DEBUG":
            traceback.print_exc(file=sys.stderr)
        print("product-archiver error: ", err, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

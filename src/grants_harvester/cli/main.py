"""Main CLI entry point."""

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _setup_logging() -> None:
    """Root logger to stderr at LOG_LEVEL (default INFO); httpx kept quiet."""
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="[%(asctime)s] %(levelname)s [%(module)s-%(funcName)s()::%(lineno)d] %(message)s",
        datefmt="%d/%b/%Y %H:%M:%S",
        stream=sys.stderr,
    )
    if log_level <= logging.INFO:
        for noisy in ("httpx", "httpcore"):
            logging.getLogger(noisy).setLevel(logging.WARNING)


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="grants-harvester",
        description="Harvest single-attachment grant opportunities from Simpler.Grants.gov",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("collect", help="Collect all posted grant opportunity IDs")
    subparsers.add_parser("harvest", help="Fetch details for collected IDs and write statistics")
    subparsers.add_parser("run", help="Collect then harvest")

    args = parser.parse_args(argv)

    load_dotenv()
    _setup_logging()

    from grants_harvester.config import HarvesterConfig
    from grants_harvester.pipeline import run_collect, run_harvest, run_pipeline

    try:
        config = HarvesterConfig.from_env()
        if args.command == "collect":
            run_collect(config)
        elif args.command == "harvest":
            run_harvest(config)
        elif args.command == "run":
            run_pipeline(config)
        else:
            parser.print_help()
    except Exception as e:
        logger.error("Fatal error: %s", e)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

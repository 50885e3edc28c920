#!/usr/bin/env python3
"""
Command line entry point for the muh2 log parser
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date

from .config import load_settings
from .errors import InternalError, log_error
from .events import CollectingSink, EventKind
from .logging_config import LoggerConfigurator
from .logs import logger
from .reader import LogReader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="muh2log", description="Classify a muh2 IRC log into chat events"
    )
    parser.add_argument("logfile", help="muh2 log file to parse")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="date the log covers (YYYY-MM-DD); defaults to the date in the filename",
    )
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--encoding", help="primary encoding of the log file")
    parser.add_argument(
        "--debug", action="store_true", default=None, help="enable debug logging"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse one log file and log a per-kind event summary.

    Returns:
        Process exit code: 0 on success, 1 on configuration or read errors.
    """
    args = build_parser().parse_args(argv)
    configurator = LoggerConfigurator({"debug": args.debug})
    configurator.configure()
    try:
        settings = load_settings(
            args.config, log_date=args.date, encoding=args.encoding, debug=args.debug
        )
        if settings.debug:
            logging.getLogger().setLevel(logging.DEBUG)
        logger.enable_debug_format(settings.debug)
        logger.log_event("app", "start", path=args.logfile)
        sink = CollectingSink()
        stats = LogReader(settings).parse_file(args.logfile, sink)
    except InternalError as e:
        log_error("Parsing aborted", e)
        return 1

    for kind in EventKind:
        count = stats.events.get(kind, 0)
        if count:
            logger.log_event("app", "summary", kind=kind.value, count=count)
    logger.log_event(
        "app", "finished", events=stats.total_events, lines=stats.lines
    )
    return 0


def run() -> None:
    """Synchronous console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()

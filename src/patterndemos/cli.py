# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/patterndemos/LICENSE
# ==============================================================================

"""Command line entry point: ``patterndemos [demo] [--list] [--log-level LEVEL]``."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import sys
from typing import TextIO

from .demos import DEMOS, demo_names, run_all, run_demo
from .exceptions import PatternDemoError
from .utils.logger import get_logger, setup_logger
from .utils.output import write_line


ALL = "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patterndemos",
        description="Run the Facade, MVC and State design pattern demos.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                 # Run every demo
  %(prog)s state           # Run the State pattern demo
  %(prog)s --list          # List available demos
        """,
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default=ALL,
        choices=[*demo_names(), ALL],
        help="Demo to run (default: all)",
    )
    parser.add_argument("--list", action="store_true", help="List available demos and exit")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override PATTERNDEMOS_LOG_LEVEL",
    )
    return parser


def main(argv: Sequence[str] | None = None, stream: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_level is not None:
        setup_logger(level=args.log_level, force=True)
    log = get_logger(__name__)

    if args.list:
        for spec in DEMOS.values():
            write_line(f"{spec.name:<8} {spec.title}", stream)
        return 0

    try:
        if args.demo == ALL:
            run_all(stream)
        else:
            run_demo(args.demo, stream)
    except PatternDemoError as exc:
        log.error("Demo failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

# failmodes/cli/main.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from failmodes import __version__
from failmodes.config import load_config
from failmodes.config.validator import LOG_LEVELS
from failmodes.core.errors import ConfigError
from failmodes.cli.demo_cmd import run_all, run_forward, run_owner, run_parse, run_search
from failmodes.cli.fault_cmd import run_fault

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="failmodes",
        description="Demonstrate absence, recoverable failure and unrecoverable faults",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, help="Path to a YAML configuration file")
    parser.add_argument("--json", action="store_true", help="Print one JSON record per line")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--backtrace", action="store_true",
                        help="Print the full traceback when a fault occurs")

    sub = parser.add_subparsers(dest="command")

    # all - the default sequence
    sub.add_parser("all", help="Run the owner, search and parse demonstrations")

    # owner
    sub.add_parser("owner", help="Build owners with and without an asset")

    # search
    search_p = sub.add_parser("search", help="Find the first occurrence of a character")
    search_p.add_argument("text", nargs="?", help="Text to scan (default from config)")
    search_p.add_argument("char", nargs="?", help="Character to find (default from config)")

    # parse
    parse_p = sub.add_parser("parse", help="Parse unsigned integers; several texts are summed")
    parse_p.add_argument("texts", nargs="*", help="Text(s) to parse (default from config)")

    # forward
    sub.add_parser("forward", help="Forward an inner failure with added context")

    # fault
    fault_p = sub.add_parser("fault", help="Trigger an unrecoverable fault")
    fault_p.add_argument("--nested", action="store_true",
                         help="Fault through two intermediate calls")
    fault_p.add_argument("--isolated", action="store_true",
                         help="Contain the fault to a worker thread and report it")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"failmodes: {e}", file=sys.stderr)
        return 2

    if args.log_level:
        config = replace(config, log_level=args.log_level.upper())
    if args.backtrace:
        config = replace(config, backtrace=True)

    level = config.log_level.upper()
    if level not in LOG_LEVELS:
        print(f"failmodes: unknown log level {config.log_level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format=LOG_FORMAT)

    command = args.command or "all"
    if command == "all":
        return run_all(args, config)
    elif command == "owner":
        return run_owner(args, config)
    elif command == "search":
        return run_search(args, config)
    elif command == "parse":
        return run_parse(args, config)
    elif command == "forward":
        return run_forward(args, config)
    elif command == "fault":
        return run_fault(args, config)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())

"""Main entry point for cnholiday."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from cnholiday.checker import Checker
from cnholiday.config import Config
from cnholiday.errors import CnHolidayError
from cnholiday.sources import embedded_years


def build_config(args: argparse.Namespace) -> Config:
    """Layer command line flags over the environment or the config file."""
    config = Config.from_env() or Config.load() or Config()
    if args.local_dir:
        config.local_data_dir = Path(args.local_dir)
    if args.no_remote:
        config.disable_remote = True
    if args.base_url:
        config.remote_base_url = args.base_url
    if args.timeout is not None:
        config.timeout = args.timeout
    return config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cnholiday", description="Check Chinese public holidays and workdays."
    )
    parser.add_argument(
        "dates", nargs="*", metavar="DATE", help="dates as YYYY-MM-DD (default: today)"
    )
    parser.add_argument("--local-dir", help="directory holding {year}.json files")
    parser.add_argument(
        "--no-remote", action="store_true", help="do not fetch from the remote endpoint"
    )
    parser.add_argument("--base-url", help="remote endpoint base URL")
    parser.add_argument("--timeout", type=float, help="remote request timeout in seconds")
    parser.add_argument(
        "--bundled-years", action="store_true", help="list the years shipped with the package"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log data source activity")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.bundled_years:
        sys.stdout.write(" ".join(str(year) for year in embedded_years()) + "\n")
        return 0

    try:
        config = build_config(args)
    except ValueError as err:
        sys.stderr.write(f"invalid configuration: {err}\n")
        return 1

    checker = Checker(config)
    try:
        targets = [date.fromisoformat(value) for value in args.dates] or [date.today()]
    except ValueError as err:
        sys.stderr.write(f"invalid date: {err}\n")
        return 1

    for target in targets:
        try:
            info = checker.get_info(target)
        except CnHolidayError as err:
            sys.stderr.write(f"{err}\n")
            return 1
        sys.stdout.write(f"{info}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

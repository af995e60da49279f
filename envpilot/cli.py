"""Command line interface for managing env files (``pilot``)."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from .env import DEFAULT_ENV_FILE
from .errors import EnvPilotError
from .store import EnvStore
from .values import TYPE_NAMES
from .writer import set_value

ROOT_HINT = "Use 'pilot set <key>=<value> [flags]' to set environment variables"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pilot",
        description="A CLI tool for managing environment variables",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("PILOT_LOG_LEVEL", "WARNING"),
        help="Python logging level (e.g. INFO, WARNING). Use INFO to see reload traces.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    set_parser = subparsers.add_parser(
        "set",
        help="Set an environment variable",
        description="Append KEY=VALUE to an env file after checking it parses as --type.",
    )
    set_parser.add_argument("assignment", metavar="<key>=<value>")
    set_parser.add_argument(
        "--type",
        "-t",
        dest="value_type",
        default="string",
        choices=TYPE_NAMES,
        help="Type of the value (string, int, bool, float)",
    )
    set_parser.add_argument(
        "--file",
        "-f",
        default=os.environ.get("PILOT_FILE", ""),
        help="The file to save the environment variable (default is .env)",
    )
    return parser


def run_set(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    key, sep, value = args.assignment.partition("=")
    if not sep:
        parser.error("invalid syntax. Use: <key>=<value>")
    filename = args.file or DEFAULT_ENV_FILE

    try:
        set_value(EnvStore(), key, value, args.value_type, filename)
    except EnvPilotError as exc:
        print(f"error setting value: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully set {key}={value} as {args.value_type} in file {filename}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if args.command == "set":
        return run_set(args, parser)

    print(ROOT_HINT)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())

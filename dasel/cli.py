"""Command line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional, Sequence

from .errors import DaselError
from .selfupdate import Updater
from .update import run_update
from .version import current_version

DEFAULT_COMMAND = "select"
BLACKLISTED_ARGS = ("-v", "--version", "help")
OWNER_ENV = "DASEL_UPDATE_OWNER"
REPO_ENV = "DASEL_UPDATE_REPO"


def _run_update_command(args: argparse.Namespace) -> None:
    owner = os.environ.get(OWNER_ENV)
    if not owner:
        raise DaselError(f"release owner is not configured: set {OWNER_ENV}")
    repo = os.environ.get(REPO_ENV) or "dasel"
    updater = Updater(installed_version=current_version(), owner=owner, repo=repo)
    run_update(updater, sys.stdout, update_development=args.dev)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with every available command."""
    parser = argparse.ArgumentParser(
        prog="dasel",
        description="Query and modify data structures using selector strings.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s version {current_version()}"
    )
    subparsers = parser.add_subparsers(dest="command")

    update = subparsers.add_parser("update", help="Update dasel to the latest stable release.")
    update.add_argument(
        "--dev", action="store_true", help="Allow updates in development version of dasel."
    )
    update.set_defaults(handler=_run_update_command)

    parser.set_defaults(handler=None, command_names=tuple(subparsers.choices))
    return parser


def change_default_command(
    argv: Sequence[str],
    command: str,
    subcommands: Iterable[str],
    blacklisted_args: Iterable[str] = (),
) -> list[str]:
    """Insert ``command`` after the program name unless a command is already given.

    ``argv`` starts with the program name. Nothing changes when any argument
    is blacklisted.
    """
    args = list(argv)
    if len(args) <= 1:
        return args
    if args[1] in set(subcommands):
        return args
    blacklisted = set(blacklisted_args)
    if any(arg in blacklisted for arg in args):
        return args
    return [args[0], command, *args[1:]]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line program and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    names = parser.get_default("command_names")
    full = ["dasel", *argv]
    if DEFAULT_COMMAND in names:
        full = change_default_command(full, DEFAULT_COMMAND, names, BLACKLISTED_ARGS)
    args = parser.parse_args(full[1:])

    if args.handler is None:
        parser.print_help()
        return 0
    try:
        args.handler(args)
    except DaselError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0
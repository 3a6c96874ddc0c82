# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argument parser for the flagpick CLI.

Key Components:
- `get_root_parser()`: Creates the root-level CLI parser.
- `resolve_mode()`: Maps parsed arguments to a `FlagpickMode`.
"""
from argparse import ArgumentParser, Namespace
from typing import Any, Sequence

from flagpick.language import Language
from flagpick.mode import FlagpickMode
from flagpick.version import __version__


def get_root_parser(
    prog: str | None = "flagpick",
    usage: str | None = None,
    description: str | None = "flagpick - Pick flags from a command's help text.",
    epilog: str | None = "Tip: Use 'flagpick --list COMMAND' to see what was found.",
    parents: Sequence[ArgumentParser] | None = None,
    argument_default: Any = None,
    add_help: bool = True,
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the flagpick CLI.

    Notes:
        ```
        Includes the following arguments:
            COMMAND              : Command whose flags are listed.
            -l / --language      : Help text language (system or en).
            -s / --select        : Pre-select a flag by its argument (repeatable).
            --list               : Print the flag table and exit.
            --print              : Print the composed command and exit.
            --config             : Path to a TOML or YAML config file.
            -v / --verbose       : Enable debug logging.
            --version            : Print the flagpick version.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        usage=usage,
        description=description,
        epilog=epilog,
        parents=parents if parents else [],
        argument_default=argument_default,
        add_help=add_help,
        exit_on_error=exit_on_error,
    )
    parser.add_argument("command", help="Command whose help text is parsed.")
    parser.add_argument(
        "-l",
        "--language",
        choices=[language.value for language in Language],
        default=None,
        help="Help text language: the system locale or locale-neutral English.",
    )
    parser.add_argument(
        "-s",
        "--select",
        action="append",
        default=[],
        metavar="ARG",
        help="Pre-select the flag whose argument is ARG (e.g. --select=--verbose).",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--list", action="store_true", help="Print the flag table and exit."
    )
    output.add_argument(
        "--print", action="store_true", help="Print the composed command and exit."
    )
    parser.add_argument("--config", default=None, help="Path to a config file.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def resolve_mode(args: Namespace) -> FlagpickMode:
    if args.list:
        return FlagpickMode.LIST
    if args.print:
        return FlagpickMode.PRINT
    return FlagpickMode.MENU

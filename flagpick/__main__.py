"""
Flagpick CLI

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import sys
from argparse import Namespace
from typing import Sequence

from rich.markup import escape

from flagpick.acquirer import HelpTextAcquirer, fetch_flags
from flagpick.config import load_config
from flagpick.console import console, err_console
from flagpick.exceptions import FlagpickError, NoFlagsFoundError, NoHelpAvailableError
from flagpick.flag import Flag
from flagpick.language import Language
from flagpick.logger import logger
from flagpick.menu import run_menu
from flagpick.mode import FlagpickMode
from flagpick.parsers import get_root_parser, resolve_mode
from flagpick.selection import render_flag_table
from flagpick.selection_model import SelectionModel
from flagpick.themes import OneColors
from flagpick.utils import setup_logging

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def emit(text: str) -> None:
    """Print plain output meant for the shell (no markup or highlighting)."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


async def run(args: Namespace) -> int:
    config = load_config(args.config)
    language = Language(args.language) if args.language else config.language
    acquirer = HelpTextAcquirer(config=config)

    async def loader(command: str, lang: Language) -> list[Flag]:
        return await fetch_flags(command, lang, acquirer=acquirer)

    with err_console.status(f"Loading help for '{escape(args.command)}'..."):
        model = await SelectionModel.load(args.command, language, loader=loader)
    model.select_arguments(args.select)
    logger.debug("Loaded %s", model)

    mode = resolve_mode(args)
    if mode is FlagpickMode.LIST:
        console.print(render_flag_table(model, show_cursor=False))
        return EXIT_OK
    if mode is FlagpickMode.PRINT:
        emit(model.preview_string())
        return EXIT_OK

    result = await run_menu(model)
    if result is None:
        err_console.print(f"[{OneColors.COMMENT_GREY}]Cancelled.[/]")
        return EXIT_CANCELLED
    emit(result)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    parser = get_root_parser()
    args = parser.parse_args(argv)
    setup_logging(
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        return asyncio.run(run(args))
    except (NoHelpAvailableError, NoFlagsFoundError) as error:
        err_console.print(f"[{OneColors.DARK_RED}]Error:[/] {escape(str(error))}")
        err_console.print(
            f"[{OneColors.COMMENT_GREY}]Try another command or check that "
            "'man' is installed.[/]"
        )
        return EXIT_FAILURE
    except FlagpickError as error:
        err_console.print(f"[{OneColors.DARK_RED}]Error:[/] {escape(str(error))}")
        return EXIT_FAILURE
    except (KeyboardInterrupt, EOFError):
        err_console.print(f"[{OneColors.COMMENT_GREY}]Cancelled.[/]")
        return EXIT_CANCELLED


if __name__ == "__main__":
    sys.exit(main())

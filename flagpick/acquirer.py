# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `HelpTextAcquirer`, which obtains the help text of an external command.

Acquisition runs in two phases and the first success wins:

1. `<command> --help` with a short timeout. This is fast and closest to the
   canonical flag syntax, but some programs lack it, hang on it, or answer with
   free-form prose. Its output is only accepted when it looks like an option
   listing (see `looks_like_option_listing`).
2. `man <command>` with a longer timeout, forced through a plain-text pager with
   typographic formatting and color escapes disabled.

Both phases set a wide terminal width so descriptions are not wrapped onto the
next line, and `Language.ENGLISH` adds a locale-neutral override. Timeouts and
failed commands in either phase are recovered here; only exhaustion of both
phases reaches the caller as `NoHelpAvailableError`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from flagpick.config import FlagpickConfig
from flagpick.exceptions import AcquisitionError, NoHelpAvailableError
from flagpick.extractor import extract_flags
from flagpick.flag import Flag
from flagpick.language import Language
from flagpick.logger import logger
from flagpick.supervisor import ProcessSupervisor

MIN_OPTION_MARKERS = 3

MAN_ENV = {
    "PAGER": "cat",
    "MANROFFOPT": "-c",
    "GROFF_NO_SGR": "1",
}

_OVERSTRIKE = re.compile(r".\x08")


class HelpSource(Enum):
    NATIVE_HELP = "help"
    MANUAL_PAGE = "man"


@dataclass
class AcquisitionResult:
    text: str
    source: HelpSource


def looks_like_option_listing(text: str) -> bool:
    """Whether `--help` output plausibly lists options rather than prose or noise."""
    return (
        text.count(" -") >= MIN_OPTION_MARKERS
        or text.count("\n-") >= MIN_OPTION_MARKERS
    )


def strip_overstrike(text: str) -> str:
    """Remove backspace bold/underline sequences some man setups still emit."""
    return _OVERSTRIKE.sub("", text)


class HelpTextAcquirer:
    """
    Obtains help text through `--help`, falling back to the manual page.

    Args:
        supervisor (ProcessSupervisor, optional): Runs the child processes.
        config (FlagpickConfig, optional): Timeouts, width hint and command names.
    """

    def __init__(
        self,
        supervisor: ProcessSupervisor | None = None,
        config: FlagpickConfig | None = None,
    ) -> None:
        self.config = config or FlagpickConfig()
        self.supervisor = supervisor or ProcessSupervisor(
            poll_interval=self.config.poll_interval
        )

    def _base_env(self, language: Language) -> dict[str, str]:
        env = {"COLUMNS": str(self.config.terminal_columns)}
        env.update(language.env_overrides())
        return env

    async def acquire(self, command_name: str, language: Language) -> str:
        result = await self.acquire_result(command_name, language)
        return result.text

    async def acquire_result(
        self, command_name: str, language: Language
    ) -> AcquisitionResult:
        base_env = self._base_env(language)

        help_command = [command_name, self.config.help_flag]
        try:
            text = await self.supervisor.run(
                help_command, timeout=self.config.help_timeout, env=base_env
            )
        except AcquisitionError as error:
            logger.debug("'%s' failed, trying man: %s", " ".join(help_command), error)
        else:
            if looks_like_option_listing(text):
                logger.debug("Using %s output for '%s'", help_command, command_name)
                return AcquisitionResult(text, HelpSource.NATIVE_HELP)
            logger.debug(
                "'%s' output does not look like an option listing, trying man",
                " ".join(help_command),
            )

        man_command = [self.config.man_command, command_name]
        try:
            text = await self.supervisor.run(
                man_command,
                timeout=self.config.man_timeout,
                env={**MAN_ENV, **base_env},
            )
        except AcquisitionError as error:
            logger.debug("'%s' failed: %s", " ".join(man_command), error)
            raise NoHelpAvailableError(command_name) from error

        logger.debug("Using manual page for '%s'", command_name)
        return AcquisitionResult(strip_overstrike(text), HelpSource.MANUAL_PAGE)


async def fetch_flags(
    command_name: str,
    language: Language,
    *,
    acquirer: HelpTextAcquirer | None = None,
) -> list[Flag]:
    """Acquire help text for `command_name` and extract its flags."""
    acquirer = acquirer or HelpTextAcquirer()
    text = await acquirer.acquire(command_name, language)
    return extract_flags(text)

# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SelectionModel`, the state behind flag selection for one target command.

The model owns the ordered flag list, each flag's `selected` state and a cursor
into the list. All operations are total: on an empty list they do nothing.

Switching the language re-runs acquisition and extraction and replaces the flag
list wholesale. Flags have no identity beyond their canonical argument string
(`--output` for `-o, --output`), so the selection is carried over by matching
that string; descriptions may change between locales. The switch is atomic: if
acquisition or extraction fails, the flags, selection, cursor and language stay
exactly as they were.

Typical Usage:
    model = await SelectionModel.load("cp", Language.SYSTEM)
    model.move_next()
    model.toggle_current()
    await model.toggle_language()
    print(model.preview_string())
"""
from __future__ import annotations

from typing import Awaitable, Callable, Iterable

from flagpick.acquirer import fetch_flags
from flagpick.exceptions import FlagpickError
from flagpick.flag import Flag
from flagpick.language import Language
from flagpick.logger import logger

FlagLoader = Callable[[str, Language], Awaitable[list[Flag]]]


class SelectionModel:
    """
    Flag list, selection state and cursor for a target command.

    Args:
        command (str): Target command name.
        flags (list[Flag]): Initial flag list.
        language (Language): Language the flags were acquired in.
        loader (FlagLoader, optional): Coroutine producing a fresh flag list for a
            command and language. Defaults to `fetch_flags`.
    """

    def __init__(
        self,
        command: str,
        flags: list[Flag] | None = None,
        language: Language = Language.SYSTEM,
        loader: FlagLoader | None = None,
    ) -> None:
        self.command = command
        self.flags: list[Flag] = list(flags or [])
        self.language = language
        self.loader: FlagLoader = loader or fetch_flags
        self.cursor: int | None = 0 if self.flags else None

    @classmethod
    async def load(
        cls,
        command: str,
        language: Language = Language.SYSTEM,
        loader: FlagLoader | None = None,
    ) -> SelectionModel:
        """Build a model from a fresh acquisition. Errors propagate."""
        loader = loader or fetch_flags
        flags = await loader(command, language)
        return cls(command, flags, language=language, loader=loader)

    @property
    def current(self) -> Flag | None:
        if self.cursor is None or not 0 <= self.cursor < len(self.flags):
            return None
        return self.flags[self.cursor]

    def move_next(self) -> None:
        if not self.flags:
            return
        if self.cursor is None or self.cursor >= len(self.flags) - 1:
            self.cursor = 0
        else:
            self.cursor += 1

    def move_previous(self) -> None:
        if not self.flags:
            return
        if self.cursor is None:
            self.cursor = 0
        elif self.cursor == 0:
            self.cursor = len(self.flags) - 1
        else:
            self.cursor -= 1

    def focus(self, index: int) -> None:
        if 0 <= index < len(self.flags):
            self.cursor = index

    def toggle_current(self) -> None:
        flag = self.current
        if flag is not None:
            flag.selected = not flag.selected

    def select_arguments(self, arguments: Iterable[str]) -> None:
        wanted = set(arguments)
        for flag in self.flags:
            if flag.argument in wanted:
                flag.selected = True

    def selected_arguments(self) -> list[str]:
        return [flag.argument for flag in self.flags if flag.selected]

    def preview_string(self) -> str:
        arguments = self.selected_arguments()
        if not arguments:
            return self.command
        return f"{self.command} {' '.join(arguments)}"

    async def switch_language(self, language: Language) -> bool:
        """
        Re-acquire the flags in `language`, keeping the selection by canonical argument.

        Returns:
            bool: True if the flag list was replaced, False if acquisition or
            extraction failed and nothing changed.
        """
        selected = set(self.selected_arguments())
        try:
            new_flags = await self.loader(self.command, language)
        except FlagpickError as error:
            logger.warning(
                "Could not reload flags for '%s' in %s: %s",
                self.command,
                language.label,
                error,
            )
            return False

        for flag in new_flags:
            if flag.argument in selected:
                flag.selected = True

        self.flags = new_flags
        self.language = language
        if self.flags and (self.cursor is None or self.cursor >= len(self.flags)):
            self.cursor = 0
        elif not self.flags:
            self.cursor = None
        logger.debug(
            "Reloaded %d flags for '%s' in %s",
            len(self.flags),
            self.command,
            language.label,
        )
        return True

    async def toggle_language(self) -> bool:
        return await self.switch_language(self.language.toggled())

    def __str__(self) -> str:
        return (
            f"SelectionModel(command={self.command!r}, language={self.language.value!r}, "
            f"flags={len(self.flags)}, cursor={self.cursor})"
        )

# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Language`, the help text language flagpick asks child processes for.

The language only changes the environment of the processes spawned during help
acquisition. `Language.ENGLISH` forces the locale-neutral `C` locale so option
descriptions come back in a consistent language; `Language.SYSTEM` leaves the
inherited locale alone. Parsing is identical for both.
"""
from __future__ import annotations

from enum import Enum


class Language(Enum):
    SYSTEM = "system"
    ENGLISH = "en"

    @property
    def label(self) -> str:
        return "EN" if self is Language.ENGLISH else "Sys"

    def toggled(self) -> Language:
        return Language.SYSTEM if self is Language.ENGLISH else Language.ENGLISH

    def env_overrides(self) -> dict[str, str]:
        """Environment variables to add to a child process for this language."""
        if self is Language.ENGLISH:
            return {"LC_ALL": "C"}
        return {}

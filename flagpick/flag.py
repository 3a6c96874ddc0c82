# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""flag.py"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Flag:
    """
    One command-line option discovered in help text.

    At least one of `short` (e.g. `-v`) or `long` (e.g. `--verbose`) is always
    present. `selected` is owned by `SelectionModel`.
    """

    short: str | None
    long: str | None
    description: str
    selected: bool = False

    def __post_init__(self):
        if not self.short and not self.long:
            raise ValueError("Flag requires a short or a long option token.")
        if not isinstance(self.description, str):
            raise TypeError("Flag description must be a string.")

    @property
    def argument(self) -> str:
        """Canonical argument string: the long form if present, else the short form."""
        if self.long:
            return self.long
        return self.short or ""

    @property
    def label(self) -> str:
        if self.short and self.long:
            return f"{self.short}, {self.long}"
        if self.short:
            return self.short
        return f"    {self.long}"


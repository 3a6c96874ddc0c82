# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Heuristic extraction of flags from help text.

Help formats are not standardized, so this is a best-effort, line-oriented
pattern match rather than a grammar. A line is an option line when it starts
with whitespace followed by either

- a short token (`-x`, one alphanumeric or `?`), optionally followed by a comma
  and/or spaces and a long token, or
- a long token on its own (`--name`, letters, digits, `-` and `_`),

then whitespace and a description running to the end of the line:

    -v, --verbose     Enable verbose output
        --dry-run     Do not execute anything

Lines are independent: the same flag listed in two sections yields two records.
"""
from __future__ import annotations

import re

from flagpick.exceptions import NoFlagsFoundError
from flagpick.flag import Flag

FLAG_LINE = re.compile(
    r"^\s+"
    r"(?:(?P<short>-[A-Za-z0-9?])(?:,?\s+(?P<long>--[A-Za-z0-9\-_]+))?"
    r"|(?P<long_only>--[A-Za-z0-9\-_]+))"
    r"\s+(?P<desc>.+)$"
)

MIN_DESCRIPTION_LENGTH = 2


def parse_flag_line(line: str) -> Flag | None:
    """Parse one line of help text, returning None when it is not an option line."""
    match = FLAG_LINE.match(line)
    if not match:
        return None

    short = match.group("short")
    long = match.group("long") or match.group("long_only")
    description = match.group("desc").strip()

    if short is not None and not short.startswith("-"):
        return None
    if long is not None and not long.startswith("--"):
        return None
    if len(description) < MIN_DESCRIPTION_LENGTH:
        return None

    return Flag(short=short, long=long, description=description)


def extract_flags(text: str) -> list[Flag]:
    """
    Extract every option line from `text`, in source order.

    Raises:
        NoFlagsFoundError: If no line matched.
    """
    flags = [flag for line in text.split("\n") if (flag := parse_flag_line(line))]
    if not flags:
        raise NoFlagsFoundError()
    return flags

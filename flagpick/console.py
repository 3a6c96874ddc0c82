# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for flagpick output.

`console` renders tables and prompts on stdout. `err_console` carries errors and
status notes on stderr so the composed command is the only thing on stdout.
"""
from rich.console import Console

from flagpick.themes import get_one_theme

console = Console(color_system="truecolor", theme=get_one_theme())
err_console = Console(stderr=True, highlight=False, theme=get_one_theme())

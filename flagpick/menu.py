# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Line-based selection prompt for flagpick.

Each round renders the flag table and the composed command, then reads one line:

- `0,3` toggles the flags at those indices
- `L` re-acquires the help text in the other language, keeping the selection
- `P` or an empty line finishes and returns the composed command
- `Q` cancels

The prompt never runs the composed command; the caller decides what to do with
the returned string.
"""
from __future__ import annotations

from prompt_toolkit import PromptSession
from rich.markup import escape

from flagpick.console import console
from flagpick.selection import prompt_for_toggles
from flagpick.selection_model import SelectionModel
from flagpick.signals import CancelSignal, QuitSignal
from flagpick.themes import OneColors

MENU_KEYS = {
    "L": "Switch language",
    "P": "Print command",
    "Q": "Cancel",
}


def menu_hint() -> str:
    keys = "  ".join(
        f"[{OneColors.CYAN}]\\[{key}][/] {label}" for key, label in MENU_KEYS.items()
    )
    return f"[{OneColors.COMMENT_GREY}]Indices toggle flags (e.g. 0,3).[/]  {keys}"


async def handle_input(model: SelectionModel, choice: list[int] | str) -> None:
    """Apply one round of prompt input to `model`."""
    if isinstance(choice, list):
        for index in choice:
            model.focus(index)
            model.toggle_current()
        return
    if choice in ("", "P"):
        raise QuitSignal()
    if choice == "Q":
        raise CancelSignal()
    if choice == "L":
        target = model.language.toggled()
        status = f"Loading help for '{escape(model.command)}' [{target.label}]..."
        with console.status(status):
            switched = await model.switch_language(target)
        if not switched:
            console.print(
                f"[{OneColors.DARK_YELLOW}]Could not load help in {target.label}; "
                "keeping the current list.[/]"
            )


async def run_menu(
    model: SelectionModel,
    prompt_session: PromptSession | None = None,
) -> str | None:
    """
    Run the selection prompt until the user prints or cancels.

    Returns:
        str | None: The composed command, or None if cancelled.
    """
    prompt_session = prompt_session or PromptSession()
    while True:
        console.print(menu_hint())
        choice = await prompt_for_toggles(
            model,
            command_keys=list(MENU_KEYS),
            prompt_session=prompt_session,
        )
        try:
            await handle_input(model, choice)
        except QuitSignal:
            return model.preview_string()
        except CancelSignal:
            return None

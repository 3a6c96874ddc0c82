# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""selection.py"""
from __future__ import annotations

from typing import Sequence

from prompt_toolkit import PromptSession
from rich import box
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from flagpick.console import console
from flagpick.selection_model import SelectionModel
from flagpick.themes import OneColors
from flagpick.validators import ToggleInputValidator


def render_table_base(
    title: str,
    *,
    caption: str = "",
    box_style: box.Box = box.SIMPLE,
    title_style: str = "",
    caption_style: str = "",
    column_names: Sequence[str] = (),
) -> Table:
    table = Table(
        title=title,
        caption=caption,
        box=box_style,
        title_style=title_style,
        caption_style=caption_style,
    )
    for column_name in column_names:
        table.add_column(column_name)
    return table


def render_flag_table(
    model: SelectionModel,
    *,
    show_cursor: bool = True,
    box_style: box.Box = box.SIMPLE,
) -> Table:
    """Table of the model's flags: index, checkmark, option tokens, description."""
    table = render_table_base(
        title=f"flagpick: {escape(model.command)} [{model.language.label}]",
        caption=f"{len(model.flags)} flags",
        box_style=box_style,
        title_style=OneColors.CYAN_b,
        caption_style=OneColors.COMMENT_GREY,
        column_names=("#", "", "Flag", "Description"),
    )
    for index, flag in enumerate(model.flags):
        style = "flag.selected" if flag.selected else None
        if show_cursor and index == model.cursor:
            style = "flag.cursor.selected" if flag.selected else "flag.cursor"
        table.add_row(
            str(index),
            Text("[x]" if flag.selected else "[ ]"),
            Text(flag.label, style="flag.token"),
            Text(flag.description),
            style=style,
        )
    return table


def render_preview(model: SelectionModel) -> Text:
    text = Text("Preview: ", style="preview.label")
    text.append(model.preview_string())
    return text


async def prompt_for_toggles(
    model: SelectionModel,
    *,
    command_keys: Sequence[str] = (),
    prompt_session: PromptSession | None = None,
    prompt_message: str = "Toggle flags > ",
    show_table: bool = True,
    separator: str = ",",
) -> list[int] | str:
    """
    Show the flag table and read either indices to toggle or a command key.

    Returns:
        list[int] | str: Indices entered by the user, the upper-cased command key,
        or an empty string when the input was empty.
    """
    prompt_session = prompt_session or PromptSession()

    if show_table:
        console.print(render_flag_table(model))
        console.print(render_preview(model))

    selection = await prompt_session.prompt_async(
        message=prompt_message,
        validator=ToggleInputValidator(
            len(model.flags) - 1,
            command_keys=command_keys,
            separator=separator,
        ),
    )

    selection = selection.strip()
    if not selection:
        return ""
    if selection.upper() in [key.upper() for key in command_keys]:
        return selection.upper()
    return [int(index.strip()) for index in selection.split(separator)]

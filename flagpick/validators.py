# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for the flagpick selection prompt.

The prompt accepts either a comma-separated list of flag indices to toggle
(e.g. "0,3,4") or a single command key (e.g. "L" to switch language). Empty
input is allowed and means "done".

Included Validators:
- ToggleInputValidator: Validates index lists and command keys together.

These validators integrate directly into `PromptSession.prompt_async()` to
enforce correctness and provide helpful error messages.
"""
from typing import KeysView, Sequence

from prompt_toolkit.validation import ValidationError, Validator


class ToggleInputValidator(Validator):
    def __init__(
        self,
        maximum: int,
        command_keys: Sequence[str] | KeysView[str] = (),
        separator: str = ",",
        minimum: int = 0,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.command_keys = [key.upper() for key in command_keys]
        self.separator = separator
        super().__init__()

    def validate(self, document):
        text = document.text.strip()
        if not text:
            return
        selections = [index.strip() for index in text.split(self.separator)]
        upper = [selection.upper() for selection in selections]
        if any(selection in self.command_keys for selection in upper):
            if len(selections) == 1:
                return
            raise ValidationError(message="Command keys must be entered alone.")
        if self.maximum < self.minimum:
            raise ValidationError(message="There are no flags to toggle.")
        for selection in selections:
            try:
                index = int(selection)
            except ValueError:
                raise ValidationError(
                    message=f"Invalid selection: {selection}. Select a number between {self.minimum} and {self.maximum}."
                )
            if not self.minimum <= index <= self.maximum:
                raise ValidationError(
                    message=f"Invalid selection: {selection}. Select a number between {self.minimum} and {self.maximum}."
                )
            if selections.count(selection) > 1:
                raise ValidationError(message=f"Duplicate selection: {selection}")

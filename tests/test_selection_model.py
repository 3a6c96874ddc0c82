import copy
from dataclasses import replace

import pytest

from flagpick.exceptions import NoFlagsFoundError, NoHelpAvailableError
from flagpick.extractor import extract_flags
from flagpick.flag import Flag
from flagpick.language import Language
from flagpick.selection_model import SelectionModel

SYSTEM_FLAGS = [
    Flag("-v", None, "ausführliche Ausgabe"),
    Flag("-o", "--output", "in DATEI schreiben"),
    Flag("-f", "--force", "ohne Nachfrage überschreiben"),
    Flag(None, "--dry-run", "nichts ausführen"),
    Flag("-q", "--quiet", "keine Ausgabe"),
]

ENGLISH_FLAGS = [
    Flag(None, "--dry-run", "do not execute anything"),
    Flag("-o", "--output", "write to FILE"),
    Flag("-v", None, "verbose output"),
]


def make_loader(by_language):
    calls = []

    async def loader(command, language):
        calls.append((command, language))
        result = by_language[language]
        if isinstance(result, Exception):
            raise result
        return [replace(flag) for flag in result]

    loader.calls = calls
    return loader


def make_model(loader=None, flags=SYSTEM_FLAGS):
    return SelectionModel(
        "cp", [replace(flag) for flag in flags], Language.SYSTEM, loader=loader
    )


# --- Cursor ---


def test_cursor_starts_at_first_flag():
    assert make_model().cursor == 0
    assert SelectionModel("cp").cursor is None


def test_cursor_wraps_forward_and_backward():
    model = make_model()
    last = len(model.flags) - 1

    model.focus(last)
    model.move_next()
    assert model.cursor == 0

    model.move_previous()
    assert model.cursor == last


def test_cursor_steps():
    model = make_model()
    model.move_next()
    model.move_next()
    assert model.cursor == 2
    model.move_previous()
    assert model.cursor == 1


def test_moves_on_empty_list_are_noops():
    model = SelectionModel("cp")
    model.move_next()
    model.move_previous()
    model.toggle_current()
    assert model.cursor is None
    assert model.current is None


def test_focus_ignores_out_of_range():
    model = make_model()
    model.focus(3)
    model.focus(99)
    model.focus(-1)
    assert model.cursor == 3


# --- Selection ---


def test_toggle_current():
    model = make_model()
    model.focus(1)
    model.toggle_current()
    assert model.flags[1].selected is True
    model.toggle_current()
    assert model.flags[1].selected is False


def test_toggle_with_cursor_out_of_range_is_noop():
    model = make_model()
    model.cursor = 42
    model.toggle_current()
    assert not any(flag.selected for flag in model.flags)


def test_selected_arguments_in_list_order():
    model = make_model()
    for index in (3, 0, 1):
        model.focus(index)
        model.toggle_current()
    assert model.selected_arguments() == ["-v", "--output", "--dry-run"]


def test_preview_string():
    model = make_model()
    assert model.preview_string() == "cp"
    model.select_arguments(["-v", "--quiet"])
    assert model.preview_string() == "cp -v --quiet"


def test_preview_end_to_end_example():
    text = (
        "  -v, --verbose     Enable verbose output\n"
        "      --dry-run     Do not execute anything\n"
    )
    model = SelectionModel("cp", extract_flags(text))
    model.move_next()
    model.toggle_current()
    assert model.preview_string() == "cp --dry-run"


# --- Language switch ---


@pytest.mark.asyncio
async def test_switch_language_keeps_selection_by_argument():
    loader = make_loader({Language.ENGLISH: ENGLISH_FLAGS})
    model = make_model(loader)
    model.select_arguments(["-v", "--output"])

    assert await model.switch_language(Language.ENGLISH) is True

    assert loader.calls == [("cp", Language.ENGLISH)]
    assert model.language is Language.ENGLISH
    assert [flag.description for flag in model.flags] == [
        "do not execute anything",
        "write to FILE",
        "verbose output",
    ]
    assert model.selected_arguments() == ["--output", "-v"]


@pytest.mark.asyncio
async def test_switch_language_clamps_cursor():
    loader = make_loader({Language.ENGLISH: ENGLISH_FLAGS})
    model = make_model(loader)
    model.focus(4)

    await model.switch_language(Language.ENGLISH)

    assert model.cursor == 0


@pytest.mark.asyncio
async def test_switch_language_keeps_cursor_in_range():
    loader = make_loader({Language.ENGLISH: ENGLISH_FLAGS})
    model = make_model(loader)
    model.focus(2)

    await model.switch_language(Language.ENGLISH)

    assert model.cursor == 2


@pytest.mark.asyncio
async def test_switch_language_sets_cursor_on_previously_empty_model():
    loader = make_loader({Language.ENGLISH: ENGLISH_FLAGS})
    model = SelectionModel("cp", loader=loader)

    await model.switch_language(Language.ENGLISH)

    assert model.cursor == 0
    assert len(model.flags) == 3


@pytest.mark.parametrize(
    "error", [NoHelpAvailableError("cp"), NoFlagsFoundError()]
)
@pytest.mark.asyncio
async def test_switch_language_failure_leaves_state_untouched(error):
    loader = make_loader({Language.ENGLISH: error})
    model = make_model(loader)
    model.select_arguments(["--force", "--dry-run"])
    model.focus(3)
    flags_before = model.flags
    snapshot = copy.deepcopy(model.flags)

    assert await model.switch_language(Language.ENGLISH) is False

    assert model.flags is flags_before
    assert model.flags == snapshot
    assert model.cursor == 3
    assert model.language is Language.SYSTEM


@pytest.mark.asyncio
async def test_toggle_language_round_trip():
    loader = make_loader(
        {Language.ENGLISH: ENGLISH_FLAGS, Language.SYSTEM: SYSTEM_FLAGS}
    )
    model = make_model(loader)
    model.select_arguments(["--dry-run"])

    await model.toggle_language()
    assert model.language is Language.ENGLISH
    await model.toggle_language()

    assert model.language is Language.SYSTEM
    assert [call[1] for call in loader.calls] == [Language.ENGLISH, Language.SYSTEM]
    assert model.selected_arguments() == ["--dry-run"]
    assert model.flags[3].description == "nichts ausführen"


# --- Loading ---


@pytest.mark.asyncio
async def test_load_builds_model():
    loader = make_loader({Language.ENGLISH: ENGLISH_FLAGS})

    model = await SelectionModel.load("cp", Language.ENGLISH, loader=loader)

    assert model.command == "cp"
    assert model.language is Language.ENGLISH
    assert model.cursor == 0
    assert model.loader is loader


@pytest.mark.asyncio
async def test_load_propagates_errors():
    loader = make_loader({Language.SYSTEM: NoHelpAvailableError("cp")})

    with pytest.raises(NoHelpAvailableError):
        await SelectionModel.load("cp", loader=loader)

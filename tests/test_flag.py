import pytest

from flagpick.flag import Flag
from flagpick.language import Language


def test_flag_requires_short_or_long():
    with pytest.raises(ValueError):
        Flag(short=None, long=None, description="Nothing here")


def test_flag_argument_prefers_long():
    assert Flag("-v", "--verbose", "Verbose").argument == "--verbose"
    assert Flag("-v", None, "Verbose").argument == "-v"
    assert Flag(None, "--dry-run", "Dry run").argument == "--dry-run"


def test_flag_label_indents_long_only():
    assert Flag(None, "--dry-run", "Dry run").label == "    --dry-run"
    assert Flag("-a", None, "All").label == "-a"


def test_language_toggle_and_env():
    assert Language.SYSTEM.toggled() is Language.ENGLISH
    assert Language.ENGLISH.toggled() is Language.SYSTEM
    assert Language.ENGLISH.env_overrides() == {"LC_ALL": "C"}
    assert Language.SYSTEM.env_overrides() == {}
    assert Language("en") is Language.ENGLISH
    assert Language.SYSTEM.label == "Sys"

import shutil
import tempfile
from pathlib import Path

import pytest

from flagpick.config import FlagpickConfig, find_config, load_config
from flagpick.exceptions import ConfigError
from flagpick.language import Language


@pytest.fixture(autouse=True)
def fake_home(monkeypatch):
    """Redirect Path.home() to a temporary directory for all tests."""
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    yield temp_home
    shutil.rmtree(temp_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FLAGPICK_CONFIG", raising=False)
    return tmp_path


def test_defaults():
    config = FlagpickConfig()
    assert config.help_timeout == 1.0
    assert config.man_timeout == 2.0
    assert config.poll_interval == 0.05
    assert config.terminal_columns == 500
    assert config.language is Language.SYSTEM


def test_no_config_file_gives_defaults():
    assert find_config() is None
    assert load_config() == FlagpickConfig()


def test_find_config_in_cwd(isolated_cwd):
    config_file = isolated_cwd / "flagpick.toml"
    config_file.write_text("help_timeout = 1.5\n")
    assert find_config() == config_file.resolve()


def test_find_config_from_env(isolated_cwd, monkeypatch):
    config_file = isolated_cwd / "custom.yaml"
    config_file.write_text("language: en\n")
    monkeypatch.setenv("FLAGPICK_CONFIG", str(config_file))
    assert find_config() == config_file
    assert load_config().language is Language.ENGLISH


def test_find_global_config(fake_home):
    config_file = fake_home / ".config" / "flagpick" / "flagpick.yaml"
    config_file.parent.mkdir(parents=True)
    config_file.write_text("man_timeout: 4\n")
    assert find_config() == config_file
    assert load_config().man_timeout == 4.0


def test_load_toml(isolated_cwd):
    path = isolated_cwd / "settings.toml"
    path.write_text('help_timeout = 0.5\nlanguage = "en"\nhelp_flag = "-h"\n')
    config = load_config(path)
    assert config.help_timeout == 0.5
    assert config.language is Language.ENGLISH
    assert config.help_flag == "-h"


def test_load_empty_yaml(isolated_cwd):
    path = isolated_cwd / "flagpick.yaml"
    path.write_text("")
    assert load_config(path) == FlagpickConfig()


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("bad.toml", "help_timeout = -1\n", "Invalid config"),
        ("bad.yaml", "poll_interval: 0\n", "Invalid config"),
        ("bad.yaml", "unknown_key: 1\n", "Invalid config"),
        ("bad.yaml", "language: klingon\n", "Invalid config"),
        ("bad.yaml", "- a\n- b\n", "must contain a mapping"),
        ("bad.toml", "help_timeout = \n", "Could not read"),
        ("bad.json", "{}", "Unsupported config format"),
    ],
)
def test_invalid_config(isolated_cwd, name, content, message):
    path = isolated_cwd / name
    path.write_text(content)
    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_missing_explicit_config(isolated_cwd):
    with pytest.raises(ConfigError, match="not found"):
        load_config(isolated_cwd / "nope.toml")

from __future__ import annotations

from pathlib import Path

import pytest

from pathstore import ConfigurationError, StoreOptions, get_settings

ENV_VARS = (
    "PATHSTORE_FOLDER",
    "PATHSTORE_FILE",
    "PATHSTORE_READABLE",
    "PATHSTORE_NO_BLANK_DATA",
    "PATHSTORE_CHECK_UPDATES",
    "PATHSTORE_BACKUP_INTERVAL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # load_dotenv writes os.environ directly; registering each name restores it afterwards
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    opts = StoreOptions()
    assert opts.file == "data"
    assert opts.folder == Path.cwd() / "database"
    assert opts.readable is False
    assert opts.no_blank_data is False
    assert opts.check_updates is False
    assert opts.backup_interval == 5


def test_build_accepts_camel_case_aliases(tmp_path: Path):
    opts = StoreOptions.build(folder=tmp_path, noBlankData=True, checkUpdates=True, backupInterval=2)
    assert opts.no_blank_data is True
    assert opts.check_updates is True
    assert opts.backup_interval == 2.0


def test_build_overrides_base():
    base = StoreOptions.build(file="one", backup_interval=3)
    opts = StoreOptions.build(base, backupInterval=7)
    assert opts.file == "one"
    assert opts.backup_interval == 7.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"backup_interval": 0},
        {"backupInterval": -2},
        {"backup_interval": "soon"},
        {"file": ""},
        {"file": "a/b"},
        {"unknown": 1},
    ],
)
def test_build_rejects_invalid_options(overrides):
    with pytest.raises(ConfigurationError):
        StoreOptions.build(**overrides)


def test_get_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("PATHSTORE_FOLDER", str(tmp_path / "store"))
    monkeypatch.setenv("PATHSTORE_FILE", "users")
    monkeypatch.setenv("PATHSTORE_READABLE", "yes")
    monkeypatch.setenv("PATHSTORE_NO_BLANK_DATA", "1")
    monkeypatch.setenv("PATHSTORE_BACKUP_INTERVAL", "0.5")

    opts = get_settings()
    assert opts.folder == tmp_path / "store"
    assert opts.file == "users"
    assert opts.readable is True
    assert opts.no_blank_data is True
    assert opts.check_updates is False
    assert opts.backup_interval == 0.5


def test_get_settings_reads_dotenv_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    env_file = tmp_path / "store.env"
    env_file.write_text("PATHSTORE_FILE=from_dotenv\nPATHSTORE_CHECK_UPDATES=true\n", encoding="utf-8")
    opts = get_settings(env_file)
    assert opts.file == "from_dotenv"
    assert opts.check_updates is True


def test_get_settings_rejects_bad_interval(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PATHSTORE_BACKUP_INTERVAL", "weekly")
    with pytest.raises(ConfigurationError):
        get_settings()

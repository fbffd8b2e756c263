# tests/conftest.py
from pathlib import Path

import pytest

from steamid_codec.utils.i18n import init_i18n

STEAMID_ENV_VARS = (
    "STEAMID_UI_LANGUAGE",
    "STEAMID_LOG_LEVEL",
    "STEAMID_LOG_FILE",
    "STEAMID_STEAM2_NEWER_FORMAT",
)


@pytest.fixture(autouse=True)
def english_messages():
    """Every test starts (and ends) with the English catalogue active."""
    init_i18n("en")
    yield
    init_i18n("en")


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    """Remove STEAMID_* variables and run from an empty directory (no .env)."""
    for name in STEAMID_ENV_VARS:
        # setenv first so teardown also removes values loaded from a .env file
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def catalogue_dir(tmp_path: Path) -> Path:
    """A minimal, consistent i18n tree with one shared file and en/de."""
    root = tmp_path / "i18n"
    (root / "en").mkdir(parents=True)
    (root / "de").mkdir()
    (root / "logs.json").write_text('{"logs": {"hello": "Hello {name}"}}', encoding="utf-8")
    (root / "en" / "errors.json").write_text(
        '{"errors": {"boom": "Boom at {where}", "plain": "Plain"}}', encoding="utf-8"
    )
    (root / "de" / "errors.json").write_text(
        '{"errors": {"boom": "Bumm bei {where}", "plain": "Schlicht"}}', encoding="utf-8"
    )
    return root

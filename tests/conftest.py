from __future__ import annotations

import shutil
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from swearjar import config

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def fixtures_root(tmp_path: Path) -> Path:
    dest = tmp_path / "fixtures"
    shutil.copytree(FIXTURES, dest)
    return dest


@pytest.fixture()
def wordlist_path(fixtures_root: Path) -> Path:
    return fixtures_root / "extra_words.txt"


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SWEARJAR_WORDLIST", "SWEARJAR_MASK_CHAR", "SWEARJAR_STRATEGY"):
        monkeypatch.delenv(name, raising=False)
    original = (config.WORDLIST_PATH, config.MASK_CHAR, config.STRATEGY)
    config.reload_from_env()
    try:
        yield
    finally:
        config.WORDLIST_PATH, config.MASK_CHAR, config.STRATEGY = original


@pytest.fixture()
def configured_wordlist(wordlist_path: Path) -> Path:
    original = config.WORDLIST_PATH
    config.set_wordlist_path(wordlist_path)
    try:
        yield wordlist_path
    finally:
        config.set_wordlist_path(original)

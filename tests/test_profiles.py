from __future__ import annotations

from pathlib import Path

import pytest

from swearjar.profiles.loader import (
    ProfileValidationError,
    build_profile_engine,
    load_profile,
    parse_profile,
)


def test_profile_loads_and_resolves_word_lists(fixtures_root: Path) -> None:
    profile = load_profile(fixtures_root / "profile.json")
    assert profile.mask_char == "#"
    assert profile.words == ("darn",)
    assert profile.wordlists == (fixtures_root.resolve() / "extra_words.txt",)
    assert profile.use_pattern is False


def test_profile_engine_applies_words_patterns_and_flags(fixtures_root: Path) -> None:
    engine = build_profile_engine(load_profile(fixtures_root / "profile.json"))
    assert engine.censor("darn it") == "#### it"
    assert engine.censor("oh heck") == "oh ####"
    assert engine.contains_match("fuck")
    assert "d[a4]rn" in engine.pattern_set.patterns()
    # The pattern stage is disabled by the profile.
    assert not engine.contains_match("d4rn")
    engine.configure(True, True, True)
    assert engine.contains_match("d4rn")


def test_profile_without_defaults() -> None:
    engine = build_profile_engine(parse_profile({"include_defaults": False, "words": ["heck"]}))
    assert engine.contains_match("heck")
    assert not engine.contains_match("fuck")


def test_invalid_profile_collects_every_error(fixtures_root: Path) -> None:
    with pytest.raises(ProfileValidationError) as excinfo:
        load_profile(fixtures_root / "bad_profile.json")
    assert len(excinfo.value.errors) >= 3


def test_missing_profile_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_profile(tmp_path / "missing.json")

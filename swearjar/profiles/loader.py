from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator

from swearjar import config
from swearjar.engines.composite import CompositeEngine
from swearjar.profiles.schema import load_schema
from swearjar.wordlists.loader import load_word_file

logger = logging.getLogger(__name__)


@dataclass
class ProfileValidationError(Exception):
    errors: List[str]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return "Profile validation failed: " + "; ".join(self.errors)


@dataclass(frozen=True)
class FilterProfile:
    mask_char: str = config.DEFAULT_MASK_CHAR
    include_defaults: bool = True
    words: Tuple[str, ...] = ()
    patterns: Tuple[str, ...] = ()
    wordlists: Tuple[Path, ...] = ()
    use_literal: bool = True
    use_pattern: bool = True
    use_trie: bool = True
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


def validate_profile(payload: Any) -> None:
    validator = Draft202012Validator(load_schema())
    errors = sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ProfileValidationError(
            [f"{e.message} at {list(e.path)}" for e in errors]
        )


def parse_profile(payload: Dict[str, Any], base_dir: Optional[Path] = None) -> FilterProfile:
    validate_profile(payload)
    root = base_dir or Path.cwd()
    strategies = payload.get("strategies", {})
    wordlists = []
    for entry in payload.get("wordlists", []):
        path = Path(entry)
        wordlists.append(path if path.is_absolute() else root / path)
    return FilterProfile(
        mask_char=payload.get("mask_char", config.DEFAULT_MASK_CHAR),
        include_defaults=bool(payload.get("include_defaults", True)),
        words=tuple(payload.get("words", [])),
        patterns=tuple(payload.get("patterns", [])),
        wordlists=tuple(wordlists),
        use_literal=bool(strategies.get("literal", True)),
        use_pattern=bool(strategies.get("pattern", True)),
        use_trie=bool(strategies.get("trie", True)),
        raw=payload,
    )


def load_profile(path: Path) -> FilterProfile:
    payload = config.read_json(path)
    return parse_profile(payload, base_dir=path.resolve().parent)


def build_profile_engine(profile: FilterProfile) -> CompositeEngine:
    engine = CompositeEngine(
        profile.mask_char,
        None if profile.include_defaults else (),
    )
    for word in profile.words:
        engine.add_word(word)
    for pattern in profile.patterns:
        engine.pattern_set.add_pattern(pattern)
    for wordlist in profile.wordlists:
        load_word_file(engine, wordlist)
    engine.configure(profile.use_literal, profile.use_pattern, profile.use_trie)
    logger.debug(
        "Built profile engine: %d words, %d patterns",
        len(engine.word_set),
        len(engine.pattern_set),
    )
    return engine

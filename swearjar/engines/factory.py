from __future__ import annotations

from typing import Dict, Iterable, Optional, Type

from swearjar import config
from swearjar.engines.base import MatchEngine
from swearjar.engines.composite import CompositeEngine
from swearjar.engines.patterns import PatternSetEngine
from swearjar.engines.trie import TrieEngine
from swearjar.engines.wordset import WordSetEngine

ENGINE_TYPES: Dict[str, Type] = {
    "literal": WordSetEngine,
    "pattern": PatternSetEngine,
    "trie": TrieEngine,
    "composite": CompositeEngine,
}


def build_engine(
    strategy: str = config.DEFAULT_STRATEGY,
    mask_char: str = config.DEFAULT_MASK_CHAR,
    words: Optional[Iterable[str]] = None,
) -> MatchEngine:
    engine_type = ENGINE_TYPES.get(strategy)
    if engine_type is None:
        raise ValueError(
            f"Unknown strategy '{strategy}'. Expected one of: {', '.join(config.STRATEGIES)}"
        )
    return engine_type(mask_char, words)

"""Profanity detection and masking with interchangeable strategies."""

from swearjar.engines import (
    CompositeEngine,
    MatchEngine,
    PatternSetEngine,
    Trie,
    TrieEngine,
    WordSetEngine,
    build_engine,
)

__all__ = [
    "MatchEngine",
    "WordSetEngine",
    "PatternSetEngine",
    "Trie",
    "TrieEngine",
    "CompositeEngine",
    "build_engine",
]

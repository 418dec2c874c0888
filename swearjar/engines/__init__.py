from swearjar.engines.base import MatchEngine
from swearjar.engines.composite import CompositeEngine
from swearjar.engines.factory import build_engine
from swearjar.engines.patterns import PatternSetEngine
from swearjar.engines.trie import Trie, TrieEngine, TrieNode
from swearjar.engines.wordset import WordSetEngine

__all__ = [
    "MatchEngine",
    "WordSetEngine",
    "PatternSetEngine",
    "Trie",
    "TrieNode",
    "TrieEngine",
    "CompositeEngine",
    "build_engine",
]

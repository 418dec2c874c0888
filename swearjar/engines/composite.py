from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from swearjar import config
from swearjar.engines.base import MatchEngine, iter_word_lines
from swearjar.engines.patterns import PatternSetEngine
from swearjar.engines.trie import TrieEngine
from swearjar.engines.wordset import WordSetEngine
from swearjar.text import validate_mask_char

logger = logging.getLogger(__name__)


class CompositeEngine:
    """Runs the literal, pattern and trie strategies as one engine.

    ``censor`` is a pipeline: the literal stage output feeds the pattern
    stage, whose output feeds the trie stage. Word additions go to every
    stage whether or not it is currently enabled.
    """

    def __init__(
        self,
        mask_char: str = config.DEFAULT_MASK_CHAR,
        words: Optional[Iterable[str]] = None,
        *,
        use_literal: bool = True,
        use_pattern: bool = True,
        use_trie: bool = True,
    ) -> None:
        self.mask_char = validate_mask_char(mask_char)
        initial = None if words is None else list(words)
        self.word_set = WordSetEngine(self.mask_char, initial)
        self.pattern_set = PatternSetEngine(self.mask_char, initial)
        self.trie = TrieEngine(self.mask_char, initial)
        self.use_literal = use_literal
        self.use_pattern = use_pattern
        self.use_trie = use_trie

    def configure(self, use_literal: bool, use_pattern: bool, use_trie: bool) -> None:
        self.use_literal = use_literal
        self.use_pattern = use_pattern
        self.use_trie = use_trie
        logger.debug(
            "Configured composite: literal=%s pattern=%s trie=%s",
            use_literal,
            use_pattern,
            use_trie,
        )

    def enabled_engines(self) -> List[MatchEngine]:
        stages: List[MatchEngine] = []
        if self.use_literal:
            stages.append(self.word_set)
        if self.use_pattern:
            stages.append(self.pattern_set)
        if self.use_trie:
            stages.append(self.trie)
        return stages

    def contains_match(self, text: str) -> bool:
        return any(stage.contains_match(text) for stage in self.enabled_engines())

    def censor(self, text: str) -> str:
        result = text
        for stage in self.enabled_engines():
            result = stage.censor(result)
        return result

    def add_word(self, word: str) -> None:
        self.word_set.add_word(word)
        self.pattern_set.add_word(word)
        self.trie.add_word(word)

    def load_words(self, lines: Iterable[str]) -> None:
        # The line source may be a one-shot iterator, so read it once.
        for word in list(iter_word_lines(lines)):
            self.add_word(word)

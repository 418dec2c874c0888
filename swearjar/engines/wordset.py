from __future__ import annotations

from typing import Iterable, List, Optional, Set, Tuple

from swearjar import config
from swearjar.engines.base import iter_word_lines
from swearjar.text import ascii_fold, mask_spans, validate_mask_char


class WordSetEngine:
    """Literal substring matching against a case-folded set of words.

    No word-boundary checks are made, so ``"class"`` matches ``"ass"``.
    """

    def __init__(
        self,
        mask_char: str = config.DEFAULT_MASK_CHAR,
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self.mask_char = validate_mask_char(mask_char)
        self._words: Set[str] = set()
        for word in config.DEFAULT_WORDS if words is None else words:
            self.add_word(word)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and ascii_fold(word) in self._words

    def words(self) -> Tuple[str, ...]:
        return tuple(sorted(self._words))

    def add_word(self, word: str) -> None:
        folded = ascii_fold(word)
        if folded:
            self._words.add(folded)

    def load_words(self, lines: Iterable[str]) -> None:
        for word in iter_word_lines(lines):
            self.add_word(word)

    def contains_match(self, text: str) -> bool:
        folded = ascii_fold(text)
        return any(word in folded for word in self._words)

    def find_spans(self, text: str) -> List[Tuple[int, int]]:
        folded = ascii_fold(text)
        spans: List[Tuple[int, int]] = []
        for word in self.words():
            pos = folded.find(word)
            while pos != -1:
                spans.append((pos, len(word)))
                # Step one character so overlapping occurrences are found too.
                pos = folded.find(word, pos + 1)
        return spans

    def censor(self, text: str) -> str:
        if not text:
            return text
        return mask_spans(text, self.find_spans(text), self.mask_char)

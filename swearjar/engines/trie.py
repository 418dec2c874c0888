from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from swearjar import config
from swearjar.engines.base import iter_word_lines
from swearjar.text import ascii_fold, mask_spans, validate_mask_char


@dataclass
class TrieNode:
    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """Prefix tree of case-folded words.

    Every node is owned by its parent. A node is terminal iff an inserted
    word ends exactly there, so a word may be a prefix of another
    (``"ass"`` / ``"assassin"``).
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._walk(ascii_fold(word))
        return node is not None and node.terminal

    def _walk(self, word: str) -> Optional[TrieNode]:
        node = self.root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return None
            node = child
        return node

    def insert(self, word: str) -> None:
        folded = ascii_fold(word)
        if not folded:
            return
        node = self.root
        for char in folded:
            node = node.children.setdefault(char, TrieNode())
        if not node.terminal:
            node.terminal = True
            self._size += 1

    def first_match_at(self, folded: str, start: int) -> int:
        """Length of the shortest word starting at ``start``, 0 when none."""
        node = self.root
        for index in range(start, len(folded)):
            node = node.children.get(folded[index])
            if node is None:
                return 0
            if node.terminal:
                return index - start + 1
        return 0

    def longest_match_at(self, folded: str, start: int) -> int:
        """Length of the longest word starting at ``start``, 0 when none.

        The walk continues past terminal nodes while children exist.
        """
        node = self.root
        longest = 0
        for index in range(start, len(folded)):
            node = node.children.get(folded[index])
            if node is None:
                break
            if node.terminal:
                longest = index - start + 1
        return longest

    def contains_match(self, text: str) -> bool:
        folded = ascii_fold(text)
        return any(self.first_match_at(folded, i) for i in range(len(folded)))

    def find_matches(self, text: str) -> List[Tuple[int, int]]:
        """Return ``(start, length)`` spans of a single left-to-right scan.

        After a match the scan resumes right after it; words starting inside
        a matched span are never reported.
        """
        folded = ascii_fold(text)
        spans: List[Tuple[int, int]] = []
        i = 0
        size = len(folded)
        while i < size:
            length = self.longest_match_at(folded, i)
            if length:
                spans.append((i, length))
                i += length
            else:
                i += 1
        return spans


class TrieEngine:
    def __init__(
        self,
        mask_char: str = config.DEFAULT_MASK_CHAR,
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self.mask_char = validate_mask_char(mask_char)
        self.trie = Trie(config.DEFAULT_WORDS if words is None else words)

    def __len__(self) -> int:
        return len(self.trie)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def add_word(self, word: str) -> None:
        self.trie.insert(word)

    def load_words(self, lines: Iterable[str]) -> None:
        for word in iter_word_lines(lines):
            self.trie.insert(word)

    def contains_match(self, text: str) -> bool:
        return self.trie.contains_match(text)

    def censor(self, text: str) -> str:
        spans = self.trie.find_matches(text)
        if not spans:
            return text
        return mask_spans(text, spans, self.mask_char)

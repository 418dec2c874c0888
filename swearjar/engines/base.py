from __future__ import annotations

from typing import Iterable, Iterator, Protocol


class MatchEngine(Protocol):
    mask_char: str

    def contains_match(self, text: str) -> bool:
        ...

    def censor(self, text: str) -> str:
        ...

    def add_word(self, word: str) -> None:
        ...

    def load_words(self, lines: Iterable[str]) -> None:
        ...


def iter_word_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield candidate words from a line source, skipping blank lines."""
    for line in lines:
        word = line.rstrip("\r\n")
        if not word.strip():
            continue
        yield word

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from swearjar import config
from swearjar.engines.base import iter_word_lines
from swearjar.text import ascii_fold, mask_spans, validate_mask_char

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    regex: re.Pattern[str]


def _has_match(regex: re.Pattern[str], text: str) -> bool:
    # Empty matches mask nothing, so they do not count as a match either.
    return any(match.end() > match.start() for match in regex.finditer(text))


def default_patterns(mask_char: str) -> List[str]:
    mask = re.escape(mask_char)
    variants = [template.format(mask=mask) for template in config.DEFAULT_VARIANT_PATTERNS]
    return list(config.DEFAULT_WORDS) + variants


class PatternSetEngine:
    """Case-insensitive regular expressions applied one after another.

    ``censor`` runs the patterns in registration order and every pattern
    scans the output of the previous one, so a later pattern sees the mask
    characters written by an earlier pattern. Tests pin this order.
    """

    def __init__(
        self,
        mask_char: str = config.DEFAULT_MASK_CHAR,
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self.mask_char = validate_mask_char(mask_char)
        self._patterns: List[CompiledPattern] = []
        if words is None:
            sources: Iterable[str] = default_patterns(self.mask_char)
        else:
            sources = words
        for source in sources:
            self.add_pattern(source)

    def __len__(self) -> int:
        return len(self._patterns)

    def patterns(self) -> Tuple[str, ...]:
        return tuple(p.source for p in self._patterns)

    def add_pattern(self, pattern: str) -> bool:
        if not pattern:
            return False
        try:
            regex = re.compile(pattern, re.IGNORECASE | re.ASCII)
        except re.error as exc:
            logger.warning("Skipping invalid pattern %r: %s", pattern, exc)
            return False
        self._patterns.append(CompiledPattern(source=pattern, regex=regex))
        return True

    def add_literal(self, word: str) -> bool:
        return self.add_pattern(re.escape(ascii_fold(word)))

    def add_word(self, word: str) -> None:
        # Words are pattern sources here, not escaped literals.
        self.add_pattern(word)

    def load_words(self, lines: Iterable[str]) -> None:
        for word in iter_word_lines(lines):
            self.add_pattern(word)

    def contains_match(self, text: str) -> bool:
        folded = ascii_fold(text)
        return any(_has_match(p.regex, folded) for p in self._patterns)

    def censor(self, text: str) -> str:
        result = text
        for pattern in self._patterns:
            folded = ascii_fold(result)
            spans = [
                (match.start(), match.end() - match.start())
                for match in pattern.regex.finditer(folded)
                if match.end() > match.start()
            ]
            if spans:
                result = mask_spans(result, spans, self.mask_char)
        return result

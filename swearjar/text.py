from __future__ import annotations

from typing import Iterable, Tuple

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def ascii_fold(text: str) -> str:
    """Lowercase ``A``-``Z`` only.

    ``str.lower`` folds Unicode too and can change the length of a string
    (``"İ".lower()`` is two code points), which would break the index
    mapping between folded text and the original.
    """
    return text.translate(_ASCII_FOLD)


def validate_mask_char(value: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"Mask must be a single character, got {value!r}")
    return value


def mask_spans(text: str, spans: Iterable[Tuple[int, int]], mask_char: str) -> str:
    chars = list(text)
    size = len(chars)
    for start, length in spans:
        end = min(start + length, size)
        for index in range(max(start, 0), end):
            chars[index] = mask_char
    return "".join(chars)

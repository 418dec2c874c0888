from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from swearjar import config
from swearjar.engines.base import MatchEngine, iter_word_lines

logger = logging.getLogger(__name__)


def read_word_lines(path: Path) -> List[str]:
    """Read one candidate word per line; unreadable files yield no lines."""
    try:
        return config.read_text(Path(path)).splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read word list %s: %s", path, exc)
        return []


def load_word_file(engine: MatchEngine, path: Path) -> int:
    words = list(iter_word_lines(read_word_lines(path)))
    engine.load_words(words)
    logger.debug("Loaded %d words from %s", len(words), path)
    return len(words)

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

PACKAGE_ROOT = Path(__file__).resolve().parent

DEFAULT_MASK_CHAR = "*"
DEFAULT_STRATEGY = "composite"
STRATEGIES = ("literal", "pattern", "trie", "composite")

DEFAULT_WORDS = (
    "shit",
    "fuck",
    "damn",
    "ass",
    "bitch",
    "bastard",
)

# "{mask}" is replaced by the escaped mask character of the owning engine.
DEFAULT_VARIANT_PATTERNS = (
    "f[aeiou{mask}]+ck",
    "sh[aeiou{mask}]+t",
)

PROFILE_SCHEMA_PATH = PACKAGE_ROOT / "profiles" / "profile.schema.json"


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


WORDLIST_PATH: Optional[Path] = _env_path("SWEARJAR_WORDLIST")
MASK_CHAR: str = os.getenv("SWEARJAR_MASK_CHAR", DEFAULT_MASK_CHAR)
STRATEGY: str = os.getenv("SWEARJAR_STRATEGY", DEFAULT_STRATEGY)


def set_wordlist_path(path: Optional[Path]) -> None:
    global WORDLIST_PATH
    WORDLIST_PATH = path


def read_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    return path.read_text(encoding="utf-8")


def read_json(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    return json_loads(path.read_text(encoding="utf-8"))


def json_loads(payload: str) -> dict:
    import json

    return json.loads(payload)


def reload_from_env() -> None:
    global WORDLIST_PATH, MASK_CHAR, STRATEGY
    WORDLIST_PATH = _env_path("SWEARJAR_WORDLIST")
    MASK_CHAR = os.getenv("SWEARJAR_MASK_CHAR", DEFAULT_MASK_CHAR)
    STRATEGY = os.getenv("SWEARJAR_STRATEGY", DEFAULT_STRATEGY)

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from swearjar import config
from swearjar.engines.base import MatchEngine
from swearjar.engines.factory import build_engine
from swearjar.profiles.loader import (
    ProfileValidationError,
    build_profile_engine,
    load_profile,
)
from swearjar.wordlists.loader import load_word_file

log = logging.getLogger("swearjar.cli")

SAMPLE_TEXTS = (
    "What the fuck are you doing?",
    "This is a shitty situation.",
    "You're such a bastard!",
    "I don't give a damn about it.",
    "He's a complete ass.",
    "She's being a real bitch today.",
    "This is f*cking amazing!",
    "What a sh*tty day!",
    "Hello, how are you today?",
)

BENCH_CHUNK = "This is some text with fuck and shit in it. "


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build(strategy: str, mask_char: str, wordlist: Optional[Path]) -> MatchEngine:
    engine = build_engine(strategy, mask_char)
    if wordlist is not None:
        load_word_file(engine, wordlist)
    return engine


def _build_from_args(args: argparse.Namespace) -> MatchEngine:
    if args.profile:
        try:
            return build_profile_engine(load_profile(Path(args.profile)))
        except FileNotFoundError as exc:
            raise SystemExit(str(exc)) from exc
        except ProfileValidationError as exc:
            for error in exc.errors:
                print(f"Profile error: {error}", file=sys.stderr)
            raise SystemExit(1) from exc
    return _build(args.strategy, args.mask_char, _wordlist_from_args(args))


def _wordlist_from_args(args: argparse.Namespace) -> Optional[Path]:
    if args.wordlist:
        return Path(args.wordlist)
    return config.WORDLIST_PATH


def time_censor(engine: MatchEngine, text: str) -> float:
    start = time.perf_counter()
    engine.censor(text)
    return (time.perf_counter() - start) * 1000.0


def run_demo(args: argparse.Namespace) -> int:
    wordlist = _wordlist_from_args(args)
    engines: List[Tuple[str, MatchEngine]] = [
        (name, _build(name, args.mask_char, wordlist)) for name in config.STRATEGIES
    ]
    for name, engine in engines:
        print(f"\n=== {name} ===")
        for text in SAMPLE_TEXTS:
            detected = "yes" if engine.contains_match(text) else "no"
            print(f"Original: {text}")
            print(f"Detected: {detected}")
            print(f"Censored: {engine.censor(text)}")
            print("---")
    return 0


def run_check(args: argparse.Namespace) -> int:
    engine = _build_from_args(args)
    matched = engine.contains_match(args.text)
    print("yes" if matched else "no")
    return 1 if matched else 0


def run_censor(args: argparse.Namespace) -> int:
    engine = _build_from_args(args)
    print(engine.censor(args.text))
    return 0


def run_bench(args: argparse.Namespace) -> int:
    text = BENCH_CHUNK * args.repeat
    wordlist = _wordlist_from_args(args)
    print(f"Censoring {args.repeat} repetitions ({len(text)} characters):")
    for name in config.STRATEGIES:
        engine = _build(name, args.mask_char, wordlist)
        elapsed = time_censor(engine, text)
        print(f"{name}: {elapsed:.2f} ms")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Swearjar profanity detection and masking")
    parser.add_argument(
        "--strategy",
        choices=config.STRATEGIES,
        default=config.STRATEGY,
        help="Matching strategy for check/censor",
    )
    parser.add_argument("--mask-char", default=config.MASK_CHAR, help="Replacement character")
    parser.add_argument("--wordlist", help="Extra word list, one word per line")
    parser.add_argument("--profile", help="JSON filter profile (overrides --strategy)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("demo", help="Run every strategy over sample texts").set_defaults(
        handler=run_demo
    )

    check = sub.add_parser("check", help="Report whether TEXT contains profanity")
    check.add_argument("text")
    check.set_defaults(handler=run_check)

    censor = sub.add_parser("censor", help="Print TEXT with profanity masked")
    censor.add_argument("text")
    censor.set_defaults(handler=run_censor)

    bench = sub.add_parser("bench", help="Time censoring of a long text per strategy")
    bench.add_argument("--repeat", type=int, default=1000, help="How many times to repeat the sample")
    bench.set_defaults(handler=run_bench)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    config.reload_from_env()
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    try:
        return args.handler(args)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    sys.exit(main())

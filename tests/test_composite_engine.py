from __future__ import annotations

from swearjar.engines.composite import CompositeEngine
from swearjar.engines.patterns import PatternSetEngine
from swearjar.engines.trie import TrieEngine
from swearjar.engines.wordset import WordSetEngine


def test_all_stages_enabled_by_default() -> None:
    engine = CompositeEngine()
    stages = engine.enabled_engines()
    assert [type(stage) for stage in stages] == [WordSetEngine, PatternSetEngine, TrieEngine]


def test_censor_runs_every_stage() -> None:
    engine = CompositeEngine()
    assert engine.censor("What the fuck are you doing?") == "What the **** are you doing?"
    assert engine.censor("This is f*cking amazing!") == "This is ****ing amazing!"
    assert engine.contains_match("What a sh*tty day!")


def test_configure_disables_stages() -> None:
    engine = CompositeEngine()
    engine.configure(False, False, True)
    assert [type(stage) for stage in engine.enabled_engines()] == [TrieEngine]
    assert not engine.contains_match("f*cking")
    assert engine.censor("f*cking") == "f*cking"

    engine.configure(False, False, False)
    assert not engine.contains_match("fuck")
    assert engine.censor("fuck") == "fuck"


def test_flags_can_be_passed_at_construction() -> None:
    engine = CompositeEngine(use_literal=False, use_trie=False)
    assert [type(stage) for stage in engine.enabled_engines()] == [PatternSetEngine]


def test_words_added_while_disabled_apply_after_reenabling() -> None:
    engine = CompositeEngine()
    engine.configure(True, False, False)
    engine.add_word("heck")
    engine.configure(False, False, True)
    assert engine.contains_match("heck")
    engine.configure(False, True, False)
    assert engine.contains_match("heck")


def test_load_words_broadcasts_a_one_shot_iterator() -> None:
    engine = CompositeEngine(words=[])
    engine.load_words(iter(["heck\n", "\n", "crud\n"]))
    assert "heck" in engine.word_set
    assert "crud" in engine.trie
    assert engine.pattern_set.patterns() == ("heck", "crud")


def test_pipeline_order_literal_then_pattern_then_trie() -> None:
    engine = CompositeEngine(words=["abcd", "cde"])
    # The literal stage masks the union before the trie stage could skip "e".
    assert engine.censor("abcde") == "*****"

    engine.configure(False, True, True)
    # "cde" is no longer visible once "abcd" has been masked.
    assert engine.censor("abcde") == "****e"

    engine.configure(False, False, True)
    assert engine.censor("abcde") == "****e"


def test_later_stages_see_masked_text() -> None:
    engine = CompositeEngine(words=["u"])
    engine.pattern_set.add_pattern("f[u*]ck")
    engine.configure(True, True, False)
    assert engine.censor("fuck") == "****"


def test_instances_do_not_share_word_data() -> None:
    first = CompositeEngine()
    second = CompositeEngine()
    first.add_word("heck")
    assert first.contains_match("heck")
    assert not second.contains_match("heck")


def test_empty_word_keeps_clean_text_clean() -> None:
    engine = CompositeEngine()
    engine.add_word("")
    text = "Hello, how are you today?"
    assert not engine.contains_match(text)
    assert engine.censor(text) == text

"""
Tests for the compiled phrase matcher shared by the substitution stages.
"""
from voice_nlu.matching import PhraseMatcher, compile_alternation


class TestSubstitute:

    def test_longest_phrase_wins(self):
        matcher = PhraseMatcher({"fries": "french fries", "curly fries": "curly fries"})
        text, changes = matcher.substitute("curly fries and fries")
        assert text == "curly fries and french fries"
        assert changes == 1

    def test_targets_are_protected(self):
        """Canonical text is never expanded a second time."""
        matcher = PhraseMatcher({"fries": "french fries"})
        assert matcher.substitute("french fries") == ("french fries", 0)

    def test_whole_word_only(self):
        matcher = PhraseMatcher({"pop": "soda"})
        assert matcher.substitute("popcorn") == ("popcorn", 0)

    def test_substring_mode(self):
        matcher = PhraseMatcher({"expresso": "espresso"}, whole_word=False)
        assert matcher.substitute("two expressos") == ("two espressos", 1)

    def test_case_insensitive_match(self):
        matcher = PhraseMatcher({"fries": "french fries"})
        assert matcher.substitute("FRIES please") == ("french fries please", 1)

    def test_case_only_change_is_not_counted(self):
        matcher = PhraseMatcher({"pepsi": "Pepsi"}, protect_targets=False)
        assert matcher.substitute("a pepsi") == ("a Pepsi", 0)

    def test_empty_mapping(self):
        matcher = PhraseMatcher({})
        assert matcher.substitute("anything") == ("anything", 0)
        assert not matcher.contains("anything")
        assert len(matcher) == 0


class TestLookup:

    def test_finditer_positions(self):
        matcher = PhraseMatcher({"coke": "coca cola"})
        matches = list(matcher.finditer("a coke and a coke"))
        assert [m.start for m in matches] == [2, 13]
        assert all(m.replacement == "coca cola" for m in matches)

    def test_contains_and_lookup(self):
        matcher = PhraseMatcher({"Coke": "coca cola"})
        assert "coke" in matcher
        assert "coca cola" in matcher
        assert matcher.lookup("COKE") == "coca cola"
        assert matcher.lookup("pepsi") is None
        assert matcher.contains("i want a coke")


def test_compile_alternation_empty():
    assert compile_alternation([]) is None
    assert compile_alternation(["", None]) is None


def test_compile_alternation_prefers_longer_terms():
    pattern = compile_alternation(["medium", "medium rare"])
    assert pattern.search("steak medium rare please").group(0) == "medium rare"

# tests/unit/test_haiku_validator.py

import pytest
from haikupress.evaluation.haiku_validator import HAIKU_PATTERN, split_lines, validate_haiku
from haikupress.models.verdict import (
    FailureCode,
    Invalid,
    LineCountMismatch,
    SyllableMismatch,
    Valid,
)


class TestSplitLines:

    def test_splits_on_all_line_break_styles(self):
        assert split_lines("one\ntwo\r\nthree\rfour") == ["one", "two", "three", "four"]

    def test_drops_blank_lines_and_trims(self):
        assert split_lines("\n  one  \n\n \t \r\n two\n\n") == ["one", "two"]

    def test_nul_is_trimmed_like_whitespace(self):
        assert split_lines("a\n\x00\nb") == ["a", "b"]
        assert split_lines("\x00 one \x00\n two") == ["one", "two"]

    def test_other_unicode_separators_are_not_breaks(self):
        assert split_lines("one\u2028two") == ["one\u2028two"]

    def test_empty(self):
        assert split_lines("") == []
        assert split_lines("\n\r\n  \n") == []


class TestValidateHaiku:

    def test_pattern_is_five_seven_five(self):
        assert HAIKU_PATTERN == (5, 7, 5)

    def test_valid_haiku(self, basho_haiku):
        """Scenario: the classic haiku is accepted"""
        verdict = validate_haiku(basho_haiku)

        assert verdict == Valid()
        assert verdict.is_valid is True
        assert verdict.message is None

    def test_syllable_mismatch_on_first_line(self):
        verdict = validate_haiku("Hello\nWorld\nFoo")

        assert verdict == Invalid(SyllableMismatch(line_index=0, expected=5, actual=2, line_text="Hello"))
        assert verdict.is_valid is False
        assert verdict.code == FailureCode.SYLLABLE_COUNT
        assert verdict.message == 'Line 1 must contain 5 syllables: "Hello".'

    def test_empty_text_is_a_line_count_mismatch(self):
        verdict = validate_haiku("")

        assert verdict == Invalid(LineCountMismatch(line_count=0))
        assert verdict.code == FailureCode.LINE_COUNT
        assert verdict.message == "Content must contain exactly three lines to be a haiku."

    def test_stops_at_first_failing_line(self):
        """Every line has 5 syllables, so the second line is the first to fail"""
        verdict = validate_haiku("An old silent pond\nAn old silent pond\nAn old silent pond")

        assert verdict == Invalid(SyllableMismatch(1, 7, 5, "An old silent pond"))
        assert verdict.message == 'Line 2 must contain 7 syllables: "An old silent pond".'

    def test_mismatch_on_last_line(self):
        verdict = validate_haiku("An old silent pond\nA frog jumps into the pond\nHello")

        assert verdict == Invalid(SyllableMismatch(2, 5, 2, "Hello"))

    def test_two_correct_lines_fail_on_count_not_syllables(self):
        verdict = validate_haiku("An old silent pond\nA frog jumps into the pond")

        assert verdict == Invalid(LineCountMismatch(line_count=2))
        assert isinstance(verdict.reason, LineCountMismatch)

    def test_four_lines_fail_on_count(self, basho_haiku):
        verdict = validate_haiku(basho_haiku + "\nAn old silent pond")

        assert verdict == Invalid(LineCountMismatch(line_count=4))

    def test_interleaved_blank_lines_are_ignored(self):
        text = "\n\nAn old silent pond\n\n   \r\nA frog jumps into the pond\r\n\r\n\tSplash! Silence again.\n\n"

        assert validate_haiku(text) == Valid()

    def test_carriage_return_line_breaks(self):
        assert validate_haiku("An old silent pond\rA frog jumps into the pond\rSplash! Silence again.") == Valid()

    def test_line_text_is_trimmed(self):
        verdict = validate_haiku("   Hello \t\nWorld\nFoo")

        assert verdict.reason.line_text == "Hello"

    def test_line_text_is_not_escaped(self):
        verdict = validate_haiku("<b>Hi</b>\nWorld\nFoo")

        assert verdict.reason.line_text == "<b>Hi</b>"
        assert '"<b>Hi</b>"' in verdict.message

    @pytest.mark.parametrize("text", [
        "",
        "Hello\nWorld\nFoo",
        "An old silent pond\nA frog jumps into the pond\nSplash! Silence again.",
    ])
    def test_idempotent(self, text):
        assert validate_haiku(text) == validate_haiku(text)
